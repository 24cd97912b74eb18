"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure; randomness and clocks are the only injected effects

Design Decisions:
    - Functional core separated from imperative shell: services query, core decides, services write
"""
