"""Pydantic Schemas — request validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies)
    - Field names follow the JSON the web client sends (camelCase aliases), snake_case accepted too

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
