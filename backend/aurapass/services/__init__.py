"""Services Layer — user directory, event catalog, registrations, announcements, seeding.

Invariants:
    - One class per resource, constructed with the request's AsyncSession
    - Services raise AurapassError subclasses; routes never translate errors

Design Decisions:
    - One file per resource for locality (no god objects)
"""
