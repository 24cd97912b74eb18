"""Infrastructure Layer — database session management, credentials, logging.

Invariants:
    - Infrastructure imports only core/errors and core/domain_types from core/
    - Library exceptions mapped to AurapassError before leaving this layer

Design Decisions:
    - Thin wrappers over SQLAlchemy and PyJWT (single responsibility)
"""
