"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Gid wraps the externally visible user id — never the storage primary key
    - EventId and AnnouncementId wrap display ids (customId), not primary keys
    - Roles encoded as an Enum — no raw string matching outside this module

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

Gid = NewType("Gid", str)
EventId = NewType("EventId", int)
AnnouncementId = NewType("AnnouncementId", int)


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """User roles — maps to DB `role` column."""
    STUDENT = "student"
    ADMIN = "admin"


class EventStatus(str, Enum):
    """Meaningful event states. The DB column is free text."""
    OPEN = "Open"
    CLOSED = "Closed"


# ─── Principal ───────────────────────────────────────────────────

@dataclass(frozen=True)
class Principal:
    """Identity carried by a verified credential."""
    gid: Gid
    role: Role
    token_version: int = 0
    user_id: int | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
