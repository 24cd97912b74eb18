"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the aggregate root for registrations; events are referenced, never owned

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs (standard SQLAlchemy pattern)
"""

from aurapass.models.user import User  # noqa: F401
from aurapass.models.event import Event  # noqa: F401
from aurapass.models.registration import Registration  # noqa: F401
from aurapass.models.announcement import Announcement  # noqa: F401
from aurapass.models.id_counter import IdCounter  # noqa: F401
