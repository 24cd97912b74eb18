"""Registration Rules — validates a registration attempt before anything is written.

Invariants:
    - check_registration is PURE: raises a domain error or returns None, never mutates
    - Order of checks is fixed: closed event first, then duplicate
    - Shell applies the mutation (insert Registration) only after this passes

Design Decisions:
    - Status compared case-insensitively: the column is free text entered by admins
"""

from typing import Iterable

from aurapass.core.domain_types import EventStatus
from aurapass.core.errors import AlreadyRegisteredError, EventClosedError


def is_event_closed(status: str | None) -> bool:
    if not status:
        return False
    return status.strip().lower() == EventStatus.CLOSED.value.lower()


def check_registration(
    event_id: int, event_status: str | None, registered_event_ids: Iterable[int],
) -> None:
    """Raise EventClosedError / AlreadyRegisteredError, or return None if allowed."""
    if is_event_closed(event_status):
        raise EventClosedError(event_id)
    if event_id in set(registered_event_ids):
        raise AlreadyRegisteredError(event_id)
