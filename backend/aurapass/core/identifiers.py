"""Identifier Formatting — pure functions that derive display ids, passwords and tokens.

Invariants:
    - Functions are PURE except where a random source or clock is injected
    - Student gids are zero-padded to 4 digits: "{prefix}-0003"
    - next_sequence_value never returns a value below `start`

Design Decisions:
    - Candidate numbers computed here, uniqueness enforced by the store:
      callers retry with candidate + 1 on conflict (ADR: no count-then-format race)
"""

import re
import secrets
import time
import uuid
from typing import Iterable

STUDENT_GID_PREFIX: str = "Aurapass-YCP"
STUDENT_GID_COUNTER: str = "student_gid"
FIRST_EVENT_ID: int = 101
FIRST_ANNOUNCEMENT_ID: int = 1
IMAGE_URL_TEMPLATE: str = "https://picsum.photos/seed/{event_id}/400/200"


def format_student_gid(number: int, prefix: str = STUDENT_GID_PREFIX) -> str:
    """Format a student gid, e.g. 3 -> 'Aurapass-YCP-0003'."""
    return f"{prefix}-{number:04d}"


def parse_student_number(gid: str, prefix: str = STUDENT_GID_PREFIX) -> int | None:
    """Extract the numeric suffix of a generated gid, or None if it doesn't match."""
    match = re.fullmatch(rf"{re.escape(prefix)}-(\d+)", gid)
    return int(match.group(1)) if match else None


def next_student_number(
    student_count: int,
    existing_gids: Iterable[str],
    prefix: str = STUDENT_GID_PREFIX,
    high_water: int = 0,
) -> int:
    """First candidate number for a new student gid.

    Starts from count + 2 and skips past both the highest live number and
    `high_water`, the highest number ever issued. A deleted student's gid is
    therefore never issued again.
    """
    candidate = max(student_count + 2, high_water + 1)
    issued = [
        n for n in (parse_student_number(g, prefix) for g in existing_gids)
        if n is not None
    ]
    if issued:
        candidate = max(candidate, max(issued) + 1)
    return candidate


def next_sequence_value(current_max: int | None, start: int) -> int:
    """max + 1, or `start` when nothing exists yet."""
    if current_max is None:
        return start
    return max(current_max + 1, start)


def generate_numeric_password(digits: int = 4) -> str:
    """Random numeric password with exactly `digits` digits (no leading zero)."""
    low = 10 ** (digits - 1)
    return str(low + secrets.randbelow(9 * low))


def placeholder_image_url(event_id: int) -> str:
    return IMAGE_URL_TEMPLATE.format(event_id=event_id)


def new_registration_token(now_ms: int | None = None) -> str:
    """Time-based registration token, e.g. 'REG-1718000000000-3fa9c1'."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"REG-{now_ms}-{uuid.uuid4().hex[:6]}"
