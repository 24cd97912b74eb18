"""Identifier Allocation — insert a record under the next free sequential id.

Invariants:
    - Uniqueness is enforced by the store (unique constraint), never by a prior count
    - On IntegrityError the transaction is rolled back and the next candidate tried
    - After max_attempts conflicts, ConflictError is raised (nothing persisted)
    - With a named counter, the counter row is advanced to the candidate in the
      same transaction, so identifiers freed by deletion are never handed out again

Design Decisions:
    - Retry-on-conflict over a dedicated sequence table: works the same on SQLite and
      PostgreSQL and keeps display ids dense
    - Counter row read FOR UPDATE: concurrent allocators serialize on it (PostgreSQL)
"""

import logging
from typing import Callable, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from aurapass.core.errors import ConflictError
from aurapass.db.base import Base
from aurapass.models.id_counter import IdCounter

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Base)


async def read_counter(db: AsyncSession, name: str) -> int:
    """Current high-water mark for `name` (0 if never advanced)."""
    value = await db.scalar(select(IdCounter.value).where(IdCounter.name == name))
    return value or 0


async def _advance_counter(db: AsyncSession, name: str, value: int) -> None:
    result = await db.execute(
        select(IdCounter)
        .where(IdCounter.name == name)
        .with_for_update()
        .execution_options(populate_existing=True),
    )
    counter = result.scalar_one_or_none()
    if counter is None:
        db.add(IdCounter(name=name, value=value))
    elif counter.value < value:
        counter.value = value


async def insert_with_next_id(
    db: AsyncSession,
    build_record: Callable[[int], RecordT],
    first_candidate: int,
    max_attempts: int,
    label: str,
    counter: str | None = None,
) -> RecordT:
    """Persist build_record(n) for n = first_candidate, first_candidate + 1, ..."""
    candidate = first_candidate
    for attempt in range(1, max_attempts + 1):
        record = build_record(candidate)
        try:
            if counter:
                await _advance_counter(db, counter, candidate)
            db.add(record)
            await db.commit()
        except IntegrityError:
            await db.rollback()
            logger.warning(
                f"{label} {candidate} already taken, retrying",
                extra={"attempt": attempt},
            )
            candidate += 1
            continue
        return record
    raise ConflictError(
        f"Could not allocate a unique {label} after {max_attempts} attempts",
    )
