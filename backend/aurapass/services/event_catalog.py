"""Event Catalog — list with registration counts, create, delete with cleanup, registrants.

Invariants:
    - registrationCount = COUNT(DISTINCT user_id) over registrations of that event
    - custom_id allocated max + 1 (first_event_id when empty), retried on conflict
    - delete_event() removes the event's registrations and the event in one transaction
    - Deleting an unknown id is a no-op

Design Decisions:
    - Counts computed with one GROUP BY per listing: no per-user scan
    - Registrations deleted explicitly before the event: does not rely on the
      engine enforcing ON DELETE CASCADE
"""

import logging

from sqlalchemy import delete, distinct, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from aurapass.config import Settings, get_settings
from aurapass.core.domain_types import EventStatus
from aurapass.core.identifiers import next_sequence_value, placeholder_image_url
from aurapass.models.event import Event
from aurapass.models.registration import Registration
from aurapass.models.user import User
from aurapass.services.allocate_identifier import insert_with_next_id

logger = logging.getLogger(__name__)


class EventCatalog:
    """Event catalog operations."""

    def __init__(self, db: AsyncSession, settings: Settings | None = None):
        self.db = db
        self.settings = settings or get_settings()

    async def get_by_custom_id(self, custom_id: int) -> Event | None:
        result = await self.db.execute(
            select(Event).where(Event.custom_id == custom_id),
        )
        return result.scalar_one_or_none()

    async def registration_counts(self) -> dict[int, int]:
        """Map Event.id -> number of distinct registered users."""
        result = await self.db.execute(
            select(Registration.event_id, func.count(distinct(Registration.user_id)))
            .group_by(Registration.event_id),
        )
        return {event_pk: count for event_pk, count in result.all()}

    async def list_events(self) -> list[dict]:
        result = await self.db.execute(select(Event).order_by(Event.custom_id))
        counts = await self.registration_counts()
        return [
            event.to_dict(registration_count=counts.get(event.id, 0))
            for event in result.scalars().all()
        ]

    async def create_event(
        self,
        name: str,
        type: str | None = None,
        start_date: str | None = None,
        status: str | None = None,
        description: str | None = None,
    ) -> Event:
        current_max = await self.db.scalar(select(func.max(Event.custom_id)))
        first = next_sequence_value(current_max, self.settings.first_event_id)

        def build(custom_id: int) -> Event:
            return Event(
                custom_id=custom_id,
                name=name,
                type=type,
                start_date=start_date,
                status=status or EventStatus.OPEN.value,
                description=description,
                image_url=placeholder_image_url(custom_id),
            )

        event = await insert_with_next_id(
            self.db, build, first,
            self.settings.identifier_max_attempts, "event id",
        )
        logger.info("Event created", extra={"event_id": event.custom_id})
        return event

    async def delete_event(self, custom_id: int) -> int:
        """Delete the event and its registrations. Returns registrations removed."""
        event = await self.get_by_custom_id(custom_id)
        if not event:
            logger.info("Delete skipped, no such event", extra={"event_id": custom_id})
            return 0
        result = await self.db.execute(
            delete(Registration).where(Registration.event_id == event.id),
        )
        await self.db.execute(delete(Event).where(Event.id == event.id))
        await self.db.commit()
        removed = result.rowcount or 0
        logger.info(
            f"Event deleted with {removed} registration(s)",
            extra={"event_id": custom_id},
        )
        return removed

    async def list_event_registrations(self, custom_id: int) -> tuple[str, list[dict]]:
        """Return (event name or "Unknown", registrant rows)."""
        event = await self.get_by_custom_id(custom_id)
        if not event:
            return "Unknown", []
        result = await self.db.execute(
            select(Registration.token, User.gid, User.name, User.email, User.phone)
            .join(User, Registration.user_id == User.id)
            .where(Registration.event_id == event.id)
            .order_by(Registration.id),
        )
        registrants = [
            {
                "registrationId": token,
                "gid": gid,
                "name": name,
                "email": email,
                "phone": phone,
            }
            for token, gid, name, email, phone in result.all()
        ]
        return event.name or "Unknown", registrants
