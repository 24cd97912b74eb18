"""Announcement Board — list, post and delete announcements by display id.

Invariants:
    - List is newest first (custom_id descending)
    - custom_id allocated max + 1 starting at 1, retried on conflict
    - delete() takes the same id the list shows; unknown ids are a no-op
"""

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from aurapass.config import Settings, get_settings
from aurapass.core.identifiers import FIRST_ANNOUNCEMENT_ID, next_sequence_value
from aurapass.models.announcement import Announcement
from aurapass.services.allocate_identifier import insert_with_next_id

logger = logging.getLogger(__name__)


class AnnouncementBoard:

    def __init__(self, db: AsyncSession, settings: Settings | None = None):
        self.db = db
        self.settings = settings or get_settings()

    async def list_announcements(self) -> list[Announcement]:
        result = await self.db.execute(
            select(Announcement).order_by(Announcement.custom_id.desc()),
        )
        return list(result.scalars().all())

    async def post(self, title: str, content: str | None = None) -> Announcement:
        current_max = await self.db.scalar(select(func.max(Announcement.custom_id)))
        first = next_sequence_value(current_max, FIRST_ANNOUNCEMENT_ID)
        announcement = await insert_with_next_id(
            self.db,
            lambda custom_id: Announcement(
                custom_id=custom_id, title=title, content=content,
            ),
            first, self.settings.identifier_max_attempts, "announcement id",
        )
        logger.info(f"Announcement {announcement.custom_id} posted")
        return announcement

    async def delete(self, custom_id: int) -> bool:
        result = await self.db.execute(
            delete(Announcement).where(Announcement.custom_id == custom_id),
        )
        await self.db.commit()
        deleted = bool(result.rowcount)
        logger.info(f"Announcement {custom_id} delete: {'removed' if deleted else 'no-op'}")
        return deleted
