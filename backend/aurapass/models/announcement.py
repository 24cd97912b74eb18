"""Announcement ORM — notices posted by administrators.

Invariants:
    - custom_id is unique and is the only id clients see (list and delete)
    - date is stamped by the server at creation (ISO-8601 text)
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from aurapass.db.base import Base


class Announcement(Base):
    __tablename__ = "announcements"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    custom_id: Mapped[int] = mapped_column(
        Integer, unique=True, nullable=False, index=True,
    )
    title: Mapped[str | None] = mapped_column(String(200), nullable=True)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    date: Mapped[str] = mapped_column(
        String(40), nullable=False,
        default=lambda: datetime.now(timezone.utc).isoformat(),
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_dict(self) -> dict:
        return {
            "id": self.custom_id,
            "customId": self.custom_id,
            "title": self.title,
            "content": self.content,
            "date": self.date,
        }
