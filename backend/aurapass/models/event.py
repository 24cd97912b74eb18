"""Event ORM — catalog entries addressed externally by custom_id.

Invariants:
    - custom_id is unique (allocated max + 1 starting at 101, retried on conflict)
    - status is free text; only "Closed" blocks registration

Design Decisions:
    - startDate kept as text: the admin UI submits whatever date string it shows
    - No ORM relationship to registrations: deletion removes them with one bulk DELETE
      (DB-level ON DELETE CASCADE covers direct SQL deletes)
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from aurapass.db.base import Base


class Event(Base):
    """Event catalog entry."""
    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    custom_id: Mapped[int] = mapped_column(
        Integer, unique=True, nullable=False, index=True,
    )
    name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    start_date: Mapped[str | None] = mapped_column(String(50), nullable=True)
    status: Mapped[str | None] = mapped_column(
        String(20), nullable=True, default="Open",
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_dict(self, registration_count: int | None = None) -> dict:
        """API shape — id is the display id (custom_id)."""
        data = {
            "id": self.custom_id,
            "customId": self.custom_id,
            "name": self.name,
            "type": self.type,
            "startDate": self.start_date,
            "status": self.status,
            "description": self.description,
            "imageUrl": self.image_url,
        }
        if registration_count is not None:
            data["registrationCount"] = registration_count
        return data
