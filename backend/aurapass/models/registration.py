"""Registration ORM — one user's registration for one event.

Invariants:
    - (user_id, event_id) is unique: the store rejects a second registration
    - token is unique and is the registration id shown to clients
    - Both foreign keys cascade on delete: no registration outlives its user or event

Design Decisions:
    - Separate table instead of a serialized list on the user: counts become a
      GROUP BY and event deletion a plain DELETE
    - Integer primary key preserves insertion order for "most recent first" listings
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from aurapass.db.base import Base


class Registration(Base):
    """Registration of a user for an event."""
    __tablename__ = "registrations"
    __table_args__ = (
        UniqueConstraint("user_id", "event_id", name="uq_registrations_user_event"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    token: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    event_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("events.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    reg_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    user: Mapped["User"] = relationship("User", back_populates="registrations")
    event: Mapped["Event"] = relationship("Event", lazy="joined")

    def reg_date_iso(self) -> str:
        """ISO-8601 timestamp in UTC. SQLite returns naive datetimes; they are stored as UTC."""
        reg_date = self.reg_date
        if reg_date.tzinfo is None:
            reg_date = reg_date.replace(tzinfo=timezone.utc)
        return reg_date.isoformat()

    def to_summary(self) -> dict:
        """Registration as embedded in a user's profile."""
        return {
            "id": self.token,
            "eventId": self.event.custom_id,
            "regDate": self.reg_date_iso(),
        }
