"""User ORM — students and administrators, addressed externally by gid.

Invariants:
    - gid is unique and non-nullable (store rejects duplicates)
    - role is "student" or "admin" (core/domain_types.Role)
    - token_version increments on password change; credentials with an older version are rejected

Design Decisions:
    - Integer surrogate key, gid as the public id: gid appears in URLs and tokens only
    - registrations cascade on delete: a user owns its registrations
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from aurapass.db.base import Base
from aurapass.core.domain_types import Role


class User(Base):
    """User account — owns its event registrations."""
    __tablename__ = "users"
    # AUTOINCREMENT on SQLite: a deleted user's id is never reused, credentials carry it
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    gid: Mapped[str] = mapped_column(
        String(64), unique=True, nullable=False, index=True,
    )
    name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    password: Mapped[str] = mapped_column(String(200), nullable=False)
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default=Role.STUDENT.value,
    )
    email: Mapped[str | None] = mapped_column(String(200), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    token_version: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    registrations: Mapped[list["Registration"]] = relationship(
        "Registration", back_populates="user",
        cascade="all, delete-orphan", passive_deletes=True,
        order_by="Registration.id",
    )

    def to_profile(self, include_registrations: bool = False) -> dict:
        """Public profile — everything except password, token version and timestamps.

        include_registrations requires `registrations` (and each one's event) to be loaded.
        """
        profile = {
            "gid": self.gid,
            "name": self.name,
            "role": self.role,
            "email": self.email,
            "phone": self.phone,
        }
        if include_registrations:
            profile["registrations"] = [r.to_summary() for r in self.registrations]
        return profile
