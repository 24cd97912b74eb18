"""User Directory — login, student management, credential listing, self-service profile.

Invariants:
    - authenticate() matches gid AND password exactly; failure never reveals which one was wrong
    - Student gids are allocated through insert_with_next_id (unique constraint + retry)
      and a persisted high-water counter: a deleted student's gid is never reissued
    - delete_student() is idempotent and never removes an admin account
    - update_profile() changes nothing when the current password is wrong
    - A password change bumps token_version, revoking previously issued credentials

Design Decisions:
    - Passwords stored as given: admins read generated passwords back via list_credentials
      (security non-goal, compared in constant time)
"""

import logging
import secrets

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from aurapass.config import Settings, get_settings
from aurapass.core.domain_types import Role
from aurapass.core.errors import (
    InvalidCredentialsError, ResourceNotFoundError, WrongPasswordError,
)
from aurapass.core.identifiers import (
    STUDENT_GID_COUNTER, format_student_gid, generate_numeric_password,
    next_student_number,
)
from aurapass.infrastructure.credentials import issue_credential
from aurapass.models.registration import Registration
from aurapass.models.user import User
from aurapass.services.allocate_identifier import insert_with_next_id, read_counter

logger = logging.getLogger(__name__)


class UserDirectory:
    """User accounts: authentication, student lifecycle, profile updates."""

    def __init__(self, db: AsyncSession, settings: Settings | None = None):
        self.db = db
        self.settings = settings or get_settings()

    async def get_by_gid(self, gid: str) -> User | None:
        result = await self.db.execute(select(User).where(User.gid == gid))
        return result.scalar_one_or_none()

    async def get_or_404(self, gid: str) -> User:
        user = await self.get_by_gid(gid)
        if not user:
            raise ResourceNotFoundError("User", gid)
        return user

    def issue_token(self, user: User) -> str:
        return issue_credential(
            user.id, user.gid, user.role, user.token_version,
            secret=self.settings.jwt_secret,
            algorithm=self.settings.jwt_algorithm,
            expires_minutes=self.settings.access_token_expire_minutes,
        )

    async def authenticate(self, gid: str, password: str) -> tuple[str, User]:
        """Return (credential, user) for a matching gid/password pair."""
        result = await self.db.execute(
            select(User)
            .options(selectinload(User.registrations).joinedload(Registration.event))
            .where(User.gid == gid),
        )
        user = result.scalar_one_or_none()
        if not user or not secrets.compare_digest(
            user.password.encode(), password.encode(),
        ):
            logger.info("Login rejected", extra={"gid": gid})
            raise InvalidCredentialsError()
        logger.info("Login succeeded", extra={"gid": gid, "role": user.role})
        return self.issue_token(user), user

    async def list_students(self) -> list[User]:
        result = await self.db.execute(
            select(User).where(User.role == Role.STUDENT.value).order_by(User.id),
        )
        return list(result.scalars().all())

    async def create_student(self, name: str | None = None) -> User:
        """Create a student with a generated gid and 4-digit password."""
        prefix = self.settings.student_gid_prefix
        count = await self.db.scalar(
            select(func.count()).select_from(User)
            .where(User.role == Role.STUDENT.value),
        )
        issued = await self.db.execute(
            select(User.gid).where(User.gid.like(f"{prefix}-%")),
        )
        counter = f"{STUDENT_GID_COUNTER}:{prefix}"
        first = next_student_number(
            count or 0, issued.scalars().all(), prefix,
            high_water=await read_counter(self.db, counter),
        )

        def build(number: int) -> User:
            return User(
                gid=format_student_gid(number, prefix),
                name=name,
                password=generate_numeric_password(),
                role=Role.STUDENT.value,
            )

        user = await insert_with_next_id(
            self.db, build, first,
            self.settings.identifier_max_attempts, "student gid",
            counter=counter,
        )
        logger.info("Student created", extra={"gid": user.gid})
        return user

    async def delete_student(self, gid: str) -> bool:
        """Delete a student and its registrations. Returns False if nothing matched."""
        user = await self.get_by_gid(gid)
        if not user or user.role != Role.STUDENT.value:
            logger.info("Delete skipped, no such student", extra={"gid": gid})
            return False
        await self.db.execute(
            delete(Registration).where(Registration.user_id == user.id),
        )
        await self.db.delete(user)
        await self.db.commit()
        logger.info("Student deleted", extra={"gid": gid})
        return True

    async def list_credentials(self) -> list[dict]:
        return [
            {"gid": u.gid, "name": u.name, "password": u.password}
            for u in await self.list_students()
        ]

    async def update_profile(
        self,
        gid: str,
        current_password: str | None = None,
        new_password: str | None = None,
        name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
    ) -> tuple[User, str | None]:
        """Apply the supplied fields. Returns (user, new credential if password changed)."""
        user = await self.get_or_404(gid)
        new_token = None
        if new_password:
            if current_password is None or not secrets.compare_digest(
                user.password.encode(), current_password.encode(),
            ):
                logger.info("Password change rejected", extra={"gid": gid})
                raise WrongPasswordError()
            user.password = new_password
            user.token_version += 1
        if name:
            user.name = name
        if email:
            user.email = email
        if phone:
            user.phone = phone
        await self.db.commit()
        if new_password:
            new_token = self.issue_token(user)
            logger.info("Password changed, credentials revoked", extra={"gid": gid})
        return user, new_token
