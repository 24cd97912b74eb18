"""Bootstrap Seeding — ensure the admin and sample student accounts exist.

Invariants:
    - Idempotent: existing records (matched by gid) are never modified
    - Runs once per startup, after tables exist
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from aurapass.config import Settings
from aurapass.core.domain_types import Role
from aurapass.models.user import User

logger = logging.getLogger(__name__)


def bootstrap_users(settings: Settings) -> list[User]:
    return [
        User(
            gid=settings.bootstrap_admin_gid,
            name=settings.bootstrap_admin_name,
            password=settings.bootstrap_admin_password,
            role=Role.ADMIN.value,
        ),
        User(
            gid=settings.bootstrap_student_gid,
            name=settings.bootstrap_student_name,
            password=settings.bootstrap_student_password,
            role=Role.STUDENT.value,
            email=settings.bootstrap_student_email,
            phone=settings.bootstrap_student_phone,
        ),
    ]


async def seed_bootstrap_users(db: AsyncSession, settings: Settings) -> list[str]:
    """Insert missing bootstrap accounts. Returns the gids created."""
    created = []
    for user in bootstrap_users(settings):
        existing = await db.execute(select(User.id).where(User.gid == user.gid))
        if existing.scalar_one_or_none() is not None:
            continue
        db.add(user)
        created.append(user.gid)
    if created:
        await db.commit()
        logger.info(f"Seeded bootstrap accounts: {', '.join(created)}")
    return created
