"""Registration Workflow — a student registers for an event; lists own registrations.

Invariants:
    - register() checks, in order: user exists, event exists, event not closed, not already registered
    - Check-then-insert is atomic: the acting user row is locked (FOR UPDATE where supported)
      and the (user_id, event_id) unique constraint rejects a concurrent duplicate at commit
    - A rejected registration writes nothing
    - list_my_registrations() is most-recent first

Design Decisions:
    - Pure rule check in core/registration_rules; this module only queries and writes
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from aurapass.core.errors import AlreadyRegisteredError, ResourceNotFoundError
from aurapass.core.identifiers import new_registration_token
from aurapass.core.registration_rules import check_registration
from aurapass.models.event import Event
from aurapass.models.registration import Registration
from aurapass.models.user import User

logger = logging.getLogger(__name__)


class RegistrationWorkflow:
    """Student self-service registration."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _get_user_for_update(self, gid: str) -> User:
        result = await self.db.execute(
            select(User).where(User.gid == gid).with_for_update(),
        )
        user = result.scalar_one_or_none()
        if not user:
            raise ResourceNotFoundError("User", gid)
        return user

    async def _get_event(self, custom_id: int) -> Event:
        result = await self.db.execute(
            select(Event).where(Event.custom_id == custom_id),
        )
        event = result.scalar_one_or_none()
        if not event:
            raise ResourceNotFoundError("Event", str(custom_id))
        return event

    async def register(self, gid: str, event_id: int) -> Registration:
        user = await self._get_user_for_update(gid)
        event = await self._get_event(event_id)

        registered = await self.db.execute(
            select(Event.custom_id)
            .join(Registration, Registration.event_id == Event.id)
            .where(Registration.user_id == user.id),
        )
        check_registration(event.custom_id, event.status, registered.scalars().all())

        registration = Registration(
            token=new_registration_token(),
            user_id=user.id,
            event_id=event.id,
        )
        self.db.add(registration)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning(
                "Concurrent duplicate registration rejected",
                extra={"gid": gid, "event_id": event_id},
            )
            raise AlreadyRegisteredError(event_id)
        logger.info("Registered", extra={"gid": gid, "event_id": event_id})
        return registration

    async def list_my_registrations(self, gid: str) -> list[dict]:
        result = await self.db.execute(select(User.id).where(User.gid == gid))
        user_id = result.scalar_one_or_none()
        if user_id is None:
            raise ResourceNotFoundError("User", gid)
        regs = await self.db.execute(
            select(Registration)
            .where(Registration.user_id == user_id)
            .order_by(Registration.id.desc()),
        )
        return [
            {**reg.to_summary(), "event": reg.event.to_dict()}
            for reg in regs.scalars().all()
        ]
