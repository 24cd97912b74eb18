"""Registration Routes — register self for an event, list own registrations.

Invariants:
    - The acting user is always the credential's gid; a body can't register someone else
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from aurapass.api.deps import get_current_principal
from aurapass.core.domain_types import Principal
from aurapass.infrastructure.database import get_db
from aurapass.schemas.registrations import RegisterRequest
from aurapass.services.registration_workflow import RegistrationWorkflow

router = APIRouter(prefix="/api", tags=["registrations"])


@router.post("/register")
async def register_for_event(
    body: RegisterRequest,
    principal: Principal = Depends(get_current_principal),
    db: AsyncSession = Depends(get_db),
):
    """404 if user/event missing, 400 EVENT_CLOSED or ALREADY_REGISTERED."""
    registration = await RegistrationWorkflow(db).register(principal.gid, body.event_id)
    return {
        "success": True,
        "message": "Registered Successfully!",
        "registrationId": registration.token,
    }


@router.get("/myregistrations")
async def list_my_registrations(
    principal: Principal = Depends(get_current_principal),
    db: AsyncSession = Depends(get_db),
):
    registrations = await RegistrationWorkflow(db).list_my_registrations(principal.gid)
    return {"success": True, "registrations": registrations}
