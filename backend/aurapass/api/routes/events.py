"""Event Catalog Routes — list (any user), create/delete/registrants (admin).

Invariants:
    - {event_id} in paths is the display id (customId)
    - DELETE removes the event's registrations with it; unknown ids return success
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from aurapass.api.deps import get_current_principal, require_admin
from aurapass.infrastructure.database import get_db
from aurapass.schemas.events import EventCreate
from aurapass.services.event_catalog import EventCatalog

router = APIRouter(prefix="/api/events", tags=["events"])


@router.get("", dependencies=[Depends(get_current_principal)])
async def list_events(db: AsyncSession = Depends(get_db)):
    events = await EventCatalog(db).list_events()
    return {"success": True, "events": events}


@router.post(
    "", status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_event(body: EventCreate, db: AsyncSession = Depends(get_db)):
    event = await EventCatalog(db).create_event(
        name=body.name,
        type=body.type,
        start_date=body.start_date,
        status=body.status,
        description=body.description,
    )
    return {
        "success": True,
        "message": "Event created",
        "event": event.to_dict(registration_count=0),
    }


@router.delete("/{event_id}", dependencies=[Depends(require_admin)])
async def delete_event(event_id: int, db: AsyncSession = Depends(get_db)):
    removed = await EventCatalog(db).delete_event(event_id)
    return {
        "success": True,
        "message": "Event deleted",
        "registrationsRemoved": removed,
    }


@router.get("/{event_id}/registrations", dependencies=[Depends(require_admin)])
async def list_event_registrations(
    event_id: int, db: AsyncSession = Depends(get_db),
):
    event_name, registrants = await EventCatalog(db).list_event_registrations(event_id)
    return {
        "success": True,
        "eventName": event_name,
        "registrations": registrants,
    }
