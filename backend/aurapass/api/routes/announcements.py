"""Announcement Routes — list (any user), post/delete (admin).

Invariants:
    - {announcement_id} is the id shown in the list (customId)
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from aurapass.api.deps import get_current_principal, require_admin
from aurapass.infrastructure.database import get_db
from aurapass.schemas.announcements import AnnouncementCreate
from aurapass.services.announcement_board import AnnouncementBoard

router = APIRouter(prefix="/api/announcements", tags=["announcements"])


@router.get("", dependencies=[Depends(get_current_principal)])
async def list_announcements(db: AsyncSession = Depends(get_db)):
    announcements = await AnnouncementBoard(db).list_announcements()
    return {"success": True, "announcements": [a.to_dict() for a in announcements]}


@router.post(
    "", status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def post_announcement(
    body: AnnouncementCreate, db: AsyncSession = Depends(get_db),
):
    announcement = await AnnouncementBoard(db).post(body.title, body.content)
    return {"success": True, "message": "Posted", "announcement": announcement.to_dict()}


@router.delete("/{announcement_id}", dependencies=[Depends(require_admin)])
async def delete_announcement(
    announcement_id: int, db: AsyncSession = Depends(get_db),
):
    await AnnouncementBoard(db).delete(announcement_id)
    return {"success": True, "message": "Deleted"}
