"""Login Route — exchanges gid/password for a bearer credential and the public profile."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from aurapass.infrastructure.database import get_db
from aurapass.schemas.auth import LoginRequest
from aurapass.services.user_directory import UserDirectory

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login")
async def login(body: LoginRequest, db: AsyncSession = Depends(get_db)):
    """Authenticate. 401 INVALID_CREDENTIALS on mismatch."""
    token, user = await UserDirectory(db).authenticate(body.gid, body.password)
    return {
        "success": True,
        "token": token,
        **user.to_profile(include_registrations=True),
    }
