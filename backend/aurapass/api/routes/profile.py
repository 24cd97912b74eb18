"""Profile Route — self-service update of name, email, phone and password.

Invariants:
    - Only the credential's own user is updated
    - A password change returns a fresh token; the old one is revoked
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from aurapass.api.deps import get_current_principal
from aurapass.core.domain_types import Principal
from aurapass.infrastructure.database import get_db
from aurapass.schemas.users import ProfileUpdate
from aurapass.services.user_directory import UserDirectory

router = APIRouter(prefix="/api", tags=["profile"])


@router.put("/profile")
async def update_profile(
    body: ProfileUpdate,
    principal: Principal = Depends(get_current_principal),
    db: AsyncSession = Depends(get_db),
):
    user, new_token = await UserDirectory(db).update_profile(
        principal.gid,
        current_password=body.current_password,
        new_password=body.new_password,
        name=body.new_name,
        email=body.email,
        phone=body.phone,
    )
    response = {"success": True, "message": "Profile Updated", **user.to_profile()}
    if new_token:
        response["token"] = new_token
    return response
