"""Student Administration — list, create, delete students and read their credentials.

Invariants:
    - Every route is admin-only
    - DELETE is idempotent: unknown gids still return success
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from aurapass.api.deps import require_admin
from aurapass.infrastructure.database import get_db
from aurapass.schemas.users import StudentCreate
from aurapass.services.user_directory import UserDirectory

router = APIRouter(
    prefix="/api", tags=["users"], dependencies=[Depends(require_admin)],
)


@router.get("/users")
async def list_students(db: AsyncSession = Depends(get_db)):
    students = await UserDirectory(db).list_students()
    return {"success": True, "users": [s.to_profile() for s in students]}


@router.post("/users", status_code=status.HTTP_201_CREATED)
async def create_student(
    body: StudentCreate | None = None, db: AsyncSession = Depends(get_db),
):
    """Create a student with a generated gid and password."""
    user = await UserDirectory(db).create_student(body.name if body else None)
    return {
        "success": True,
        "message": "User created",
        "user": {"gid": user.gid, "password": user.password},
    }


@router.delete("/users/{gid}")
async def delete_student(gid: str, db: AsyncSession = Depends(get_db)):
    await UserDirectory(db).delete_student(gid)
    return {"success": True, "message": "User deleted"}


@router.get("/credentials")
async def list_credentials(db: AsyncSession = Depends(get_db)):
    """Student gid/password pairs for distribution by the organizer."""
    credentials = await UserDirectory(db).list_credentials()
    return {"success": True, "credentials": credentials}
