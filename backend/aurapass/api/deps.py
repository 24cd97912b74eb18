"""Access Control — bearer-credential and role dependencies for protected routes.

Invariants:
    - No Authorization header -> UnauthenticatedError (401)
    - A header that is present but not a usable Bearer credential (other scheme,
      bad signature, malformed, expired or revoked) -> ForbiddenError (403)
    - require_admin additionally rejects every role except admin (403)
    - Revocation: the stored row id and token_version must equal the credential's
      uid and ver; a user that no longer exists passes through so services can
      report NotFound

Design Decisions:
    - HTTPBearer(auto_error=False): missing credentials raise our own 401 envelope,
      not FastAPI's default 403
"""

import logging

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from aurapass.config import get_settings
from aurapass.core.domain_types import Principal
from aurapass.core.errors import ForbiddenError, UnauthenticatedError
from aurapass.infrastructure.credentials import verify_credential
from aurapass.infrastructure.database import get_db
from aurapass.models.user import User

logger = logging.getLogger(__name__)
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_principal(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> Principal:
    if credentials is None:
        if request.headers.get("Authorization", "").strip():
            raise ForbiddenError("Invalid credential")
        raise UnauthenticatedError()
    settings = get_settings()
    principal = verify_credential(
        credentials.credentials, settings.jwt_secret, settings.jwt_algorithm,
    )
    result = await db.execute(
        select(User.id, User.token_version).where(User.gid == principal.gid),
    )
    stored = result.one_or_none()
    if stored is not None and (
        stored.id != principal.user_id
        or stored.token_version != principal.token_version
    ):
        logger.info("Revoked credential presented", extra={"gid": principal.gid})
        raise ForbiddenError("Credential revoked")
    return principal


async def require_admin(
    principal: Principal = Depends(get_current_principal),
) -> Principal:
    if not principal.is_admin:
        raise ForbiddenError("Admin role required")
    return principal
