"""Bearer Credentials — issue and verify signed, expiring JWTs.

Invariants:
    - Claims: sub (gid), uid (User.id), role, ver (token version), iat, exp
    - verify_credential never returns a partially valid principal: any decode,
      signature, expiry or claim problem raises ForbiddenError
    - Revocation is checked by the caller against the stored row id and token version

Design Decisions:
    - PyJWT with a shared HS256 secret: credentials are stateless, no session store
    - Expiry always set: a leaked token stops working after access_token_expire_minutes
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt

from aurapass.core.domain_types import Gid, Principal, Role
from aurapass.core.errors import ForbiddenError

logger = logging.getLogger(__name__)


def issue_credential(
    user_id: int,
    gid: str,
    role: str,
    token_version: int,
    secret: str,
    algorithm: str = "HS256",
    expires_minutes: int = 720,
    now: datetime | None = None,
) -> str:
    """Sign a credential for the given identity."""
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "sub": gid,
        "uid": user_id,
        "role": role,
        "ver": token_version,
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def verify_credential(token: str, secret: str, algorithm: str = "HS256") -> Principal:
    """Decode and validate a credential. Raises ForbiddenError on any failure."""
    try:
        payload = jwt.decode(
            token, secret, algorithms=[algorithm],
            options={"require": ["sub", "uid", "role", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise ForbiddenError("Credential expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Rejected credential: {e}")
        raise ForbiddenError("Invalid credential")

    try:
        role = Role(payload["role"])
        user_id = int(payload["uid"])
    except (TypeError, ValueError):
        raise ForbiddenError("Invalid credential")
    return Principal(
        gid=Gid(str(payload["sub"])),
        role=role,
        user_id=user_id,
        token_version=int(payload.get("ver", 0)),
    )
