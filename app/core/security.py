from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt

from app.core.config import settings
from shared.entities.actor import Actor, RoleName

ALGORITHM = "HS256"
KNOWN_ROLES = {r.value for r in RoleName}


def issue_token(actor: Actor) -> str:
    now = datetime.now(timezone.utc)
    exp = now + timedelta(minutes=int(settings.jwt_expires_minutes))
    payload: Dict[str, Any] = {
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
        "sub": actor.subject,
        "roles": [r.value for r in actor.roles],
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=ALGORITHM)


def read_token(token: str) -> Actor:
    """Decode and verify a bearer token. Raises jwt.InvalidTokenError."""
    payload = jwt.decode(
        token,
        settings.jwt_secret,
        algorithms=[ALGORITHM],
        audience=settings.jwt_audience,
        issuer=settings.jwt_issuer,
        options={"require": ["sub", "exp"]},
    )
    # unknown role names are dropped
    roles = [RoleName(r) for r in payload.get("roles", []) if r in KNOWN_ROLES]
    return Actor(subject=payload["sub"], roles=roles)
