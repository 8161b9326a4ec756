# app/core/auth.py
import logging

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from app.core.security import read_token
from shared.entities.actor import Actor, RoleName

log = logging.getLogger(__name__)

# tokens are issued by the identity provider; tokenUrl only feeds the OpenAPI docs
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/v1/auth/token")

async def get_current_actor(token: str = Depends(oauth2_scheme)) -> Actor:
    try:
        return read_token(token)
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="invalid_token")

def require_role(*roles: RoleName):
    async def dep(actor: Actor = Depends(get_current_actor)) -> Actor:
        if roles and not actor.has_role(*roles):
            log.info("auth: %s lacks any of %s", actor.subject, [r.value for r in roles])
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="forbidden")
        return actor
    return dep

# Helpers
require_admin  = require_role(RoleName.admin)
require_staff  = require_role(RoleName.admin, RoleName.editor)
