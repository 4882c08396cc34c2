import logging
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError

from file_store.app.core.config import settings
from file_store.app.core.security import decode_access_token
from file_store.app.domain.files.entities import AuthState

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="/api/v1/auth/token",
    auto_error=False,
)

DEV_OWNER_ID = '66449af6-23c2-4bd9-8d66-369d67c548e0'
ANONYMOUS = AuthState(authenticated=False)


async def get_auth_state(token: Annotated[Optional[str], Depends(oauth2_scheme)]) -> AuthState:
    if settings.SKIP_AUTH:
        return AuthState(authenticated=True, owner_id=DEV_OWNER_ID)
    if not token:
        return ANONYMOUS
    try:
        payload = decode_access_token(token)
    except JWTError as e:
        logger.info("Rejected bearer token: %s", e)
        return ANONYMOUS

    sub = payload.get("sub")
    if not isinstance(sub, str) or not sub:
        return ANONYMOUS
    return AuthState(authenticated=True, owner_id=sub)


async def require_auth(auth: Annotated[AuthState, Depends(get_auth_state)]) -> AuthState:
    if not auth.authenticated or auth.owner_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return auth
