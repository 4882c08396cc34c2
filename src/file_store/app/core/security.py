# app/core/security.py
from datetime import timedelta
from typing import Any

from jose import jwt

from file_store.app.core.config import settings
from file_store.app.domain.common.value_objects import utcnow


def create_access_token(subject: str, expires_delta: timedelta = timedelta(hours=1)) -> str:
    payload = {"sub": subject, "exp": utcnow() + expires_delta}
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
