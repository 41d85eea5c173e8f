from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from student_management.core.errors import Unauthorized
from student_management.core.settings import settings


@dataclass(frozen=True)
class IssuedToken:
    token: str
    subject: str
    issued_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class Principal:
    """Identity carried by a verified access token."""

    username: str
    expires_at: datetime


def _now() -> datetime:
    # JWT trabalha com segundos inteiros; truncar mantém exp - iat exato
    return datetime.now(UTC).replace(microsecond=0)


def create_access_token(sub: str, expires_delta: timedelta | None = None) -> IssuedToken:
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    now = _now()
    expires_at = now + expires_delta
    payload: dict[str, Any] = {
        "sub": sub,  # username
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "jti": str(uuid.uuid4()),
        "iat": int(now.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    token = jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALG)
    return IssuedToken(token=token, subject=sub, issued_at=now, expires_at=expires_at)


def decode_access_token(token: str) -> Principal:
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALG],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
        )
    except JWTError as e:
        raise Unauthorized("Token inválido ou expirado") from e

    sub = payload.get("sub")
    if not sub:
        raise Unauthorized("Token malformado")
    return Principal(
        username=sub,
        expires_at=datetime.fromtimestamp(payload["exp"], tz=UTC),
    )


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer"
        if settings.APP_ENV.value == "prod":
            response.headers["Strict-Transport-Security"] = (
                "max-age=15552000; includeSubDomains"
            )
        return response
