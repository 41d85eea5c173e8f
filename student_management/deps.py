from __future__ import annotations

from fastapi import Request

from student_management.core.errors import Unauthorized
from student_management.core.security import Principal, decode_access_token


def _extract_token_from_request(request: Request) -> str | None:
    auth = request.headers.get("Authorization")
    if auth and auth.lower().startswith("bearer "):
        return auth.split(" ", 1)[1].strip() or None
    return None


def get_current_principal(request: Request) -> Principal:
    """Stateless gate: verifies the bearer token without touching the database."""
    token = _extract_token_from_request(request)
    if not token:
        raise Unauthorized("Não autenticado")

    return decode_access_token(token)
