from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from student_management.core.errors import InvalidRequest, Unauthorized
from student_management.core.logging import get_logger
from student_management.core.security import IssuedToken, create_access_token
from student_management.models.user import User

INVALID_CREDENTIALS = "Usuário ou senha inválidos"


def authenticate(db: Session, username: str | None, password: str | None) -> IssuedToken:
    """Checks the credential pair against the users table and issues an access token.

    The comparison is an exact, case-sensitive match on plaintext columns.
    Unknown usernames and wrong passwords fail with the same error.
    """
    log = get_logger()
    if not username or not password:
        raise InvalidRequest("Usuário e senha são obrigatórios")

    user = db.execute(
        select(User).where(User.username == username, User.password == password)
    ).scalar_one_or_none()
    if user is None:
        log.info("auth.login.failed", username=username)
        raise Unauthorized(INVALID_CREDENTIALS)

    issued = create_access_token(user.username)
    log.info("auth.login.ok", username=user.username, expires_at=issued.expires_at.isoformat())
    return issued
