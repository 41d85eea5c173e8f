from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from student_management.db import get_db
from student_management.schemas.auth import LoginIn, LoginOut
from student_management.services import auth as auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginOut)
def api_login(payload: LoginIn, db: Session = Depends(get_db)) -> LoginOut:
    issued = auth_service.authenticate(db, payload.username, payload.password)
    return LoginOut(
        token=issued.token, username=issued.subject, expires_at=issued.expires_at
    )
