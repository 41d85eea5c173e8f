from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LoginIn(BaseModel):
    # opcionais aqui: campo ausente ou vazio vira 400 no serviço
    username: str | None = None
    password: str | None = None


class LoginOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    token: str
    username: str
    expires_at: datetime
