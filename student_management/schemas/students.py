from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, constr
from pydantic.alias_generators import to_camel

# maior valor de uma coluna INTEGER de 32 bits
MAX_INT = 2**31 - 1

Name = constr(strip_whitespace=True, min_length=1, max_length=100)


class StudentIn(BaseModel):
    """Corpo do POST. Um ``id`` enviado pelo cliente é ignorado."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    nome: Name
    idade: int = Field(ge=0, le=MAX_INT)
    serie: int = Field(ge=0, le=MAX_INT)
    nota_media: float = Field(ge=0, le=10)
    endereco: constr(strip_whitespace=True, min_length=1, max_length=200)
    nome_pai: Name
    nome_mae: Name
    data_nascimento: dt.date


class StudentUpdateIn(StudentIn):
    id: int = Field(le=MAX_INT)


class StudentOut(BaseModel):
    # sem as restrições de entrada: uma linha antiga fora das regras ainda é listada
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int
    nome: str
    idade: int
    serie: int
    nota_media: float
    endereco: str
    nome_pai: str
    nome_mae: str
    data_nascimento: dt.date
