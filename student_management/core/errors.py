"""Domain errors raised by the services and rendered by ``main.py``."""
from __future__ import annotations

from fastapi import status


class ServiceError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Erro interno"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)

    @property
    def headers(self) -> dict[str, str] | None:
        return None


class InvalidRequest(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Requisição inválida"


class Unauthorized(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Não autenticado"

    @property
    def headers(self) -> dict[str, str]:
        return {"WWW-Authenticate": "Bearer"}


class NotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Não encontrado"


class StoreConflict(ServiceError):
    """The store rejected a write that is not explained by a concurrent delete."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Conflito de escrita no banco de dados"
