"""Taxonomia de falhas de envio.

Toda falha é convertida em uma destas classes antes de virar
ResponseError; nenhuma delas atravessa o limite do use case.
"""

from __future__ import annotations

from typing import Any, ClassVar

from app.domain.outcome import ErrorDetail


class WhatsAppSendError(Exception):
    """Base para falhas de envio com serialização própria."""

    kind: ClassVar[str] = "unknown"

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def serialize_error(self) -> list[ErrorDetail]:
        """Converte a falha em lista ordenada de ErrorDetail."""
        return [ErrorDetail(message=self.message, details=self.details)]


class SchemaValidationError(WhatsAppSendError):
    """Body de sucesso fora do formato esperado (body bruto em details)."""

    kind = "schema_validation"


class ApiError(WhatsAppSendError):
    """Meta respondeu com status de erro (campo `error` do body em details)."""

    kind = "api"


class TransportError(WhatsAppSendError):
    """Nenhuma resposta HTTP recebida (rede, timeout)."""

    kind = "transport"

    def __init__(self, message: str) -> None:
        super().__init__(message)
