"""Filters de logging para injeção de contexto e mascaramento.

Campos injetados:
- correlation_id: ID de rastreamento do envio
- service: Nome do serviço (ex: wa_outbound)

Campos sensíveis passados via `extra` (token, telefone) são mascarados.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Atributos de LogRecord que nunca devem sair em claro
SENSITIVE_FIELDS = frozenset(
    {
        "access_token",
        "authorization",
        "to",
        "wa_id",
        "phone_number",
    }
)

REDACTED = "[REDACTED]"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Se correlation_id já foi passado via `extra`, preserva o valor.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SensitiveFieldFilter(logging.Filter):
    """Mascara campos sensíveis adicionados ao record via `extra`.

    Não filtra records; apenas substitui o valor por REDACTED.
    """

    def __init__(self, fields: frozenset[str] = SENSITIVE_FIELDS) -> None:
        super().__init__()
        self._fields = fields

    def filter(self, record: logging.LogRecord) -> bool:
        for field in self._fields:
            if getattr(record, field, None) is not None:
                setattr(record, field, REDACTED)
        return True
