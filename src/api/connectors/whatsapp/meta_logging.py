"""Helpers de logging para API Meta/WhatsApp (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .meta_errors import WhatsAppApiError

logger = logging.getLogger(__name__)


def log_meta_error(
    meta_error: WhatsAppApiError,
    path: str,
    status_code: int,
) -> None:
    """Loga erro da Meta sem expor dados sensíveis."""
    logger.warning(
        "Erro da API Meta/WhatsApp",
        extra={
            "path": path,
            "status_code": status_code,
            "error_type": meta_error.error_type,
            "error_code": meta_error.error_code,
            "fbtrace_id": meta_error.fbtrace_id,
        },
    )


def log_transport_error(path: str, error_type: str) -> None:
    """Loga falha sem resposta (rede, timeout)."""
    logger.warning(
        "Falha de transporte na API Meta/WhatsApp",
        extra={"path": path, "error_type": error_type},
    )


def log_success(path: str, status_code: int) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "Envio WhatsApp bem-sucedido",
        extra={"path": path, "status_code": status_code},
    )
