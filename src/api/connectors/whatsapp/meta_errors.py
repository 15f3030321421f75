"""Parsing do corpo de erro da Graph API para logs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class WhatsAppApiError:
    """Campos do objeto `error` da Meta relevantes para diagnóstico."""

    error_type: str
    error_code: int
    error_message: str
    fbtrace_id: str | None


def parse_meta_error(response_data: Any) -> WhatsAppApiError | None:
    """Lê `error` de um body decodificado.

    Retorna None para body que não é objeto ou não traz `error` como objeto.
    """
    if not isinstance(response_data, dict):
        return None
    error = response_data.get("error")
    if not isinstance(error, dict):
        return None

    return WhatsAppApiError(
        error_type=error.get("type", "unknown"),
        error_code=error.get("code", 0),
        error_message=error.get("message", "Erro desconhecido"),
        fbtrace_id=error.get("fbtrace_id"),
    )
