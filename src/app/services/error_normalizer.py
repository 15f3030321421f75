"""Normalização de falhas para a lista `{message, details}`."""

from __future__ import annotations

from typing import Any

from app.domain.errors import ApiError, TransportError, WhatsAppSendError
from app.domain.outcome import ErrorDetail, ResponseError
from app.protocols.transport import TransportFailure


def _remote_error_details(response_body: Any) -> Any:
    """Campo `error` do body remoto, repassado sem alteração."""
    if not isinstance(response_body, dict):
        return None
    return response_body.get("error")


def classify_failure(exc: BaseException) -> WhatsAppSendError:
    """Mapeia uma exceção para a taxonomia de falhas.

    - WhatsAppSendError: repassada como está
    - TransportFailure com resposta (status ou body): ApiError, com
      details = body["error"] quando existir
    - TransportFailure sem resposta: TransportError
    """
    if isinstance(exc, WhatsAppSendError):
        return exc
    if isinstance(exc, TransportFailure):
        if exc.status_code is not None or exc.response_body is not None:
            return ApiError(str(exc), details=_remote_error_details(exc.response_body))
        return TransportError(str(exc))
    return WhatsAppSendError(str(exc) or type(exc).__name__)


def format_error(
    exc: BaseException,
    details: Any = None,
) -> list[ErrorDetail]:
    """Converte qualquer exceção na lista ordenada de ErrorDetail.

    Falhas da taxonomia serializam a si mesmas; demais exceções viram
    um único item com a mensagem e os `details` informados.
    """
    if isinstance(exc, WhatsAppSendError):
        return exc.serialize_error()
    return [ErrorDetail(message=str(exc) or type(exc).__name__, details=details)]


def to_response_error(exc: BaseException) -> ResponseError:
    """Dobra qualquer falha na variante `error` do resultado."""
    return ResponseError(error=tuple(format_error(classify_failure(exc))))
