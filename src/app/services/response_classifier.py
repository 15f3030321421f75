"""Classificador estrutural do body de sucesso da Meta.

Retorna o resultado ou a falha como valor; não levanta exceção para
body inválido.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, StrictStr, ValidationError, field_validator

from app.domain.errors import SchemaValidationError
from app.domain.outcome import Contact, MessageRef, ResponseSuccess

logger = logging.getLogger(__name__)

INVALID_SCHEMA_MESSAGE = "Invalid schema format"


class _RawContact(BaseModel):
    input: StrictStr
    wa_id: StrictStr


class _RawMessage(BaseModel):
    id: StrictStr
    message_status: str | None = None

    @field_validator("message_status", mode="before")
    @classmethod
    def _drop_non_string_status(cls, value: Any) -> Any:
        # Só `id` faz parte da validação; status fora do formato é descartado
        return value if isinstance(value, str) else None


class _RawSuccessBody(BaseModel):
    messaging_product: StrictStr
    contacts: list[_RawContact]
    messages: list[_RawMessage]


def classify_response(raw: Any) -> ResponseSuccess | SchemaValidationError:
    """Valida o body bruto e projeta na variante de sucesso.

    Válido quando `messaging_product` é string, `messages` é lista com `id`
    string em cada item e `contacts` é lista com `input` e `wa_id` string.
    Campos extras são descartados.

    Args:
        raw: Body decodificado da resposta

    Returns:
        ResponseSuccess, ou SchemaValidationError com o body bruto em details.
    """
    try:
        body = _RawSuccessBody.model_validate(raw)
    except ValidationError as exc:
        logger.warning(
            "Body de sucesso fora do formato esperado",
            extra={"error_count": exc.error_count(), "body_type": type(raw).__name__},
        )
        details = raw if isinstance(raw, dict) else {"body": raw}
        return SchemaValidationError(INVALID_SCHEMA_MESSAGE, details=details)

    return ResponseSuccess(
        messaging_product=body.messaging_product,
        contacts=tuple(
            Contact(input=contact.input, wa_id=contact.wa_id) for contact in body.contacts
        ),
        messages=tuple(
            MessageRef(id=message.id, message_status=message.message_status)
            for message in body.messages
        ),
    )
