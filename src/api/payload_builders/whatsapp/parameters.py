"""Serialização de parâmetros de template para o formato Graph API."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from api.payload_builders.whatsapp.media import resolve_media
from app.domain.template_parameters import (
    CurrencyParameter,
    DateTimeParameter,
    DocumentParameter,
    ImageParameter,
    TemplateParameter,
    TextParameter,
    VideoParameter,
)


def serialize_parameter(parameter: TemplateParameter) -> dict[str, Any]:
    """Converte um parâmetro tipado no dict `{type, <type>: ...}` da API."""
    match parameter:
        case TextParameter(text=text):
            return {"type": "text", "text": text}
        case ImageParameter(image=media):
            return {"type": "image", "image": resolve_media(media)}
        case VideoParameter(video=media):
            return {"type": "video", "video": resolve_media(media)}
        case DocumentParameter(document=media, filename=filename):
            document = resolve_media(media)
            if filename is not None:
                document["filename"] = filename
            return {"type": "document", "document": document}
        case CurrencyParameter():
            return {
                "type": "currency",
                "currency": {
                    "fallback_value": parameter.fallback_value,
                    "code": parameter.code,
                    "amount_1000": parameter.amount_1000,
                },
            }
        case DateTimeParameter(fallback_value=fallback_value):
            return {"type": "date_time", "date_time": {"fallback_value": fallback_value}}
    raise TypeError(f"Parâmetro de template não suportado: {type(parameter).__name__}")


def serialize_body(values: Iterable[TemplateParameter | str] | None) -> list[dict[str, Any]]:
    """Serializa parâmetros de body; strings viram parâmetros de texto."""
    if not values:
        return []
    return [
        serialize_parameter(TextParameter(value) if isinstance(value, str) else value)
        for value in values
    ]


def body_component(values: Iterable[TemplateParameter | str] | None) -> dict[str, Any] | None:
    """Componente `body` ou None quando não há parâmetros."""
    parameters = serialize_body(values)
    if not parameters:
        return None
    return {"type": "body", "parameters": parameters}
