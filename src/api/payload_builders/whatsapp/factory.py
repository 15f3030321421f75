"""Factory para obter o builder correto por tipo de mensagem."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.whatsapp.base import (
    PayloadBuilder,
    build_base_payload,
)
from api.payload_builders.whatsapp.interactive import (
    InteractivePayloadBuilder,
)
from api.payload_builders.whatsapp.location import (
    LocationPayloadBuilder,
)
from api.payload_builders.whatsapp.media import (
    ImagePayloadBuilder,
    VideoPayloadBuilder,
)
from api.payload_builders.whatsapp.template import (
    TemplatePayloadBuilder,
)
from api.payload_builders.whatsapp.text import (
    TextPayloadBuilder,
)
from app.constants.whatsapp import MessageType

if TYPE_CHECKING:
    from app.domain.messages import OutboundMessage

# Mapeamento de tipo de mensagem para builder
_BUILDERS: dict[MessageType, PayloadBuilder] = {
    MessageType.TEXT: TextPayloadBuilder(),
    MessageType.IMAGE: ImagePayloadBuilder(),
    MessageType.VIDEO: VideoPayloadBuilder(),
    MessageType.TEMPLATE: TemplatePayloadBuilder(),
    MessageType.INTERACTIVE: InteractivePayloadBuilder(),
    MessageType.LOCATION: LocationPayloadBuilder(),
}


def get_payload_builder(message_type: MessageType) -> PayloadBuilder | None:
    """Retorna o builder para o tipo de mensagem.

    Args:
        message_type: Tipo de mensagem

    Returns:
        Builder apropriado ou None se não suportado
    """
    return _BUILDERS.get(message_type)


def build_full_payload(message: OutboundMessage) -> dict[str, Any]:
    """Constrói payload completo para a API Meta.

    Args:
        message: Mensagem tipada

    Returns:
        Payload completo pronto para envio

    Raises:
        ValueError: Se tipo de mensagem não suportado
    """
    message_type = getattr(message, "message_type", None)
    builder = get_payload_builder(message_type) if message_type is not None else None

    if builder is None:
        raise ValueError(f"Tipo de mensagem não suportado: {type(message).__name__}")

    payload = build_base_payload(message)
    payload.update(builder.build(message))
    return payload
