"""Envelope comum e protocolo dos builders por tipo de mensagem."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from app.constants.whatsapp import MESSAGING_PRODUCT, RECIPIENT_TYPE

if TYPE_CHECKING:
    from app.domain.messages import OutboundMessage


class PayloadBuilder(Protocol):
    """Builder de payload específico de um tipo de mensagem.

    Retorna apenas a chave do tipo (ex: `{"text": {...}}`); o envelope
    é montado por build_base_payload.
    """

    def build(self, message: Any) -> dict[str, Any]: ...


def build_base_payload(message: OutboundMessage) -> dict[str, Any]:
    """Monta campos comuns do envelope Graph API.

    O campo `type` vem sempre da tag da própria variante.
    """
    return {
        "messaging_product": MESSAGING_PRODUCT,
        "recipient_type": RECIPIENT_TYPE,
        "to": message.to,
        "type": str(message.message_type),
    }
