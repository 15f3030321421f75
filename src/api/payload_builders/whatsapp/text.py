"""Builder para mensagens de texto."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.messages import TextMessage


class TextPayloadBuilder:
    """Builder para mensagens de texto simples."""

    def build(self, message: TextMessage) -> dict[str, Any]:
        """Constrói payload para mensagem de texto.

        Args:
            message: Mensagem de texto

        Returns:
            Payload de texto conforme API Meta
        """
        return {
            "text": {
                "preview_url": message.preview_url,
                "body": message.body,
            }
        }
