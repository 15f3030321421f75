"""Protocolos de construção de payload outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.messages import OutboundMessage


class PayloadBuilderProtocol(Protocol):
    """Contrato mínimo para construir o envelope de envio."""

    def build_full_payload(self, message: OutboundMessage) -> dict[str, Any]: ...
