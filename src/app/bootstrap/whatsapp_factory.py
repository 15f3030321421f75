"""Factory de wiring para WhatsApp (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.bootstrap.whatsapp_adapters import (
    GraphApiPayloadBuilder,
    create_graph_api_transport,
)
from app.use_cases.whatsapp.send_message import SendMessageUseCase
from config.settings import get_whatsapp_settings

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from config.settings import WhatsAppSettings


def create_whatsapp_messenger(
    settings: WhatsAppSettings | None = None,
    client: httpx.AsyncClient | None = None,
    extra_headers: Mapping[str, str] | None = None,
) -> SendMessageUseCase:
    """Cria o cliente de envio com dependências injetadas.

    Args:
        settings: WhatsAppSettings opcional. Se None, carrega do ambiente.
        client: httpx.AsyncClient opcional (testes usam MockTransport).
        extra_headers: Headers adicionais; sobrescrevem os padrões.

    Raises:
        ValueError: Se access_token, phone_number_id ou api_version inválidos.
    """
    whatsapp = settings or get_whatsapp_settings()
    transport = create_graph_api_transport(whatsapp, client, extra_headers)
    return SendMessageUseCase(
        builder=GraphApiPayloadBuilder(),
        transport=transport,
        phone_number_id=whatsapp.phone_number_id,
    )
