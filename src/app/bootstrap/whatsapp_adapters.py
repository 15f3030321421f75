"""Adapters concretos para WhatsApp (wiring em app/bootstrap).

Este módulo é o único autorizado a acoplar app <-> api.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any

from api.connectors.whatsapp.headers import build_headers, normalize_api_version
from api.connectors.whatsapp.http_client import WhatsAppHttpTransport
from api.payload_builders.whatsapp.factory import build_full_payload
from app.protocols.payload_builder import PayloadBuilderProtocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from app.domain.messages import OutboundMessage
    from config.settings import WhatsAppSettings


class GraphApiPayloadBuilder(PayloadBuilderProtocol):
    """Builder de payload para Graph API."""

    def build_full_payload(self, message: OutboundMessage) -> dict[str, Any]:
        return build_full_payload(message)


def create_graph_api_transport(
    settings: WhatsAppSettings,
    client: httpx.AsyncClient | None = None,
    extra_headers: Mapping[str, str] | None = None,
) -> WhatsAppHttpTransport:
    """Cria transporte HTTP apontando para `settings.api_endpoint`.

    A versão é normalizada antes (ex: "21" -> "v21").
    """
    normalized = replace(settings, api_version=normalize_api_version(settings.api_version))
    headers = build_headers(settings.access_token, settings.token_type, extra_headers)
    return WhatsAppHttpTransport(
        base_url=normalized.api_endpoint,
        headers=headers,
        timeout_seconds=settings.request_timeout_seconds,
        client=client,
    )
