"""Transporte HTTP para a Meta Graph API (WhatsApp Cloud API).

Único ponto de IO do envio outbound. Não faz retry: cada chamada
resulta em exatamente um POST. Falhas viram TransportFailure com
status_code e body (quando houver) para normalização na camada app.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from api.connectors.whatsapp.meta_errors import parse_meta_error
from api.connectors.whatsapp.meta_logging import (
    log_meta_error,
    log_success,
    log_transport_error,
)
from app.protocols.transport import TransportFailure

logger: logging.Logger = logging.getLogger(__name__)


def _decode_body(response: httpx.Response) -> Any:
    """Decodifica JSON; body não-JSON é retornado como texto."""
    if not response.content:
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return response.text


class WhatsAppHttpTransport:
    """Implementa TransportProtocol sobre httpx.AsyncClient.

    Aceita um AsyncClient injetado (testes usam httpx.MockTransport) e
    nunca o altera: URL completa, headers e timeout vão em cada request,
    então vários transportes podem compartilhar o mesmo client.
    """

    def __init__(
        self,
        base_url: str,
        headers: Mapping[str, str],
        timeout_seconds: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._headers = dict(headers)
        self._timeout = timeout_seconds
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds)

    @property
    def base_url(self) -> str:
        """URL base com versão da Graph API."""
        return self._base_url

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    async def post(self, path: str, body: dict[str, Any]) -> Any:
        """POST JSON e retorna o body decodificado.

        Raises:
            TransportFailure: status 4xx/5xx (com status e body) ou falha de rede.
        """
        try:
            response = await self._client.post(
                self._url(path),
                json=body,
                headers=self._headers,
                timeout=self._timeout,
            )
        except httpx.HTTPError as exc:
            log_transport_error(path, type(exc).__name__)
            raise TransportFailure(str(exc) or type(exc).__name__) from exc

        data = _decode_body(response)
        if response.is_error:
            meta_error = parse_meta_error(data)
            if meta_error is not None:
                log_meta_error(meta_error, path, response.status_code)
            else:
                logger.warning(
                    "Resposta de erro sem body Meta",
                    extra={"path": path, "status_code": response.status_code},
                )
            raise TransportFailure(
                f"Request failed with status code {response.status_code}",
                status_code=response.status_code,
                response_body=data,
            )

        log_success(path, response.status_code)
        return data

    async def aclose(self) -> None:
        """Fecha o AsyncClient se ele foi criado aqui."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> WhatsAppHttpTransport:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
