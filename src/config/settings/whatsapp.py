"""Settings específicas de WhatsApp.

Configurações do canal WhatsApp via Graph API.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import lru_cache

# Constantes do Graph API
GRAPH_API_VERSION: str = "v24.0"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"

_VALID_TOKEN_TYPES = ("Bearer", "OAuth")
_VERSION_PATTERN = re.compile(r"^v\d+(\.\d+)?$")


@dataclass(frozen=True)
class WhatsAppSettings:
    """Configurações do canal WhatsApp.

    Attributes:
        access_token: Token de acesso à Graph API
        phone_number_id: ID do número de telefone no Meta Business
        api_version: Versão da Graph API (ex: v24.0)
        api_base_url: URL base da Graph API
        token_type: Esquema do header Authorization (Bearer|OAuth)
        request_timeout_seconds: Timeout para requisições HTTP
    """

    # Credenciais
    access_token: str = ""
    phone_number_id: str = ""

    # API
    api_version: str = GRAPH_API_VERSION
    api_base_url: str = GRAPH_API_BASE_URL
    token_type: str = "Bearer"

    # Timeouts
    request_timeout_seconds: float = 30.0

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url.rstrip('/')}/{self.api_version}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de WhatsApp.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.phone_number_id:
            errors.append("WHATSAPP_PHONE_NUMBER_ID não configurado")

        if not self.access_token:
            errors.append("WHATSAPP_ACCESS_TOKEN não configurado")

        if not _VERSION_PATTERN.match(self.api_version):
            errors.append("WHATSAPP_API_VERSION deve seguir o formato v<number>")

        if self.token_type not in _VALID_TOKEN_TYPES:
            errors.append("WHATSAPP_TOKEN_TYPE deve ser 'Bearer' ou 'OAuth'")

        if self.request_timeout_seconds <= 0:
            errors.append("WHATSAPP_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> WhatsAppSettings:
    """Carrega WhatsAppSettings a partir de variáveis de ambiente."""
    return WhatsAppSettings(
        access_token=os.getenv("WHATSAPP_ACCESS_TOKEN", ""),
        phone_number_id=os.getenv("WHATSAPP_PHONE_NUMBER_ID", ""),
        api_version=os.getenv("WHATSAPP_API_VERSION", GRAPH_API_VERSION),
        api_base_url=os.getenv("WHATSAPP_API_BASE_URL", GRAPH_API_BASE_URL),
        token_type=os.getenv("WHATSAPP_TOKEN_TYPE", "Bearer"),
        request_timeout_seconds=float(
            os.getenv("WHATSAPP_REQUEST_TIMEOUT_SECONDS", "30")
        ),
    )


@lru_cache(maxsize=1)
def get_whatsapp_settings() -> WhatsAppSettings:
    """Retorna instância cacheada de WhatsAppSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
