"""Conector WhatsApp - adapter de borda para Meta Graph API.

Este módulo é o único ponto de IO para o canal WhatsApp.
Responsabilidades:
- Transporte HTTP (POST de mensagens)
- Headers de autenticação
- Parsing de erros da Graph API
"""

from .headers import build_headers, normalize_api_version
from .http_client import WhatsAppHttpTransport
from .meta_errors import WhatsAppApiError, parse_meta_error

__all__ = [
    "WhatsAppApiError",
    "WhatsAppHttpTransport",
    "build_headers",
    "normalize_api_version",
    "parse_meta_error",
]
