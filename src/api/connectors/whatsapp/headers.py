"""Headers de autenticação e versão da Graph API."""

from __future__ import annotations

import re
from collections.abc import Mapping

from app.constants.whatsapp import TokenType

_VERSION_PATTERN = re.compile(r"^v\d+(\.\d+)?$")


def normalize_api_version(version: str | int | float) -> str:
    """Normaliza versão para o formato `v<number>`.

    Exemplos: `24` -> `v24`, `"24.0"` -> `v24.0`, `"v24.0"` -> `v24.0`.

    Raises:
        ValueError: Se a versão não segue o formato `v<number>`.
    """
    text = str(version).strip()
    if not text.startswith("v"):
        text = f"v{text}"
    if not _VERSION_PATTERN.match(text):
        raise ValueError(f"Versão da Graph API inválida: {version!r}")
    return text


def build_headers(
    access_token: str,
    token_type: TokenType | str = TokenType.BEARER,
    extra_headers: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Monta headers de envio.

    Headers extras são aplicados por último e sobrescrevem os padrões.

    Raises:
        ValueError: Se access_token vazio ou token_type desconhecido.
    """
    if not access_token or not access_token.strip():
        raise ValueError("access_token não pode ser vazio")
    token = TokenType(token_type)

    headers = {
        "Content-Type": "application/json",
        "Authorization": f"{token} {access_token}",
    }
    headers.update(extra_headers or {})
    return headers
