"""Parâmetros de template WhatsApp (variantes tipadas).

Cada variante carrega a tag `type` como ClassVar; a serialização para o
formato Graph API fica em api/payload_builders/whatsapp/parameters.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal

from app.domain.media import MediaReference


@dataclass(frozen=True)
class TextParameter:
    """Parâmetro de texto."""

    text: str

    type: ClassVar[Literal["text"]] = "text"


@dataclass(frozen=True)
class ImageParameter:
    """Parâmetro de imagem (header)."""

    image: MediaReference

    type: ClassVar[Literal["image"]] = "image"


@dataclass(frozen=True)
class VideoParameter:
    """Parâmetro de vídeo (header)."""

    video: MediaReference

    type: ClassVar[Literal["video"]] = "video"


@dataclass(frozen=True)
class DocumentParameter:
    """Parâmetro de documento (header), com filename opcional."""

    document: MediaReference
    filename: str | None = None

    type: ClassVar[Literal["document"]] = "document"


@dataclass(frozen=True)
class CurrencyParameter:
    """Valor monetário.

    Attributes:
        fallback_value: Texto exibido quando a localização falha
        code: Código da moeda (ISO 4217)
        amount_1000: Valor multiplicado por 1000
    """

    fallback_value: str
    code: str
    amount_1000: int

    type: ClassVar[Literal["currency"]] = "currency"


@dataclass(frozen=True)
class DateTimeParameter:
    """Data/hora com valor de fallback."""

    fallback_value: str

    type: ClassVar[Literal["date_time"]] = "date_time"


TemplateParameter = (
    TextParameter
    | ImageParameter
    | VideoParameter
    | DocumentParameter
    | CurrencyParameter
    | DateTimeParameter
)

# Parâmetros aceitos no header de um template
HeaderParameter = TextParameter | ImageParameter | VideoParameter | DocumentParameter

# Header de card de carrossel: apenas imagem ou vídeo
CardHeaderParameter = ImageParameter | VideoParameter

# Body de carrossel de produtos
ProductBodyParameter = TextParameter | CurrencyParameter | DateTimeParameter
