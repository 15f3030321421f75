"""Mensagens outbound tipadas (uma variante por tipo de envelope).

Cada variante declara `message_type` (tag do envelope) como ClassVar;
o builder usa essa tag para escolher o payload.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from app.constants.whatsapp import InteractiveType, MessageType
from app.domain.media import MediaReference
from app.domain.template_components import (
    CarouselComponents,
    CatalogComponents,
    ProductCarouselComponents,
    TemplateComponents,
)
from app.domain.template_parameters import HeaderParameter

MAX_REPLY_BUTTONS = 3


@dataclass(frozen=True)
class TextMessage:
    """Mensagem de texto simples."""

    to: str
    body: str
    preview_url: bool = True

    message_type: ClassVar[MessageType] = MessageType.TEXT


@dataclass(frozen=True)
class ImageMessage:
    """Mensagem de imagem."""

    to: str
    image: MediaReference

    message_type: ClassVar[MessageType] = MessageType.IMAGE


@dataclass(frozen=True)
class VideoMessage:
    """Mensagem de vídeo."""

    to: str
    video: MediaReference

    message_type: ClassVar[MessageType] = MessageType.VIDEO


AnyTemplateComponents = (
    TemplateComponents | CarouselComponents | ProductCarouselComponents | CatalogComponents
)


@dataclass(frozen=True)
class TemplateMessage:
    """Mensagem de template aprovado.

    O tipo de `components` define a família: template simples,
    carrossel de mídia, carrossel de produtos ou catálogo.
    """

    to: str
    name: str
    language: str
    components: AnyTemplateComponents | None = None

    message_type: ClassVar[MessageType] = MessageType.TEMPLATE


@dataclass(frozen=True)
class ReplyButton:
    """Botão de resposta rápida de mensagem interativa."""

    id: str
    title: str


@dataclass(frozen=True)
class InteractiveButtonMessage:
    """Mensagem interativa com até 3 botões de resposta."""

    to: str
    body: str
    buttons: Sequence[ReplyButton]
    header: HeaderParameter | None = None
    footer: str | None = None

    message_type: ClassVar[MessageType] = MessageType.INTERACTIVE
    interactive_type: ClassVar[InteractiveType] = InteractiveType.BUTTON

    def __post_init__(self) -> None:
        object.__setattr__(self, "buttons", tuple(self.buttons))
        if not 1 <= len(self.buttons) <= MAX_REPLY_BUTTONS:
            raise ValueError(f"Mensagem interativa exige de 1 a {MAX_REPLY_BUTTONS} botões")


@dataclass(frozen=True)
class ListRow:
    """Linha selecionável de uma seção de lista."""

    id: str
    title: str
    description: str | None = None


@dataclass(frozen=True)
class ListSection:
    """Seção de lista interativa."""

    title: str
    rows: Sequence[ListRow]

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", tuple(self.rows))


@dataclass(frozen=True)
class InteractiveListMessage:
    """Mensagem interativa de lista."""

    to: str
    body: str
    button: str
    sections: Sequence[ListSection]
    header: str | None = None
    footer: str | None = None

    message_type: ClassVar[MessageType] = MessageType.INTERACTIVE
    interactive_type: ClassVar[InteractiveType] = InteractiveType.LIST

    def __post_init__(self) -> None:
        object.__setattr__(self, "sections", tuple(self.sections))
        if not self.sections:
            raise ValueError("Mensagem de lista exige ao menos uma seção")


@dataclass(frozen=True)
class LocationMessage:
    """Mensagem de localização."""

    to: str
    latitude: float
    longitude: float
    name: str | None = None
    address: str | None = None

    message_type: ClassVar[MessageType] = MessageType.LOCATION


OutboundMessage = (
    TextMessage
    | ImageMessage
    | VideoMessage
    | TemplateMessage
    | InteractiveButtonMessage
    | InteractiveListMessage
    | LocationMessage
)
