"""Descrições tipadas de componentes de template, carrossel e catálogo.

Os objetos são imutáveis; sequências recebidas são congeladas em tuplas.
Violações estruturais (índices fora da faixa, quantidade de botões ou
cards) levantam ValueError na construção.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar, Literal

from app.domain.template_parameters import (
    CardHeaderParameter,
    HeaderParameter,
    ProductBodyParameter,
    TemplateParameter,
)

MAX_QUICK_REPLIES = 3
MAX_CARD_BUTTONS = 2
MAX_CAROUSEL_CARDS = 10

BodyValue = TemplateParameter | str


def _freeze(instance: object, name: str) -> tuple:
    value = getattr(instance, name)
    frozen = tuple(value) if value is not None else None
    object.__setattr__(instance, name, frozen)
    return frozen or ()


@dataclass(frozen=True)
class QuickReplyButton:
    """Botão quick reply de template (índice 0..2).

    `payload` aceita uma string ou uma sequência; cada item vira um
    parâmetro `payload` do botão.
    """

    index: int
    payload: str | Sequence[str]

    def __post_init__(self) -> None:
        if not isinstance(self.payload, str) and not _freeze(self, "payload"):
            raise ValueError("quick reply exige ao menos um payload")
        if self.index not in range(MAX_QUICK_REPLIES):
            raise ValueError(
                f"index de quick reply deve estar entre 0 e {MAX_QUICK_REPLIES - 1}"
            )

    @property
    def payloads(self) -> tuple[str, ...]:
        if isinstance(self.payload, str):
            return (self.payload,)
        return self.payload


@dataclass(frozen=True)
class TemplateComponents:
    """Componentes de um template simples.

    Índices de quick reply repetidos são aceitos e enviados como vieram.
    """

    header: HeaderParameter | None = None
    body: Sequence[TemplateParameter] | None = None
    quick_replies: Sequence[QuickReplyButton] | None = None

    def __post_init__(self) -> None:
        _freeze(self, "body")
        replies = _freeze(self, "quick_replies")
        if len(replies) > MAX_QUICK_REPLIES:
            raise ValueError(f"Máximo de {MAX_QUICK_REPLIES} quick replies por template")


@dataclass(frozen=True)
class CarouselQuickReply:
    """Botão quick reply de card de carrossel."""

    index: int
    payload: str

    sub_type: ClassVar[Literal["quick_reply"]] = "quick_reply"


@dataclass(frozen=True)
class CarouselUrlButton:
    """Botão URL de card de carrossel (sufixo dinâmico da URL)."""

    index: int
    text: str

    sub_type: ClassVar[Literal["url"]] = "url"


CarouselButton = CarouselQuickReply | CarouselUrlButton


@dataclass(frozen=True)
class CarouselCard:
    """Card de carrossel de mídia.

    `card_index` é ignorado na montagem: o índice enviado é sempre a
    posição do card na lista.
    """

    header: CardHeaderParameter
    buttons: Sequence[CarouselButton]
    body: Sequence[BodyValue] | None = None
    card_index: int | None = None

    def __post_init__(self) -> None:
        _freeze(self, "body")
        buttons = _freeze(self, "buttons")
        if not 1 <= len(buttons) <= MAX_CARD_BUTTONS:
            raise ValueError(f"Card de carrossel exige de 1 a {MAX_CARD_BUTTONS} botões")


@dataclass(frozen=True)
class CarouselComponents:
    """Carrossel de mídia: body opcional + cards."""

    cards: Sequence[CarouselCard]
    body: Sequence[BodyValue] | None = None

    def __post_init__(self) -> None:
        _freeze(self, "body")
        _check_card_count(_freeze(self, "cards"))


@dataclass(frozen=True)
class ProductCard:
    """Card de carrossel de produtos do catálogo."""

    product_retailer_id: str
    catalog_id: str
    card_index: int | None = None


@dataclass(frozen=True)
class ProductCarouselComponents:
    """Carrossel de produtos: body opcional + cards de produto."""

    cards: Sequence[ProductCard]
    body: Sequence[ProductBodyParameter | str] | None = None

    def __post_init__(self) -> None:
        _freeze(self, "body")
        _check_card_count(_freeze(self, "cards"))


@dataclass(frozen=True)
class CatalogComponents:
    """Template de catálogo: textos do body + produto da thumbnail."""

    thumbnail_product_retailer_id: str
    body: Sequence[str] | None = None

    def __post_init__(self) -> None:
        _freeze(self, "body")


def _check_card_count(cards: tuple) -> None:
    if not 1 <= len(cards) <= MAX_CAROUSEL_CARDS:
        raise ValueError(f"Carrossel exige de 1 a {MAX_CAROUSEL_CARDS} cards")
