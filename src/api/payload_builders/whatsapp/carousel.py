"""Montagem de componentes de carrossel (mídia e produtos).

O `card_index` enviado é sempre a posição do card na lista. Headers de
card usam `link` mesmo para mídia referenciada por id.
"""

from __future__ import annotations

from typing import Any

from api.payload_builders.whatsapp.parameters import body_component
from app.constants.whatsapp import ComponentType, ParameterType
from app.domain.media import MediaById, MediaByUrl, MediaReference
from app.domain.template_components import (
    CarouselButton,
    CarouselCard,
    CarouselComponents,
    CarouselQuickReply,
    CarouselUrlButton,
    ProductCard,
    ProductCarouselComponents,
)
from app.domain.template_parameters import (
    CardHeaderParameter,
    ImageParameter,
    VideoParameter,
)


def _media_link(media: MediaReference) -> str | int:
    match media:
        case MediaById(id=media_id):
            return media_id
        case MediaByUrl(link=link):
            return link
    raise TypeError(f"Referência de mídia não suportada: {type(media).__name__}")


def _card_header(header: CardHeaderParameter) -> dict[str, Any]:
    match header:
        case ImageParameter(image=media):
            kind = ParameterType.IMAGE
        case VideoParameter(video=media):
            kind = ParameterType.VIDEO
        case _:
            raise TypeError(f"Header de card não suportado: {type(header).__name__}")

    return {
        "type": ComponentType.HEADER,
        "parameters": [{"type": kind, str(kind): {"link": _media_link(media)}}],
    }


def _card_button(button: CarouselButton) -> dict[str, Any]:
    match button:
        case CarouselQuickReply(payload=payload):
            parameters = [{"type": ParameterType.PAYLOAD, "payload": payload}]
        case CarouselUrlButton(text=text):
            parameters = [{"type": ParameterType.TEXT, "text": text}]
        case _:
            raise TypeError(f"Botão de card não suportado: {type(button).__name__}")

    return {
        "type": ComponentType.BUTTON,
        "sub_type": button.sub_type,
        "index": button.index,
        "parameters": parameters,
    }


def _build_card(position: int, card: CarouselCard) -> dict[str, Any]:
    components = [_card_header(card.header)]
    body = body_component(card.body)
    if body is not None:
        components.append(body)
    components.extend(_card_button(button) for button in card.buttons)
    return {"card_index": position, "components": components}


def _build_product_card(position: int, card: ProductCard) -> dict[str, Any]:
    product = {
        "type": ParameterType.PRODUCT,
        "product": {
            "product_retailer_id": card.product_retailer_id,
            "catalog_id": card.catalog_id,
        },
    }
    return {
        "card_index": position,
        "components": [{"type": ComponentType.HEADER, "parameters": [product]}],
    }


def _with_carousel(body: dict[str, Any] | None, cards: list[dict[str, Any]]) -> list[dict[str, Any]]:
    components = [body] if body is not None else []
    components.append({"type": ComponentType.CAROUSEL, "cards": cards})
    return components


def build_carousel_components(components: CarouselComponents) -> list[dict[str, Any]]:
    """Componentes de carrossel de mídia: body opcional + carousel."""
    cards = [_build_card(position, card) for position, card in enumerate(components.cards)]
    return _with_carousel(body_component(components.body), cards)


def build_product_carousel_components(
    components: ProductCarouselComponents,
) -> list[dict[str, Any]]:
    """Componentes de carrossel de produtos: body opcional + carousel."""
    cards = [
        _build_product_card(position, card) for position, card in enumerate(components.cards)
    ]
    return _with_carousel(body_component(components.body), cards)
