"""Montagem de componentes de template de catálogo."""

from __future__ import annotations

from typing import Any

from api.payload_builders.whatsapp.parameters import body_component
from app.constants.whatsapp import ButtonSubType, ComponentType, ParameterType
from app.domain.template_components import CatalogComponents


def build_catalog_components(components: CatalogComponents) -> list[dict[str, Any]]:
    """Body com textos (quando houver) + botão CATALOG fixo no índice 0."""
    result: list[dict[str, Any]] = []

    body = body_component(components.body)
    if body is not None:
        result.append(body)

    result.append({
        "type": ComponentType.BUTTON,
        "sub_type": ButtonSubType.CATALOG,
        "index": 0,
        "parameters": [
            {
                "type": ParameterType.ACTION,
                "action": {
                    "thumbnail_product_retailer_id": components.thumbnail_product_retailer_id,
                },
            }
        ],
    })
    return result
