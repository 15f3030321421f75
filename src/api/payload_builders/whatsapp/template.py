"""Builder para mensagens de template e montagem de componentes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.whatsapp.carousel import (
    build_carousel_components,
    build_product_carousel_components,
)
from api.payload_builders.whatsapp.catalog import build_catalog_components
from api.payload_builders.whatsapp.parameters import body_component, serialize_parameter
from app.constants.whatsapp import ButtonSubType, ComponentType, ParameterType
from app.domain.template_components import (
    CarouselComponents,
    CatalogComponents,
    ProductCarouselComponents,
    TemplateComponents,
)

if TYPE_CHECKING:
    from app.domain.messages import AnyTemplateComponents, TemplateMessage


def build_template_components(
    components: TemplateComponents | None,
) -> list[dict[str, Any]] | None:
    """Monta `components` de template simples.

    Ordem fixa: header, body, quick replies (índices preservados).

    Returns:
        Lista de componentes ou None quando não há nenhum; nesse caso a
        chave `components` deve ser omitida do payload.
    """
    if components is None:
        return None

    result: list[dict[str, Any]] = []

    if components.header is not None:
        result.append({
            "type": ComponentType.HEADER,
            "parameters": [serialize_parameter(components.header)],
        })

    body = body_component(components.body)
    if body is not None:
        result.append(body)

    for reply in components.quick_replies or ():
        result.append({
            "type": ComponentType.BUTTON,
            "sub_type": ButtonSubType.QUICK_REPLY,
            "index": reply.index,
            "parameters": [
                {"type": ParameterType.PAYLOAD, "payload": payload} for payload in reply.payloads
            ],
        })

    return result or None


def assemble_components(
    components: AnyTemplateComponents | None,
) -> list[dict[str, Any]] | None:
    """Escolhe a montagem conforme a família de componentes."""
    match components:
        case None:
            return None
        case TemplateComponents():
            return build_template_components(components)
        case CarouselComponents():
            return build_carousel_components(components)
        case ProductCarouselComponents():
            return build_product_carousel_components(components)
        case CatalogComponents():
            return build_catalog_components(components)
    raise TypeError(f"Componentes não suportados: {type(components).__name__}")


class TemplatePayloadBuilder:
    """Builder para mensagens de template."""

    def build(self, message: TemplateMessage) -> dict[str, Any]:
        """Constrói payload para mensagem de template.

        Args:
            message: Mensagem de template

        Returns:
            Payload template conforme API Meta
        """
        template_obj: dict[str, Any] = {
            "name": message.name,
            "language": {"code": message.language},
        }

        components = assemble_components(message.components)
        if components:
            template_obj["components"] = components

        return {"template": template_obj}
