"""Builders de payload para API Meta/WhatsApp.

Este pacote contém builders especializados por tipo de mensagem e a
montagem de componentes de template, carrossel e catálogo.
"""

from api.payload_builders.whatsapp.base import (
    PayloadBuilder,
    build_base_payload,
)
from api.payload_builders.whatsapp.factory import (
    build_full_payload,
    get_payload_builder,
)
from api.payload_builders.whatsapp.media import resolve_media
from api.payload_builders.whatsapp.template import (
    assemble_components,
    build_template_components,
)

__all__ = [
    "PayloadBuilder",
    "assemble_components",
    "build_base_payload",
    "build_full_payload",
    "build_template_components",
    "get_payload_builder",
    "resolve_media",
]
