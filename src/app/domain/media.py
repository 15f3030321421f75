"""Referências de mídia outbound (por id ou por URL).

A tag discriminadora (`type`) existe apenas do lado do chamador; a API
Meta não a aceita dentro do objeto de mídia.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Literal


@dataclass(frozen=True)
class MediaById:
    """Mídia previamente enviada para a Meta (media id)."""

    id: str | int
    caption: str | None = None

    type: ClassVar[Literal["id"]] = "id"


@dataclass(frozen=True)
class MediaByUrl:
    """Mídia hospedada em URL pública."""

    link: str
    caption: str | None = None

    type: ClassVar[Literal["url"]] = "url"


MediaReference = MediaById | MediaByUrl


def parse_media_reference(data: Mapping[str, Any]) -> MediaReference:
    """Converte mapping com tag `type` em MediaReference.

    Aceita o formato `{"type": "id", "id": ...}` ou
    `{"type": "url", "link": ...}`, com `caption` opcional.

    Raises:
        ValueError: Se a tag for desconhecida ou o campo da variante faltar.
    """
    tag = data.get("type")
    caption = data.get("caption")

    if tag == MediaById.type:
        if "id" not in data:
            raise ValueError("Mídia do tipo 'id' exige o campo 'id'")
        return MediaById(id=data["id"], caption=caption)

    if tag == MediaByUrl.type:
        if "link" not in data:
            raise ValueError("Mídia do tipo 'url' exige o campo 'link'")
        return MediaByUrl(link=data["link"], caption=caption)

    raise ValueError(f"Tipo de mídia desconhecido: {tag!r}")
