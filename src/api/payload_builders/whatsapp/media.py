"""Resolver de referências de mídia e builders de imagem/vídeo."""

from __future__ import annotations

from typing import Any

from app.domain.media import MediaById, MediaByUrl, MediaReference
from app.domain.messages import ImageMessage, VideoMessage


def resolve_media(media: MediaReference) -> dict[str, Any]:
    """Converte MediaReference no objeto de mídia da API Meta.

    Emite apenas `id` ou `link` (conforme a variante) e `caption` quando
    presente. A tag discriminadora nunca é emitida.
    """
    match media:
        case MediaById(id=media_id):
            result: dict[str, Any] = {"id": media_id}
        case MediaByUrl(link=link):
            result = {"link": link}
        case _:
            raise TypeError(f"Referência de mídia não suportada: {type(media).__name__}")

    if media.caption is not None:
        result["caption"] = media.caption
    return result


class ImagePayloadBuilder:
    """Builder para mensagens de imagem."""

    def build(self, message: ImageMessage) -> dict[str, Any]:
        return {"image": resolve_media(message.image)}


class VideoPayloadBuilder:
    """Builder para mensagens de vídeo."""

    def build(self, message: VideoMessage) -> dict[str, Any]:
        return {"video": resolve_media(message.video)}
