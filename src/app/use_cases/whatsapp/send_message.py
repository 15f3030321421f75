"""Use case de envio outbound WhatsApp (fachada do cliente).

Orquestra: build do envelope -> transporte -> classificação/normalização.
Todo envio termina em ResponseSuccess ou ResponseError; nenhuma exceção
atravessa este limite.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from app.domain.errors import SchemaValidationError, WhatsAppSendError
from app.domain.media import MediaReference, parse_media_reference
from app.domain.messages import (
    ImageMessage,
    InteractiveButtonMessage,
    InteractiveListMessage,
    ListSection,
    LocationMessage,
    OutboundMessage,
    ReplyButton,
    TemplateMessage,
    TextMessage,
    VideoMessage,
)
from app.domain.outcome import ResponseError, ResponseSuccess
from app.observability.correlation import correlation_scope
from app.observability.metrics import record_latency, record_send_outcome
from app.services.error_normalizer import classify_failure, to_response_error
from app.services.response_classifier import classify_response

if TYPE_CHECKING:
    from app.domain.template_components import (
        CarouselComponents,
        CatalogComponents,
        ProductCarouselComponents,
        TemplateComponents,
    )
    from app.domain.template_parameters import HeaderParameter
    from app.protocols.payload_builder import PayloadBuilderProtocol
    from app.protocols.transport import TransportProtocol

logger = logging.getLogger(__name__)

Outcome = ResponseSuccess | ResponseError


def _coerce_media(media: MediaReference | Mapping[str, Any]) -> MediaReference:
    if isinstance(media, Mapping):
        return parse_media_reference(media)
    return media


class SendMessageUseCase:
    """Envia mensagens tipadas por um transporte injetado.

    Sem estado mutável compartilhado: cada chamada monta seu próprio
    envelope e consome sua própria resposta.
    """

    def __init__(
        self,
        builder: PayloadBuilderProtocol,
        transport: TransportProtocol,
        phone_number_id: str,
    ) -> None:
        if not phone_number_id:
            raise ValueError("phone_number_id é obrigatório")
        self._builder = builder
        self._transport = transport
        self._phone_number_id = phone_number_id

    @property
    def messages_path(self) -> str:
        """Path relativo do endpoint de mensagens."""
        return f"/{self._phone_number_id}/messages"

    async def execute(self, message: OutboundMessage) -> Outcome:
        """Envia uma mensagem e retorna o resultado normalizado."""
        message_type = str(getattr(message, "message_type", "unknown"))

        with correlation_scope() as correlation_id:
            try:
                payload = self._builder.build_full_payload(message)
            except Exception as exc:
                logger.warning(
                    "Falha ao montar payload outbound",
                    extra={"message_type": message_type, "error_type": type(exc).__name__},
                )
                return self._failed(message_type, exc, correlation_id)

            start = time.perf_counter()
            try:
                raw = await self._transport.post(self.messages_path, payload)
            except Exception as exc:
                failure = classify_failure(exc)
                logger.warning(
                    "Envio WhatsApp falhou",
                    extra={
                        "message_type": message_type,
                        "error_kind": failure.kind,
                        "status_code": getattr(exc, "status_code", None),
                    },
                )
                return self._failed(message_type, failure, correlation_id)
            finally:
                latency_ms = (time.perf_counter() - start) * 1000
                record_latency("whatsapp_send", "post", latency_ms, correlation_id)

            result = classify_response(raw)
            if isinstance(result, SchemaValidationError):
                return self._failed(message_type, result, correlation_id)

            record_send_outcome(message_type, result.status, correlation_id=correlation_id)
            return result

    def _failed(
        self,
        message_type: str,
        exc: BaseException,
        correlation_id: str,
    ) -> ResponseError:
        error_kind = exc.kind if isinstance(exc, WhatsAppSendError) else "build"
        record_send_outcome(message_type, "error", error_kind, correlation_id)
        return to_response_error(exc)

    async def _compose_and_execute(self, compose: Callable[[], OutboundMessage]) -> Outcome:
        """Constrói a mensagem e envia; erro de construção vira ResponseError."""
        try:
            message = compose()
        except (TypeError, ValueError) as exc:
            logger.warning(
                "Mensagem outbound inválida",
                extra={"error_type": type(exc).__name__},
            )
            return to_response_error(exc)
        return await self.execute(message)

    async def send_text(self, to: str, body: str, preview_url: bool = True) -> Outcome:
        return await self._compose_and_execute(
            lambda: TextMessage(to=to, body=body, preview_url=preview_url)
        )

    async def send_image(self, to: str, image: MediaReference | Mapping[str, Any]) -> Outcome:
        return await self._compose_and_execute(
            lambda: ImageMessage(to=to, image=_coerce_media(image))
        )

    async def send_video(self, to: str, video: MediaReference | Mapping[str, Any]) -> Outcome:
        return await self._compose_and_execute(
            lambda: VideoMessage(to=to, video=_coerce_media(video))
        )

    async def send_template(
        self,
        to: str,
        name: str,
        language: str,
        components: TemplateComponents | None = None,
    ) -> Outcome:
        return await self._compose_and_execute(
            lambda: TemplateMessage(to=to, name=name, language=language, components=components)
        )

    async def send_media_carousel(
        self,
        to: str,
        name: str,
        language: str,
        components: CarouselComponents,
    ) -> Outcome:
        return await self._compose_and_execute(
            lambda: TemplateMessage(to=to, name=name, language=language, components=components)
        )

    async def send_product_carousel(
        self,
        to: str,
        name: str,
        language: str,
        components: ProductCarouselComponents,
    ) -> Outcome:
        return await self._compose_and_execute(
            lambda: TemplateMessage(to=to, name=name, language=language, components=components)
        )

    async def send_catalog(
        self,
        to: str,
        name: str,
        language: str,
        components: CatalogComponents,
    ) -> Outcome:
        return await self._compose_and_execute(
            lambda: TemplateMessage(to=to, name=name, language=language, components=components)
        )

    async def send_interactive_buttons(
        self,
        to: str,
        body: str,
        buttons: Sequence[ReplyButton],
        header: HeaderParameter | None = None,
        footer: str | None = None,
    ) -> Outcome:
        return await self._compose_and_execute(
            lambda: InteractiveButtonMessage(
                to=to, body=body, buttons=buttons, header=header, footer=footer
            )
        )

    async def send_interactive_list(
        self,
        to: str,
        body: str,
        button: str,
        sections: Sequence[ListSection],
        header: str | None = None,
        footer: str | None = None,
    ) -> Outcome:
        return await self._compose_and_execute(
            lambda: InteractiveListMessage(
                to=to,
                body=body,
                button=button,
                sections=sections,
                header=header,
                footer=footer,
            )
        )

    async def send_location(
        self,
        to: str,
        latitude: float,
        longitude: float,
        name: str | None = None,
        address: str | None = None,
    ) -> Outcome:
        return await self._compose_and_execute(
            lambda: LocationMessage(
                to=to, latitude=latitude, longitude=longitude, name=name, address=address
            )
        )
