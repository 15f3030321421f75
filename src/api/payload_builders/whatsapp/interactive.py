"""Builder para mensagens interativas (botões e lista)."""

from __future__ import annotations

from typing import Any

from api.payload_builders.whatsapp.parameters import serialize_parameter
from app.domain.messages import (
    InteractiveButtonMessage,
    InteractiveListMessage,
    ListSection,
    ReplyButton,
)


def _build_button_action(buttons: tuple[ReplyButton, ...]) -> dict[str, Any]:
    return {
        "buttons": [
            {"type": "reply", "reply": {"id": button.id, "title": button.title}}
            for button in buttons
        ]
    }


def _build_section(section: ListSection) -> dict[str, Any]:
    rows = []
    for row in section.rows:
        item = {"id": row.id, "title": row.title}
        if row.description is not None:
            item["description"] = row.description
        rows.append(item)
    return {"title": section.title, "rows": rows}


def _build_list_action(message: InteractiveListMessage) -> dict[str, Any]:
    return {
        "button": message.button,
        "sections": [_build_section(section) for section in message.sections],
    }


class InteractivePayloadBuilder:
    """Builder para mensagens interativas.

    `interactive.type` é fixo pela variante; header e footer só entram
    quando informados.
    """

    def build(
        self,
        message: InteractiveButtonMessage | InteractiveListMessage,
    ) -> dict[str, Any]:
        header: dict[str, Any] | None = None

        match message:
            case InteractiveButtonMessage():
                if message.header is not None:
                    header = serialize_parameter(message.header)
                action = _build_button_action(message.buttons)
            case InteractiveListMessage():
                if message.header is not None:
                    header = {"type": "text", "text": message.header}
                action = _build_list_action(message)
            case _:
                raise TypeError(f"Mensagem interativa não suportada: {type(message).__name__}")

        interactive: dict[str, Any] = {"type": str(message.interactive_type)}
        if header is not None:
            interactive["header"] = header
        interactive["body"] = {"text": message.body}
        if message.footer is not None:
            interactive["footer"] = {"text": message.footer}
        interactive["action"] = action

        return {"interactive": interactive}
