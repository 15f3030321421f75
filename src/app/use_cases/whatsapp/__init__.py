"""Use cases específicos de WhatsApp."""

from .send_message import SendMessageUseCase

__all__ = [
    "SendMessageUseCase",
]
