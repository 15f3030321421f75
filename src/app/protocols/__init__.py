"""Protocolos e contratos do core da aplicação."""

from .payload_builder import PayloadBuilderProtocol
from .transport import TransportFailure, TransportProtocol

__all__ = [
    "PayloadBuilderProtocol",
    "TransportFailure",
    "TransportProtocol",
]
