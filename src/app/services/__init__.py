"""Serviços de aplicação.

Unidades puras de classificação e normalização (sem IO direto).
"""

from app.services.error_normalizer import classify_failure, format_error, to_response_error
from app.services.response_classifier import classify_response

__all__ = [
    "classify_failure",
    "classify_response",
    "format_error",
    "to_response_error",
]
