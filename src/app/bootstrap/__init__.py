"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging e conecta implementações concretas
(camada api) aos protocolos da camada app.

Uso:
    from app.bootstrap import create_whatsapp_messenger, initialize_app

    initialize_app()
    messenger = create_whatsapp_messenger()
    outcome = await messenger.send_text("5511999999999", "Olá")
"""

from __future__ import annotations

import logging

from app.bootstrap.whatsapp_factory import create_whatsapp_messenger
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_whatsapp_settings

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id a partir do ambiente.

    Deve ser chamada uma vez no início do processo.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa logging em nível DEBUG para testes."""
    base = get_base_settings()
    configure_logging(
        level="DEBUG",
        service_name=f"{base.service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(strict: bool = False) -> list[str]:
    """Valida settings obrigatórias no startup.

    Args:
        strict: Se True, levanta RuntimeError quando houver erros.

    Returns:
        Lista de erros prefixados por origem (vazia = OK).
    """
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in get_base_settings().validate())
    errors.extend(f"whatsapp: {error}" for error in get_whatsapp_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok"},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida:\n{details}")
    return errors


__all__ = [
    "create_whatsapp_messenger",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
