"""Settings base do serviço.

Configurações comuns: nível de log e nome do serviço.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_SERVICE_NAME: str = "wa_outbound"


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        log_level: Nível de log (DEBUG|INFO|WARNING|ERROR|CRITICAL)
        service_name: Nome do serviço para logs
    """

    log_level: str = "INFO"
    service_name: str = DEFAULT_SERVICE_NAME

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if logging.getLevelName(self.log_level) == f"Level {self.log_level}":
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        return errors


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    return BaseSettings(
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        service_name=os.getenv("SERVICE_NAME", DEFAULT_SERVICE_NAME),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
