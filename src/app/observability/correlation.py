"""Correlation_id por envio, propagado para os logs.

Usa ContextVar, então envios concorrentes (tasks asyncio distintas)
não compartilham o valor.

Uso:
    from app.observability.correlation import correlation_scope

    with correlation_scope() as correlation_id:
        ...  # logs dentro do bloco carregam o correlation_id
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())


@contextmanager
def correlation_scope() -> Iterator[str]:
    """Garante um correlation_id ativo durante o bloco.

    Reaproveita o ID já definido pelo chamador; caso contrário gera um
    novo e restaura o contexto ao sair.
    """
    current = get_correlation_id()
    if current:
        yield current
        return

    token = set_correlation_id()
    try:
        yield get_correlation_id()
    finally:
        reset_correlation_id(token)
