"""Protocolo de transporte HTTP usado pelo use case de envio.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import Any, Protocol


class TransportFailure(Exception):
    """Falha de transporte, com body de resposta quando houve resposta.

    Attributes:
        status_code: Status HTTP (None quando não houve resposta)
        response_body: Body da resposta de erro (JSON ou texto), se houver
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class TransportProtocol(Protocol):
    """Contrato mínimo: POST em path relativo com body JSON.

    Retorna o body decodificado em sucesso; levanta TransportFailure
    em erro HTTP ou de rede.
    """

    async def post(self, path: str, body: dict[str, Any]) -> Any: ...
