"""Resultado normalizado de um envio (sucesso ou erro).

O chamador deve sempre verificar `status` antes de acessar os campos
de sucesso.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Contact(_Frozen):
    """Contato retornado pela Meta para o destinatário."""

    input: str
    wa_id: str


class MessageRef(_Frozen):
    """Referência da mensagem aceita pela Meta."""

    id: str
    message_status: str | None = None


class ErrorDetail(_Frozen):
    """Item de erro normalizado."""

    message: str
    details: Any = None


class ResponseSuccess(_Frozen):
    """Variante de sucesso."""

    status: Literal["success"] = "success"
    messaging_product: str
    contacts: tuple[Contact, ...]
    messages: tuple[MessageRef, ...]

    def to_dict(self) -> dict[str, Any]:
        """Formato de saída com campos opcionais ausentes omitidos."""
        return self.model_dump(mode="json", exclude_none=True)


class ResponseError(_Frozen):
    """Variante de erro: lista ordenada de erros."""

    status: Literal["error"] = "error"
    error: tuple[ErrorDetail, ...]

    def to_dict(self) -> dict[str, Any]:
        """Formato de saída com `details` omitido quando ausente."""
        return self.model_dump(mode="json", exclude_none=True)


ResponseOutcome = Annotated[ResponseSuccess | ResponseError, Field(discriminator="status")]
