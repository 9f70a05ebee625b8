"""Modelos pydantic da resposta JSON do gateway.

Tolerantes: campos ausentes viram None e campos desconhecidos são ignorados.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GatewayMessageStatus(BaseModel):
    """Status de um destino em "messages"."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    to: str | None = None
    status: str | None = None
    reference: str | None = None
    parts: int | None = None
    message_details: str | None = Field(None, alias="messageDetails")
    message_error_code: int | None = Field(None, alias="messageErrorCode")


class GatewayResponse(BaseModel):
    """Corpo de resposta do gateway (sucesso ou erro)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    details: str | None = None
    error_code: int | None = Field(None, alias="errorCode")
    error: str | dict[str, Any] | None = None
    messages: list[GatewayMessageStatus] | None = None

    @property
    def has_error(self) -> bool:
        """True se o corpo traz um campo "error" preenchido."""
        return bool(self.error)

    @property
    def error_text(self) -> str | None:
        """Mensagem de erro do corpo: "error", "error.message" ou "details"."""
        if isinstance(self.error, str) and self.error:
            return self.error
        if isinstance(self.error, dict):
            message = self.error.get("message")
            if isinstance(message, str) and message:
                return message
        return self.details or None
