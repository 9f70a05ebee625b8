"""Protocolo público do cliente de mensagens."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    import asyncio
    from collections.abc import Iterable, Sequence

    from .models import MessageRequest, TextClientResult


class TextClientProtocol(Protocol):
    """Contrato de envio: mensagem única ou lote heterogêneo."""

    async def send_message(
        self,
        text: str,
        sender: str,
        recipients: Iterable[str],
        reference: str | None = None,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> TextClientResult: ...

    async def send_messages(
        self,
        messages: Sequence[MessageRequest],
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> TextClientResult: ...
