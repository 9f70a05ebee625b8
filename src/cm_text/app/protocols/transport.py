"""Protocolo de transporte HTTP.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    import asyncio

    from .models import RawResponse


class HttpTransportProtocol(Protocol):
    """Contrato mínimo: um POST de bytes, devolvendo status + corpo."""

    async def post(
        self,
        url: str,
        content: bytes,
        content_type: str,
        cancel_event: asyncio.Event | None = None,
    ) -> RawResponse: ...
