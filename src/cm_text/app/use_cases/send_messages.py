"""Use case de envio: validação -> payload -> transporte -> mapeamento."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cm_text.api.normalizers.gateway_response import (
    map_gateway_response,
    map_transport_failure,
)
from cm_text.api.payload_builders.messages import build_request_body
from cm_text.app.protocols.errors import GatewayTransportError
from cm_text.config.settings import GATEWAY_MEDIA_TYPE

if TYPE_CHECKING:
    import asyncio

    from cm_text.app.protocols.models import Batch, TextClientResult
    from cm_text.app.protocols.transport import HttpTransportProtocol

logger = logging.getLogger(__name__)


class SendMessagesUseCase:
    """Orquestra build, envio e mapeamento de um lote já normalizado.

    Sem estado mutável entre chamadas: seguro para uso concorrente.
    """

    __slots__ = ("_endpoint", "_product_token", "_transport")

    def __init__(
        self,
        product_token: str,
        transport: HttpTransportProtocol,
        endpoint: str,
    ) -> None:
        self._product_token = product_token
        self._transport = transport
        self._endpoint = endpoint

    async def execute(
        self,
        batch: Batch,
        cancel_event: asyncio.Event | None = None,
    ) -> TextClientResult:
        """Envia o lote em uma única chamada.

        Raises:
            SendCancelledError: Propagado do transporte sem conversão
        """
        body = build_request_body(self._product_token, batch)

        try:
            raw = await self._transport.post(
                self._endpoint,
                body,
                GATEWAY_MEDIA_TYPE,
                cancel_event,
            )
        except GatewayTransportError as exc:
            return map_transport_failure(exc)

        result = map_gateway_response(raw)
        logger.info(
            "gateway_send_completed",
            extra={
                "success": result.success,
                "status_code": result.status_code,
                "message_count": len(batch),
                "recipient_count": sum(len(m.recipients) for m in batch),
                "detail_count": len(result.details),
            },
        )
        return result
