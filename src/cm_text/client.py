"""Cliente público de envio de mensagens de texto.

Uso:
    client = TextClient(product_token)
    result = await client.send_message("Olá", "Pyloto", ["0031612345678"])
    if not result.success:
        ...

Sem transporte injetado, usa o transporte compartilhado do processo,
criado no primeiro envio.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cm_text.api.connectors.gateway import get_shared_transport
from cm_text.api.validators import normalize_batch, normalize_single
from cm_text.app.use_cases import SendMessagesUseCase
from cm_text.config.settings import get_gateway_settings, is_valid_endpoint

if TYPE_CHECKING:
    import asyncio
    import uuid
    from collections.abc import Iterable, Sequence

    from cm_text.app.protocols.models import Batch, MessageRequest, TextClientResult
    from cm_text.app.protocols.transport import HttpTransportProtocol
    from cm_text.config.settings import GatewaySettings

logger = logging.getLogger(__name__)


class TextClient:
    """Envia mensagens de texto pelo gateway.

    Implementa TextClientProtocol. Falhas de transporte e rejeições do
    gateway voltam como TextClientResult; apenas InvalidArgumentError e
    SendCancelledError são levantados.
    """

    __slots__ = ("_api_key", "_endpoint", "_transport")

    def __init__(
        self,
        api_key: str | uuid.UUID,
        transport: HttpTransportProtocol | None = None,
        *,
        settings: GatewaySettings | None = None,
    ) -> None:
        """Inicializa cliente.

        Args:
            api_key: Token de produto da conta
            transport: Transporte opcional (testes ou cliente HTTP próprio)
            settings: GatewaySettings opcional. Se None, carrega do ambiente.

        Raises:
            ValueError: Se api_key vazio ou endpoint malformado
        """
        token = str(api_key).strip() if api_key is not None else ""
        if not token:
            raise ValueError("api_key é obrigatório")

        gateway = settings or get_gateway_settings()
        if not is_valid_endpoint(gateway.endpoint):
            raise ValueError(f"Endpoint do gateway inválido: {gateway.endpoint!r}")

        self._api_key = token
        self._endpoint = gateway.endpoint
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: GatewaySettings | None = None,
        transport: HttpTransportProtocol | None = None,
    ) -> TextClient:
        """Cria cliente usando o token de CM_TEXT_PRODUCT_TOKEN."""
        gateway = settings or get_gateway_settings()
        return cls(gateway.product_token, transport, settings=gateway)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoint={self._endpoint!r})"

    async def send_message(
        self,
        text: str,
        sender: str,
        recipients: Iterable[str],
        reference: str | None = None,
        *,
        cancel_event: asyncio.Event | None = None,
        minimum_parts: int | None = None,
        maximum_parts: int | None = None,
    ) -> TextClientResult:
        """Envia uma mensagem para um ou mais destinos.

        Args:
            text: Conteúdo da mensagem
            sender: Remetente, até 11 alfanuméricos ou 16 dígitos
            recipients: Destinos em formato internacional (ex: 00447911123456)
            reference: Referência de 1 a 32 alfanuméricos, ecoada nos
                status reports
            cancel_event: Sinal de cancelamento opcional
            minimum_parts: Mínimo de partes para SMS multipart
            maximum_parts: Máximo de partes para SMS multipart

        Raises:
            InvalidArgumentError: Antes de qualquer IO, se a entrada é inválida
            SendCancelledError: Se cancel_event disparou
        """
        batch = normalize_single(
            text,
            sender,
            recipients,
            reference,
            minimum_parts=minimum_parts,
            maximum_parts=maximum_parts,
        )
        return await self._send(batch, cancel_event)

    async def send_messages(
        self,
        messages: Sequence[MessageRequest],
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> TextClientResult:
        """Envia lote de mensagens em uma única chamada.

        A ordem do lote é preservada no envelope.

        Raises:
            InvalidArgumentError: Lote vazio ou mensagem inválida
            SendCancelledError: Se cancel_event disparou
        """
        return await self._send(normalize_batch(messages), cancel_event)

    async def _send(
        self,
        batch: Batch,
        cancel_event: asyncio.Event | None,
    ) -> TextClientResult:
        transport = self._transport or get_shared_transport()
        use_case = SendMessagesUseCase(self._api_key, transport, self._endpoint)
        return await use_case.execute(batch, cancel_event)
