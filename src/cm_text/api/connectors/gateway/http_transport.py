"""Transporte HTTP (httpx) para o gateway de mensagens.

Responsabilidades:
- Um único POST por chamada, sem retry (envio não é idempotente)
- Leitura em streaming do corpo da resposta
- Cancelamento: cada espera (envio/headers e cada chunk do corpo) corre
  contra o sinal; se o sinal vence, a chamada é abandonada
- Falhas de rede/TLS/timeout/decodificação viram GatewayTransportError

Logging estruturado sem token, destinos ou conteúdo.
"""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from cm_text.app.protocols.errors import GatewayTransportError, SendCancelledError
from cm_text.app.protocols.models import RawResponse

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Awaitable

    from cm_text.config.settings import GatewaySettings

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


class HttpxTransport:
    """Transporte httpx com cliente reutilizável.

    O httpx.AsyncClient é criado no primeiro envio e reutilizado pelas
    chamadas seguintes do mesmo event loop, inclusive concorrentes. Se o
    loop em execução muda (ex: novo asyncio.run), um novo cliente é criado,
    pois o anterior está preso ao loop antigo. Um cliente injetado pertence
    ao chamador: é sempre usado como está e não é fechado por aclose().
    """

    __slots__ = ("_client", "_client_loop", "_owns_client", "_settings")

    def __init__(
        self,
        settings: GatewaySettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        from cm_text.config.settings import get_gateway_settings

        self._settings = settings or get_gateway_settings()
        self._client = client
        self._client_loop: asyncio.AbstractEventLoop | None = None
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        """Obtém ou cria cliente HTTP para o loop em execução."""
        loop = asyncio.get_running_loop()
        if self._client is None or (self._owns_client and self._client_loop is not loop):
            self._client = httpx.AsyncClient(
                timeout=self._settings.timeout,
                headers={"User-Agent": self._settings.user_agent},
            )
            self._client_loop = loop
        return self._client

    async def post(
        self,
        url: str,
        content: bytes,
        content_type: str,
        cancel_event: asyncio.Event | None = None,
    ) -> RawResponse:
        """Executa um POST e lê a resposta por completo.

        Args:
            url: Endpoint absoluto do gateway
            content: Corpo já serializado
            content_type: Media type do corpo
            cancel_event: Sinal de cancelamento opcional

        Returns:
            RawResponse com status e corpo completos

        Raises:
            SendCancelledError: Se o sinal disparou antes da leitura completa
            GatewayTransportError: Se o gateway não foi alcançado ou a
                resposta não pôde ser lida
        """
        _raise_if_cancelled(cancel_event, "before_send")
        client = self._get_client()
        request = client.build_request(
            "POST",
            url,
            content=content,
            headers={"Content-Type": content_type},
        )

        try:
            response = await _await_or_cancel(
                client.send(request, stream=True),
                cancel_event,
                "after_headers",
            )
            try:
                _raise_if_cancelled(cancel_event, "after_headers")
                body = await _read_body(response.aiter_bytes(), cancel_event)
            finally:
                await response.aclose()
        except httpx.RequestError as exc:
            logger.warning(
                "gateway_transport_error",
                extra={"error_type": type(exc).__name__},
            )
            raise GatewayTransportError(
                _describe_transport_error(exc),
                error_type=type(exc).__name__,
            ) from exc

        raw = RawResponse(
            status_code=response.status_code,
            body=body,
            reason_phrase=response.reason_phrase,
        )
        logger.debug(
            "gateway_response_received",
            extra={"status_code": raw.status_code, "body_bytes": len(raw.body)},
        )
        return raw

    async def aclose(self) -> None:
        """Fecha o cliente HTTP se ele foi criado por este transporte."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
            self._client_loop = None


async def _read_body(
    chunks: AsyncIterator[bytes],
    cancel_event: asyncio.Event | None,
) -> bytes:
    """Lê o corpo chunk a chunk, cada espera sujeita ao cancelamento."""
    parts: list[bytes] = []
    while True:
        chunk = await _await_or_cancel(_next_chunk(chunks), cancel_event, "reading_body")
        if chunk is None:
            break
        parts.append(chunk)
    _raise_if_cancelled(cancel_event, "after_body")
    return b"".join(parts)


async def _next_chunk(chunks: AsyncIterator[bytes]) -> bytes | None:
    try:
        return await anext(chunks)
    except StopAsyncIteration:
        return None


async def _await_or_cancel(
    awaitable: Awaitable[T],
    cancel_event: asyncio.Event | None,
    stage: str,
) -> T:
    """Aguarda `awaitable`, abandonando-o se o sinal disparar antes."""
    if cancel_event is None:
        return await awaitable

    task: asyncio.Future[T] = asyncio.ensure_future(awaitable)
    waiter: asyncio.Future[Any] = asyncio.ensure_future(cancel_event.wait())
    try:
        done, _ = await asyncio.wait(
            {task, waiter},
            return_when=asyncio.FIRST_COMPLETED,
        )
    except asyncio.CancelledError:
        task.cancel()
        raise
    finally:
        waiter.cancel()

    if cancel_event.is_set():
        if task not in done:
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
            _raise_if_cancelled(cancel_event, stage)
        if task.cancelled() or task.exception() is not None:
            _raise_if_cancelled(cancel_event, stage)

    # Resultado concluído junto com o sinal é devolvido; o chamador
    # verifica o sinal de novo e fecha a resposta
    return task.result()


def _raise_if_cancelled(cancel_event: asyncio.Event | None, stage: str) -> None:
    if cancel_event is not None and cancel_event.is_set():
        logger.info("gateway_send_cancelled", extra={"stage": stage})
        raise SendCancelledError(f"envio cancelado ({stage})")


def _describe_transport_error(exc: httpx.RequestError) -> str:
    if isinstance(exc, httpx.TimeoutException):
        return "Timeout ao contatar o gateway"
    if isinstance(exc, httpx.ConnectError):
        return "Falha de conexão com o gateway"
    if isinstance(exc, httpx.DecodingError):
        return "Resposta do gateway não pôde ser decodificada"
    return f"Falha de transporte ao contatar o gateway ({type(exc).__name__})"


@lru_cache(maxsize=1)
def get_shared_transport() -> HttpxTransport:
    """Retorna o transporte compartilhado do processo.

    Criado no primeiro uso; a cache garante singleton. O cliente httpx
    interno é recriado quando o event loop em execução muda.
    """
    return HttpxTransport()
