"""Testes do TextClient (API pública de envio)."""

from __future__ import annotations

import asyncio
import uuid
from collections.abc import AsyncIterator
from unittest.mock import patch

import httpx
import pytest

from cm_text import (
    FailureKind,
    InvalidArgumentError,
    MessageRequest,
    SendCancelledError,
    TextClient,
)
from cm_text.api.connectors.gateway import HttpxTransport
from cm_text.api.normalizers import INVALID_RESPONSE_MESSAGE
from cm_text.app.protocols.errors import GatewayTransportError
from cm_text.config.settings import GatewaySettings
from tests.fakes.fake_transport import FakeTransport, accepted_body

TOKEN = uuid.UUID("6a8f3d2c-1b4e-4c5d-9e7f-0a1b2c3d4e5f")


class TestConstruction:
    """Validação na construção do cliente."""

    def test_accepts_uuid_token(self) -> None:
        client = TextClient(TOKEN, FakeTransport())
        assert client._api_key == str(TOKEN)

    @pytest.mark.parametrize("api_key", ["", "   ", None])
    def test_blank_api_key_rejected(self, api_key: str | None) -> None:
        with pytest.raises(ValueError, match="api_key"):
            TextClient(api_key, FakeTransport())  # type: ignore[arg-type]

    @pytest.mark.parametrize("endpoint", ["not a url", "ftp://gw.example.com/x", "", "/v1.0/message"])
    def test_malformed_endpoint_rejected(self, endpoint: str) -> None:
        with pytest.raises(ValueError, match="Endpoint"):
            TextClient(TOKEN, FakeTransport(), settings=GatewaySettings(endpoint=endpoint))

    def test_repr_hides_token(self) -> None:
        client = TextClient(TOKEN, FakeTransport())
        assert str(TOKEN) not in repr(client)

    def test_from_settings_uses_product_token(self) -> None:
        transport = FakeTransport()
        client = TextClient.from_settings(GatewaySettings(product_token="tok-123"), transport)
        assert client._api_key == "tok-123"


class TestSendMessage:
    """Entrada de mensagem única."""

    @pytest.mark.asyncio
    async def test_success(self) -> None:
        transport = FakeTransport(200, accepted_body("0031612345678"))
        client = TextClient(TOKEN, transport)

        result = await client.send_message("Olá", "Pyloto", ["0031612345678"], "ref1")

        assert result.success is True
        assert result.error_message is None
        entry = transport.posts[0].json["messages"]["msg"][0]
        assert entry == {
            "from": "Pyloto",
            "to": [{"number": "0031612345678"}],
            "body": {"type": "auto", "content": "Olá"},
            "reference": "ref1",
        }

    @pytest.mark.asyncio
    async def test_invalid_credentials(self) -> None:
        client = TextClient(TOKEN, FakeTransport(401, {"error": "invalid credentials"}))

        result = await client.send_message("Olá", "Pyloto", ["0031612345678"])

        assert result.success is False
        assert result.status_code == 401
        assert result.error_message == "invalid credentials"
        assert result.failure_kind == FailureKind.GATEWAY_REJECTED

    @pytest.mark.asyncio
    async def test_garbage_body_never_success(self) -> None:
        client = TextClient(TOKEN, FakeTransport(200, "not json"))

        result = await client.send_message("Olá", "Pyloto", ["0031612345678"])

        assert result.success is False
        assert result.error_message == INVALID_RESPONSE_MESSAGE

    @pytest.mark.asyncio
    async def test_transport_failure_is_result(self) -> None:
        transport = FakeTransport(error=GatewayTransportError("Timeout ao contatar o gateway"))
        client = TextClient(TOKEN, transport)

        result = await client.send_message("Olá", "Pyloto", ["0031612345678"])

        assert result.success is False
        assert result.failure_kind == FailureKind.TRANSPORT

    @pytest.mark.asyncio
    async def test_empty_recipients_raise_before_io(self) -> None:
        transport = FakeTransport(200, accepted_body("x"))
        client = TextClient(TOKEN, transport)

        with pytest.raises(InvalidArgumentError):
            await client.send_message("Olá", "Pyloto", [])
        assert transport.posts == []

    @pytest.mark.asyncio
    async def test_long_sender_raises_before_io(self) -> None:
        transport = FakeTransport()
        client = TextClient(TOKEN, transport)

        with pytest.raises(InvalidArgumentError):
            await client.send_message("Olá", "Pyloto Tecnologia", ["0031612345678"])
        assert transport.posts == []

    @pytest.mark.asyncio
    async def test_multipart_bounds_forwarded(self) -> None:
        transport = FakeTransport(200, accepted_body("001"))
        client = TextClient(TOKEN, transport)

        await client.send_message("Olá", "Pyloto", ["001"], minimum_parts=1, maximum_parts=4)

        entry = transport.posts[0].json["messages"]["msg"][0]
        assert entry["minimumNumberOfMessageParts"] == 1
        assert entry["maximumNumberOfMessageParts"] == 4


class TestSendMessages:
    """Entrada de lote."""

    @pytest.mark.asyncio
    async def test_batch_of_three_in_order(self) -> None:
        transport = FakeTransport(200, accepted_body("001", "002", "003"))
        client = TextClient(TOKEN, transport)
        messages = [
            MessageRequest(text=f"texto {i}", sender="Pyloto", recipients=(f"00{i}",))
            for i in (1, 2, 3)
        ]

        result = await client.send_messages(messages)

        assert result.success is True
        entries = transport.posts[0].json["messages"]["msg"]
        assert [e["body"]["content"] for e in entries] == ["texto 1", "texto 2", "texto 3"]
        assert [d.to for d in result.details] == ["001", "002", "003"]

    @pytest.mark.asyncio
    async def test_cancelled_before_send(self) -> None:
        transport = FakeTransport(200, accepted_body("001"))
        client = TextClient(TOKEN, transport)
        event = asyncio.Event()
        event.set()

        with pytest.raises(SendCancelledError):
            await client.send_messages(
                [MessageRequest(text="Oi", sender="Pyloto", recipients=("001",))],
                cancel_event=event,
            )
        assert transport.posts == []

    @pytest.mark.asyncio
    async def test_empty_batch_rejected(self) -> None:
        client = TextClient(TOKEN, FakeTransport())
        with pytest.raises(InvalidArgumentError):
            await client.send_messages([])

    @pytest.mark.asyncio
    async def test_plain_string_recipient_sent_as_one_number(self) -> None:
        transport = FakeTransport(200, accepted_body("0031612345678"))
        client = TextClient(TOKEN, transport)
        message = MessageRequest(text="Oi", sender="Pyloto", recipients="0031612345678")  # type: ignore[arg-type]

        result = await client.send_messages([message])

        assert result.success is True
        entry = transport.posts[0].json["messages"]["msg"][0]
        assert entry["to"] == [{"number": "0031612345678"}]


def _httpx_transport(handler: object) -> HttpxTransport:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))  # type: ignore[arg-type]
    return HttpxTransport(settings=GatewaySettings(), client=client)


class TestHttpxTransportIntegration:
    """Cliente com o transporte httpx real sobre MockTransport."""

    @pytest.mark.asyncio
    async def test_undecodable_body_is_transport_failure(self) -> None:
        async def body() -> AsyncIterator[bytes]:
            yield b"nao e gzip"

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=body())

        client = TextClient(TOKEN, _httpx_transport(handler))

        result = await client.send_message("Olá", "Pyloto", ["0031612345678"])

        assert result.success is False
        assert result.status_code is None
        assert result.failure_kind == FailureKind.TRANSPORT

    @pytest.mark.asyncio
    async def test_cancel_during_stalled_body_raises_cancelled(self) -> None:
        event = asyncio.Event()

        async def body() -> AsyncIterator[bytes]:
            yield b'{"errorCode":'
            event.set()
            await asyncio.sleep(30)
            raise httpx.ReadTimeout("stalled")

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=body())

        client = TextClient(TOKEN, _httpx_transport(handler))
        message = MessageRequest(text="Oi", sender="Pyloto", recipients=("001",))

        with pytest.raises(SendCancelledError):
            await asyncio.wait_for(client.send_messages([message], cancel_event=event), timeout=5)


class TestDefaultTransport:
    """Sem transporte injetado, usa o compartilhado no primeiro envio."""

    @pytest.mark.asyncio
    async def test_shared_transport_resolved_lazily(self) -> None:
        shared = FakeTransport(200, accepted_body("001"))
        with patch("cm_text.client.get_shared_transport", return_value=shared) as getter:
            client = TextClient(TOKEN)
            getter.assert_not_called()

            result = await client.send_message("Oi", "Pyloto", ["001"])

        getter.assert_called_once()
        assert result.success is True
        assert len(shared.posts) == 1
