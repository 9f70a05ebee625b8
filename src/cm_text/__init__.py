"""cm_text - cliente de envio de mensagens de texto via gateway JSON.

Uso:
    from cm_text import MessageRequest, TextClient

    client = TextClient(product_token)
    result = await client.send_messages([
        MessageRequest(text="Olá", sender="Pyloto", recipients=("0031612345678",)),
    ])
"""

from cm_text.app.protocols import (
    BodyType,
    FailureKind,
    InvalidArgumentError,
    MessageDetail,
    MessageRequest,
    SendCancelledError,
    TextClientError,
    TextClientProtocol,
    TextClientResult,
)
from cm_text.client import TextClient

__all__ = [
    "BodyType",
    "FailureKind",
    "InvalidArgumentError",
    "MessageDetail",
    "MessageRequest",
    "SendCancelledError",
    "TextClient",
    "TextClientError",
    "TextClientProtocol",
    "TextClientResult",
]
