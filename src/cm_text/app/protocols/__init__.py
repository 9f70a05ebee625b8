"""Protocolos e contratos do core do cliente."""

from .errors import (
    GatewayTransportError,
    InvalidArgumentError,
    SendCancelledError,
    TextClientError,
)
from .models import (
    Batch,
    BodyType,
    FailureKind,
    MessageDetail,
    MessageRequest,
    RawResponse,
    TextClientResult,
)
from .text_client import TextClientProtocol
from .transport import HttpTransportProtocol

__all__ = [
    "Batch",
    "BodyType",
    "FailureKind",
    "GatewayTransportError",
    "HttpTransportProtocol",
    "InvalidArgumentError",
    "MessageDetail",
    "MessageRequest",
    "RawResponse",
    "SendCancelledError",
    "TextClientError",
    "TextClientProtocol",
    "TextClientResult",
]
