"""Conector do gateway - único ponto de IO do cliente."""

from .http_transport import HttpxTransport, get_shared_transport

__all__ = [
    "HttpxTransport",
    "get_shared_transport",
]
