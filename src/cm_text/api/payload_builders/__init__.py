"""Payload builders: construção do envelope JSON do gateway."""

from cm_text.api.payload_builders.messages import (
    build_envelope,
    build_message_entry,
    build_request_body,
    serialize_envelope,
)

__all__ = [
    "build_envelope",
    "build_message_entry",
    "build_request_body",
    "serialize_envelope",
]
