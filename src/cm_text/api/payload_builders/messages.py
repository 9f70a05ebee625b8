"""Builder do envelope JSON do gateway.

Funções puras: mesmo token + mesmo lote produzem os mesmos bytes.
Um lote de N mensagens vira N entradas em "msg", na ordem recebida,
todas sob o mesmo bloco de autenticação.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cm_text.app.protocols.models import Batch, MessageRequest


def build_message_entry(message: MessageRequest) -> dict[str, Any]:
    """Constrói a entrada "msg" de uma mensagem.

    Args:
        message: Mensagem já validada

    Returns:
        Entrada conforme schema do gateway
    """
    entry: dict[str, Any] = {
        "from": message.sender,
        "to": [{"number": recipient} for recipient in message.recipients],
        "body": {
            "type": str(message.body_type),
            "content": message.text,
        },
    }

    if message.reference is not None:
        entry["reference"] = message.reference
    if message.minimum_parts is not None:
        entry["minimumNumberOfMessageParts"] = message.minimum_parts
    if message.maximum_parts is not None:
        entry["maximumNumberOfMessageParts"] = message.maximum_parts

    return entry


def build_envelope(product_token: str, batch: Batch) -> dict[str, Any]:
    """Constrói o envelope completo para o lote.

    Args:
        product_token: Token de produto da conta
        batch: Lote normalizado (ao menos uma mensagem)

    Returns:
        Envelope pronto para serialização
    """
    return {
        "messages": {
            "authentication": {"producttoken": product_token},
            "msg": [build_message_entry(message) for message in batch],
        }
    }


def serialize_envelope(envelope: dict[str, Any]) -> bytes:
    """Serializa envelope como JSON UTF-8 sem escapar caracteres não-ASCII."""
    return json.dumps(envelope, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def build_request_body(product_token: str, batch: Batch) -> bytes:
    """Atalho: envelope serializado para o lote."""
    return serialize_envelope(build_envelope(product_token, batch))
