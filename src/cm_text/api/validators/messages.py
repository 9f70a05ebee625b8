"""Validação e normalização de mensagens de saída.

Toda entrada (mensagem única ou lote) sai daqui como Batch, uma tupla
não vazia de MessageRequest válidos. Nenhum IO acontece neste módulo.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cm_text.api.validators.limits import (
    MAX_MESSAGE_PARTS,
    MAX_REFERENCE_LENGTH,
    MAX_SENDER_ALPHANUMERIC_LENGTH,
    MAX_SENDER_NUMERIC_LENGTH,
    MIN_MESSAGE_PARTS,
    MIN_REFERENCE_LENGTH,
    REFERENCE_PATTERN,
    SENDER_ALPHANUMERIC_PATTERN,
    SENDER_NUMERIC_PATTERN,
)
from cm_text.app.protocols.errors import InvalidArgumentError
from cm_text.app.protocols.models import Batch, BodyType, MessageRequest

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


def is_valid_sender(sender: str) -> bool:
    """Remetente: até 11 alfanuméricos ou até 16 dígitos."""
    if not isinstance(sender, str) or not sender or sender != sender.strip():
        return False
    if SENDER_NUMERIC_PATTERN.match(sender):
        return len(sender) <= MAX_SENDER_NUMERIC_LENGTH
    return bool(SENDER_ALPHANUMERIC_PATTERN.match(sender)) and (
        len(sender) <= MAX_SENDER_ALPHANUMERIC_LENGTH
    )


def is_valid_reference(reference: str) -> bool:
    """Referência: 1 a 32 caracteres alfanuméricos."""
    return (
        isinstance(reference, str)
        and MIN_REFERENCE_LENGTH <= len(reference) <= MAX_REFERENCE_LENGTH
        and bool(REFERENCE_PATTERN.match(reference))
    )


def validate_message(message: MessageRequest) -> None:
    """Valida uma MessageRequest.

    Args:
        message: Mensagem a validar

    Raises:
        InvalidArgumentError: Se algum campo viola as regras do gateway
    """
    if not isinstance(message.text, str) or not message.text:
        raise InvalidArgumentError("text é obrigatório", field_name="text")

    if not is_valid_sender(message.sender):
        raise InvalidArgumentError(
            f"sender deve ter até {MAX_SENDER_ALPHANUMERIC_LENGTH} caracteres "
            f"alfanuméricos ou até {MAX_SENDER_NUMERIC_LENGTH} dígitos",
            field_name="sender",
        )

    if not message.recipients:
        raise InvalidArgumentError(
            "recipients deve conter ao menos um destino",
            field_name="recipients",
        )

    for position, recipient in enumerate(message.recipients):
        if not isinstance(recipient, str) or not recipient.strip():
            raise InvalidArgumentError(
                f"recipients[{position}] está vazio",
                field_name="recipients",
            )

    if message.reference is not None and not is_valid_reference(message.reference):
        raise InvalidArgumentError(
            f"reference deve ter de {MIN_REFERENCE_LENGTH} a "
            f"{MAX_REFERENCE_LENGTH} caracteres alfanuméricos",
            field_name="reference",
        )

    _validate_parts(message.minimum_parts, message.maximum_parts)

    if message.body_type not in tuple(BodyType):
        raise InvalidArgumentError(
            f"body_type inválido: {message.body_type}",
            field_name="body_type",
        )


def _validate_parts(minimum: int | None, maximum: int | None) -> None:
    for name, value in (("minimum_parts", minimum), ("maximum_parts", maximum)):
        if value is None:
            continue
        if not MIN_MESSAGE_PARTS <= value <= MAX_MESSAGE_PARTS:
            raise InvalidArgumentError(
                f"{name} deve estar entre {MIN_MESSAGE_PARTS} e {MAX_MESSAGE_PARTS}",
                field_name=name,
            )
    if minimum is not None and maximum is not None and minimum > maximum:
        raise InvalidArgumentError(
            "minimum_parts não pode ser maior que maximum_parts",
            field_name="minimum_parts",
        )


def validate_batch(messages: Sequence[MessageRequest]) -> None:
    """Valida lote: não vazio e cada elemento válido.

    Raises:
        InvalidArgumentError: Com o índice da mensagem inválida
    """
    if not messages:
        raise InvalidArgumentError(
            "messages deve conter ao menos uma mensagem",
            field_name="messages",
        )
    for index, message in enumerate(messages):
        if not isinstance(message, MessageRequest):
            raise InvalidArgumentError(
                f"messages[{index}] não é MessageRequest",
                field_name="messages",
            )
        try:
            validate_message(message)
        except InvalidArgumentError as exc:
            raise InvalidArgumentError(
                f"messages[{index}]: {exc}",
                field_name=exc.field_name,
            ) from exc


def normalize_single(
    text: str,
    sender: str,
    recipients: Iterable[str],
    reference: str | None = None,
    *,
    minimum_parts: int | None = None,
    maximum_parts: int | None = None,
) -> Batch:
    """Converte chamada de mensagem única em lote de um elemento."""
    if recipients is None:
        raise InvalidArgumentError(
            "recipients deve conter ao menos um destino",
            field_name="recipients",
        )
    if isinstance(recipients, str):
        # Uma string solta seria iterada caractere a caractere
        recipients = (recipients,)
    message = MessageRequest(
        text=text,
        sender=sender,
        recipients=tuple(recipients),
        reference=reference,
        minimum_parts=minimum_parts,
        maximum_parts=maximum_parts,
    )
    validate_message(message)
    return (message,)


def normalize_batch(messages: Sequence[MessageRequest]) -> Batch:
    """Valida lote e devolve como tupla imutável, ordem preservada."""
    validate_batch(messages)
    return tuple(messages)
