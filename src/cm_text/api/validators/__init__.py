"""Validadores de mensagens de saída.

Uso:
    from cm_text.api.validators import normalize_batch

    batch = normalize_batch(messages)  # levanta InvalidArgumentError
"""

from cm_text.api.validators.limits import (
    MAX_MESSAGE_PARTS,
    MAX_REFERENCE_LENGTH,
    MAX_SENDER_ALPHANUMERIC_LENGTH,
    MAX_SENDER_NUMERIC_LENGTH,
)
from cm_text.api.validators.messages import (
    is_valid_reference,
    is_valid_sender,
    normalize_batch,
    normalize_single,
    validate_batch,
    validate_message,
)

__all__ = [
    "MAX_MESSAGE_PARTS",
    "MAX_REFERENCE_LENGTH",
    "MAX_SENDER_ALPHANUMERIC_LENGTH",
    "MAX_SENDER_NUMERIC_LENGTH",
    "is_valid_reference",
    "is_valid_sender",
    "normalize_batch",
    "normalize_single",
    "validate_batch",
    "validate_message",
]
