"""Limites do gateway para campos de mensagem."""

from __future__ import annotations

import re

# Remetente alfanumérico (ex: "CM Telecom") ou numérico
MAX_SENDER_ALPHANUMERIC_LENGTH = 11
MAX_SENDER_NUMERIC_LENGTH = 16

MIN_REFERENCE_LENGTH = 1
MAX_REFERENCE_LENGTH = 32

# SMS multipart
MIN_MESSAGE_PARTS = 1
MAX_MESSAGE_PARTS = 8

SENDER_ALPHANUMERIC_PATTERN = re.compile(r"^[A-Za-z0-9 ]+$")
SENDER_NUMERIC_PATTERN = re.compile(r"^[0-9]+$")
REFERENCE_PATTERN = re.compile(r"^[A-Za-z0-9]+$")
