"""Logging estruturado JSON do cm_text."""

from cm_text.config.logging.config import configure_logging
from cm_text.config.logging.filters import CorrelationIdFilter, SensitiveValueFilter
from cm_text.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "SensitiveValueFilter",
    "configure_logging",
    "create_json_formatter",
]
