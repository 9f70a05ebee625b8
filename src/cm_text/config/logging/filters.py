"""Filters de logging para injeção de contexto e mascaramento.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço (ex: cm_text)

Valores sensíveis (token de produto) são mascarados na mensagem e nos
campos string passados via `extra`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

MASK = "***"

# Atributos padrão do LogRecord que não são campos `extra`
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", None, None)).keys()
) | {"message", "asctime"}


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Se correlation_id já foi passado via `extra`, preserva o valor.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SensitiveValueFilter(logging.Filter):
    """Mascara valores sensíveis conhecidos antes da formatação.

    Args:
        values: Segredos a mascarar. Vazios são ignorados.
    """

    def __init__(self, values: Iterable[str] = ()) -> None:
        super().__init__()
        self._values = tuple(v for v in values if v)

    def filter(self, record: logging.LogRecord) -> bool:
        if not self._values:
            return True

        message = record.getMessage()
        masked = self._mask(message)
        if masked != message:
            record.msg = masked
            record.args = None

        for key, value in list(vars(record).items()):
            if key not in _RESERVED_ATTRS and isinstance(value, str):
                setattr(record, key, self._mask(value))
        return True

    def _mask(self, text: str) -> str:
        for value in self._values:
            text = text.replace(value, MASK)
        return text
