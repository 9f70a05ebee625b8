"""Configuração centralizada de logging.

Uso:
    from cm_text.config.logging import configure_logging

    configure_logging(level="INFO")

Os módulos usam logging.getLogger(__name__) com eventos snake_case e
campos via `extra`, nunca com token, destinos ou conteúdo de mensagem.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cm_text.config.logging.filters import CorrelationIdFilter, SensitiveValueFilter
from cm_text.config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "cm_text"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    sensitive_values: Iterable[str] | None = None,
) -> None:
    """Configura logging JSON estruturado.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
        sensitive_values: Segredos a mascarar. Se None, usa o token de
            produto das settings (quando configurado).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    if sensitive_values is None:
        from cm_text.config.settings import get_gateway_settings

        sensitive_values = (get_gateway_settings().product_token,)

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(SensitiveValueFilter(sensitive_values))
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]
