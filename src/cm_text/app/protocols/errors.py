"""Taxonomia de erros do cliente.

Apenas InvalidArgumentError e SendCancelledError chegam ao chamador.
GatewayTransportError é capturado pelo use case e vira TextClientResult.
Rejeições do gateway nunca são exceções.
"""

from __future__ import annotations


class TextClientError(Exception):
    """Base de todos os erros do cliente."""


class InvalidArgumentError(TextClientError, ValueError):
    """Dados do chamador violam uma restrição documentada."""

    def __init__(self, message: str, field_name: str | None = None) -> None:
        super().__init__(message)
        self.field_name = field_name


class GatewayTransportError(TextClientError):
    """Gateway inalcançável ou resposta ilegível (rede, TLS, timeout).

    Não carrega payload, token ou destinos.
    """

    def __init__(self, message: str, error_type: str | None = None) -> None:
        super().__init__(message)
        self.error_type = error_type


class SendCancelledError(TextClientError):
    """Sinal de cancelamento disparado antes da leitura completa da resposta."""
