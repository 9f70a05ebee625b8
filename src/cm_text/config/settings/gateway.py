"""Settings do gateway de mensagens.

Configurações de endpoint e timeouts carregadas de variáveis de ambiente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

import httpx

# Constantes do gateway
GATEWAY_ENDPOINT: str = "https://gw.cmtelecom.com/v1.0/message"
GATEWAY_MEDIA_TYPE: str = "application/json; charset=utf-8"
DEFAULT_USER_AGENT: str = "cm-text-python"


@dataclass(frozen=True)
class GatewaySettings:
    """Configurações do gateway.

    Attributes:
        endpoint: URL absoluta do endpoint JSON de envio
        request_timeout_seconds: Timeout total de leitura/escrita
        connect_timeout_seconds: Timeout de conexão
        user_agent: User-Agent enviado ao gateway
        product_token: Token padrão (opcional, ver TextClient.from_settings)
    """

    endpoint: str = GATEWAY_ENDPOINT
    request_timeout_seconds: float = 30.0
    connect_timeout_seconds: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    product_token: str = ""

    @property
    def timeout(self) -> httpx.Timeout:
        """Timeout httpx derivado das settings."""
        return httpx.Timeout(
            self.request_timeout_seconds,
            connect=self.connect_timeout_seconds,
        )

    def validate(self) -> list[str]:
        """Valida configurações do gateway.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not is_valid_endpoint(self.endpoint):
            errors.append(f"CM_TEXT_ENDPOINT inválido: {self.endpoint!r}")

        if self.request_timeout_seconds <= 0:
            errors.append("CM_TEXT_TIMEOUT_SECONDS deve ser > 0")

        if self.connect_timeout_seconds <= 0:
            errors.append("CM_TEXT_CONNECT_TIMEOUT_SECONDS deve ser > 0")

        return errors


def is_valid_endpoint(endpoint: str) -> bool:
    """True se endpoint é URL absoluta http(s) com host."""
    try:
        url = httpx.URL(endpoint)
    except (httpx.InvalidURL, TypeError):
        return False
    return url.scheme in ("http", "https") and bool(url.host)


def _load_from_env() -> GatewaySettings:
    """Carrega GatewaySettings de variáveis de ambiente."""
    return GatewaySettings(
        endpoint=os.getenv("CM_TEXT_ENDPOINT", GATEWAY_ENDPOINT),
        request_timeout_seconds=float(os.getenv("CM_TEXT_TIMEOUT_SECONDS", "30")),
        connect_timeout_seconds=float(
            os.getenv("CM_TEXT_CONNECT_TIMEOUT_SECONDS", "10")
        ),
        user_agent=os.getenv("CM_TEXT_USER_AGENT", DEFAULT_USER_AGENT),
        product_token=os.getenv("CM_TEXT_PRODUCT_TOKEN", ""),
    )


@lru_cache(maxsize=1)
def get_gateway_settings() -> GatewaySettings:
    """Retorna instância cacheada de GatewaySettings."""
    return _load_from_env()
