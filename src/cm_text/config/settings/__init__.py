"""Settings do cm_text."""

from __future__ import annotations

from cm_text.config.settings.gateway import (
    DEFAULT_USER_AGENT,
    GATEWAY_ENDPOINT,
    GATEWAY_MEDIA_TYPE,
    GatewaySettings,
    get_gateway_settings,
    is_valid_endpoint,
)

__all__ = [
    "DEFAULT_USER_AGENT",
    "GATEWAY_ENDPOINT",
    "GATEWAY_MEDIA_TYPE",
    "GatewaySettings",
    "get_gateway_settings",
    "is_valid_endpoint",
]
