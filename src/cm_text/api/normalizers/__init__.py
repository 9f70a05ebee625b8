"""Normalizers: resposta bruta do gateway -> contratos tipados."""

from cm_text.api.normalizers.gateway_response import (
    INVALID_RESPONSE_MESSAGE,
    map_gateway_response,
    map_transport_failure,
)
from cm_text.api.normalizers.models import GatewayMessageStatus, GatewayResponse

__all__ = [
    "INVALID_RESPONSE_MESSAGE",
    "GatewayMessageStatus",
    "GatewayResponse",
    "map_gateway_response",
    "map_transport_failure",
]
