"""Mapeamento da resposta bruta do gateway para TextClientResult.

Classificação single-shot, sem estado:
- 2xx + JSON válido: sucesso (salvo errorCode != 0 ou campo "error"),
  status por destino
- 2xx + JSON inválido: falha de parse, nunca sucesso silencioso
- não-2xx + JSON com erro: rejeição com a mensagem do corpo
- não-2xx + corpo vazio/ilegível: rejeição com descrição genérica

Os detalhes seguem a ordem da resposta; não são recorrelacionados com
a ordem do lote enviado.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from cm_text.api.normalizers.models import GatewayMessageStatus, GatewayResponse
from cm_text.app.protocols.models import FailureKind, MessageDetail, TextClientResult

if TYPE_CHECKING:
    from cm_text.app.protocols.errors import GatewayTransportError
    from cm_text.app.protocols.models import RawResponse

logger = logging.getLogger(__name__)

INVALID_RESPONSE_MESSAGE = "Resposta do gateway não pôde ser interpretada (JSON inválido)"


def map_gateway_response(raw: RawResponse) -> TextClientResult:
    """Converte status + corpo brutos em TextClientResult.

    Args:
        raw: Resposta lida por completo pelo transporte

    Returns:
        Resultado imutável
    """
    parsed = _parse_body(raw.body)

    if not raw.is_success_status:
        return _map_rejection(raw, parsed)

    if parsed is None:
        logger.warning(
            "gateway_response_invalid_json",
            extra={"status_code": raw.status_code, "body_bytes": len(raw.body)},
        )
        return TextClientResult(
            success=False,
            status_code=raw.status_code,
            error_message=INVALID_RESPONSE_MESSAGE,
            failure_kind=FailureKind.INVALID_RESPONSE,
        )

    details = _map_details(parsed.messages)

    if parsed.error_code or parsed.has_error:
        logger.warning(
            "gateway_rejected",
            extra={"status_code": raw.status_code, "gateway_error_code": parsed.error_code},
        )
        return TextClientResult(
            success=False,
            status_code=raw.status_code,
            error_message=parsed.error_text or _generic_status_message(raw),
            details=details,
            failure_kind=FailureKind.GATEWAY_REJECTED,
            gateway_error_code=parsed.error_code,
            gateway_details=parsed.details,
        )

    return TextClientResult(
        success=True,
        status_code=raw.status_code,
        details=details,
        gateway_error_code=parsed.error_code,
        gateway_details=parsed.details,
    )


def map_transport_failure(exc: GatewayTransportError) -> TextClientResult:
    """Converte falha de transporte em resultado sem status HTTP."""
    return TextClientResult(
        success=False,
        status_code=None,
        error_message=str(exc),
        failure_kind=FailureKind.TRANSPORT,
    )


def _map_rejection(raw: RawResponse, parsed: GatewayResponse | None) -> TextClientResult:
    error_message = parsed.error_text if parsed is not None else None
    logger.warning(
        "gateway_rejected",
        extra={
            "status_code": raw.status_code,
            "structured_body": parsed is not None,
        },
    )
    return TextClientResult(
        success=False,
        status_code=raw.status_code,
        error_message=error_message or _generic_status_message(raw),
        details=_map_details(parsed.messages) if parsed is not None else (),
        failure_kind=FailureKind.GATEWAY_REJECTED,
        gateway_error_code=parsed.error_code if parsed is not None else None,
        gateway_details=parsed.details if parsed is not None else None,
    )


def _parse_body(body: bytes) -> GatewayResponse | None:
    """Parseia corpo JSON; None se vazio, ilegível ou não-objeto."""
    if not body or not body.strip():
        return None
    try:
        return GatewayResponse.model_validate_json(body)
    except ValidationError as exc:
        logger.debug(
            "gateway_response_parse_failed",
            extra={"error_count": exc.error_count()},
        )
        return None


def _map_details(messages: list[GatewayMessageStatus] | None) -> tuple[MessageDetail, ...]:
    if not messages:
        return ()
    return tuple(
        MessageDetail(
            to=item.to,
            status=item.status,
            reference=item.reference,
            parts=item.parts,
            details=item.message_details,
            error_code=item.message_error_code,
        )
        for item in messages
    )


def _generic_status_message(raw: RawResponse) -> str:
    if raw.reason_phrase:
        return f"HTTP {raw.status_code}: {raw.reason_phrase}"
    return f"HTTP {raw.status_code}"
