"""Contratos canônicos do cliente de mensagens.

Modelos imutáveis trocados entre as camadas:
- MessageRequest / Batch: entrada do chamador (já normalizada)
- RawResponse: status + corpo brutos devolvidos pelo transporte
- TextClientResult / MessageDetail: resultado tipado devolvido ao chamador

O token de produto nunca faz parte destes modelos.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class BodyType(StrEnum):
    """Tipo de corpo aceito pelo gateway."""

    AUTO = "auto"
    PLAIN = "plain"


class FailureKind(StrEnum):
    """Classificação de falha capturada no resultado."""

    TRANSPORT = "transport"
    GATEWAY_REJECTED = "gateway_rejected"
    INVALID_RESPONSE = "invalid_response"


@dataclass(frozen=True, slots=True)
class MessageRequest:
    """Mensagem lógica a ser enviada.

    Attributes:
        text: Conteúdo da mensagem (enviado sem alterações)
        sender: Remetente exibido ("from" no wire)
        recipients: Destinos em formato internacional, ordem preservada
        reference: Referência opcional ecoada nos status reports
        minimum_parts: Mínimo de partes para SMS multipart
        maximum_parts: Máximo de partes para SMS multipart
        body_type: Tipo de corpo (auto|plain)
    """

    text: str
    sender: str
    recipients: tuple[str, ...]
    reference: str | None = None
    minimum_parts: int | None = None
    maximum_parts: int | None = None
    body_type: BodyType = BodyType.AUTO

    def __post_init__(self) -> None:
        # Aceita qualquer iterável de destinos, mas congela como tupla.
        # Uma string solta é um único destino, não uma sequência de dígitos
        recipients = self.recipients
        if recipients is None:
            recipients = ()
        elif isinstance(recipients, str):
            recipients = (recipients,)
        if not isinstance(recipients, tuple):
            recipients = tuple(recipients)
        object.__setattr__(self, "recipients", recipients)


# Lote normalizado: sempre uma tupla não vazia de MessageRequest
Batch = tuple[MessageRequest, ...]


@dataclass(frozen=True, slots=True)
class RawResponse:
    """Resposta HTTP bruta lida por completo pelo transporte."""

    status_code: int
    body: bytes = b""
    reason_phrase: str = ""

    @property
    def is_success_status(self) -> bool:
        """True para status 2xx."""
        return 200 <= self.status_code < 300


@dataclass(frozen=True, slots=True)
class MessageDetail:
    """Status individual devolvido pelo gateway para um destino."""

    to: str | None = None
    status: str | None = None
    reference: str | None = None
    parts: int | None = None
    details: str | None = None
    error_code: int | None = None

    @property
    def accepted(self) -> bool:
        """True se o gateway aceitou este destino."""
        if self.error_code:
            return False
        return (self.status or "").lower() != "rejected"


@dataclass(frozen=True, slots=True)
class TextClientResult:
    """Resultado tipado de uma chamada de envio.

    Attributes:
        success: True se o gateway aceitou a requisição
        status_code: Status HTTP (None em falha de transporte)
        error_message: Descrição da falha (None em sucesso)
        details: Status por destino, na ordem da resposta
        failure_kind: Classificação da falha (None em sucesso)
        gateway_error_code: Campo errorCode devolvido pelo gateway
        gateway_details: Campo details devolvido pelo gateway
    """

    success: bool
    status_code: int | None = None
    error_message: str | None = None
    details: tuple[MessageDetail, ...] = field(default_factory=tuple)
    failure_kind: FailureKind | None = None
    gateway_error_code: int | None = None
    gateway_details: str | None = None

    @property
    def rejected_details(self) -> tuple[MessageDetail, ...]:
        """Destinos recusados individualmente (aceite parcial)."""
        return tuple(d for d in self.details if not d.accepted)
