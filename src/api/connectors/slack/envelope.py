"""Decodificação do envelope uniforme da Slack Web API.

Toda resposta JSON tem a forma `{ok, error, warnings, ...campos}`.
O desvio de fluxo é feito por `error` (não pelo status HTTP): a Slack
responde 200 mesmo para erros de negócio.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import SlackApiError, SlackDecodeError

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class SlackEnvelope(BaseModel):
    """Campos comuns a toda resposta da API."""

    model_config = ConfigDict(extra="ignore")

    ok: bool = False
    error: str | None = None
    warnings: list[str] | None = None


def parse_envelope(body: str) -> SlackEnvelope:
    """Lê apenas os campos do envelope.

    Raises:
        SlackDecodeError: Se o corpo não for um objeto JSON válido
    """
    try:
        return SlackEnvelope.model_validate_json(body)
    except ValidationError as exc:
        raise SlackDecodeError("invalid_envelope", http_response_body=body) from exc


def decode_envelope(body: str, response_type: type[ResponseT]) -> ResponseT:
    """Decodifica envelope e payload para `response_type`.

    Args:
        body: Corpo bruto da resposta (HTTP 200, não vazio)
        response_type: Modelo pydantic da resposta do endpoint

    Returns:
        Instância de `response_type` com os campos do payload

    Raises:
        SlackApiError: Se `error` estiver preenchido (payload não é decodificado)
        SlackDecodeError: Se o corpo não couber no envelope ou no tipo
    """
    envelope = parse_envelope(body)
    if envelope.error is not None:
        raise SlackApiError(
            envelope.error,
            warnings=envelope.warnings,
            http_response_body=body,
        )

    try:
        return response_type.model_validate_json(body)
    except ValidationError as exc:
        raise SlackDecodeError("invalid_response_payload", http_response_body=body) from exc


def empty_response(response_type: type[ResponseT]) -> ResponseT:
    """Valor "zero" do tipo de resposta (200 sem corpo JSON)."""
    return response_type.model_validate({})
