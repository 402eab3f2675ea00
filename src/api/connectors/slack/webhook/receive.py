"""Recepção de requests assinados da Slack (eventos, slash commands, interações)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ..errors import InvalidEncodingError, InvalidJsonError
from ..signature import SLACK_SIGNED_HASH_HEADER, SLACK_SIGNED_TIMESTAMP_HEADER

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..signature import SlackEventSignatureVerifier


def _header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is not None:
        return value
    for key, candidate in headers.items():
        if key.lower() == name:
            return candidate
    return None


def decode_signed_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    verifier: SlackEventSignatureVerifier,
) -> str:
    """Valida assinatura e devolve o corpo bruto como texto.

    O corpo não é parseado: a decodificação do payload fica com o chamador.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos (nomes case-insensitive)
        verifier: Verificador configurado com o signing secret

    Raises:
        SlackSignatureError: Se headers ausentes, assinatura inválida ou expirada
        InvalidEncodingError: Se o corpo não for UTF-8 válido

    Returns:
        Corpo em UTF-8
    """
    verifier.verify(
        _header(headers, SLACK_SIGNED_HASH_HEADER),
        raw_body,
        _header(headers, SLACK_SIGNED_TIMESTAMP_HEADER),
    )
    try:
        return raw_body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidEncodingError("invalid_encoding") from exc


def parse_signed_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    verifier: SlackEventSignatureVerifier,
) -> dict[str, object]:
    """Valida assinatura e parseia o corpo como objeto JSON.

    Raises:
        SlackSignatureError: Se a assinatura não for válida
        InvalidEncodingError: Se o corpo não for UTF-8 válido
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto
    """
    body = decode_signed_request(raw_body, headers, verifier)

    try:
        payload = json.loads(body or "{}")
    except json.JSONDecodeError as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    return payload
