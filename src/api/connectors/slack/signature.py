"""Verificação de assinatura HMAC-SHA256 de requests da Slack.

Esquema v0:
    base = b"v0:" + timestamp + b":" + corpo_bruto
    assinatura = "v0=" + hex(HMAC-SHA256(signing_secret, base))

A verificação usa o corpo bruto (bytes), antes de qualquer parse JSON.
"""

from __future__ import annotations

import hashlib
import hmac
import time
from typing import TYPE_CHECKING

from config.settings.slack import DEFAULT_SIGNATURE_MAX_AGE_SECONDS

from .errors import SlackSignatureError

if TYPE_CHECKING:
    from collections.abc import Callable

SLACK_SIGNED_HASH_HEADER = "x-slack-signature"
SLACK_SIGNED_TIMESTAMP_HEADER = "x-slack-request-timestamp"
SIGNATURE_VERSION = "v0"


class SlackEventSignatureVerifier:
    """Valida assinatura e frescor de requests assinados pela Slack.

    Args:
        signing_secret: Signing secret do app Slack
        max_age_seconds: Janela aceita entre timestamp e relógio local,
            nos dois sentidos (requests antigos ou do futuro)
        clock: Fonte de tempo em segundos Unix (injetável em testes)
    """

    def __init__(
        self,
        signing_secret: str,
        max_age_seconds: int = DEFAULT_SIGNATURE_MAX_AGE_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not signing_secret:
            raise ValueError("signing_secret não pode ser vazio")
        if max_age_seconds <= 0:
            raise ValueError("max_age_seconds deve ser > 0")
        self._secret = signing_secret.encode("utf-8")
        self._max_age_seconds = max_age_seconds
        self._clock = clock

    def sign(self, raw_body: bytes | str, timestamp: str) -> str:
        """Calcula a assinatura `v0=<hex>` para corpo e timestamp."""
        body = raw_body.encode("utf-8") if isinstance(raw_body, str) else raw_body
        base = b":".join((SIGNATURE_VERSION.encode("ascii"), timestamp.encode("utf-8"), body))
        digest = hmac.new(self._secret, base, hashlib.sha256).hexdigest()
        return f"{SIGNATURE_VERSION}={digest}"

    def verify(
        self,
        received_hash: str | None,
        raw_body: bytes | str,
        received_timestamp: str | None,
    ) -> None:
        """Valida assinatura recebida.

        Raises:
            SlackSignatureError: absent_signature, invalid_timestamp,
                stale_timestamp ou invalid_signature
        """
        if not received_hash or not received_timestamp:
            raise SlackSignatureError("absent_signature")

        try:
            timestamp = int(received_timestamp)
        except ValueError as exc:
            raise SlackSignatureError("invalid_timestamp") from exc

        if abs(self._clock() - timestamp) > self._max_age_seconds:
            raise SlackSignatureError("stale_timestamp")

        expected = self.sign(raw_body, received_timestamp)
        if not hmac.compare_digest(expected.encode("utf-8"), received_hash.encode("utf-8")):
            raise SlackSignatureError("invalid_signature")
