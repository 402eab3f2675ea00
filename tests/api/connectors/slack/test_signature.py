"""Testes do verificador de assinatura v0 (HMAC-SHA256)."""

from __future__ import annotations

import hashlib
import hmac

import pytest

from api.connectors.slack.errors import SlackSignatureError, WebhookRequestError
from api.connectors.slack.signature import SlackEventSignatureVerifier

SECRET = "8f742231b10e8888abcd99yyyzzz85a5"
NOW = 1_531_420_618
BODY = b"token=xyzz0WbapA4vBCDEFasx0q6G&team_id=T1DC2JH3J&command=%2Fweather&text=94070"


def _verifier(now: float = NOW, max_age_seconds: int = 300) -> SlackEventSignatureVerifier:
    return SlackEventSignatureVerifier(SECRET, max_age_seconds=max_age_seconds, clock=lambda: now)


def _expected(body: bytes, timestamp: str) -> str:
    base = b"v0:" + timestamp.encode() + b":" + body
    return "v0=" + hmac.new(SECRET.encode(), base, hashlib.sha256).hexdigest()


def test_sign_matches_v0_scheme() -> None:
    assert _verifier().sign(BODY, str(NOW)) == _expected(BODY, str(NOW))


def test_sign_accepts_text_body() -> None:
    verifier = _verifier()
    assert verifier.sign(BODY.decode(), str(NOW)) == verifier.sign(BODY, str(NOW))


def test_verify_accepts_valid_signature() -> None:
    verifier = _verifier()
    verifier.verify(verifier.sign(BODY, str(NOW)), BODY, str(NOW))


def test_verify_accepts_timestamp_at_window_edge() -> None:
    verifier = _verifier(now=NOW + 300)
    verifier.verify(verifier.sign(BODY, str(NOW)), BODY, str(NOW))


def test_verify_rejects_modified_body() -> None:
    verifier = _verifier()
    signature = verifier.sign(BODY, str(NOW))
    tampered = BODY.replace(b"94070", b"94071")

    with pytest.raises(SlackSignatureError) as exc_info:
        verifier.verify(signature, tampered, str(NOW))

    assert exc_info.value.reason == "invalid_signature"


def test_verify_rejects_signature_for_other_timestamp() -> None:
    verifier = _verifier()
    signature = verifier.sign(BODY, str(NOW - 1))

    with pytest.raises(SlackSignatureError, match="invalid_signature"):
        verifier.verify(signature, BODY, str(NOW))


@pytest.mark.parametrize("offset", [-301, 301, -3600])
def test_verify_rejects_timestamp_outside_window(offset: int) -> None:
    # offset positivo = request do futuro
    timestamp = str(NOW + offset)
    verifier = _verifier()

    with pytest.raises(SlackSignatureError) as exc_info:
        verifier.verify(verifier.sign(BODY, timestamp), BODY, timestamp)

    assert exc_info.value.reason == "stale_timestamp"


@pytest.mark.parametrize(
    ("received_hash", "received_timestamp"),
    [(None, str(NOW)), ("v0=abc", None), ("", ""), (None, None)],
)
def test_verify_rejects_missing_headers(
    received_hash: str | None,
    received_timestamp: str | None,
) -> None:
    with pytest.raises(SlackSignatureError) as exc_info:
        _verifier().verify(received_hash, BODY, received_timestamp)

    assert exc_info.value.reason == "absent_signature"


def test_verify_rejects_non_numeric_timestamp() -> None:
    with pytest.raises(SlackSignatureError) as exc_info:
        _verifier().verify("v0=abc", BODY, "ontem")

    assert exc_info.value.reason == "invalid_timestamp"


def test_signature_error_is_webhook_request_error() -> None:
    with pytest.raises(WebhookRequestError):
        _verifier().verify(None, BODY, None)


def test_custom_window() -> None:
    verifier = _verifier(now=NOW + 90, max_age_seconds=60)
    with pytest.raises(SlackSignatureError, match="stale_timestamp"):
        verifier.verify(verifier.sign(BODY, str(NOW)), BODY, str(NOW))


@pytest.mark.parametrize(("secret", "max_age"), [("", 300), ("s", 0), ("s", -5)])
def test_invalid_construction(secret: str, max_age: int) -> None:
    with pytest.raises(ValueError):
        SlackEventSignatureVerifier(secret, max_age_seconds=max_age)
