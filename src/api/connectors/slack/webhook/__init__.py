"""Webhook Slack: verificação de assinatura e parsing seguro."""

from ..errors import (
    InvalidEncodingError,
    InvalidJsonError,
    SlackSignatureError,
    WebhookRequestError,
)
from ..signature import SlackEventSignatureVerifier
from .receive import decode_signed_request, parse_signed_request

__all__ = [
    "InvalidEncodingError",
    "InvalidJsonError",
    "SlackEventSignatureVerifier",
    "SlackSignatureError",
    "WebhookRequestError",
    "decode_signed_request",
    "parse_signed_request",
]
