"""Helpers de logging para a Slack Web API (sem tokens nem corpos)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import SlackApiError, SlackHttpError, SlackTransportError

logger = logging.getLogger(__name__)


def log_api_error(error: SlackApiError, http_method: str, method_name: str) -> None:
    """Loga erro de envelope (`ok: false`)."""
    logger.warning(
        "slack_api_error",
        extra={
            "http_method": http_method,
            "slack_method": method_name,
            "error_code": error.code,
            "warnings": error.warnings,
        },
    )


def log_http_error(error: SlackHttpError, http_method: str, method_name: str) -> None:
    """Loga status HTTP inesperado."""
    logger.warning(
        "slack_http_error",
        extra={
            "http_method": http_method,
            "slack_method": method_name,
            "status_code": error.status_code,
        },
    )


def log_transport_error(
    error: SlackTransportError,
    http_method: str,
    method_name: str,
) -> None:
    """Loga falha de rede com o tipo da causa original."""
    logger.error(
        "slack_transport_error",
        extra={
            "http_method": http_method,
            "slack_method": method_name,
            "cause": type(error.cause).__name__ if error.cause else None,
        },
    )


def log_success(http_method: str, method_name: str, status_code: int) -> None:
    logger.debug(
        "slack_call_success",
        extra={
            "http_method": http_method,
            "slack_method": method_name,
            "status_code": status_code,
        },
    )
