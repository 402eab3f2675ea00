"""Agregador de settings.

Re-exporta as settings de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.slack import (
    DEFAULT_SIGNATURE_MAX_AGE_SECONDS,
    SLACK_API_BASE_URL,
    SlackSettings,
    get_slack_settings,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "DEFAULT_SIGNATURE_MAX_AGE_SECONDS",
    "SLACK_API_BASE_URL",
    "BaseSettings",
    "Environment",
    "SlackSettings",
    "get_base_settings",
    "get_slack_settings",
]
