"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="slack_client")
    logger = get_logger(__name__)

Logs estruturados, sem tokens nem corpos de resposta.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, TokenRedactionFilter, redact_tokens
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "TokenRedactionFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "redact_tokens",
]
