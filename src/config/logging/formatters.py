"""Formatters de logging estruturado.

Logs JSON com campos obrigatórios:
- correlation_id
- service
- timestamp (asctime)
- level
- logger (name)
- message
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-17 10:30:00,123",
            "level": "WARNING",
            "logger": "api.connectors.slack.slack_logging",
            "message": "slack_api_error",
            "correlation_id": "abc-123",
            "service": "slack_client",
            "slack_method": "files.info",
            "error_code": "file_not_found"
        }
    """
    format_string = " ".join(f"%({name})s" for name in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
