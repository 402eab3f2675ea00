"""Filters de logging para injeção de contexto e redação de credenciais.

Campos injetados:
- correlation_id: ID de rastreamento da chamada
- service: Nome do serviço

Tokens Slack (xoxb-, xoxp-, xapp-, ...) nunca saem em claro nos logs.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

SLACK_TOKEN_PATTERN = re.compile(r"\b(xox[abposre]|xapp)-[A-Za-z0-9-]+")
REDACTED = "[REDACTED]"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


def redact_tokens(text: str) -> str:
    """Substitui tokens Slack por [REDACTED]."""
    return SLACK_TOKEN_PATTERN.sub(REDACTED, text)


class TokenRedactionFilter(logging.Filter):
    """Remove tokens Slack da mensagem final do record.

    A mensagem é formatada (msg % args) antes da redação, então tokens
    passados como argumento também são cobertos.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_tokens(message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True
