"""Erros do cliente Slack.

Taxonomia (todos terminais no ponto de detecção, sem retry interno):
- SlackTransportError: falha de rede (DNS, conexão, TLS, timeout)
- SlackHttpError: status HTTP diferente de 200
- SlackApiError: envelope com `ok: false` e `error` preenchido
- SlackDecodeError: corpo 200 que não decodifica para o tipo esperado
- SlackSignatureError: webhook com assinatura ausente, inválida ou expirada
- InvalidJsonError / InvalidEncodingError: corpo de webhook verificado ilegível

Nenhum erro carrega token ou secret.
"""

from __future__ import annotations


class SlackClientError(Exception):
    """Erro base do cliente Slack."""


class SlackTransportError(SlackClientError):
    """Falha de rede ao falar com a API (não convertida em outro tipo)."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class SlackHttpError(SlackClientError):
    """Resposta HTTP com status diferente de 200."""

    def __init__(self, status_code: int, http_response_body: str | None = None) -> None:
        super().__init__(f"slack_http_error: {status_code}")
        self.status_code = status_code
        self.http_response_body = http_response_body


class SlackApiError(SlackClientError):
    """Envelope Slack com `error` preenchido (HTTP 200)."""

    def __init__(
        self,
        code: str,
        warnings: list[str] | None = None,
        http_response_body: str | None = None,
    ) -> None:
        super().__init__(f"slack_api_error: {code}")
        self.code = code
        self.warnings = warnings or []
        self.http_response_body = http_response_body


class SlackDecodeError(SlackClientError):
    """Corpo de resposta 200 que não é JSON válido para o tipo esperado."""

    def __init__(self, message: str, http_response_body: str | None = None) -> None:
        super().__init__(message)
        self.http_response_body = http_response_body


class WebhookRequestError(ValueError):
    """Erro base para falhas de request de webhook."""


class SlackSignatureError(SlackClientError, WebhookRequestError):
    """Assinatura de webhook ausente, inválida ou fora da janela de tempo.

    Attributes:
        reason: Código curto (absent_signature, invalid_timestamp,
            stale_timestamp, invalid_signature).
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no corpo de um webhook já verificado."""


class InvalidEncodingError(WebhookRequestError):
    """Corpo de webhook assinado que não é UTF-8 válido."""
