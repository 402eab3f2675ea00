"""Settings específicas da Slack Web API.

Credenciais e limites do cliente e da verificação de webhooks.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

SLACK_API_BASE_URL: str = "https://slack.com/api"
DEFAULT_SIGNATURE_MAX_AGE_SECONDS: int = 300


@dataclass(frozen=True)
class SlackSettings:
    """Configurações do cliente Slack.

    Attributes:
        api_base_url: URL base da Web API
        bot_token: Token padrão (xoxb-) para sessões do bot
        client_id: Client ID do app (troca OAuth)
        client_secret: Client secret do app (troca OAuth)
        signing_secret: Secret para validação HMAC de webhooks
        request_timeout_seconds: Timeout das requisições HTTP
        signature_max_age_seconds: Janela aceita do timestamp assinado
    """

    api_base_url: str = SLACK_API_BASE_URL
    bot_token: str = field(default="", repr=False)
    client_id: str = ""
    client_secret: str = field(default="", repr=False)
    signing_secret: str = field(default="", repr=False)

    request_timeout_seconds: float = 30.0
    signature_max_age_seconds: int = DEFAULT_SIGNATURE_MAX_AGE_SECONDS

    @property
    def has_client_credentials(self) -> bool:
        return bool(self.client_id and self.client_secret)

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url.startswith(("https://", "http://")):
            errors.append("SLACK_API_BASE_URL deve ser uma URL http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("SLACK_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.signature_max_age_seconds <= 0:
            errors.append("SLACK_SIGNATURE_MAX_AGE_SECONDS deve ser > 0")

        if bool(self.client_id) != bool(self.client_secret):
            errors.append("SLACK_CLIENT_ID e SLACK_CLIENT_SECRET devem ser configurados juntos")

        return errors


def _load_from_env() -> SlackSettings:
    """Carrega SlackSettings a partir de variáveis de ambiente."""
    return SlackSettings(
        api_base_url=os.getenv("SLACK_API_BASE_URL", SLACK_API_BASE_URL),
        bot_token=os.getenv("SLACK_BOT_TOKEN", ""),
        client_id=os.getenv("SLACK_CLIENT_ID", ""),
        client_secret=os.getenv("SLACK_CLIENT_SECRET", ""),
        signing_secret=os.getenv("SLACK_SIGNING_SECRET", ""),
        request_timeout_seconds=float(os.getenv("SLACK_REQUEST_TIMEOUT_SECONDS", "30")),
        signature_max_age_seconds=int(
            os.getenv(
                "SLACK_SIGNATURE_MAX_AGE_SECONDS",
                str(DEFAULT_SIGNATURE_MAX_AGE_SECONDS),
            )
        ),
    )


@lru_cache(maxsize=1)
def get_slack_settings() -> SlackSettings:
    """Retorna instância cacheada de SlackSettings."""
    return _load_from_env()
