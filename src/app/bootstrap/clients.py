"""Factories do cliente Slack a partir de SlackSettings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.slack import (
    SlackApiToken,
    SlackClient,
    SlackClientCredentials,
    SlackEventSignatureVerifier,
    SlackHttpClient,
    SlackHttpClientConfig,
)
from config.settings import get_slack_settings

if TYPE_CHECKING:
    import httpx

    from api.connectors.slack import SlackClientSession
    from config.settings import SlackSettings

logger = logging.getLogger(__name__)


def create_slack_http_client(
    settings: SlackSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> SlackHttpClient:
    """Cria connector httpx configurado.

    Args:
        settings: SlackSettings opcional. Se None, carrega do ambiente.
        http_client: Pool httpx externo opcional (não é fechado pelo connector).
    """
    slack = settings or get_slack_settings()
    config = SlackHttpClientConfig(
        api_base_url=slack.api_base_url,
        timeout_seconds=slack.request_timeout_seconds,
    )
    return SlackHttpClient(config=config, http_client=http_client)


def create_slack_client(
    settings: SlackSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> SlackClient:
    return SlackClient(create_slack_http_client(settings, http_client))


def open_bot_session(
    client: SlackClient,
    settings: SlackSettings | None = None,
) -> SlackClientSession:
    """Abre sessão com o token do bot configurado.

    Raises:
        ValueError: Se SLACK_BOT_TOKEN não estiver configurado
    """
    slack = settings or get_slack_settings()
    if not slack.bot_token:
        raise ValueError("SLACK_BOT_TOKEN não configurado")
    return client.open_session(SlackApiToken(slack.bot_token, token_type="bot"))


def create_signature_verifier(
    settings: SlackSettings | None = None,
) -> SlackEventSignatureVerifier:
    """Cria verificador de webhooks.

    Raises:
        ValueError: Se SLACK_SIGNING_SECRET não estiver configurado
    """
    slack = settings or get_slack_settings()
    if not slack.signing_secret:
        raise ValueError("SLACK_SIGNING_SECRET não configurado")
    logger.info(
        "slack_signature_verifier_created",
        extra={"max_age_seconds": slack.signature_max_age_seconds},
    )
    return SlackEventSignatureVerifier(
        slack.signing_secret,
        max_age_seconds=slack.signature_max_age_seconds,
    )


def create_client_credentials(
    settings: SlackSettings | None = None,
) -> SlackClientCredentials:
    """Credenciais do app para a troca OAuth (oauth.v2.access).

    Raises:
        ValueError: Se SLACK_CLIENT_ID/SLACK_CLIENT_SECRET não estiverem configurados
    """
    slack = settings or get_slack_settings()
    if not slack.has_client_credentials:
        raise ValueError("SLACK_CLIENT_ID/SLACK_CLIENT_SECRET não configurados")
    return SlackClientCredentials(slack.client_id, slack.client_secret)
