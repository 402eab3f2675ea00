"""Testes do composition root (app.bootstrap)."""

from __future__ import annotations

import logging

import httpx
import pytest

from api.connectors.slack import (
    SlackClient,
    SlackClientCredentials,
    SlackEventSignatureVerifier,
    SlackHttpClient,
)
from app.bootstrap import (
    create_client_credentials,
    create_signature_verifier,
    create_slack_client,
    create_slack_http_client,
    initialize_app,
    open_bot_session,
    validate_runtime_settings,
)
from config.logging import CorrelationIdFilter
from config.settings import SlackSettings, get_base_settings, get_slack_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_base_settings.cache_clear()
    get_slack_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_slack_settings.cache_clear()


def test_create_slack_http_client_uses_settings() -> None:
    settings = SlackSettings(api_base_url="https://slack.example.test/api", request_timeout_seconds=7)

    connector = create_slack_http_client(settings)

    assert isinstance(connector, SlackHttpClient)
    assert connector.build_url("files.info") == "https://slack.example.test/api/files.info"
    assert connector._config.timeout_seconds == 7


@pytest.mark.asyncio
async def test_create_slack_client_with_external_pool() -> None:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))

    client = create_slack_client(SlackSettings(), http_client=http_client)

    assert isinstance(client, SlackClient)
    await http_client.aclose()


def test_open_bot_session_requires_token() -> None:
    client = create_slack_client(SlackSettings())

    with pytest.raises(ValueError, match="SLACK_BOT_TOKEN"):
        open_bot_session(client, SlackSettings())


def test_open_bot_session_uses_bot_token() -> None:
    settings = SlackSettings(bot_token="xoxb-bot")
    client = create_slack_client(settings)

    session = open_bot_session(client, settings)

    assert session.client is client
    assert session._token.token_value == "xoxb-bot"
    assert session._token.token_type == "bot"


def test_create_signature_verifier_requires_secret() -> None:
    with pytest.raises(ValueError, match="SLACK_SIGNING_SECRET"):
        create_signature_verifier(SlackSettings())


def test_create_signature_verifier_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLACK_SIGNING_SECRET", "shh")
    monkeypatch.setenv("SLACK_SIGNATURE_MAX_AGE_SECONDS", "120")

    verifier = create_signature_verifier()

    assert isinstance(verifier, SlackEventSignatureVerifier)
    assert verifier._max_age_seconds == 120


def test_initialize_app_configures_json_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SERVICE_NAME", "files_sync")

    initialize_app()

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)


def test_validate_runtime_settings_warns_in_development(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("SLACK_CLIENT_ID", "only-id")

    validate_runtime_settings()


def test_validate_runtime_settings_fails_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("SLACK_REQUEST_TIMEOUT_SECONDS", "0")

    with pytest.raises(RuntimeError, match="SLACK_REQUEST_TIMEOUT_SECONDS"):
        validate_runtime_settings()


def test_validate_runtime_settings_ok_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    for name in ("SLACK_CLIENT_ID", "SLACK_CLIENT_SECRET", "SLACK_API_BASE_URL"):
        monkeypatch.delenv(name, raising=False)

    validate_runtime_settings()


def test_create_client_credentials_from_settings() -> None:
    credentials = create_client_credentials(SlackSettings(client_id="123.456", client_secret="s3cr3t"))

    assert credentials == SlackClientCredentials("123.456", "s3cr3t")


@pytest.mark.parametrize(
    "settings",
    [SlackSettings(), SlackSettings(client_id="123.456"), SlackSettings(client_secret="s3cr3t")],
)
def test_create_client_credentials_requires_both_values(settings: SlackSettings) -> None:
    with pytest.raises(ValueError, match="SLACK_CLIENT_ID"):
        create_client_credentials(settings)
