"""Testes para config.settings (base e slack)."""

from __future__ import annotations

import pytest

from config.settings import (
    DEFAULT_SIGNATURE_MAX_AGE_SECONDS,
    SLACK_API_BASE_URL,
    BaseSettings,
    SlackSettings,
    get_base_settings,
    get_slack_settings,
)
from config.settings.base.core import _load_base_from_env, _parse_environment
from config.settings.slack import _load_from_env


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_base_settings.cache_clear()
    get_slack_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_slack_settings.cache_clear()


class TestSlackSettings:
    def test_defaults_are_valid(self) -> None:
        settings = SlackSettings()
        assert settings.api_base_url == SLACK_API_BASE_URL
        assert settings.signature_max_age_seconds == DEFAULT_SIGNATURE_MAX_AGE_SECONDS == 300
        assert settings.validate() == []

    def test_secrets_not_in_repr(self) -> None:
        settings = SlackSettings(
            bot_token="xoxb-secret",
            client_secret="client-secret",
            signing_secret="signing-secret",
        )
        text = repr(settings)
        assert "xoxb-secret" not in text
        assert "client-secret" not in text
        assert "signing-secret" not in text

    def test_has_client_credentials(self) -> None:
        assert SlackSettings(client_id="1", client_secret="s").has_client_credentials is True
        assert SlackSettings(client_id="1").has_client_credentials is False

    def test_invalid_base_url(self) -> None:
        errors = SlackSettings(api_base_url="slack.com/api").validate()
        assert any("SLACK_API_BASE_URL" in error for error in errors)

    def test_non_positive_timeout(self) -> None:
        errors = SlackSettings(request_timeout_seconds=0).validate()
        assert any("SLACK_REQUEST_TIMEOUT_SECONDS" in error for error in errors)

    def test_non_positive_signature_window(self) -> None:
        errors = SlackSettings(signature_max_age_seconds=-1).validate()
        assert any("SLACK_SIGNATURE_MAX_AGE_SECONDS" in error for error in errors)

    def test_client_credentials_must_be_paired(self) -> None:
        errors = SlackSettings(client_secret="only-secret").validate()
        assert any("SLACK_CLIENT_ID" in error for error in errors)

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SLACK_API_BASE_URL", "https://slack.example.test/api")
        monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-1")
        monkeypatch.setenv("SLACK_SIGNING_SECRET", "shh")
        monkeypatch.setenv("SLACK_REQUEST_TIMEOUT_SECONDS", "5.5")
        monkeypatch.setenv("SLACK_SIGNATURE_MAX_AGE_SECONDS", "60")

        settings = _load_from_env()

        assert settings.api_base_url == "https://slack.example.test/api"
        assert settings.bot_token == "xoxb-1"
        assert settings.signing_secret == "shh"
        assert settings.request_timeout_seconds == 5.5
        assert settings.signature_max_age_seconds == 60

    def test_getter_is_cached(self) -> None:
        assert get_slack_settings() is get_slack_settings()


class TestBaseSettings:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("prod", "production"),
            ("PRODUCTION", "production"),
            ("stage", "staging"),
            ("dev", "development"),
            ("qualquer", "development"),
        ],
    )
    def test_parse_environment(self, raw: str, expected: str) -> None:
        assert _parse_environment(raw) == expected

    def test_load_base_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("SERVICE_NAME", "files_sync")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = _load_base_from_env()

        assert settings.environment == "production"
        assert settings.service_name == "files_sync"
        assert settings.log_level == "DEBUG"

    def test_validate_reports_invalid_fields(self) -> None:
        errors = BaseSettings(service_name="", log_level="verbose").validate()
        assert any("SERVICE_NAME" in error for error in errors)
        assert any("LOG_LEVEL" in error for error in errors)

    def test_defaults_are_valid(self) -> None:
        assert BaseSettings().validate() == []
