"""Tests for configuration loading (config.py) and the error taxonomy."""

import pytest

from slack_reports.config import DEFAULT_API_URL, SlackConfig
from slack_reports.exceptions import (
    ApplicationError,
    DeliveryError,
    InvalidConfigError,
    RetriesExhaustedError,
    SlackError,
)


# SlackConfig

class TestSlackConfig:
    def test_defaults(self):
        config = SlackConfig(bot_token="xoxb-1", default_channel_id="C1")
        assert config.api_url == DEFAULT_API_URL
        assert config.fallback_text == "Automated Notification"
        assert config.retry_attempts == 3
        assert config.retry_delay_seconds == 1.0
        assert config.timeout_seconds == 30.0
        assert config.sentry_enabled is False

    @pytest.mark.parametrize("token", ["", "   "])
    def test_blank_token_rejected(self, token):
        with pytest.raises(InvalidConfigError, match="Bot token is required"):
            SlackConfig(bot_token=token, default_channel_id="C1")

    def test_blank_channel_rejected(self):
        with pytest.raises(InvalidConfigError, match="Default channel ID is required"):
            SlackConfig(bot_token="xoxb-1", default_channel_id="")

    @pytest.mark.parametrize("kwargs", [
        {"retry_attempts": 0},
        {"retry_delay_ms": -1},
        {"timeout_ms": -5},
    ])
    def test_out_of_range_values_rejected(self, kwargs):
        with pytest.raises(InvalidConfigError):
            SlackConfig(bot_token="xoxb-1", default_channel_id="C1", **kwargs)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            SlackConfig(bot_token="", default_channel_id="C1")


class TestFromEnv:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-env")
        monkeypatch.setenv("SLACK_CHANNEL_ID", "C0ENV")
        monkeypatch.setenv("SLACK_RETRY_ATTEMPTS", "5")
        monkeypatch.setenv("SLACK_RETRY_DELAY_MS", "250")
        monkeypatch.setenv("SLACK_TIMEOUT_MS", "0")
        monkeypatch.setenv("SLACK_FALLBACK_TEXT", "Ops update")
        monkeypatch.setenv("SENTRY_DSN", "https://key@sentry.example.com/1")

        config = SlackConfig.from_env()

        assert config.bot_token == "xoxb-env"
        assert config.default_channel_id == "C0ENV"
        assert config.retry_attempts == 5
        assert config.retry_delay_seconds == 0.25
        assert config.timeout_ms == 0
        assert config.fallback_text == "Ops update"
        assert config.sentry_enabled is True

    def test_missing_token(self, monkeypatch):
        monkeypatch.delenv("SLACK_BOT_TOKEN", raising=False)
        monkeypatch.setenv("SLACK_CHANNEL_ID", "C0ENV")
        with pytest.raises(InvalidConfigError):
            SlackConfig.from_env()

    def test_non_numeric_setting(self, monkeypatch):
        monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-env")
        monkeypatch.setenv("SLACK_CHANNEL_ID", "C0ENV")
        monkeypatch.setenv("SLACK_RETRY_ATTEMPTS", "three")
        with pytest.raises(InvalidConfigError, match="Invalid numeric setting"):
            SlackConfig.from_env()


# Exceptions

class TestExceptions:
    def test_str_includes_code_and_status(self):
        err = ApplicationError("Slack API returned error", error_code="not_authed", http_status=401)
        assert str(err) == "Slack API returned error [Error Code: not_authed] [HTTP Status: 401]"

    def test_str_without_details(self):
        assert str(DeliveryError("boom")) == "boom"

    def test_hierarchy(self):
        assert issubclass(RetriesExhaustedError, DeliveryError)
        assert issubclass(DeliveryError, SlackError)
        assert issubclass(InvalidConfigError, SlackError)

    def test_exhausted_copies_last_error_details(self):
        last = ApplicationError("x", error_code="ratelimited", http_status=429)
        err = RetriesExhaustedError(3, last)
        assert err.error_code == "ratelimited"
        assert err.http_status == 429
        assert err.message == "Failed to send message after 3 attempts"
