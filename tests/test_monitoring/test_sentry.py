"""Tests for Sentry helpers (sentry.py)."""

import pytest
from unittest.mock import patch

from slack_reports.config import SlackConfig
from slack_reports.monitoring import sentry


@pytest.fixture(autouse=True)
def reset_sentry_state(monkeypatch):
    monkeypatch.setattr(sentry, "_sentry_initialized", False)


class TestInitSentry:
    @patch("slack_reports.monitoring.sentry.sentry_sdk")
    def test_skipped_without_dsn(self, mock_sdk, slack_config):
        assert sentry.init_sentry(slack_config) is False
        mock_sdk.init.assert_not_called()
        assert sentry.is_initialized() is False

    @patch("slack_reports.monitoring.sentry.sentry_sdk")
    def test_initializes_with_dsn(self, mock_sdk):
        config = SlackConfig(
            bot_token="xoxb-1",
            default_channel_id="C1",
            sentry_dsn="https://key@sentry.example.com/1",
            sentry_environment="staging",
        )

        assert sentry.init_sentry(config) is True

        kwargs = mock_sdk.init.call_args.kwargs
        assert kwargs["dsn"] == "https://key@sentry.example.com/1"
        assert kwargs["environment"] == "staging"
        mock_sdk.set_tag.assert_called_once_with("default_channel", "C1")
        assert sentry.is_initialized() is True

    @patch("slack_reports.monitoring.sentry.sentry_sdk")
    def test_init_failure_is_logged_not_raised(self, mock_sdk):
        mock_sdk.init.side_effect = RuntimeError("bad dsn")
        config = SlackConfig(bot_token="xoxb-1", default_channel_id="C1", sentry_dsn="nope")

        assert sentry.init_sentry(config) is False
        assert sentry.is_initialized() is False


class TestHelpers:
    @patch("slack_reports.monitoring.sentry.sentry_sdk")
    def test_noop_when_not_initialized(self, mock_sdk):
        sentry.add_breadcrumb("attempt 1")
        assert sentry.capture_exception(RuntimeError("x")) is None
        mock_sdk.add_breadcrumb.assert_not_called()
        mock_sdk.capture_exception.assert_not_called()

    @patch("slack_reports.monitoring.sentry.sentry_sdk")
    def test_forwards_when_initialized(self, mock_sdk, monkeypatch):
        monkeypatch.setattr(sentry, "_sentry_initialized", True)
        mock_sdk.capture_exception.return_value = "event-id"
        error = RuntimeError("x")

        sentry.add_breadcrumb("attempt 1", data={"channel": "C1"})
        event_id = sentry.capture_exception(error, tags={"command": "send"})

        mock_sdk.add_breadcrumb.assert_called_once_with(
            message="attempt 1", category="slack", level="info", data={"channel": "C1"},
        )
        mock_sdk.capture_exception.assert_called_once_with(
            error, tags={"command": "send"}, extras={},
        )
        assert event_id == "event-id"
