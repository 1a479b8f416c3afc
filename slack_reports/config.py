"""
Slack Reports Configuration

Loads delivery settings from environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from .exceptions import InvalidConfigError

DEFAULT_API_URL = "https://slack.com/api/chat.postMessage"
DEFAULT_FALLBACK_TEXT = "Automated Notification"


@dataclass(frozen=True)
class SlackConfig:
    """Configuration for the Slack delivery client."""

    # Slack settings
    bot_token: str
    default_channel_id: str
    api_url: str = DEFAULT_API_URL
    fallback_text: str = DEFAULT_FALLBACK_TEXT

    # Retry policy
    retry_attempts: int = 3
    retry_delay_ms: int = 1000
    timeout_ms: int = 30000

    # Sentry settings
    sentry_dsn: Optional[str] = field(default=None)
    sentry_environment: str = "production"

    def __post_init__(self):
        if not self.bot_token or not self.bot_token.strip():
            raise InvalidConfigError("Bot token is required")
        if not self.default_channel_id or not self.default_channel_id.strip():
            raise InvalidConfigError("Default channel ID is required")
        if self.retry_attempts < 1:
            raise InvalidConfigError(f"retry_attempts must be >= 1, got {self.retry_attempts}")
        if self.retry_delay_ms < 0:
            raise InvalidConfigError(f"retry_delay_ms must be >= 0, got {self.retry_delay_ms}")
        if self.timeout_ms < 0:
            raise InvalidConfigError(f"timeout_ms must be >= 0, got {self.timeout_ms}")

    @classmethod
    def from_env(cls) -> "SlackConfig":
        """Create config from environment variables."""
        try:
            return cls(
                bot_token=os.getenv("SLACK_BOT_TOKEN", ""),
                default_channel_id=os.getenv("SLACK_CHANNEL_ID", ""),
                api_url=os.getenv("SLACK_API_URL", DEFAULT_API_URL),
                fallback_text=os.getenv("SLACK_FALLBACK_TEXT", DEFAULT_FALLBACK_TEXT),
                retry_attempts=int(os.getenv("SLACK_RETRY_ATTEMPTS", "3")),
                retry_delay_ms=int(os.getenv("SLACK_RETRY_DELAY_MS", "1000")),
                timeout_ms=int(os.getenv("SLACK_TIMEOUT_MS", "30000")),
                sentry_dsn=os.getenv("SENTRY_DSN"),
                sentry_environment=os.getenv("SENTRY_ENVIRONMENT", "production"),
            )
        except ValueError as e:
            if isinstance(e, InvalidConfigError):
                raise
            raise InvalidConfigError(f"Invalid numeric setting: {e}") from e

    @property
    def retry_delay_seconds(self) -> float:
        return self.retry_delay_ms / 1000.0

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0

    @property
    def sentry_enabled(self) -> bool:
        """Check if Sentry tracking is configured."""
        return bool(self.sentry_dsn)
