"""
Slack API Types

Response model for chat.postMessage.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

UNKNOWN_ERROR = "Unknown error"


@dataclass
class SlackResponse:
    """Parsed Slack Web API response."""

    ok: bool
    error: Optional[str] = None
    warning: Optional[str] = None
    ts: Optional[str] = None
    channel: Optional[str] = None
    status_code: int = 200
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], status_code: int = 200) -> "SlackResponse":
        """Create from a decoded JSON body."""
        return cls(
            ok=data.get("ok") is True,
            error=data.get("error"),
            warning=data.get("warning"),
            ts=data.get("ts"),
            channel=data.get("channel"),
            status_code=status_code,
            raw=data,
        )

    @property
    def http_ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_successful(self) -> bool:
        """Delivered: HTTP 2xx and ok=true."""
        return self.http_ok and self.ok

    @property
    def error_message(self) -> str:
        return self.error or UNKNOWN_ERROR

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "ok": self.ok,
            "error": self.error,
            "warning": self.warning,
            "ts": self.ts,
            "channel": self.channel,
            "status_code": self.status_code,
        }
