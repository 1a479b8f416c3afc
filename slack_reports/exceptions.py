"""
Slack Reports Exceptions

Error taxonomy for message assembly and delivery.
"""

from typing import Optional


class SlackError(Exception):
    """Base class for all slack_reports errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        http_status: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.http_status = http_status

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            parts.append(f"[Error Code: {self.error_code}]")
        if self.http_status:
            parts.append(f"[HTTP Status: {self.http_status}]")
        return " ".join(parts)


class InvalidConfigError(SlackError, ValueError):
    """Configuration values are missing or out of range."""


# Message assembly

class MessageBuildError(SlackError):
    """A message or block could not be assembled."""


class InvalidBlockError(MessageBuildError):
    """A block violates its shape rules (empty text, too many fields, ...)."""


class MalformedTableError(MessageBuildError):
    """Table rows do not line up with the header row."""


class BuilderConsumedError(MessageBuildError):
    """The builder was used after build() handed its message out."""


# Delivery

class DeliveryError(SlackError):
    """Any failure surfaced while sending a message."""


class InvalidInputError(DeliveryError):
    """Input validation failed before any network call. Never retried."""


class TransportError(DeliveryError):
    """Network-level failure: connection refused, DNS, timeout."""


class ApplicationError(DeliveryError):
    """Slack answered, but with an HTTP error status or ok=false."""


class RetriesExhaustedError(DeliveryError):
    """Every configured attempt failed. The last error is the cause."""

    def __init__(self, attempts: int, last_error: Optional[BaseException] = None):
        error_code = getattr(last_error, "error_code", None)
        http_status = getattr(last_error, "http_status", None)
        super().__init__(
            f"Failed to send message after {attempts} attempts",
            error_code=error_code,
            http_status=http_status,
        )
        self.attempts = attempts
        self.last_error = last_error


class DeliveryInterruptedError(DeliveryError):
    """Delivery was cancelled, before an attempt or while waiting to retry."""
