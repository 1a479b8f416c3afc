"""
Sentry Setup and Context Management

Initializes Sentry SDK and provides breadcrumb / capture helpers that are
no-ops until init_sentry() succeeds.
"""

import logging
from typing import Any, Dict, Optional

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

from ..config import SlackConfig

logger = logging.getLogger(__name__)

# Track initialization state
_sentry_initialized = False


def init_sentry(config: SlackConfig) -> bool:
    """
    Initialize Sentry SDK.

    Args:
        config: SlackConfig with DSN

    Returns:
        True if initialized successfully
    """
    global _sentry_initialized

    if _sentry_initialized:
        return True

    if not config.sentry_enabled:
        logger.debug("Sentry not configured, skipping initialization")
        return False

    logging_integration = LoggingIntegration(
        level=logging.INFO,  # Capture INFO and above as breadcrumbs
        event_level=logging.ERROR,  # Send ERROR and above as events
    )

    try:
        sentry_sdk.init(
            dsn=config.sentry_dsn,
            environment=config.sentry_environment,
            integrations=[logging_integration],
            send_default_pii=False,
            attach_stacktrace=True,
        )
    except Exception as e:
        logger.error("Failed to initialize Sentry: %s", e)
        return False

    sentry_sdk.set_tag("default_channel", config.default_channel_id)

    _sentry_initialized = True
    logger.debug("Sentry initialized successfully")
    return True


def is_initialized() -> bool:
    return _sentry_initialized


def add_breadcrumb(
    message: str,
    category: str = "slack",
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Add a breadcrumb to the current Sentry scope.

    Args:
        message: Breadcrumb message
        category: Category (slack, http, cli)
        level: Severity level (debug, info, warning, error)
        data: Additional structured data
    """
    if not _sentry_initialized:
        return

    sentry_sdk.add_breadcrumb(
        message=message,
        category=category,
        level=level,
        data=data or {},
    )


def capture_exception(
    exception: BaseException,
    tags: Optional[Dict[str, str]] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> Optional[str]:
    """
    Capture an exception with context.

    Args:
        exception: Exception to capture
        tags: Tags to attach to the event
        extra: Extra data to attach to the event

    Returns:
        Sentry event ID, or None when Sentry is not initialized
    """
    if not _sentry_initialized:
        return None

    return sentry_sdk.capture_exception(
        exception,
        tags=tags or {},
        extras=extra or {},
    )
