"""
Monitoring for Slack delivery

Provides Sentry error tracking and breadcrumbs for delivery attempts.
"""

from .sentry import (
    add_breadcrumb,
    capture_exception,
    init_sentry,
    is_initialized,
)

__all__ = [
    'add_breadcrumb',
    'capture_exception',
    'init_sentry',
    'is_initialized',
]
