"""Slack Web API client, retry strategy and response types."""

from .client import SlackClient
from .retry import RetryStrategy
from .types import SlackResponse

__all__ = [
    'SlackClient',
    'RetryStrategy',
    'SlackResponse',
]
