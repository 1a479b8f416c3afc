"""
Slack Reports

Block Kit message building, report templates and resilient delivery to the
Slack Web API.
"""

from .api import RetryStrategy, SlackClient, SlackResponse
from .config import SlackConfig
from .exceptions import (
    ApplicationError,
    BuilderConsumedError,
    DeliveryError,
    DeliveryInterruptedError,
    InvalidBlockError,
    InvalidConfigError,
    InvalidInputError,
    MalformedTableError,
    MessageBuildError,
    RetriesExhaustedError,
    SlackError,
    TransportError,
)
from .messages import Block, Button, ButtonStyle, Message, MessageBuilder, TextObject, TextType

__version__ = "1.0.0"

__all__ = [
    'SlackClient',
    'SlackConfig',
    'SlackResponse',
    'RetryStrategy',
    'Block',
    'Button',
    'ButtonStyle',
    'Message',
    'MessageBuilder',
    'TextObject',
    'TextType',
    'SlackError',
    'InvalidConfigError',
    'MessageBuildError',
    'InvalidBlockError',
    'MalformedTableError',
    'BuilderConsumedError',
    'DeliveryError',
    'InvalidInputError',
    'TransportError',
    'ApplicationError',
    'RetriesExhaustedError',
    'DeliveryInterruptedError',
]
