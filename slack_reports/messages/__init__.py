"""
Slack Message Module

Block Kit document model and the fluent builder that assembles it.
"""

from .blocks import (
    SECTION_MAX_FIELDS,
    Block,
    BlockType,
    Button,
    ButtonStyle,
    Message,
    TextObject,
    TextType,
)
from .builder import MessageBuilder

__all__ = [
    'SECTION_MAX_FIELDS',
    'Block',
    'BlockType',
    'Button',
    'ButtonStyle',
    'Message',
    'MessageBuilder',
    'TextObject',
    'TextType',
]
