"""
Slack Block Kit Document Model

Immutable data structures for a Block Kit message: text objects, buttons,
blocks and the message itself. Every type serializes itself with to_dict(),
omitting optional fields that are not set.
"""

import json
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from ..exceptions import InvalidBlockError

# Slack rejects section blocks with more than 10 fields.
SECTION_MAX_FIELDS = 10


class TextType(Enum):
    """Text object kinds."""
    PLAIN = "plain_text"
    MARKDOWN = "mrkdwn"


class ButtonStyle(Enum):
    """Button visual styles. DEFAULT is never sent on the wire."""
    DEFAULT = "default"
    PRIMARY = "primary"
    DANGER = "danger"


class BlockType(Enum):
    """Supported block kinds."""
    HEADER = "header"
    SECTION = "section"
    DIVIDER = "divider"
    CONTEXT = "context"
    ACTIONS = "actions"


@dataclass(frozen=True)
class TextObject:
    """A styled string with an explicit markup kind."""

    type: TextType
    text: str
    emoji: Optional[bool] = None
    verbatim: Optional[bool] = None

    @classmethod
    def plain(cls, text: str, emoji: bool = True) -> "TextObject":
        return cls(TextType.PLAIN, text, emoji=emoji)

    @classmethod
    def markdown(cls, text: str) -> "TextObject":
        return cls(TextType.MARKDOWN, text)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type.value, "text": self.text}
        if self.emoji is not None and self.type == TextType.PLAIN:
            data["emoji"] = self.emoji
        if self.verbatim is not None:
            data["verbatim"] = self.verbatim
        return data


def _coerce_style(style: Union[ButtonStyle, str, None]) -> Optional[ButtonStyle]:
    if style is None or isinstance(style, ButtonStyle):
        return style
    try:
        return ButtonStyle(style.lower())
    except ValueError:
        raise InvalidBlockError(f"Unknown button style: {style!r}") from None


@dataclass(frozen=True)
class Button:
    """Interactive button element. The label is always a typed text object."""

    text: TextObject
    url: Optional[str] = None
    action_id: Optional[str] = None
    style: Optional[ButtonStyle] = None
    value: Optional[str] = None

    def __post_init__(self):
        if not self.text.text:
            raise InvalidBlockError("Button label cannot be empty")
        if not self.url and not self.action_id:
            raise InvalidBlockError(
                f"Button '{self.text.text}' needs a url or an action_id"
            )

    @classmethod
    def create(
        cls,
        label: str,
        url: Optional[str] = None,
        style: Union[ButtonStyle, str, None] = None,
        action_id: Optional[str] = None,
        value: Optional[str] = None,
    ) -> "Button":
        """
        Create a button from a bare string label.

        Args:
            label: Button text (wrapped as plain text)
            url: Link opened when clicked
            style: ButtonStyle or its string value
            action_id: Identifier sent with interaction payloads
            value: Value sent with interaction payloads

        Returns:
            Button
        """
        return cls(
            text=TextObject.plain(label),
            url=url,
            action_id=action_id,
            style=_coerce_style(style),
            value=value,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": "button", "text": self.text.to_dict()}
        if self.url is not None:
            data["url"] = self.url
        if self.action_id is not None:
            data["action_id"] = self.action_id
        if self.style is not None and self.style != ButtonStyle.DEFAULT:
            data["style"] = self.style.value
        if self.value is not None:
            data["value"] = self.value
        return data


Element = Union[TextObject, Button]


def _require_text(kind: str, text: str) -> None:
    if text is None or not str(text).strip():
        raise InvalidBlockError(f"{kind} text cannot be empty")


@dataclass(frozen=True)
class Block:
    """A typed visual unit of a message."""

    type: BlockType
    text: Optional[TextObject] = None
    fields: Tuple[TextObject, ...] = ()
    elements: Tuple[Element, ...] = ()
    block_id: Optional[str] = None
    accessory: Optional[Button] = None

    def __post_init__(self):
        if len(self.fields) > SECTION_MAX_FIELDS:
            raise InvalidBlockError(
                f"Section blocks allow at most {SECTION_MAX_FIELDS} fields, got {len(self.fields)}"
            )
        if self.type == BlockType.DIVIDER and (
            self.text is not None or self.fields or self.elements or self.accessory is not None
        ):
            raise InvalidBlockError("Divider block cannot carry text, fields or elements")
        if self.type == BlockType.HEADER and self.text is None:
            raise InvalidBlockError("Header block needs text")
        if self.type == BlockType.SECTION and self.text is None and not self.fields:
            raise InvalidBlockError("Section block needs text or fields")
        if self.type in (BlockType.CONTEXT, BlockType.ACTIONS) and not self.elements:
            raise InvalidBlockError(f"{self.type.value} block needs at least one element")

        if self.text is not None:
            _require_text(self.type.value.capitalize(), self.text.text)
        for text_obj in self.fields:
            _require_text("Section field", text_obj.text)
        if self.type == BlockType.CONTEXT:
            for element in self.elements:
                if isinstance(element, TextObject):
                    _require_text("Context element", element.text)

    @classmethod
    def header(cls, text: str) -> "Block":
        """Create a header block (plain text, emoji enabled)."""
        return cls(BlockType.HEADER, text=TextObject.plain(text, emoji=True))

    @classmethod
    def section(cls, text: str, markdown: bool = True) -> "Block":
        """Create a section block with a single text object."""
        text_obj = TextObject.markdown(text) if markdown else TextObject.plain(text)
        return cls(BlockType.SECTION, text=text_obj)

    @classmethod
    def fields_section(cls, fields: Sequence[str]) -> "Block":
        """Create a section block laid out as markdown fields."""
        return cls(BlockType.SECTION, fields=tuple(TextObject.markdown(f) for f in fields))

    @classmethod
    def divider(cls) -> "Block":
        return cls(BlockType.DIVIDER)

    @classmethod
    def context(cls, texts: Sequence[str]) -> "Block":
        """Create a context block of small markdown elements."""
        return cls(BlockType.CONTEXT, elements=tuple(TextObject.markdown(t) for t in texts))

    @classmethod
    def actions(cls, buttons: Sequence[Button]) -> "Block":
        return cls(BlockType.ACTIONS, elements=tuple(buttons))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the Block Kit wire shape."""
        data: Dict[str, Any] = {"type": self.type.value}
        if self.text is not None:
            data["text"] = self.text.to_dict()
        if self.block_id is not None:
            data["block_id"] = self.block_id
        if self.elements:
            data["elements"] = [e.to_dict() for e in self.elements]
        if self.fields:
            data["fields"] = [f.to_dict() for f in self.fields]
        if self.accessory is not None:
            data["accessory"] = self.accessory.to_dict()
        return data


@dataclass(frozen=True)
class Message:
    """One complete outbound message. Block order is render order."""

    channel: Optional[str] = None
    text: Optional[str] = None
    thread_ts: Optional[str] = None
    blocks: Tuple[Block, ...] = field(default_factory=tuple)

    def with_channel(self, channel: str) -> "Message":
        """Return a copy addressed to another channel."""
        return replace(self, channel=channel)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: Dict[str, Any] = {}
        if self.channel is not None:
            data["channel"] = self.channel
        if self.thread_ts is not None:
            data["thread_ts"] = self.thread_ts
        if self.text is not None:
            data["text"] = self.text
        data["blocks"] = [b.to_dict() for b in self.blocks]
        return data

    def to_payload(self, fallback_text: str) -> Dict[str, Any]:
        """
        Build the chat.postMessage request body.

        Args:
            fallback_text: Notification text used when the message has none

        Returns:
            Payload dict with channel, text, blocks (and thread_ts if set)
        """
        payload: Dict[str, Any] = {
            "channel": self.channel,
            "text": self.text or fallback_text,
            "blocks": [b.to_dict() for b in self.blocks],
        }
        if self.thread_ts:
            payload["thread_ts"] = self.thread_ts
        return payload

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)
