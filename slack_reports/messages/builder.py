"""
Slack Message Builder

Fluent, single-use accumulator that assembles blocks into a Message.
"""

import logging
from typing import List, Optional, Sequence, Union

from ..exceptions import BuilderConsumedError, InvalidBlockError, MalformedTableError
from .blocks import SECTION_MAX_FIELDS, Block, Button, ButtonStyle, Message

logger = logging.getLogger(__name__)


class MessageBuilder:
    """
    Builds a Message one block at a time.

    Usage:
        message = (
            MessageBuilder.create("C0123456")
            .add_header(":rocket: Deploy finished")
            .add_section("*Version:* `1.4.2`")
            .add_divider()
            .add_button("Open", "https://app.example.com", style="primary")
            .build()
        )

    build() hands the message out exactly once; the builder refuses any
    further calls after that.
    """

    def __init__(self, channel: Optional[str] = None):
        self._channel = channel
        self._text: Optional[str] = None
        self._thread_ts: Optional[str] = None
        self._blocks: List[Block] = []
        self._consumed = False

    @classmethod
    def create(cls, channel: Optional[str] = None) -> "MessageBuilder":
        return cls(channel)

    def _append(self, block: Block) -> "MessageBuilder":
        self._check_open()
        self._blocks.append(block)
        return self

    def _check_open(self) -> None:
        if self._consumed:
            raise BuilderConsumedError("MessageBuilder was already built; create a new builder")

    # Scalar fields

    def channel(self, channel: str) -> "MessageBuilder":
        self._check_open()
        self._channel = channel
        return self

    def text(self, text: str) -> "MessageBuilder":
        """Set the plain-text fallback shown in notifications."""
        self._check_open()
        self._text = text
        return self

    def thread_ts(self, thread_ts: str) -> "MessageBuilder":
        """Post as a reply in the thread with this timestamp."""
        self._check_open()
        self._thread_ts = thread_ts
        return self

    # Blocks

    def add_header(self, text: str) -> "MessageBuilder":
        return self._append(Block.header(text))

    def add_section(self, text: str) -> "MessageBuilder":
        """Add a section block with markdown text."""
        return self._append(Block.section(text))

    def add_plain_section(self, text: str) -> "MessageBuilder":
        return self._append(Block.section(text, markdown=False))

    def add_context(self, *texts: str) -> "MessageBuilder":
        """Add one context block with an element per text, in order."""
        return self._append(Block.context(texts))

    def add_divider(self) -> "MessageBuilder":
        return self._append(Block.divider())

    def add_button(
        self,
        text: str,
        url: str,
        style: Union[ButtonStyle, str, None] = None,
    ) -> "MessageBuilder":
        """Add an actions block holding a single link button."""
        return self._append(Block.actions([Button.create(text, url=url, style=style)]))

    def add_buttons(self, *buttons: Button) -> "MessageBuilder":
        """Add ONE actions block holding all buttons, in argument order."""
        return self._append(Block.actions(buttons))

    def add_table(
        self,
        headers: Sequence[str],
        rows: Sequence[Sequence[str]],
    ) -> "MessageBuilder":
        """
        Add a table as field sections separated by dividers.

        Produces a bold header section and a divider, then a section and a
        divider per row.

        Args:
            headers: Column titles
            rows: Cell values, one sequence per row

        Raises:
            MalformedTableError: If a row length differs from the header
                length or the table is wider than a section allows. Nothing
                is appended in that case.
        """
        self._check_open()

        if not headers:
            raise MalformedTableError("Table needs at least one header")
        if len(headers) > SECTION_MAX_FIELDS:
            raise MalformedTableError(
                f"Table has {len(headers)} columns; sections allow at most {SECTION_MAX_FIELDS}"
            )
        for index, row in enumerate(rows):
            if len(row) != len(headers):
                raise MalformedTableError(
                    f"Row {index} has {len(row)} cells, expected {len(headers)}"
                )

        try:
            table_blocks = [Block.fields_section([f"*{h}*" for h in headers]), Block.divider()]
            for row in rows:
                table_blocks.append(Block.fields_section(row))
                table_blocks.append(Block.divider())
        except InvalidBlockError as e:
            raise MalformedTableError(str(e)) from e

        self._blocks.extend(table_blocks)
        return self

    def add_custom_block(self, block: Block) -> "MessageBuilder":
        """Add a pre-built block for shapes the helpers don't cover."""
        return self._append(block)

    def build(self) -> Message:
        """Return the finished Message. The builder cannot be reused."""
        self._check_open()
        self._consumed = True
        logger.debug("Built message with %d blocks", len(self._blocks))
        return Message(
            channel=self._channel,
            text=self._text,
            thread_ts=self._thread_ts,
            blocks=tuple(self._blocks),
        )
