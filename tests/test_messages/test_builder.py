"""Tests for the fluent message builder (builder.py)."""

import pytest

from slack_reports.exceptions import BuilderConsumedError, InvalidBlockError, MalformedTableError
from slack_reports.messages import Block, BlockType, Button, ButtonStyle, MessageBuilder


def block_types(message):
    return [b.type for b in message.blocks]


# Ordering and scalar fields

class TestBuilderBasics:
    def test_blocks_follow_call_order(self):
        message = (
            MessageBuilder.create("C1")
            .add_header("Title")
            .add_section("*body*")
            .add_divider()
            .add_context("a", "b")
            .add_plain_section("plain")
            .build()
        )
        assert block_types(message) == [
            BlockType.HEADER,
            BlockType.SECTION,
            BlockType.DIVIDER,
            BlockType.CONTEXT,
            BlockType.SECTION,
        ]

    def test_scalar_fields(self):
        message = (
            MessageBuilder.create()
            .channel("C2")
            .text("fallback")
            .thread_ts("111.222")
            .build()
        )
        assert message.channel == "C2"
        assert message.text == "fallback"
        assert message.thread_ts == "111.222"
        assert message.blocks == ()

    def test_header_and_buttons_scenario(self):
        message = (
            MessageBuilder.create("C1")
            .add_header("Deploy finished")
            .add_buttons(
                Button.create("Open", url="https://app.example.com", style=ButtonStyle.PRIMARY),
                Button.create("Rollback", url="https://rollback.example.com", style=ButtonStyle.DANGER),
            )
            .build()
        )

        assert len(message.blocks) == 2
        actions = message.blocks[1].to_dict()
        assert actions["type"] == "actions"
        assert [e["style"] for e in actions["elements"]] == ["primary", "danger"]
        assert [e["text"]["text"] for e in actions["elements"]] == ["Open", "Rollback"]

    def test_add_button_makes_single_button_actions_block(self):
        message = MessageBuilder.create().add_button("Docs", "https://docs.example.com").build()
        data = message.blocks[0].to_dict()
        assert data["type"] == "actions"
        assert len(data["elements"]) == 1
        assert "style" not in data["elements"][0]

    def test_add_custom_block(self):
        custom = Block.fields_section(["*Owner*", "platform-team"])
        message = MessageBuilder.create().add_custom_block(custom).build()
        assert message.blocks == (custom,)

    def test_blank_context_rejected(self):
        with pytest.raises(InvalidBlockError):
            MessageBuilder.create().add_context("")

    def test_custom_header_without_text_rejected(self):
        with pytest.raises(InvalidBlockError):
            MessageBuilder.create().add_custom_block(Block(BlockType.HEADER))


# Tables

class TestAddTable:
    @pytest.mark.parametrize("row_count", [0, 1, 4])
    def test_table_block_count(self, row_count):
        rows = [[f"r{i}", str(i)] for i in range(row_count)]
        message = MessageBuilder.create().add_table(["Name", "Value"], rows).build()
        assert len(message.blocks) == 2 + 2 * row_count

    def test_table_layout(self):
        message = (
            MessageBuilder.create()
            .add_table(["Metric", "Value"], [["CPU", "42%"], ["Memory", "63%"]])
            .build()
        )
        blocks = [b.to_dict() for b in message.blocks]

        assert [f["text"] for f in blocks[0]["fields"]] == ["*Metric*", "*Value*"]
        assert blocks[1] == {"type": "divider"}
        assert [f["text"] for f in blocks[2]["fields"]] == ["CPU", "42%"]
        assert blocks[3] == {"type": "divider"}
        assert [f["text"] for f in blocks[4]["fields"]] == ["Memory", "63%"]
        assert blocks[5] == {"type": "divider"}

    def test_mismatched_row_appends_nothing(self):
        builder = MessageBuilder.create().add_header("Before")

        with pytest.raises(MalformedTableError, match="Row 1 has 1 cells, expected 2"):
            builder.add_table(["A", "B"], [["1", "2"], ["3"]])

        message = builder.build()
        assert block_types(message) == [BlockType.HEADER]

    def test_blank_cell_appends_nothing(self):
        builder = MessageBuilder.create().add_divider()

        with pytest.raises(MalformedTableError, match="cannot be empty"):
            builder.add_table(["A"], [[""]])

        assert block_types(builder.build()) == [BlockType.DIVIDER]

    def test_empty_headers_rejected(self):
        with pytest.raises(MalformedTableError):
            MessageBuilder.create().add_table([], [])

    def test_too_many_columns_rejected(self):
        headers = [f"c{i}" for i in range(11)]
        with pytest.raises(MalformedTableError):
            MessageBuilder.create().add_table(headers, [])


# Single use

class TestBuilderConsumed:
    def test_second_build_raises(self):
        builder = MessageBuilder.create()
        builder.build()
        with pytest.raises(BuilderConsumedError):
            builder.build()

    def test_mutation_after_build_raises(self):
        builder = MessageBuilder.create().add_divider()
        message = builder.build()

        with pytest.raises(BuilderConsumedError):
            builder.add_section("late")
        with pytest.raises(BuilderConsumedError):
            builder.text("late")
        with pytest.raises(BuilderConsumedError):
            builder.add_table(["A"], [["1"]])

        assert len(message.blocks) == 1
