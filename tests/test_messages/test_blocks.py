"""Tests for the Block Kit document model (blocks.py)."""

import json

import pytest

from slack_reports.exceptions import InvalidBlockError
from slack_reports.messages.blocks import (
    Block,
    BlockType,
    Button,
    ButtonStyle,
    Message,
    TextObject,
    TextType,
)


# TextObject

class TestTextObject:
    def test_plain_includes_emoji(self):
        assert TextObject.plain("Hi").to_dict() == {
            "type": "plain_text", "text": "Hi", "emoji": True,
        }

    def test_markdown_has_no_emoji_key(self):
        assert TextObject.markdown("*Hi*").to_dict() == {"type": "mrkdwn", "text": "*Hi*"}

    def test_verbatim_only_when_set(self):
        text = TextObject(TextType.MARKDOWN, "<#C1>", verbatim=True)
        assert text.to_dict()["verbatim"] is True


# Button

class TestButton:
    def test_default_style_not_serialized(self):
        button = Button.create("Ack", url="https://ack.example.com", style=ButtonStyle.DEFAULT)
        assert "style" not in button.to_dict()

    def test_string_style_is_coerced(self):
        button = Button.create("Go", url="https://x.example.com", style="Primary")
        assert button.style == ButtonStyle.PRIMARY
        assert button.to_dict() == {
            "type": "button",
            "text": {"type": "plain_text", "text": "Go", "emoji": True},
            "url": "https://x.example.com",
            "style": "primary",
        }

    def test_unknown_style_rejected(self):
        with pytest.raises(InvalidBlockError, match="Unknown button style"):
            Button.create("Go", url="https://x.example.com", style="loud")

    def test_needs_url_or_action_id(self):
        with pytest.raises(InvalidBlockError):
            Button.create("Go")

    def test_action_id_without_url(self):
        data = Button.create("Approve", action_id="approve", value="42").to_dict()
        assert data["action_id"] == "approve"
        assert data["value"] == "42"
        assert "url" not in data

    def test_empty_label_rejected(self):
        with pytest.raises(InvalidBlockError):
            Button.create("", url="https://x.example.com")


# Block

class TestBlock:
    def test_header(self):
        assert Block.header("Title").to_dict() == {
            "type": "header",
            "text": {"type": "plain_text", "text": "Title", "emoji": True},
        }

    def test_empty_header_rejected(self):
        with pytest.raises(InvalidBlockError):
            Block.header("  ")

    def test_section_markdown_and_plain(self):
        assert Block.section("*x*").text.type == TextType.MARKDOWN
        assert Block.section("x", markdown=False).text.type == TextType.PLAIN

    def test_divider_has_only_type(self):
        assert Block.divider().to_dict() == {"type": "divider"}

    def test_fields_section(self):
        data = Block.fields_section(["a", "b"]).to_dict()
        assert data == {
            "type": "section",
            "fields": [{"type": "mrkdwn", "text": "a"}, {"type": "mrkdwn", "text": "b"}],
        }

    def test_section_field_limit(self):
        Block.fields_section([str(i) for i in range(10)])
        with pytest.raises(InvalidBlockError, match="at most 10"):
            Block.fields_section([str(i) for i in range(11)])

    def test_empty_section_rejected(self):
        with pytest.raises(InvalidBlockError):
            Block(BlockType.SECTION)

    def test_header_without_text_rejected(self):
        with pytest.raises(InvalidBlockError, match="Header block needs text"):
            Block(BlockType.HEADER)

    def test_blank_field_rejected(self):
        with pytest.raises(InvalidBlockError, match="Section field text cannot be empty"):
            Block.fields_section(["ok", ""])

    def test_blank_context_element_rejected(self):
        with pytest.raises(InvalidBlockError, match="Context element text cannot be empty"):
            Block.context(["ok", "  "])

    def test_blank_text_object_rejected_on_custom_block(self):
        with pytest.raises(InvalidBlockError, match="Section text cannot be empty"):
            Block(BlockType.SECTION, text=TextObject.markdown(""))

    def test_divider_rejects_content(self):
        with pytest.raises(InvalidBlockError, match="Divider"):
            Block(BlockType.DIVIDER, text=TextObject.plain("x"))

    def test_empty_context_and_actions_rejected(self):
        with pytest.raises(InvalidBlockError):
            Block.context([])
        with pytest.raises(InvalidBlockError):
            Block.actions([])

    def test_context_keeps_element_order(self):
        data = Block.context(["one", "two", "three"]).to_dict()
        assert [e["text"] for e in data["elements"]] == ["one", "two", "three"]

    def test_block_id_and_accessory(self):
        block = Block(
            BlockType.SECTION,
            text=TextObject.markdown("Open the runbook"),
            block_id="runbook",
            accessory=Button.create("Open", url="https://runbook.example.com"),
        )
        data = block.to_dict()
        assert data["block_id"] == "runbook"
        assert data["accessory"]["type"] == "button"


# Message

class TestMessage:
    def test_to_dict_omits_unset_fields(self):
        message = Message(blocks=(Block.divider(),))
        assert message.to_dict() == {"blocks": [{"type": "divider"}]}

    def test_with_channel_returns_copy(self):
        original = Message(channel="C1", blocks=(Block.divider(),))
        moved = original.with_channel("C2")
        assert moved.channel == "C2"
        assert original.channel == "C1"
        assert moved.blocks == original.blocks

    def test_payload_falls_back_to_default_text(self):
        payload = Message(channel="C1").to_payload("Automated Notification")
        assert payload == {"channel": "C1", "text": "Automated Notification", "blocks": []}

    def test_payload_includes_thread_ts(self):
        payload = Message(channel="C1", text="hi", thread_ts="123.456").to_payload("fallback")
        assert payload["text"] == "hi"
        assert payload["thread_ts"] == "123.456"

    def test_to_json_is_stable(self):
        message = Message(
            channel="C1",
            text="Ünïcödé ✅",
            blocks=(Block.header("🚀 Release"), Block.section("*done*")),
        )
        assert message.to_json() == message.to_json()
        assert json.loads(message.to_json()) == message.to_dict()
        assert "✅" in message.to_json()

    def test_message_is_immutable(self):
        message = Message(channel="C1")
        with pytest.raises(AttributeError):
            message.channel = "C2"
