"""
Tests for the wire format of messages and tool calls.
"""

import json

from swarmloop.types import Agent, FunctionCall, Message, Role, ToolCall


class TestToolCall:
    """Tool call parsing from the OpenAI format."""

    def test_json_string_arguments_keep_order(self):
        tool_call = ToolCall.from_dict({
            "id": "call_1",
            "type": "function",
            "function": {"name": "move", "arguments": "{\"to\": \"b\", \"from\": \"a\"}"},
        })

        assert list(tool_call.arguments) == ["to", "from"]
        assert tool_call.name == "move"

    def test_undecodable_arguments_kept_raw(self):
        tool_call = ToolCall.from_dict({
            "id": "call_1",
            "function": {"name": "move", "arguments": "not json"},
        })

        assert tool_call.arguments == {"raw": "not json"}

    def test_empty_arguments(self):
        tool_call = ToolCall.from_dict({"id": "c", "function": {"name": "ping", "arguments": ""}})
        assert tool_call.arguments == {}

    def test_to_dict_encodes_arguments(self):
        tool_call = ToolCall(id="c", function=FunctionCall(name="echo", arguments={"x": "hi"}))

        data = tool_call.to_dict()

        assert data["type"] == "function"
        assert json.loads(data["function"]["arguments"]) == {"x": "hi"}


class TestMessage:
    """Message conversion to the API format."""

    def test_assistant_with_tool_calls_round_trips(self):
        message = Message(
            role=Role.ASSISTANT,
            content=None,
            tool_calls=[ToolCall(id="c", function=FunctionCall(name="echo", arguments={"x": 1}))],
        )

        assert Message.from_dict(message.to_dict()) == message

    def test_tool_result_serialized_only_on_the_wire(self):
        message = Message(role=Role.TOOL, content={"temp": 21}, tool_call_id="c")

        data = message.to_dict()

        assert message.content == {"temp": 21}
        assert json.loads(data["content"]) == {"temp": 21}
        assert data["tool_call_id"] == "c"

    def test_none_content_stays_none(self):
        assert Message(role=Role.TOOL, content=None).to_dict()["content"] is None

    def test_unserializable_result_falls_back_to_str(self):
        marker = object()
        assert Message(role=Role.TOOL, content=marker).to_dict()["content"] == str(marker)


class TestAgent:
    def test_defaults(self):
        agent = Agent(name="helper")
        assert agent.model is None
        assert agent.tools == []
        assert agent.instructions == ""
