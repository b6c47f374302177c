"""
Core types for the swarm loop.

These are the data structures that flow through a run: the agent being
driven, the tools it exposes, and the messages that make up the transcript.
They are intentionally plain dataclasses - the transcript is just a list.
"""

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Role(str, Enum):
    """Message roles in the conversation."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


@dataclass
class FunctionCall:
    """The function part of a tool call: which tool, with which arguments."""
    name: str
    arguments: dict[str, Any] = field(default_factory=dict)


@dataclass
class ToolCall:
    """
    A request from the model to execute a tool.

    Arguments keep the order in which the model emitted them. That order
    only matters for tools using the positional calling convention.
    """
    id: str
    function: FunctionCall
    type: str = "function"

    @property
    def name(self) -> str:
        return self.function.name

    @property
    def arguments(self) -> dict[str, Any]:
        return self.function.arguments

    def to_dict(self) -> dict[str, Any]:
        """Convert to OpenAI API format (arguments as a JSON string)."""
        return {
            "id": self.id,
            "type": self.type,
            "function": {
                "name": self.function.name,
                "arguments": json.dumps(self.function.arguments),
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ToolCall":
        """Create from OpenAI API format."""
        function = data["function"]
        raw_arguments = function.get("arguments") or {}
        if isinstance(raw_arguments, str):
            try:
                arguments = json.loads(raw_arguments) if raw_arguments.strip() else {}
            except json.JSONDecodeError:
                arguments = {"raw": raw_arguments}
        else:
            arguments = dict(raw_arguments)
        if not isinstance(arguments, dict):
            arguments = {"raw": arguments}

        return cls(
            id=data.get("id", ""),
            type=data.get("type", "function"),
            function=FunctionCall(name=function["name"], arguments=arguments),
        )


@dataclass
class Message:
    """
    A single message in the transcript.

    For tool messages, content holds whatever the tool returned (possibly
    None when no tool matched). It is only stringified when the message is
    sent back to the API.
    """
    role: Role
    content: Any = None
    name: str | None = None
    tool_call_id: str | None = None
    tool_calls: list[ToolCall] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to OpenAI API format."""
        result: dict[str, Any] = {
            "role": self.role.value,
            "content": _wire_content(self.content),
        }
        if self.name is not None:
            result["name"] = self.name
        if self.tool_call_id is not None:
            result["tool_call_id"] = self.tool_call_id
        if self.tool_calls:
            result["tool_calls"] = [tc.to_dict() for tc in self.tool_calls]
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Message":
        """Create from OpenAI API format."""
        raw_calls = data.get("tool_calls")
        return cls(
            role=Role(data["role"]),
            content=data.get("content"),
            name=data.get("name"),
            tool_call_id=data.get("tool_call_id"),
            tool_calls=[ToolCall.from_dict(tc) for tc in raw_calls] if raw_calls else None,
        )

    @property
    def has_tool_calls(self) -> bool:
        return bool(self.tool_calls)


def _wire_content(content: Any) -> str | None:
    if content is None or isinstance(content, str):
        return content
    try:
        return json.dumps(content)
    except (TypeError, ValueError):
        return str(content)


@dataclass
class Tool:
    """
    A named capability the model may request.

    fn receives the run's context variables first, then the call
    arguments. By default arguments are bound by keyword. Tools created
    with positional=True get the argument values positionally, in the
    order the model listed them; the caller is then responsible for making
    that order match the function's parameters.
    """
    name: str
    fn: Callable[..., Any]
    description: str = ""
    parameters: dict[str, Any] = field(
        default_factory=lambda: {"type": "object", "properties": {}}
    )
    positional: bool = False

    def to_openai_schema(self) -> dict[str, Any]:
        """Convert to OpenAI tool format."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }

    @classmethod
    def from_function(
        cls,
        fn: Callable[..., Any],
        name: str | None = None,
        description: str | None = None,
    ) -> "Tool":
        """Build a tool whose schema is derived from fn's signature."""
        from swarmloop.tools import function_parameters

        if description is None:
            doc = (fn.__doc__ or "").strip()
            description = doc.splitlines()[0] if doc else ""
        return cls(
            name=name or fn.__name__,
            fn=fn,
            description=description,
            parameters=function_parameters(fn),
        )


@dataclass
class Agent:
    """
    A named configuration bundle: instructions, model and tools.

    The agent is owned by the caller. The runner only reads it.
    """
    name: str
    instructions: str = ""
    model: str | None = None
    tools: list[Tool] = field(default_factory=list)


@dataclass
class RunResult:
    """What a run hands back: the final agent and the transcript."""
    agent: Agent
    messages: list[Message]
