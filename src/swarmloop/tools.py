"""
Tool dispatch - turning a model's tool call into a function call.

The dispatcher looks a requested tool up by name among the active agent's
tools and invokes it with the run's context variables plus the call
arguments. An unknown name is not an error: it yields None. Exceptions
raised by the tool body are not caught.
"""

import inspect
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from swarmloop.types import Tool, ToolCall

logger = logging.getLogger(__name__)

_JSON_TYPES: dict[Any, str] = {
    str: "string",
    int: "integer",
    float: "number",
    bool: "boolean",
    list: "array",
    dict: "object",
}


class ToolDispatcher:
    """Locates the tool named by a call and invokes it."""

    def find(self, name: str, available_tools: Iterable[Tool]) -> Tool | None:
        """Return the first tool called name, or None."""
        for tool in available_tools:
            if tool.name == name:
                return tool
        return None

    def dispatch(
        self,
        tool_call: ToolCall,
        available_tools: Iterable[Tool],
        context_variables: Mapping[str, Any],
    ) -> Any:
        """
        Execute a tool call against the available tools.

        Returns whatever the tool returns, or None if no tool matches.
        """
        tool = self.find(tool_call.function.name, available_tools)
        if tool is None:
            logger.warning(f"No tool named '{tool_call.function.name}', skipping call {tool_call.id}")
            return None

        arguments = tool_call.function.arguments
        logger.info(f"Executing tool: {tool.name}")
        if tool.positional:
            return tool.fn(context_variables, *arguments.values())
        return tool.fn(context_variables, **arguments)


def function_parameters(fn: Callable[..., Any]) -> dict[str, Any]:
    """
    Build a JSON schema for fn's parameters.

    The first parameter receives the context variables and is not part of
    the schema. Parameters without a default are required.
    """
    params = list(inspect.signature(fn).parameters.values())[1:]
    properties: dict[str, Any] = {}
    required: list[str] = []
    for param in params:
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        json_type = _JSON_TYPES.get(param.annotation, "string")
        properties[param.name] = {"type": json_type}
        if param.default is param.empty:
            required.append(param.name)

    schema: dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema
