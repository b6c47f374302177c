"""
Runner - the turn loop.

Each turn sends the agent's instructions plus the transcript to the model,
appends the reply, and if the reply asks for tools, dispatches every call
and appends the results. The loop ends when a reply asks for no tools or
the turn budget runs out.

The transcript passed to run() is extended in place. The list in the
returned RunResult is that same object, so a caller holding the original
reference sees every appended message, including those appended before a
failure propagated.
"""

import logging
import math
import threading
from collections.abc import Callable
from typing import Any

from swarmloop.config import RunConfig
from swarmloop.llm import LLMClient
from swarmloop.tools import ToolDispatcher
from swarmloop.types import Agent, Message, Role, RunResult

logger = logging.getLogger(__name__)


class Runner:
    """
    Drives one agent through repeated chat turns.

    There is no handoff: the agent returned is always the agent passed in.
    """

    def __init__(
        self,
        client: LLMClient | None = None,
        config: RunConfig | None = None,
        dispatcher: ToolDispatcher | None = None,
        observer: Callable[[str], None] = print,
    ) -> None:
        self.client = client or LLMClient()
        self.config = config or RunConfig.from_env()
        self.dispatcher = dispatcher or ToolDispatcher()
        self.observer = observer

    def run(
        self,
        agent: Agent,
        messages: list[Message],
        context_variables: dict[str, Any] | None = None,
        max_turns: int | None = None,
        debug: bool | None = None,
        cancel_event: threading.Event | None = None,
    ) -> RunResult:
        """
        Run the turn loop until the model stops requesting tools.

        Args:
            agent: The agent to drive
            messages: Prior conversation, without the system prompt. Mutated
                in place.
            context_variables: Passed as the same object to every tool call
            max_turns: Upper bound on turns; None falls back to the
                configured default, which may itself be unbounded
            debug: Emit "<agent>: <content>" per assistant turn
            cancel_event: When set, no further turn is started

        Returns:
            RunResult with the agent and the (same) transcript list
        """
        if context_variables is None:
            context_variables = {}
        if max_turns is None:
            max_turns = self.config.max_turns
        limit: float = math.inf if max_turns is None else max_turns
        if limit < 0:
            raise ValueError(f"max_turns must be non-negative, got {max_turns}")
        if debug is None:
            debug = self.config.debug

        current_agent = agent
        num_turns = 0

        while num_turns < limit:
            if cancel_event is not None and cancel_event.is_set():
                logger.info(f"Run cancelled before turn {num_turns + 1}")
                break

            logger.info(f"Turn {num_turns + 1} for agent {current_agent.name}")
            outgoing = [Message(role=Role.SYSTEM, content=current_agent.instructions), *messages]
            tool_schemas = [t.to_openai_schema() for t in current_agent.tools] or None
            response = self.client.chat(
                outgoing,
                model=current_agent.model or self.client.default_model,
                tools=tool_schemas,
            )

            message = response.message
            messages.append(message)

            if debug:
                self.observer(f"{current_agent.name}: {message.content}")

            if message.tool_calls and current_agent.tools:
                for tool_call in message.tool_calls:
                    result = self.dispatcher.dispatch(tool_call, current_agent.tools, context_variables)
                    messages.append(Message(
                        role=Role.TOOL,
                        content=result,
                        name=tool_call.function.name,
                        tool_call_id=tool_call.id,
                    ))

            if not message.tool_calls or num_turns >= limit:
                break

            num_turns += 1

        return RunResult(agent=current_agent, messages=messages)

    def close(self) -> None:
        """Close the underlying client."""
        self.client.close()

    def __enter__(self) -> "Runner":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
