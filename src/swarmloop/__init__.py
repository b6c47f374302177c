"""
swarmloop - a minimal turn loop around an OpenAI-compatible chat endpoint.

A Runner sends an Agent's instructions and the transcript to the model,
appends the reply, runs any requested tools, and repeats until the model
answers without tool calls or the turn budget is spent.
"""

__version__ = "0.1.0"

from swarmloop.config import LLMConfig, RunConfig
from swarmloop.llm import ChatResponse, LLMClient, LLMError
from swarmloop.runner import Runner
from swarmloop.tools import ToolDispatcher
from swarmloop.types import (
    Agent,
    FunctionCall,
    Message,
    Role,
    RunResult,
    Tool,
    ToolCall,
)

__all__ = [
    "Agent",
    "ChatResponse",
    "FunctionCall",
    "LLMClient",
    "LLMConfig",
    "LLMError",
    "Message",
    "Role",
    "RunConfig",
    "RunResult",
    "Runner",
    "Tool",
    "ToolCall",
    "ToolDispatcher",
]
