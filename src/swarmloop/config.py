"""
Configuration for the swarm loop.

All configuration is loaded from environment variables. Any
OpenAI-compatible endpoint works; DeepSeek is only the default.
"""

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.deepseek.com/v1"
DEFAULT_MODEL = "deepseek-chat"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class LLMConfig:
    """Configuration for the chat-completion client."""
    base_url: str = DEFAULT_BASE_URL
    api_key: str = ""
    default_model: str = DEFAULT_MODEL
    timeout: float | None = None

    @classmethod
    def from_env(cls) -> "LLMConfig":
        """Load configuration from environment variables."""
        timeout = os.getenv("SWARM_TIMEOUT")
        return cls(
            base_url=os.getenv("SWARM_BASE_URL", DEFAULT_BASE_URL),
            api_key=os.getenv("SWARM_API_KEY", ""),
            default_model=os.getenv("SWARM_DEFAULT_MODEL", DEFAULT_MODEL),
            timeout=float(timeout) if timeout else None,
        )


@dataclass
class RunConfig:
    """
    Defaults for a run.

    max_turns of None means the loop only stops when the model stops
    asking for tools.
    """
    max_turns: int | None = None
    debug: bool = False

    @classmethod
    def from_env(cls) -> "RunConfig":
        """Load configuration from environment variables."""
        max_turns = os.getenv("SWARM_MAX_TURNS")
        return cls(
            max_turns=int(max_turns) if max_turns else None,
            debug=os.getenv("SWARM_DEBUG", "false").strip().lower() in _TRUTHY,
        )
