"""
LLM Client - the chat-completion collaborator.

Works with any OpenAI-compatible API (DeepSeek, OpenAI, vLLM, Ollama).
Authentication and base URL are fixed at construction; each call sends a
model identifier and a message list and returns one assistant message.

There is no retry logic here: a failed request surfaces as
LLMError and the caller decides what to do.
"""

import logging
from typing import Any

import httpx

from swarmloop.config import LLMConfig
from swarmloop.types import Message, Role

logger = logging.getLogger(__name__)


class LLMError(Exception):
    """Error from the LLM client."""
    pass


class LLMClient:
    """
    Synchronous client for OpenAI-compatible chat completion APIs.

    No timeout is applied unless one is configured.
    """

    def __init__(
        self,
        config: LLMConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client with configuration.

        Args:
            config: Endpoint configuration (base URL, API key, default model)
            transport: Optional httpx transport, mainly for tests
        """
        self.config = config or LLMConfig.from_env()
        self._client = httpx.Client(
            base_url=self.config.base_url,
            headers={
                "Authorization": f"Bearer {self.config.api_key}",
                "Content-Type": "application/json",
            },
            timeout=self.config.timeout,
            transport=transport,
        )

    @property
    def default_model(self) -> str:
        return self.config.default_model

    def chat(
        self,
        messages: list[Message],
        model: str | None = None,
        tools: list[dict[str, Any]] | None = None,
    ) -> "ChatResponse":
        """
        Send a chat completion request.

        Args:
            messages: The full outgoing message list, system prompt included
            model: Model identifier, defaults to the configured one
            tools: Optional list of tool definitions

        Returns:
            ChatResponse wrapping the assistant message

        Raises:
            LLMError: On transport failure, error status or malformed body
        """
        payload: dict[str, Any] = {
            "model": model or self.default_model,
            "messages": [m.to_dict() for m in messages],
        }
        if tools:
            payload["tools"] = tools

        logger.debug(f"Sending chat request with {len(messages)} messages to {payload['model']}")

        try:
            response = self._client.post("/chat/completions", json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error: {e.response.status_code} - {e.response.text}")
            raise LLMError(f"HTTP {e.response.status_code}: {e.response.text}") from e
        except httpx.RequestError as e:
            raise LLMError(f"Request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise LLMError(f"Response is not JSON: {response.text[:200]}") from e

        return ChatResponse.from_api_response(data)

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "LLMClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class ChatResponse:
    """
    Response from a chat completion request.

    Wraps the raw body and exposes the first choice as a Message.
    """

    def __init__(
        self,
        message: Message,
        finish_reason: str | None = None,
        raw_response: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.finish_reason = finish_reason
        self.raw_response = raw_response or {}

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "ChatResponse":
        """Parse an API response into a ChatResponse."""
        try:
            choice = data["choices"][0]
            raw_message = dict(choice["message"])
        except (KeyError, IndexError, TypeError) as e:
            raise LLMError(f"Malformed response structure: {data}") from e

        raw_message.setdefault("role", Role.ASSISTANT.value)
        try:
            message = Message.from_dict(raw_message)
        except (KeyError, ValueError, TypeError) as e:
            raise LLMError(f"Malformed message in response: {raw_message}") from e

        return cls(
            message=message,
            finish_reason=choice.get("finish_reason"),
            raw_response=data,
        )

    @property
    def content(self) -> Any:
        return self.message.content

    @property
    def has_tool_calls(self) -> bool:
        """Check if the response includes tool calls."""
        return self.message.has_tool_calls
