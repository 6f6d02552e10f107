"""
OpenAI chat-completion provider.

Sends a message history plus tool declarations to a chat model and returns
the assistant message together with its token usage. Also runs single-prompt
JSON-mode turns used for reranking.

Dependencies: langchain_openai, langchain_core, pydantic
System role: Chat completion for the conversation orchestrator
"""

import logging
from collections.abc import Sequence
from typing import Any, Literal

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage
from langchain_openai import ChatOpenAI
from pydantic import BaseModel, ConfigDict, Field, SecretStr

from docs_qa.boundary.llm.credentials import require_api_key
from docs_qa.core.exceptions import ChatProviderError

logger = logging.getLogger(__name__)

ToolChoice = Literal["auto", "none"]


class TokenUsage(BaseModel):
    """Token usage reported for one model turn."""

    prompt_tokens: int = Field(default=0, ge=0)
    completion_tokens: int = Field(default=0, ge=0)

    @classmethod
    def from_message(cls, message: AIMessage) -> "TokenUsage":
        """Read usage from a message's ``usage_metadata`` (zeros when absent)."""
        usage = message.usage_metadata or {}
        return cls(
            prompt_tokens=usage.get("input_tokens", 0) or 0,
            completion_tokens=usage.get("output_tokens", 0) or 0,
        )


class ChatCompletion(BaseModel):
    """Assistant message and usage for one model turn."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    message: AIMessage
    usage: TokenUsage = Field(default_factory=TokenUsage)


class OpenAIChatProvider:
    """Async chat completion through langchain's ChatOpenAI."""

    def __init__(self, api_key: SecretStr | None, base_url: str | None = None) -> None:
        """
        Initialize chat provider.

        Args:
            api_key: OpenAI API key
            base_url: Optional API base URL override
        """
        self._api_key = api_key
        self._base_url = base_url

    async def chat(
        self,
        messages: Sequence[BaseMessage],
        tools: Sequence[Any],
        tool_choice: ToolChoice,
        model: str,
        max_tokens: int,
        temperature: float,
    ) -> ChatCompletion:
        """
        Run one model turn.

        Args:
            messages: Full conversation history
            tools: Tool declarations the model may call
            tool_choice: "auto" to allow tool calls, "none" to force text
            model: Chat model identifier
            max_tokens: Output token cap
            temperature: Sampling temperature

        Returns:
            ChatCompletion: Assistant message and usage

        Raises:
            ConfigurationError: If the API key is missing (no call is made)
            ChatProviderError: If the provider call fails
        """
        api_key = require_api_key(self._api_key)

        llm = ChatOpenAI(
            model=model,
            api_key=api_key,
            base_url=self._base_url,
            max_tokens=max_tokens,
            temperature=temperature,
        )
        runnable = llm.bind_tools(list(tools), tool_choice=tool_choice) if tools else llm

        logger.info(
            f"{__name__}:chat - START model={model}, messages={len(messages)}, tool_choice={tool_choice}"
        )
        try:
            message = await runnable.ainvoke(list(messages))
        except Exception as e:
            logger.error(f"{__name__}:chat - FAILED: {type(e).__name__}: {e}")
            raise ChatProviderError(
                f"Chat completion failed: {e}",
                operation="chat",
                details={"model": model},
            ) from e

        if not isinstance(message, AIMessage):
            raise ChatProviderError(
                "Chat completion returned no assistant message",
                operation="chat",
                details={"model": model},
            )

        usage = TokenUsage.from_message(message)
        logger.info(
            f"{__name__}:chat - END tool_calls={len(message.tool_calls)}, "
            f"prompt_tokens={usage.prompt_tokens}, completion_tokens={usage.completion_tokens}"
        )
        return ChatCompletion(message=message, usage=usage)

    async def complete_json(self, prompt: str, model: str, temperature: float = 0.0) -> ChatCompletion:
        """
        Run one single-prompt turn in JSON mode.

        Args:
            prompt: User prompt; must ask for a JSON object
            model: Chat model identifier
            temperature: Sampling temperature

        Returns:
            ChatCompletion: Assistant message (JSON text) and usage

        Raises:
            ConfigurationError: If the API key is missing (no call is made)
            ChatProviderError: If the provider call fails
        """
        api_key = require_api_key(self._api_key)

        llm = ChatOpenAI(
            model=model,
            api_key=api_key,
            base_url=self._base_url,
            temperature=temperature,
        )
        runnable = llm.bind(response_format={"type": "json_object"})

        logger.info(f"{__name__}:complete_json - START model={model}, prompt_len={len(prompt)}")
        try:
            message = await runnable.ainvoke([HumanMessage(content=prompt)])
        except Exception as e:
            logger.error(f"{__name__}:complete_json - FAILED: {type(e).__name__}: {e}")
            raise ChatProviderError(
                f"Chat completion failed: {e}",
                operation="complete_json",
                details={"model": model},
            ) from e

        if not isinstance(message, AIMessage):
            raise ChatProviderError(
                "Chat completion returned no assistant message",
                operation="complete_json",
                details={"model": model},
            )

        usage = TokenUsage.from_message(message)
        logger.info(
            f"{__name__}:complete_json - END prompt_tokens={usage.prompt_tokens}, "
            f"completion_tokens={usage.completion_tokens}"
        )
        return ChatCompletion(message=message, usage=usage)
