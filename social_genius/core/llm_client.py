"""LLM client wrapper for Vertex AI integration.

This module provides a clean abstraction over the chat model used for post
generation, handling error cases, logging and token usage extraction.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

from .interfaces import LLMError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TIMEOUT_SECONDS = 60


@dataclass
class LLMResponse:
    """Text and token usage of a single model call."""

    text: str
    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


def _extract_usage(response_obj: Any) -> tuple[int, int]:
    # LangChain AIMessage exposes usage_metadata={"input_tokens": .., "output_tokens": ..}
    usage = getattr(response_obj, "usage_metadata", None) or {}
    return int(usage.get("input_tokens", 0) or 0), int(usage.get("output_tokens", 0) or 0)


class LLMClient:
    """Chat model wrapper.

    Wraps any object exposing ``async ainvoke(messages)`` - a LangChain
    ``BaseChatModel`` from ``config.get_model()`` in production, or
    ``MockChatModel`` in tests.

    Example:
        >>> from social_genius.core.mocks import MockChatModel
        >>> llm = LLMClient(MockChatModel())
        >>> text = await llm.chat([{"role": "user", "content": "Hello"}])
    """

    def __init__(
        self,
        chat_model: Any,
        model: str = DEFAULT_MODEL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.client = chat_model
        self.model = model
        self.timeout_seconds = timeout_seconds

    async def chat(self, messages: list[dict[str, str]]) -> str:
        """Call the LLM and return the response text.

        Raises:
            LLMError: If the API call fails
        """
        response = await self.chat_with_usage(messages)
        return response.text

    async def chat_with_usage(self, messages: list[dict[str, str]]) -> LLMResponse:
        """Call the LLM with conversation context.

        Args:
            messages: Conversation [{"role": "system"|"user", "content": "..."}]
                      in chronological order

        Returns:
            LLMResponse with text and token counts (0 when the model reports none)

        Raises:
            LLMError: If the API call fails (timeout, rate limit, credentials, ...)
        """
        logger.info(
            "Calling LLM",
            extra={
                "component": "llm_client",
                "model": self.model,
                "message_count": len(messages),
                "last_role": messages[-1]["role"] if messages else None,
            },
        )

        try:
            response_obj = await asyncio.wait_for(
                self.client.ainvoke(messages), timeout=self.timeout_seconds
            )
        except (asyncio.TimeoutError, TimeoutError) as e:
            error_msg = f"LLM call timeout after {self.timeout_seconds}s: {e}"
            logger.error(
                error_msg,
                extra={"component": "llm_client", "model": self.model, "error_type": "timeout"},
            )
            raise LLMError(error_msg) from e
        except Exception as e:
            error_msg = f"LLM call failed: {e}"
            logger.error(
                error_msg,
                extra={
                    "component": "llm_client",
                    "model": self.model,
                    "error_type": type(e).__name__,
                    "error": str(e),
                },
            )
            raise LLMError(error_msg) from e

        # ChatVertexAI returns AIMessage with .content; simple mocks may return str
        if hasattr(response_obj, "content"):
            text = response_obj.content
        else:
            text = str(response_obj)
        if not isinstance(text, str):
            # Multimodal content blocks: keep the text parts
            text = "".join(
                block.get("text", "") if isinstance(block, dict) else str(block) for block in text
            )

        input_tokens, output_tokens = _extract_usage(response_obj)

        logger.info(
            "LLM response received",
            extra={
                "component": "llm_client",
                "model": self.model,
                "response_length": len(text),
                "input_tokens": input_tokens,
                "output_tokens": output_tokens,
            },
        )

        return LLMResponse(text=text, input_tokens=input_tokens, output_tokens=output_tokens)
