"""Mock implementations for development and testing.

Lets the post generator and the gateway run without Vertex AI credentials.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class MockAIMessage:
    """Mimics the parts of LangChain's AIMessage the LLM client reads."""

    content: str
    usage_metadata: dict[str, int] = field(default_factory=dict)


class MockChatModel:
    """Mock chat model returning a canned post as JSON.

    Returns canned responses without real API calls. Useful for:
        - Unit testing without API costs
        - Fast test execution (no network calls)
        - Predictable responses for testing

    Args:
        response: Raw text to return instead of the canned JSON post
        error: Exception to raise from ainvoke
    """

    def __init__(self, response: str | None = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[list[dict[str, str]]] = []

    async def ainvoke(self, messages: list[dict[str, str]]) -> MockAIMessage:
        self.calls.append(messages)
        logger.info("[MOCK] Chat model invoked", extra={"message_count": len(messages)})

        if self.error is not None:
            raise self.error

        if self.response is not None:
            return MockAIMessage(content=self.response)

        topic = messages[-1]["content"] if messages else ""
        post: dict[str, Any] = {
            "content": "Small habits compound. Here's how to start today.",
            "hashtags": ["#Habits", "#Growth", "#Mindset"],
            "imagePrompt": "Sunrise over a desk with a notebook, warm light",
            "videoPrompt": "Time-lapse of a morning routine, vertical framing",
            "metadata": {
                "estimatedEngagement": "high",
                "contentType": "educational",
                "targetAudience": "Young professionals",
            },
        }
        text = f"Here is your post:\n```json\n{json.dumps(post, indent=2)}\n```"
        return MockAIMessage(
            content=text,
            usage_metadata={"input_tokens": len(topic) // 4, "output_tokens": len(text) // 4},
        )
