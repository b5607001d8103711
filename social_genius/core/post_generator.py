"""
Generate social media posts optimized for a platform.

Orchestrates one generation:
1. Build system + user prompts from the platform spec
2. Call the LLM
3. Parse the JSON post out of the response
4. Validate against platform limits, truncating hashtag overflow
5. Return a structured result with usage and cost
"""

import json
import logging
import re
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .interfaces import GenerationError, UnknownPlatformError
from .llm_client import LLMClient
from .media import ImagePlan, VideoPlan, plan_image, plan_video
from .platform_specs import get_platform_spec
from .prompt import PostRequest, build_system_prompt, build_user_prompt
from .validators import ValidationResult, validate_hashtags, validate_post

logger = logging.getLogger(__name__)

# Gemini Flash pricing, USD per token
COST_PER_INPUT_TOKEN = 0.075 / 1_000_000
COST_PER_OUTPUT_TOKEN = 0.30 / 1_000_000

_JSON_BLOCK = re.compile(r"\{.*\}", re.DOTALL)


@dataclass
class TokenUsage:
    prompt_tokens: int = 0
    completion_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return self.prompt_tokens + self.completion_tokens

    @property
    def estimated_cost_usd(self) -> float:
        return (
            self.prompt_tokens * COST_PER_INPUT_TOKEN
            + self.completion_tokens * COST_PER_OUTPUT_TOKEN
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalTokens": self.total_tokens,
            "promptTokens": self.prompt_tokens,
            "completionTokens": self.completion_tokens,
            "estimatedCostUSD": f"{self.estimated_cost_usd:.6f}",
        }


@dataclass
class GeneratedPost:
    """Generated post content plus validation and usage."""

    platform: str
    content: str
    hashtags: List[str]
    metadata: Dict[str, Any]
    validation: ValidationResult
    usage: TokenUsage = field(default_factory=TokenUsage)
    generation_time_ms: int = 0
    image_prompt: Optional[str] = None
    video_prompt: Optional[str] = None
    image_plan: Optional[ImagePlan] = None
    video_plan: Optional[VideoPlan] = None

    def to_dict(self) -> Dict[str, Any]:
        post: Dict[str, Any] = {
            "content": self.content,
            "hashtags": list(self.hashtags),
            "metadata": dict(self.metadata),
        }
        if self.image_prompt is not None:
            post["imagePrompt"] = self.image_prompt
        if self.video_prompt is not None:
            post["videoPrompt"] = self.video_prompt
        if self.image_plan is not None:
            post["imageSettings"] = self.image_plan.to_dict()
        if self.video_plan is not None:
            post["videoSettings"] = self.video_plan.to_dict()

        return {
            "platform": self.platform,
            "post": post,
            "validation": self.validation.to_dict(),
            "usage": self.usage.to_dict(),
            "generationTimeMs": self.generation_time_ms,
        }


def parse_generated_post(text: str) -> Dict[str, Any]:
    """
    Extract the JSON post object from model output.

    Takes everything from the first ``{`` to the last ``}`` so fenced code
    blocks and surrounding prose are tolerated.

    Raises:
        GenerationError: If no JSON object is present or it does not parse
    """
    match = _JSON_BLOCK.search(text)
    if not match:
        raise GenerationError("No JSON found in response", raw_output=text)

    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise GenerationError(f"Failed to parse AI response: {e}", raw_output=text) from e

    if not isinstance(parsed, dict):
        raise GenerationError("AI response JSON is not an object", raw_output=text)
    return parsed


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value]


class PostGenerator:
    """Generates and validates posts through an LLM client.

    Example:
        >>> generator = PostGenerator(LLMClient(MockChatModel()))
        >>> post = await generator.generate(PostRequest("instagram", "educational", "habits"))
        >>> post.validation.valid
        True
    """

    def __init__(self, llm_client: LLMClient) -> None:
        self.llm = llm_client

    async def generate(self, request: PostRequest) -> GeneratedPost:
        """
        Generate a post for ``request.platform``.

        Raises:
            UnknownPlatformError: If the platform is not supported
            LLMError: If the model call fails
            GenerationError: If the model output is not a JSON post
        """
        start = time.monotonic()

        spec = get_platform_spec(request.platform)
        if spec is None:
            raise UnknownPlatformError(request.platform)

        logger.info(
            f"Generating {request.platform} post: {request.post_type} about '{request.topic}'",
            extra={"platform": request.platform, "topic": request.topic, "tone": request.tone},
        )

        messages = [
            {"role": "system", "content": build_system_prompt(request.platform)},
            {"role": "user", "content": build_user_prompt(request)},
        ]
        response = await self.llm.chat_with_usage(messages)
        generated = parse_generated_post(response.text)

        content = str(generated.get("content") or "")
        hashtags = _string_list(generated.get("hashtags"))

        if len(content) > spec.text.max_chars:
            logger.warning(
                f"Generated content exceeds limit: {len(content)}/{spec.text.max_chars}",
                extra={"platform": request.platform},
            )

        hashtag_check = validate_hashtags(request.platform, hashtags)
        if not hashtag_check.valid and len(hashtags) > spec.hashtags.max:
            logger.warning(
                f"Generated hashtags exceed limit: {len(hashtags)}/{spec.hashtags.max}",
                extra={"platform": request.platform},
            )
            hashtags = hashtags[: spec.hashtags.max]

        validation = validate_post(request.platform, content, hashtags)

        raw_metadata = generated.get("metadata")
        raw_metadata = raw_metadata if isinstance(raw_metadata, dict) else {}
        metadata = {
            "estimatedEngagement": raw_metadata.get("estimatedEngagement") or "medium",
            "contentType": raw_metadata.get("contentType") or request.post_type,
            "characterCount": len(content),
        }

        image_prompt = generated.get("imagePrompt") if request.include_image else None
        video_prompt = generated.get("videoPrompt") if request.include_video else None

        post = GeneratedPost(
            platform=request.platform,
            content=content,
            hashtags=hashtags,
            metadata=metadata,
            validation=validation,
            usage=TokenUsage(response.input_tokens, response.output_tokens),
            image_prompt=image_prompt,
            video_prompt=video_prompt,
            image_plan=(
                plan_image(request.platform, image_prompt, style=request.image_style)
                if image_prompt
                else None
            ),
            video_plan=(
                plan_video(request.platform, video_prompt, style=request.video_style)
                if video_prompt
                else None
            ),
        )
        post.generation_time_ms = int((time.monotonic() - start) * 1000)

        logger.info(
            f"Generated post: {len(content)} chars, {len(hashtags)} hashtags, "
            f"valid={validation.valid}",
            extra={
                "platform": request.platform,
                "total_tokens": post.usage.total_tokens,
                "generation_time_ms": post.generation_time_ms,
            },
        )
        return post
