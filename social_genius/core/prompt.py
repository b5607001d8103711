"""Prompt construction for post generation.

Every limit quoted to the model comes from ``platform_specs`` so the prompt
and the validators can never disagree.
"""

from dataclasses import dataclass
from typing import Literal, Optional, get_args

from .interfaces import UnknownPlatformError
from .platform_specs import get_platform_spec

Platform = Literal["instagram", "twitter", "facebook", "tiktok", "linkedin"]

PostType = Literal[
    "promotional",
    "educational",
    "entertaining",
    "news",
    "announcement",
    "behind-the-scenes",
    "user-generated",
    "poll",
    "question",
]

Tone = Literal[
    "casual",
    "professional",
    "friendly",
    "urgent",
    "inspiring",
    "humorous",
    "empathetic",
    "authoritative",
]

ContentLength = Literal["short", "medium", "long"]

PLATFORMS = get_args(Platform)
POST_TYPES = get_args(PostType)
TONES = get_args(Tone)
CONTENT_LENGTHS = get_args(ContentLength)

PLATFORM_STRATEGIES = {
    "instagram": "Visual-first. Casual, authentic tone. Hook in the first 125 characters, "
    "before the 'more' button. Natural call-to-action (save, share, link in bio).",
    "twitter": "Concise and punchy with an immediate news-worthy angle. "
    "1-2 hashtags at most. Clear, direct call-to-action.",
    "facebook": "Conversational and community-focused. Key message in the first 2-3 lines. "
    "Questions and polls perform well.",
    "tiktok": "Caption supports the video. Trending, Gen-Z friendly language. "
    "Hook immediately. Mix trending and niche hashtags.",
    "linkedin": "Professional thought leadership. Data-driven or experience-based insight. "
    "1000-1500 characters performs best.",
}

VIDEO_DURATION_HINTS = {
    "instagram": "15-60 seconds for Reels",
    "twitter": "15-45 seconds",
    "tiktok": "15-60 seconds",
    "linkedin": "30-90 seconds",
    "facebook": "30-90 seconds",
}

OUTPUT_FORMAT = """You MUST respond with valid JSON in this exact format:

```json
{
  "content": "The main post text content",
  "hashtags": ["hashtag1", "hashtag2", "hashtag3"],
  "imagePrompt": "Detailed prompt for image generation (if requested)",
  "videoPrompt": "Detailed prompt for video generation (if requested)",
  "metadata": {
    "estimatedEngagement": "high|medium|low",
    "contentType": "educational|entertaining|promotional|inspirational",
    "targetAudience": "Brief audience description"
  }
}
```"""


@dataclass
class PostRequest:
    """Parameters for one post generation."""

    platform: Platform
    post_type: PostType
    topic: str
    tone: Tone = "casual"
    content_length: ContentLength = "medium"
    include_hashtags: bool = True
    include_image: bool = False
    image_style: str = "professional"
    include_video: bool = False
    video_style: str = "dynamic"
    additional_instructions: Optional[str] = None


def build_system_prompt(platform: str) -> str:
    """
    Build the system prompt for a platform.

    Raises:
        UnknownPlatformError: If the platform has no spec
    """
    spec = get_platform_spec(platform)
    if spec is None:
        raise UnknownPlatformError(platform)

    key = platform.lower()
    sweet_spot = f" (optimal: {spec.text.sweet_spot} chars)" if spec.text.sweet_spot else ""
    image_dimensions = ", ".join(f"{d.name} ({d.aspect_ratio})" for d in spec.images.dimensions)
    video_ratio = spec.videos.dimensions[0].aspect_ratio if spec.videos.dimensions else "16:9 or 9:16"

    return f"""# Social Media Post Generation for {spec.name}

You are an expert social media content strategist creating platform-optimized posts.

## Strategy
{PLATFORM_STRATEGIES.get(key, "")}

## Platform Specifications for {spec.name}
- Character Limit: {spec.text.max_chars}{sweet_spot}
- Hashtag Limit: {spec.hashtags.max} (recommended: {spec.hashtags.recommended})
- Image Formats: {", ".join(spec.images.formats)}
- Video Formats: {", ".join(spec.videos.formats)}

## Media Prompts
- Image dimensions: {image_dimensions}
- Video duration: {VIDEO_DURATION_HINTS.get(key, "30-90 seconds")}
- Video aspect ratio: {video_ratio}

## Output Format
{OUTPUT_FORMAT}

## Critical Rules
1. Never exceed {spec.text.max_chars} characters
2. Never exceed {spec.hashtags.max} hashtags
3. Sound human, not corporate or robotic"""


def build_user_prompt(request: PostRequest) -> str:
    """Build the user prompt describing the requested post."""
    lines = [
        f"Generate a {request.platform} post with the following requirements:",
        "",
        f"**Post Type**: {request.post_type}",
        f"**Topic**: {request.topic}",
        f"**Tone**: {request.tone}",
        f"**Content Length**: {request.content_length}",
        f"**Include Hashtags**: {'Yes' if request.include_hashtags else 'No'}",
        "**Include Image**: "
        + (f"Yes (style: {request.image_style})" if request.include_image else "No"),
        "**Include Video**: "
        + (f"Yes (style: {request.video_style})" if request.include_video else "No"),
    ]
    if request.additional_instructions:
        lines += ["", f"**Additional Instructions**: {request.additional_instructions}"]
    lines += ["", "Generate engaging, platform-optimized content that drives real engagement."]
    return "\n".join(lines)
