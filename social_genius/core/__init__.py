"""Core components for Social Genius.

This module provides:
- Platform Specification Registry (per-platform limits)
- Content Validator (text, hashtags, images, videos, posts)
- Post generation (prompts, LLM client, media planning)
- Shared exceptions
"""

from .interfaces import (
    GenerationError,
    LLMError,
    SocialGeniusError,
    UnknownPlatformError,
)
from .platform_specs import (
    PLATFORM_SPECS,
    MediaDimension,
    PlatformSpec,
    get_optimal_aspect_ratio,
    get_optimal_image_dimensions,
    get_optimal_video_dimensions,
    get_platform_spec,
    get_supported_platforms,
    is_platform_supported,
)
from .validators import (
    ValidationResult,
    validate_hashtags,
    validate_image,
    validate_post,
    validate_text_content,
    validate_video,
)

__all__ = [
    # Registry
    "PLATFORM_SPECS",
    "MediaDimension",
    "PlatformSpec",
    "get_platform_spec",
    "get_supported_platforms",
    "is_platform_supported",
    "get_optimal_aspect_ratio",
    "get_optimal_image_dimensions",
    "get_optimal_video_dimensions",
    # Validator
    "ValidationResult",
    "validate_text_content",
    "validate_hashtags",
    "validate_image",
    "validate_video",
    "validate_post",
    # Exceptions
    "SocialGeniusError",
    "LLMError",
    "GenerationError",
    "UnknownPlatformError",
]
