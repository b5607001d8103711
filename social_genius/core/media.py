"""Image and video request planning.

Picks generator-compatible aspect ratios, durations and prompt enhancements
for a platform before an image or video model is called. The model calls
themselves live outside this package.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .platform_specs import (
    MediaDimension,
    get_optimal_image_dimensions,
    get_optimal_video_dimensions,
)

logger = logging.getLogger(__name__)

# Aspect ratios accepted by the image model. 4:5 is not among them.
IMAGEN_ASPECT_RATIOS = ("1:1", "3:4", "4:3", "9:16", "16:9")
DEFAULT_IMAGE_ASPECT_RATIO = "1:1"

IMAGE_ASPECT_RATIO_FALLBACKS = {
    "4:5": "3:4",
    "5:4": "4:3",
    "2:3": "3:4",
    "3:2": "4:3",
    "21:9": "16:9",
}

PLATFORM_IMAGE_ASPECT_RATIOS = {
    "instagram": "3:4",  # Closest supported ratio to the 4:5 portrait feed
    "twitter": "16:9",
    "facebook": "16:9",
    "tiktok": "9:16",
    "linkedin": "16:9",
}

IMAGE_STYLE_ENHANCEMENTS = {
    "realistic": "photorealistic, high quality, detailed, professional photography",
    "artistic": "artistic, creative, vibrant colors, stylized, modern design",
    "minimalist": "minimalist, clean, simple, elegant, professional, uncluttered",
    "bold": "bold colors, high contrast, eye-catching, dynamic, energetic",
}

DEFAULT_VIDEO_SETTINGS = {"aspect_ratio": "16:9", "duration_seconds": 30}

PLATFORM_VIDEO_SETTINGS = {
    "instagram": {"aspect_ratio": "9:16", "duration_seconds": 60},
    "twitter": {"aspect_ratio": "16:9", "duration_seconds": 45},
    "facebook": {"aspect_ratio": "9:16", "duration_seconds": 60},
    "tiktok": {"aspect_ratio": "9:16", "duration_seconds": 30},
    "linkedin": {"aspect_ratio": "16:9", "duration_seconds": 90},
}

VIDEO_STYLE_ENHANCEMENTS = {
    "cinematic": "cinematic camera movements, professional lighting, smooth transitions, "
    "high production value",
    "fast-paced": "quick cuts, dynamic movement, energetic pacing, rapid scene changes, "
    "trending style",
    "smooth": "smooth camera movements, steady shots, gentle transitions, professional flow",
    "dynamic": "dynamic angles, varied perspectives, engaging movement, "
    "attention-grabbing visuals",
}

VIDEO_PLATFORM_HINTS = {
    "tiktok": "trending TikTok style, mobile-first, hook in first 3 seconds, vertical format",
    "instagram": "Instagram Reels aesthetic, polished, visually appealing, mobile-optimized",
    "twitter": "news-worthy, quick to the point, professional",
    "facebook": "engaging, shareable, community-focused",
    "linkedin": "professional, business-appropriate, informative",
}


def _dimension_dict(dimension: Optional[MediaDimension]) -> Optional[Dict[str, Any]]:
    return dimension.to_dict() if dimension else None


@dataclass
class ImagePlan:
    platform: str
    prompt: str
    aspect_ratio: str
    style: str
    recommended_dimensions: Optional[MediaDimension] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "platform": self.platform,
            "prompt": self.prompt,
            "aspectRatio": self.aspect_ratio,
            "style": self.style,
            "recommendedDimensions": _dimension_dict(self.recommended_dimensions),
        }


@dataclass
class VideoPlan:
    platform: str
    prompt: str
    aspect_ratio: str
    duration_seconds: int
    style: str
    recommended_dimensions: Optional[MediaDimension] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "platform": self.platform,
            "prompt": self.prompt,
            "aspectRatio": self.aspect_ratio,
            "durationSeconds": self.duration_seconds,
            "style": self.style,
            "recommendedDimensions": _dimension_dict(self.recommended_dimensions),
        }


def platform_image_aspect_ratio(platform: str) -> str:
    """Best image-model aspect ratio for a platform; the default for unknown ones."""
    return PLATFORM_IMAGE_ASPECT_RATIOS.get(platform.lower(), DEFAULT_IMAGE_ASPECT_RATIO)


def normalize_image_aspect_ratio(aspect_ratio: str) -> str:
    """
    Map an aspect ratio onto one the image model accepts.

    Example:
        >>> normalize_image_aspect_ratio("4:5")
        '3:4'
        >>> normalize_image_aspect_ratio("7:3")
        '1:1'
    """
    normalized = aspect_ratio.strip()
    if normalized in IMAGEN_ASPECT_RATIOS:
        return normalized

    fallback = IMAGE_ASPECT_RATIO_FALLBACKS.get(normalized)
    if fallback:
        logger.info(f"Aspect ratio {normalized} not supported, using {fallback}")
        return fallback

    logger.warning(
        f"Unknown aspect ratio {normalized}, using {DEFAULT_IMAGE_ASPECT_RATIO}"
    )
    return DEFAULT_IMAGE_ASPECT_RATIO


def enhance_image_prompt(prompt: str, style: str) -> str:
    enhancement = IMAGE_STYLE_ENHANCEMENTS.get(style, IMAGE_STYLE_ENHANCEMENTS["realistic"])
    return f"{prompt}. Style: {enhancement}"


def platform_video_settings(platform: str) -> Dict[str, Any]:
    return dict(PLATFORM_VIDEO_SETTINGS.get(platform.lower(), DEFAULT_VIDEO_SETTINGS))


def enhance_video_prompt(prompt: str, style: str, platform: str) -> str:
    enhancement = VIDEO_STYLE_ENHANCEMENTS.get(style, VIDEO_STYLE_ENHANCEMENTS["dynamic"])
    platform_hint = VIDEO_PLATFORM_HINTS.get(platform.lower(), "")
    return f"{prompt}. {enhancement}. {platform_hint}"


def plan_image(
    platform: str, prompt: str, style: str = "realistic", aspect_ratio: Optional[str] = None
) -> ImagePlan:
    """Resolve the aspect ratio and enhanced prompt for an image request.

    An explicit ``aspect_ratio`` overrides the platform default; either way
    the result is normalised to a ratio the image model accepts.
    """
    ratio = normalize_image_aspect_ratio(aspect_ratio or platform_image_aspect_ratio(platform))
    return ImagePlan(
        platform=platform,
        prompt=enhance_image_prompt(prompt, style),
        aspect_ratio=ratio,
        style=style,
        recommended_dimensions=get_optimal_image_dimensions(platform),
    )


def plan_video(
    platform: str,
    prompt: str,
    style: str = "dynamic",
    duration_seconds: Optional[int] = None,
    aspect_ratio: Optional[str] = None,
) -> VideoPlan:
    """Resolve the aspect ratio, duration and enhanced prompt for a video request."""
    settings = platform_video_settings(platform)
    return VideoPlan(
        platform=platform,
        prompt=enhance_video_prompt(prompt, style, platform),
        aspect_ratio=aspect_ratio or settings["aspect_ratio"],
        duration_seconds=duration_seconds or settings["duration_seconds"],
        style=style,
        recommended_dimensions=get_optimal_video_dimensions(platform),
    )
