"""Social media platform specifications.

Character limits, hashtag limits and media requirements for every supported
platform. This table is the single source of truth for platform constraints:
prompts, validators and media planning all read from it.

Sources:
    - Instagram: 2,200 chars, 5 hashtag limit
    - X (Twitter): 280 chars standard, 25K for Premium
    - Facebook: 63,206 chars
    - TikTok: 4,000 chars
    - LinkedIn: 3,000 chars
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class MediaDimension:
    """Recommended media size. The first entry of a spec's list is the optimal one."""

    name: str
    width: int
    height: int
    aspect_ratio: str

    @property
    def ratio(self) -> float:
        return self.width / self.height

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "width": self.width,
            "height": self.height,
            "aspectRatio": self.aspect_ratio,
        }


@dataclass(frozen=True)
class TextLimits:
    max_chars: int
    sweet_spot: Optional[int] = None  # Optimal length for engagement


@dataclass(frozen=True)
class MediaSpec:
    formats: Tuple[str, ...]
    max_size_mb: float
    dimensions: Tuple[MediaDimension, ...]
    max_duration_seconds: Optional[int] = None  # Videos only


@dataclass(frozen=True)
class HashtagLimits:
    max: int
    recommended: int


@dataclass(frozen=True)
class OpenGraphSpec:
    required: bool
    image_size: str


@dataclass(frozen=True)
class PlatformSpec:
    """Constraint record for one platform."""

    name: str
    text: TextLimits
    images: MediaSpec
    videos: MediaSpec
    hashtags: HashtagLimits
    open_graph: Optional[OpenGraphSpec] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON shape served to clients (camelCase, absent optionals omitted)."""
        text: Dict[str, Any] = {"maxChars": self.text.max_chars}
        if self.text.sweet_spot is not None:
            text["sweetSpot"] = self.text.sweet_spot

        videos: Dict[str, Any] = {
            "formats": list(self.videos.formats),
            "maxSizeMB": self.videos.max_size_mb,
            "dimensions": [d.to_dict() for d in self.videos.dimensions],
        }
        if self.videos.max_duration_seconds is not None:
            videos["maxDurationSeconds"] = self.videos.max_duration_seconds

        data: Dict[str, Any] = {
            "name": self.name,
            "text": text,
            "images": {
                "formats": list(self.images.formats),
                "maxSizeMB": self.images.max_size_mb,
                "dimensions": [d.to_dict() for d in self.images.dimensions],
            },
            "videos": videos,
            "hashtags": {
                "max": self.hashtags.max,
                "recommended": self.hashtags.recommended,
            },
        }
        if self.open_graph is not None:
            data["openGraph"] = {
                "required": self.open_graph.required,
                "imageSize": self.open_graph.image_size,
            }
        return data


_PLATFORM_SPECS: Dict[str, PlatformSpec] = {
    "instagram": PlatformSpec(
        name="Instagram",
        text=TextLimits(max_chars=2200, sweet_spot=125),  # Before "more" button
        images=MediaSpec(
            formats=("JPG", "PNG"),
            max_size_mb=15,
            dimensions=(
                MediaDimension("Square", 1080, 1080, "1:1"),
                MediaDimension("Portrait", 1080, 1350, "4:5"),
                MediaDimension("Story/Reel", 1080, 1920, "9:16"),
            ),
        ),
        videos=MediaSpec(
            formats=("MP4", "MOV"),
            max_size_mb=15,
            max_duration_seconds=900,  # 15 minutes uploaded, 90s in-app
            dimensions=(
                MediaDimension("Story", 1080, 1920, "9:16"),
                MediaDimension("Reel", 1080, 1920, "9:16"),
            ),
        ),
        hashtags=HashtagLimits(max=5, recommended=3),
    ),
    "twitter": PlatformSpec(
        name="X (Twitter)",
        text=TextLimits(max_chars=280),  # Standard users (Premium: 25,000)
        images=MediaSpec(
            formats=("JPG", "PNG", "GIF"),
            max_size_mb=5,
            dimensions=(MediaDimension("Standard", 1200, 675, "16:9"),),
        ),
        videos=MediaSpec(
            formats=("MP4", "MOV"),
            max_size_mb=512,  # Standard (1GB Pro, 16GB Premium+)
            max_duration_seconds=140,
            dimensions=(
                MediaDimension("Landscape", 1280, 720, "16:9"),
                MediaDimension("Portrait", 720, 1280, "9:16"),
            ),
        ),
        hashtags=HashtagLimits(max=999, recommended=2),  # No strict limit
    ),
    "facebook": PlatformSpec(
        name="Facebook",
        text=TextLimits(max_chars=63206, sweet_spot=80),
        images=MediaSpec(
            formats=("JPG", "PNG"),
            max_size_mb=30,
            dimensions=(MediaDimension("Standard", 1200, 630, "1.91:1"),),
        ),
        videos=MediaSpec(
            formats=("MP4",),
            max_size_mb=4000,
            max_duration_seconds=14460,  # 241 minutes
            dimensions=(
                MediaDimension("Landscape", 1280, 720, "16:9"),
                MediaDimension("Portrait", 1080, 1920, "9:16"),
            ),
        ),
        hashtags=HashtagLimits(max=999, recommended=2),
        open_graph=OpenGraphSpec(required=True, image_size="1200x630"),
    ),
    "tiktok": PlatformSpec(
        name="TikTok",
        text=TextLimits(max_chars=4000),
        images=MediaSpec(
            formats=("JPG", "PNG"),
            max_size_mb=50,
            dimensions=(MediaDimension("Story Carousel", 1080, 1920, "9:16"),),
        ),
        videos=MediaSpec(
            formats=("MP4", "MOV"),
            max_size_mb=50,
            max_duration_seconds=3600,  # 60 minutes
            dimensions=(MediaDimension("Standard", 1080, 1920, "9:16"),),
        ),
        hashtags=HashtagLimits(max=30, recommended=3),
    ),
    "linkedin": PlatformSpec(
        name="LinkedIn",
        text=TextLimits(max_chars=3000, sweet_spot=1500),
        images=MediaSpec(
            formats=("JPG", "PNG"),
            max_size_mb=10,
            dimensions=(
                MediaDimension("Standard", 1200, 627, "1.91:1"),
                MediaDimension("Story", 1080, 1920, "9:16"),
            ),
        ),
        videos=MediaSpec(
            formats=("MP4", "MOV"),
            max_size_mb=200,
            max_duration_seconds=600,  # 10 minutes
            dimensions=(MediaDimension("Landscape", 1280, 720, "16:9"),),
        ),
        hashtags=HashtagLimits(max=999, recommended=5),
    ),
}

# Read-only view; keys are lowercase platform identifiers in declaration order.
PLATFORM_SPECS: Mapping[str, PlatformSpec] = MappingProxyType(_PLATFORM_SPECS)


def get_platform_spec(platform: str) -> Optional[PlatformSpec]:
    """
    Get platform specification by platform key.

    Args:
        platform: Platform identifier, matched case-insensitively

    Returns:
        PlatformSpec, or None if the platform is not supported

    Example:
        >>> get_platform_spec("Instagram").text.max_chars
        2200
        >>> get_platform_spec("myspace") is None
        True
    """
    return PLATFORM_SPECS.get(platform.lower())


def get_supported_platforms() -> List[str]:
    """Return all supported platform keys in declaration order."""
    return list(PLATFORM_SPECS.keys())


def is_platform_supported(platform: str) -> bool:
    """Check if a platform is supported (case-insensitive)."""
    return platform.lower() in PLATFORM_SPECS


def get_optimal_aspect_ratio(platform: str) -> Optional[str]:
    """
    Get optimal aspect ratio for a platform's primary image format.

    Returns:
        Aspect ratio label (e.g. "1:1", "9:16"), or None when the platform is
        unknown or declares no image dimensions
    """
    dimension = get_optimal_image_dimensions(platform)
    return dimension.aspect_ratio if dimension else None


def get_optimal_image_dimensions(platform: str) -> Optional[MediaDimension]:
    """Get the first (optimal) image dimension for a platform."""
    spec = get_platform_spec(platform)
    if not spec or not spec.images.dimensions:
        return None
    return spec.images.dimensions[0]


def get_optimal_video_dimensions(platform: str) -> Optional[MediaDimension]:
    """Get the first (optimal) video dimension for a platform."""
    spec = get_platform_spec(platform)
    if not spec or not spec.videos.dimensions:
        return None
    return spec.videos.dimensions[0]
