"""Social media content validation.

Checks text, hashtags, images and videos against the platform constraints in
``platform_specs``. Every function is pure and never raises: an unknown
platform produces an invalid result with a single explanatory error, and all
applicable rule checks run so that ``errors`` is exhaustive.

Errors make a result invalid. Warnings are advisory and never affect ``valid``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

from .platform_specs import MediaDimension, get_platform_spec

# Maximum absolute difference between width/height ratios that still counts
# as a match. Comparison is strict: a difference of exactly 0.05 is a mismatch.
ASPECT_RATIO_TOLERANCE = 0.05

MIN_CONTENT_CHARS = 10
MAX_HASHTAG_LENGTH = 30
MIN_WIDTH_FACTOR = 0.5
MIN_VIDEO_SECONDS = 3

# Platforms where a post without hashtags loses discoverability
HASHTAG_PLATFORMS = ("instagram", "tiktok", "twitter")

INSTAGRAM_REELS_SECONDS = 90
TIKTOK_SHORT_FORM_SECONDS = 60

Number = Union[int, float]


@dataclass
class ValidationResult:
    """Outcome of a validation call.

    Attributes:
        valid: True iff ``errors`` is empty
        errors: Hard rule violations, in check order
        warnings: Advisory findings, in check order
        stats: Numeric snapshot keyed in camelCase (charCount, hashtagLimit, ...)
    """

    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    stats: Dict[str, Number] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "stats": dict(self.stats),
        }


def _unknown_platform(platform: str) -> ValidationResult:
    return ValidationResult(valid=False, errors=[f"Unknown platform: {platform}"])


def _build_result(
    errors: List[str], warnings: List[str], stats: Dict[str, Number]
) -> ValidationResult:
    return ValidationResult(valid=not errors, errors=errors, warnings=warnings, stats=stats)


def _find_matching_dimension(
    width: Number, height: Number, dimensions: Sequence[MediaDimension]
) -> Optional[MediaDimension]:
    if height <= 0:
        return None
    aspect_ratio = width / height
    for dimension in dimensions:
        if abs(aspect_ratio - dimension.ratio) < ASPECT_RATIO_TOLERANCE:
            return dimension
    return None


def _recommended_ratios(dimensions: Sequence[MediaDimension]) -> str:
    return ", ".join(f"{d.name} ({d.aspect_ratio})" for d in dimensions)


def validate_text_content(platform: str, content: str) -> ValidationResult:
    """
    Validate text content against platform character limits.

    Args:
        platform: Platform identifier (instagram, twitter, facebook, tiktok, linkedin)
        content: Post text

    Returns:
        ValidationResult with stats ``charCount`` and ``charLimit``

    Example:
        >>> result = validate_text_content("twitter", "A" * 300)
        >>> result.valid, result.errors
        (False, ['Content exceeds X (Twitter) character limit (300/280)'])
    """
    spec = get_platform_spec(platform)
    if spec is None:
        return _unknown_platform(platform)

    errors: List[str] = []
    warnings: List[str] = []
    char_count = len(content)

    if char_count > spec.text.max_chars:
        errors.append(
            f"Content exceeds {spec.name} character limit ({char_count}/{spec.text.max_chars})"
        )

    sweet_spot = spec.text.sweet_spot
    if sweet_spot and char_count > sweet_spot:
        warnings.append(
            f"Content exceeds optimal length for {spec.name} ({char_count}/{sweet_spot} chars). "
            f"Consider keeping key message in first {sweet_spot} characters for better visibility."
        )

    if 0 < char_count < MIN_CONTENT_CHARS:
        warnings.append(
            f"Content is very short ({char_count} chars). "
            f"Consider adding more context for better engagement."
        )

    return _build_result(
        errors, warnings, {"charCount": char_count, "charLimit": spec.text.max_chars}
    )


def validate_hashtags(platform: str, hashtags: Sequence[str]) -> ValidationResult:
    """
    Validate hashtags against platform limits.

    Tags may be given with or without a leading ``#``; one leading ``#`` is
    stripped before the per-tag checks. Messages address tags by 1-based
    position or echo the tag as given.

    Args:
        platform: Platform identifier
        hashtags: Hashtag strings in post order

    Returns:
        ValidationResult with stats ``hashtagCount`` and ``hashtagLimit``
    """
    spec = get_platform_spec(platform)
    if spec is None:
        return _unknown_platform(platform)

    errors: List[str] = []
    warnings: List[str] = []
    count = len(hashtags)

    if count > spec.hashtags.max:
        errors.append(f"Too many hashtags for {spec.name} ({count}/{spec.hashtags.max})")

    # Also fires when the hard limit above is exceeded.
    if count > spec.hashtags.recommended:
        warnings.append(
            f"More hashtags than recommended for {spec.name}. "
            f"Recommended: {spec.hashtags.recommended}, Current: {count}. "
            f"Research shows fewer, more targeted hashtags often perform better."
        )

    for index, tag in enumerate(hashtags, start=1):
        clean_tag = tag[1:] if tag.startswith("#") else tag

        if not clean_tag:
            errors.append(f"Hashtag {index} is empty")

        if " " in clean_tag:
            errors.append(f'Hashtag "{tag}" contains spaces (invalid)')

        if len(clean_tag) > MAX_HASHTAG_LENGTH:
            warnings.append(
                f'Hashtag "{tag}" is very long ({len(clean_tag)} chars). '
                f"Consider using shorter, more memorable tags."
            )

    if count == 0 and platform.lower() in HASHTAG_PLATFORMS:
        warnings.append(
            f"No hashtags provided. Hashtags can significantly improve "
            f"discoverability on {spec.name}."
        )

    return _build_result(
        errors, warnings, {"hashtagCount": count, "hashtagLimit": spec.hashtags.max}
    )


def validate_image(
    platform: str, width: int, height: int, file_size_mb: float, fmt: str
) -> ValidationResult:
    """
    Validate image specifications against platform requirements.

    Format tokens are compared uppercase with ``JPEG`` treated as ``JPG``.
    A non-standard aspect ratio or a small width only produces warnings,
    because platforms crop or rescale rather than reject.

    Args:
        platform: Platform identifier
        width: Image width in pixels
        height: Image height in pixels
        file_size_mb: File size in megabytes
        fmt: Image format (JPG, PNG, GIF, ...)

    Returns:
        ValidationResult with stats ``width``, ``height``, ``fileSizeMB``, ``maxSizeMB``
    """
    spec = get_platform_spec(platform)
    if spec is None:
        return _unknown_platform(platform)

    errors: List[str] = []
    warnings: List[str] = []
    images = spec.images

    normalized_format = fmt.upper().replace("JPEG", "JPG")
    if normalized_format not in images.formats:
        errors.append(
            f"Invalid image format for {spec.name}. "
            f"Supported formats: {', '.join(images.formats)}"
        )

    if file_size_mb > images.max_size_mb:
        errors.append(
            f"Image size exceeds {spec.name} limit "
            f"({file_size_mb:.2f}MB / {images.max_size_mb}MB)"
        )

    if _find_matching_dimension(width, height, images.dimensions) is None:
        warnings.append(
            f"Image aspect ratio ({width}x{height}) doesn't match "
            f"recommended dimensions for {spec.name}. "
            f"Recommended: {_recommended_ratios(images.dimensions)}. "
            f"Your image may be cropped or not display optimally."
        )

    if images.dimensions:
        min_recommended_width = min(d.width for d in images.dimensions)
        if width < min_recommended_width * MIN_WIDTH_FACTOR:
            warnings.append(
                f"Image width ({width}px) is quite small. "
                f"Recommended minimum: {min_recommended_width}px for best quality on {spec.name}."
            )

    return _build_result(
        errors,
        warnings,
        {
            "width": width,
            "height": height,
            "fileSizeMB": file_size_mb,
            "maxSizeMB": images.max_size_mb,
        },
    )


def _platform_video_warnings(platform: str, duration_seconds: float) -> List[str]:
    warnings = []
    key = platform.lower()
    if key == "instagram" and duration_seconds > INSTAGRAM_REELS_SECONDS:
        warnings.append(
            f"Video is longer than {INSTAGRAM_REELS_SECONDS} seconds. "
            f"For Instagram, in-app recorded Reels are limited to {INSTAGRAM_REELS_SECONDS}s. "
            f"Uploaded videos can be up to 15 minutes but shorter content often performs better."
        )
    if key == "tiktok" and duration_seconds > TIKTOK_SHORT_FORM_SECONDS:
        warnings.append(
            f"Video is longer than {TIKTOK_SHORT_FORM_SECONDS} seconds. "
            f"While TikTok supports up to 60 minutes, "
            f"shorter content (15-60s) typically gets better engagement."
        )
    return warnings


def validate_video(
    platform: str,
    width: int,
    height: int,
    duration_seconds: float,
    file_size_mb: float,
    fmt: str,
) -> ValidationResult:
    """
    Validate video specifications against platform requirements.

    Unlike images there is no format aliasing: the uppercased token must
    appear in the platform's video formats as-is.

    Args:
        platform: Platform identifier
        width: Video width in pixels
        height: Video height in pixels
        duration_seconds: Video duration in seconds
        file_size_mb: File size in megabytes
        fmt: Video format (MP4, MOV, ...)

    Returns:
        ValidationResult with stats ``width``, ``height``, ``durationSeconds``,
        ``maxDurationSeconds``, ``fileSizeMB``, ``maxSizeMB``
    """
    spec = get_platform_spec(platform)
    if spec is None:
        return _unknown_platform(platform)

    errors: List[str] = []
    warnings: List[str] = []
    videos = spec.videos

    if fmt.upper() not in videos.formats:
        errors.append(
            f"Invalid video format for {spec.name}. "
            f"Supported formats: {', '.join(videos.formats)}"
        )

    if file_size_mb > videos.max_size_mb:
        errors.append(
            f"Video size exceeds {spec.name} limit "
            f"({file_size_mb:.2f}MB / {videos.max_size_mb}MB)"
        )

    max_duration = videos.max_duration_seconds
    if max_duration is not None and duration_seconds > max_duration:
        errors.append(
            f"Video duration exceeds {spec.name} limit ({duration_seconds}s / {max_duration}s)"
        )

    if duration_seconds < MIN_VIDEO_SECONDS:
        warnings.append(
            f"Video is very short ({duration_seconds}s). "
            f"Consider making it at least 3-5 seconds for better viewer experience."
        )

    if _find_matching_dimension(width, height, videos.dimensions) is None:
        warnings.append(
            f"Video aspect ratio ({width}x{height}) doesn't match "
            f"recommended dimensions for {spec.name}. "
            f"Recommended: {_recommended_ratios(videos.dimensions)}. "
            f"Your video may be cropped or pillarboxed."
        )

    warnings.extend(_platform_video_warnings(platform, duration_seconds))

    stats: Dict[str, Number] = {
        "width": width,
        "height": height,
        "durationSeconds": duration_seconds,
    }
    if max_duration is not None:
        stats["maxDurationSeconds"] = max_duration
    stats["fileSizeMB"] = file_size_mb
    stats["maxSizeMB"] = videos.max_size_mb

    return _build_result(errors, warnings, stats)


def validate_post(
    platform: str, content: str, hashtags: Optional[Sequence[str]] = None
) -> ValidationResult:
    """
    Validate a complete post (text + hashtags).

    Errors and warnings are concatenated text-first; stats are merged with
    hashtag keys taking precedence on collision.
    """
    text_result = validate_text_content(platform, content)
    hashtag_result = validate_hashtags(platform, hashtags or [])

    return ValidationResult(
        valid=text_result.valid and hashtag_result.valid,
        errors=[*text_result.errors, *hashtag_result.errors],
        warnings=[*text_result.warnings, *hashtag_result.warnings],
        stats={**text_result.stats, **hashtag_result.stats},
    )
