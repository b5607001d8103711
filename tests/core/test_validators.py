"""Unit tests for the content validator.

Covers:
- Text length limits, sweet spots and short-content warnings
- Hashtag counts and per-tag checks
- Image and video format, size, duration and aspect ratio checks
- Composite post validation
- Unknown platform handling (never raises)
"""

import pytest

from social_genius.core.platform_specs import get_platform_spec, get_supported_platforms
from social_genius.core.validators import (
    ASPECT_RATIO_TOLERANCE,
    ValidationResult,
    validate_hashtags,
    validate_image,
    validate_post,
    validate_text_content,
    validate_video,
)

# ============================================================================
# Text content
# ============================================================================


class TestValidateTextContent:
    """Tests for validate_text_content."""

    def test_over_limit_is_error(self) -> None:
        """Test: 300 chars on X (Twitter) exceeds the 280 hard limit."""
        result = validate_text_content("twitter", "A" * 300)

        assert result.valid is False
        assert result.errors == ["Content exceeds X (Twitter) character limit (300/280)"]
        assert result.warnings == []
        assert result.stats == {"charCount": 300, "charLimit": 280}

    def test_exactly_at_limit_is_valid(self) -> None:
        result = validate_text_content("twitter", "A" * 280)

        assert result.valid is True
        assert result.errors == []

    def test_over_sweet_spot_is_warning(self) -> None:
        """Test: 130 chars on Instagram is valid but past the 125-char fold."""
        result = validate_text_content("instagram", "B" * 130)

        assert result.valid is True
        assert result.errors == []
        assert result.warnings == [
            "Content exceeds optimal length for Instagram (130/125 chars). "
            "Consider keeping key message in first 125 characters for better visibility."
        ]

    def test_short_content_warning(self) -> None:
        result = validate_text_content("linkedin", "Hi there")

        assert result.valid is True
        assert result.warnings == [
            "Content is very short (8 chars). "
            "Consider adding more context for better engagement."
        ]

    def test_empty_content_has_no_short_warning(self) -> None:
        """Test: empty text is neither an error nor 'very short'."""
        result = validate_text_content("linkedin", "")

        assert result.valid is True
        assert result.warnings == []
        assert result.stats["charCount"] == 0

    def test_ten_chars_is_not_short(self) -> None:
        result = validate_text_content("twitter", "0123456789")

        assert result.warnings == []

    def test_platform_case_insensitive(self) -> None:
        result = validate_text_content("TWITTER", "A" * 300)

        assert result.errors == ["Content exceeds X (Twitter) character limit (300/280)"]

    def test_unknown_platform(self) -> None:
        """Test: unknown platform yields a single error and empty stats."""
        result = validate_text_content("myspace", "Hello world!")

        assert result == ValidationResult(valid=False, errors=["Unknown platform: myspace"])
        assert result.stats == {}


# ============================================================================
# Hashtags
# ============================================================================


class TestValidateHashtags:
    """Tests for validate_hashtags."""

    def test_too_many_hashtags_also_warns_recommended(self) -> None:
        """Test: exceeding the hard limit also reports the recommended-count warning."""
        tags = ["#a", "#b", "#c", "#d", "#e", "#f"]

        result = validate_hashtags("instagram", tags)

        assert result.valid is False
        assert result.errors == ["Too many hashtags for Instagram (6/5)"]
        assert len(result.warnings) == 1
        assert result.warnings[0].startswith(
            "More hashtags than recommended for Instagram. Recommended: 3, Current: 6."
        )
        assert result.stats == {"hashtagCount": 6, "hashtagLimit": 5}

    def test_within_recommended_is_clean(self) -> None:
        result = validate_hashtags("instagram", ["#Habits", "#Growth", "#Mindset"])

        assert result.valid is True
        assert result.errors == []
        assert result.warnings == []

    def test_empty_hashtag(self) -> None:
        """Test: a bare '#' (or empty string) is reported by 1-based position."""
        result = validate_hashtags("linkedin", ["#ok", "#"])

        assert result.valid is False
        assert result.errors == ["Hashtag 2 is empty"]

    def test_empty_string_hashtag(self) -> None:
        result = validate_hashtags("linkedin", [""])

        assert result.errors == ["Hashtag 1 is empty"]

    def test_hashtag_with_space(self) -> None:
        """Test: the offending tag is echoed exactly as given."""
        result = validate_hashtags("linkedin", ["#two words"])

        assert result.valid is False
        assert result.errors == ['Hashtag "#two words" contains spaces (invalid)']

    def test_long_hashtag_is_warning(self) -> None:
        long_tag = "#" + "a" * 31

        result = validate_hashtags("linkedin", [long_tag])

        assert result.valid is True
        assert result.warnings == [
            f'Hashtag "{long_tag}" is very long (31 chars). '
            f"Consider using shorter, more memorable tags."
        ]

    def test_thirty_char_hashtag_is_fine(self) -> None:
        result = validate_hashtags("linkedin", ["#" + "a" * 30])

        assert result.warnings == []

    def test_only_one_leading_hash_stripped(self) -> None:
        """Test: '##' keeps one '#', so the tag is not empty."""
        result = validate_hashtags("linkedin", ["##"])

        assert result.valid is True

    @pytest.mark.parametrize("platform", ["instagram", "tiktok", "twitter"])
    def test_missing_hashtags_warning(self, platform: str) -> None:
        result = validate_hashtags(platform, [])

        assert result.valid is True
        assert len(result.warnings) == 1
        assert result.warnings[0].startswith("No hashtags provided.")

    @pytest.mark.parametrize("platform", ["facebook", "linkedin"])
    def test_no_missing_hashtags_warning(self, platform: str) -> None:
        result = validate_hashtags(platform, [])

        assert result.warnings == []

    def test_missing_hashtags_message_uses_display_name(self) -> None:
        result = validate_hashtags("twitter", [])

        assert result.warnings == [
            "No hashtags provided. Hashtags can significantly improve "
            "discoverability on X (Twitter)."
        ]

    def test_leading_hash_does_not_change_outcome(self) -> None:
        """Test: tags with and without '#' validate identically."""
        with_hash = validate_hashtags("tiktok", ["#AI", "#Tech", "#two words"])
        without_hash = validate_hashtags("tiktok", ["AI", "Tech", "two words"])

        assert with_hash.valid == without_hash.valid
        assert len(with_hash.errors) == len(without_hash.errors)
        assert len(with_hash.warnings) == len(without_hash.warnings)
        assert with_hash.stats == without_hash.stats

    def test_unknown_platform(self) -> None:
        result = validate_hashtags("myspace", ["#a"])

        assert result.errors == ["Unknown platform: myspace"]
        assert result.stats == {}


# ============================================================================
# Images
# ============================================================================


class TestValidateImage:
    """Tests for validate_image."""

    def test_portrait_instagram_image_is_clean(self) -> None:
        """Test: 1080x1350 JPEG matches Instagram's 4:5 portrait."""
        result = validate_image("instagram", 1080, 1350, 2.0, "JPEG")

        assert result.valid is True
        assert result.errors == []
        assert result.warnings == []
        assert result.stats == {
            "width": 1080,
            "height": 1350,
            "fileSizeMB": 2.0,
            "maxSizeMB": 15,
        }

    def test_oversized_image(self) -> None:
        result = validate_image("twitter", 1200, 675, 6, "PNG")

        assert result.valid is False
        assert result.errors == ["Image size exceeds X (Twitter) limit (6.00MB / 5MB)"]

    def test_invalid_format(self) -> None:
        result = validate_image("instagram", 1080, 1080, 1.0, "BMP")

        assert result.valid is False
        assert result.errors == [
            "Invalid image format for Instagram. Supported formats: JPG, PNG"
        ]

    @pytest.mark.parametrize("fmt", ["jpg", "jpeg", "JPEG", "Jpg"])
    def test_jpeg_aliases(self, fmt: str) -> None:
        result = validate_image("instagram", 1080, 1080, 1.0, fmt)

        assert result.valid is True

    def test_all_errors_reported(self) -> None:
        """Test: format and size errors are both collected, not short-circuited."""
        result = validate_image("twitter", 1200, 675, 10, "TIFF")

        assert len(result.errors) == 2
        assert result.errors[0].startswith("Invalid image format for X (Twitter)")
        assert result.errors[1].startswith("Image size exceeds X (Twitter) limit")

    def test_aspect_ratio_within_tolerance(self) -> None:
        """Test: 1.04 is within tolerance of Instagram's 1:1."""
        result = validate_image("instagram", 1040, 1000, 1.0, "PNG")

        assert result.warnings == []

    def test_aspect_ratio_at_tolerance_is_mismatch(self) -> None:
        """Test: a ratio difference of 0.05 is not accepted (strict comparison)."""
        assert ASPECT_RATIO_TOLERANCE == 0.05

        result = validate_image("instagram", 1050, 1000, 1.0, "PNG")

        assert result.valid is True
        assert len(result.warnings) == 1
        assert result.warnings[0].startswith(
            "Image aspect ratio (1050x1000) doesn't match recommended dimensions for Instagram."
        )
        assert "Square (1:1), Portrait (4:5), Story/Reel (9:16)" in result.warnings[0]

    def test_zero_height_is_mismatch_not_crash(self) -> None:
        result = validate_image("instagram", 1080, 0, 1.0, "PNG")

        assert result.valid is True
        assert any("aspect ratio (1080x0)" in w for w in result.warnings)

    def test_small_width_warning(self) -> None:
        """Test: width below half of the smallest recommended width warns."""
        result = validate_image("linkedin", 500, 261, 1.0, "PNG")

        assert result.valid is True
        assert (
            "Image width (500px) is quite small. "
            "Recommended minimum: 1080px for best quality on LinkedIn."
        ) in result.warnings

    def test_unknown_platform(self) -> None:
        result = validate_image("myspace", 100, 100, 1.0, "PNG")

        assert result.errors == ["Unknown platform: myspace"]


# ============================================================================
# Videos
# ============================================================================


class TestValidateVideo:
    """Tests for validate_video."""

    def test_vertical_tiktok_video_is_clean(self) -> None:
        result = validate_video("tiktok", 1080, 1920, 45, 20, "MP4")

        assert result.valid is True
        assert result.errors == []
        assert result.warnings == []
        assert list(result.stats) == [
            "width",
            "height",
            "durationSeconds",
            "maxDurationSeconds",
            "fileSizeMB",
            "maxSizeMB",
        ]
        assert result.stats["maxDurationSeconds"] == 3600

    def test_instagram_too_long(self) -> None:
        """Test: 1000s exceeds Instagram's 900s cap and trips the Reels advisory."""
        result = validate_video("instagram", 1080, 1920, 1000, 10, "MP4")

        assert result.valid is False
        assert result.errors == ["Video duration exceeds Instagram limit (1000s / 900s)"]
        assert any(w.startswith("Video is longer than 90 seconds.") for w in result.warnings)

    def test_tiktok_long_form_advisory(self) -> None:
        result = validate_video("tiktok", 1080, 1920, 120, 20, "MP4")

        assert result.valid is True
        assert result.warnings == [
            "Video is longer than 60 seconds. While TikTok supports up to 60 minutes, "
            "shorter content (15-60s) typically gets better engagement."
        ]

    def test_very_short_video(self) -> None:
        result = validate_video("tiktok", 1080, 1920, 2, 1, "MP4")

        assert result.valid is True
        assert result.warnings == [
            "Video is very short (2s). "
            "Consider making it at least 3-5 seconds for better viewer experience."
        ]

    def test_format_has_no_aliasing(self) -> None:
        """Test: Facebook accepts only MP4."""
        result = validate_video("facebook", 1280, 720, 30, 100, "MOV")

        assert result.valid is False
        assert result.errors == ["Invalid video format for Facebook. Supported formats: MP4"]

    def test_format_case_insensitive(self) -> None:
        result = validate_video("instagram", 1080, 1920, 30, 10, "mov")

        assert result.valid is True

    def test_oversized_video(self) -> None:
        result = validate_video("instagram", 1080, 1920, 30, 20.5, "MP4")

        assert result.errors == ["Video size exceeds Instagram limit (20.50MB / 15MB)"]

    def test_landscape_on_vertical_platform_warns(self) -> None:
        result = validate_video("tiktok", 1920, 1080, 30, 10, "MP4")

        assert result.valid is True
        assert len(result.warnings) == 1
        assert result.warnings[0].endswith("Your video may be cropped or pillarboxed.")
        assert "Standard (9:16)" in result.warnings[0]

    def test_unknown_platform(self) -> None:
        result = validate_video("myspace", 1080, 1920, 30, 10, "MP4")

        assert result.errors == ["Unknown platform: myspace"]
        assert result.stats == {}


# ============================================================================
# Composite post
# ============================================================================


class TestValidatePost:
    """Tests for validate_post (text + hashtags)."""

    def test_combines_text_and_hashtag_findings(self) -> None:
        result = validate_post("instagram", "C" * 130, ["#a", "#b", "#c", "#d", "#e", "#f"])

        assert result.valid is False
        assert result.errors == ["Too many hashtags for Instagram (6/5)"]
        assert len(result.warnings) == 2
        assert result.warnings[0].startswith("Content exceeds optimal length for Instagram")
        assert result.warnings[1].startswith("More hashtags than recommended for Instagram")
        assert result.stats == {
            "charCount": 130,
            "charLimit": 2200,
            "hashtagCount": 6,
            "hashtagLimit": 5,
        }

    def test_valid_post(self) -> None:
        result = validate_post(
            "instagram",
            "Small habits compound. Here's how to start today.",
            ["#Habits", "#Growth"],
        )

        assert result.valid is True
        assert result.errors == []
        assert result.warnings == []

    def test_text_errors_come_first(self) -> None:
        result = validate_post("twitter", "A" * 300, ["#bad tag"])

        assert result.errors == [
            "Content exceeds X (Twitter) character limit (300/280)",
            'Hashtag "#bad tag" contains spaces (invalid)',
        ]

    def test_hashtags_default_to_empty(self) -> None:
        result = validate_post("twitter", "Shipping our new release today!")

        assert result.stats["hashtagCount"] == 0
        assert result.warnings[-1].startswith("No hashtags provided.")

    def test_unknown_platform_reported_by_both_checks(self) -> None:
        result = validate_post("myspace", "Hello world!", ["#a"])

        assert result.valid is False
        assert result.errors == ["Unknown platform: myspace", "Unknown platform: myspace"]

    def test_to_dict(self) -> None:
        result = validate_post("twitter", "A" * 300)

        data = result.to_dict()

        assert set(data) == {"valid", "errors", "warnings", "stats"}
        assert data["valid"] is False
        assert data["stats"]["charLimit"] == 280


# ============================================================================
# Properties across platforms
# ============================================================================


class TestCrossPlatformProperties:
    """Checks that hold for every supported platform."""

    @pytest.mark.parametrize("platform", get_supported_platforms())
    def test_at_limit_has_no_errors(self, platform: str) -> None:
        limit = get_platform_spec(platform).text.max_chars

        assert validate_text_content(platform, "x" * limit).errors == []

    @pytest.mark.parametrize("platform", get_supported_platforms())
    def test_over_limit_counts_chars(self, platform: str) -> None:
        limit = get_platform_spec(platform).text.max_chars

        result = validate_text_content(platform, "x" * (limit + 1))

        assert result.valid is False
        assert result.stats["charCount"] == limit + 1

    @pytest.mark.parametrize("platform", [*get_supported_platforms(), "myspace"])
    @pytest.mark.parametrize(
        "content,hashtags",
        [
            ("Short", []),
            ("A" * 5000, ["#ok"]),
            ("Launching today, come say hi!", ["#a", "#b c", "#"]),
        ],
    )
    def test_post_validity_is_conjunction(
        self, platform: str, content: str, hashtags: list[str]
    ) -> None:
        expected = (
            validate_text_content(platform, content).valid
            and validate_hashtags(platform, hashtags).valid
        )

        assert validate_post(platform, content, hashtags).valid == expected

    def test_exact_standard_dimensions_match(self) -> None:
        """Test: 1200x675 PNG is X (Twitter)'s standard 16:9 image."""
        result = validate_image("twitter", 1200, 675, 2, "PNG")

        assert result.valid is True
        assert result.warnings == []

    def test_small_square_instagram_image(self) -> None:
        """Test: 500px is below half of the 1080px smallest recommended width."""
        result = validate_image("instagram", 500, 500, 1, "JPG")

        assert result.valid is True
        assert result.errors == []
        assert result.warnings == [
            "Image width (500px) is quite small. "
            "Recommended minimum: 1080px for best quality on Instagram."
        ]
