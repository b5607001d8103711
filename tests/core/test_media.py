"""Unit tests for image and video request planning."""

import pytest

from social_genius.core.media import (
    DEFAULT_IMAGE_ASPECT_RATIO,
    IMAGE_STYLE_ENHANCEMENTS,
    IMAGEN_ASPECT_RATIOS,
    PLATFORM_VIDEO_SETTINGS,
    enhance_image_prompt,
    enhance_video_prompt,
    normalize_image_aspect_ratio,
    plan_image,
    plan_video,
    platform_image_aspect_ratio,
    platform_video_settings,
)


class TestImageAspectRatio:
    """Tests for aspect ratio selection and normalization."""

    @pytest.mark.parametrize("ratio", IMAGEN_ASPECT_RATIOS)
    def test_supported_ratio_passes_through(self, ratio: str) -> None:
        assert normalize_image_aspect_ratio(ratio) == ratio

    @pytest.mark.parametrize(
        "ratio,expected",
        [("4:5", "3:4"), ("5:4", "4:3"), ("2:3", "3:4"), ("3:2", "4:3"), ("21:9", "16:9")],
    )
    def test_fallback_mapping(self, ratio: str, expected: str) -> None:
        assert normalize_image_aspect_ratio(ratio) == expected

    def test_unknown_ratio_uses_default(self) -> None:
        assert normalize_image_aspect_ratio("7:3") == DEFAULT_IMAGE_ASPECT_RATIO

    def test_whitespace_stripped(self) -> None:
        assert normalize_image_aspect_ratio(" 16:9 ") == "16:9"

    def test_platform_defaults(self) -> None:
        assert platform_image_aspect_ratio("Instagram") == "3:4"
        assert platform_image_aspect_ratio("tiktok") == "9:16"
        assert platform_image_aspect_ratio("myspace") == DEFAULT_IMAGE_ASPECT_RATIO


class TestPromptEnhancement:
    def test_image_style_appended(self) -> None:
        prompt = enhance_image_prompt("A coffee cup", "minimalist")

        assert prompt == f"A coffee cup. Style: {IMAGE_STYLE_ENHANCEMENTS['minimalist']}"

    def test_unknown_image_style_falls_back_to_realistic(self) -> None:
        prompt = enhance_image_prompt("A coffee cup", "professional")

        assert prompt.endswith(IMAGE_STYLE_ENHANCEMENTS["realistic"])

    def test_video_prompt_has_style_and_platform_hint(self) -> None:
        prompt = enhance_video_prompt("Morning routine", "cinematic", "tiktok")

        assert prompt.startswith("Morning routine. cinematic camera movements")
        assert prompt.endswith("hook in first 3 seconds, vertical format")


class TestVideoSettings:
    def test_platform_settings(self) -> None:
        assert platform_video_settings("linkedin") == {"aspect_ratio": "16:9", "duration_seconds": 90}

    def test_unknown_platform_default(self) -> None:
        assert platform_video_settings("myspace") == {"aspect_ratio": "16:9", "duration_seconds": 30}

    def test_returns_copy(self) -> None:
        """Test: mutating the result does not alter the shared table."""
        settings = platform_video_settings("instagram")
        settings["duration_seconds"] = 1

        assert PLATFORM_VIDEO_SETTINGS["instagram"]["duration_seconds"] == 60


class TestPlans:
    """Tests for plan_image / plan_video."""

    def test_plan_image_defaults(self) -> None:
        plan = plan_image("instagram", "Latte art on a wooden table")

        assert plan.aspect_ratio == "3:4"
        assert plan.style == "realistic"
        assert plan.prompt.startswith("Latte art on a wooden table. Style: photorealistic")
        assert plan.recommended_dimensions.aspect_ratio == "1:1"

    def test_plan_image_explicit_ratio_normalized(self) -> None:
        plan = plan_image("instagram", "Latte art", aspect_ratio="4:5")

        assert plan.aspect_ratio == "3:4"

    def test_plan_image_to_dict(self) -> None:
        data = plan_image("twitter", "Launch banner", style="bold").to_dict()

        assert data["aspectRatio"] == "16:9"
        assert data["style"] == "bold"
        assert data["recommendedDimensions"] == {
            "name": "Standard",
            "width": 1200,
            "height": 675,
            "aspectRatio": "16:9",
        }

    def test_plan_image_unknown_platform(self) -> None:
        data = plan_image("myspace", "Anything").to_dict()

        assert data["aspectRatio"] == "1:1"
        assert data["recommendedDimensions"] is None

    def test_plan_video_defaults(self) -> None:
        plan = plan_video("tiktok", "Dance challenge")

        assert plan.aspect_ratio == "9:16"
        assert plan.duration_seconds == 30
        assert plan.style == "dynamic"
        assert plan.recommended_dimensions.width == 1080

    def test_plan_video_overrides(self) -> None:
        data = plan_video(
            "linkedin", "Product demo", style="smooth", duration_seconds=45, aspect_ratio="1:1"
        ).to_dict()

        assert data["aspectRatio"] == "1:1"
        assert data["durationSeconds"] == 45
        assert data["recommendedDimensions"]["aspectRatio"] == "16:9"
