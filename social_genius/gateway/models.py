"""
Pydantic models for the Gateway module.

This module defines request/response models for:
- Content, image and video validation
- Post generation
- Platform listing
- Health check

Request fields are optional where the endpoint answers a missing field with
its own 400 body; wrong types and values outside the post type, tone and
content length enumerations are still rejected by Pydantic (422).
All models use Pydantic v2 and accept both camelCase and snake_case.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from social_genius.core.prompt import ContentLength, PostType, Tone


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ValidateContentRequest(CamelModel):
    """Body of POST /api/validate-content."""

    platform: str | None = Field(
        None,
        description="Platform identifier (instagram, twitter, facebook, tiktok, linkedin)",
        examples=["instagram"],
    )
    content: str | None = Field(
        None,
        description="Post text to validate",
        examples=["Small habits compound. Here's how to start today."],
    )
    hashtags: list[str] | None = Field(
        None,
        description="Hashtags with or without leading '#'",
        examples=[["#Habits", "Growth"]],
    )


class ValidateImageRequest(CamelModel):
    """Body of POST /api/validate-image."""

    platform: str | None = None
    width: int | None = Field(None, description="Width in pixels", examples=[1080])
    height: int | None = Field(None, description="Height in pixels", examples=[1350])
    file_size_mb: float | None = Field(None, alias="fileSizeMB", examples=[2.4])
    format: str | None = Field(None, description="JPG, PNG, GIF, ...", examples=["JPEG"])


class ValidateVideoRequest(CamelModel):
    """Body of POST /api/validate-video."""

    platform: str | None = None
    width: int | None = Field(None, examples=[1080])
    height: int | None = Field(None, examples=[1920])
    duration_seconds: int | float | None = Field(None, alias="durationSeconds", examples=[45])
    file_size_mb: int | float | None = Field(None, alias="fileSizeMB", examples=[12.5])
    format: str | None = Field(None, description="MP4, MOV, ...", examples=["MP4"])


class ValidationResponse(BaseModel):
    """Validation result returned verbatim to clients."""

    valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    stats: dict[str, int | float] = Field(
        default_factory=dict,
        examples=[{"charCount": 52, "charLimit": 2200, "hashtagCount": 2, "hashtagLimit": 5}],
    )


class GeneratePostRequest(CamelModel):
    """Body of POST /api/generate-post."""

    platform: str | None = Field(None, examples=["linkedin"])
    post_type: PostType | None = Field(None, alias="postType", examples=["educational"])
    topic: str | None = Field(None, examples=["Remote onboarding for engineers"])
    tone: Tone = Field("casual", examples=["professional"])
    content_length: ContentLength = Field("medium", alias="contentLength")
    include_hashtags: bool = Field(True, alias="includeHashtags")
    include_image: bool = Field(False, alias="includeImage")
    image_style: str = Field("professional", alias="imageStyle")
    include_video: bool = Field(False, alias="includeVideo")
    video_style: str = Field("dynamic", alias="videoStyle")
    additional_instructions: str | None = Field(None, alias="additionalInstructions")


class PlatformSummary(BaseModel):
    key: str
    name: str
    optimal_aspect_ratio: str | None = Field(None, serialization_alias="optimalAspectRatio")


class PlatformListResponse(BaseModel):
    platforms: list[PlatformSummary]
    count: int


class ErrorResponse(BaseModel):
    error: str
    details: Any = None


class HealthCheckResponse(BaseModel):
    """
    Health check response.

    Returns 200 OK if healthy, 503 Service Unavailable if unhealthy.
    """

    status: str = Field(
        ...,
        description="Overall health status: 'healthy' or 'unhealthy'",
        examples=["healthy", "unhealthy"],
    )
    timestamp: str = Field(
        ...,
        description="Current timestamp in ISO8601 format",
        examples=["2026-10-18T12:00:00Z"],
    )
    version: str = Field(default="1.0.0", description="Application version")
    checks: dict[str, str] = Field(
        default_factory=dict,
        description="Component health checks (component_name -> status)",
        examples=[{"platform_registry": "ok", "post_generator": "ok"}],
    )

    @field_validator("status")
    @classmethod
    def status_valid(cls, v: str) -> str:
        """Validate that status is either 'healthy' or 'unhealthy'."""
        if v not in ("healthy", "unhealthy"):
            raise ValueError("Status must be 'healthy' or 'unhealthy'")
        return v

    @field_validator("timestamp")
    @classmethod
    def timestamp_valid(cls, v: str) -> str:
        """Validate that timestamp is in ISO8601 format."""
        try:
            datetime.fromisoformat(v.replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError(f"Timestamp must be in ISO8601 format: {e}") from e
        return v
