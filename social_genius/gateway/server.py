"""
FastAPI server for the Gateway module.

This module implements the HTTP interface for Social Genius:
- GET  /health: Health check
- GET  /api/platforms: Supported platforms
- GET  /api/platforms/{platform}: Full platform specification
- POST /api/validate-content: Validate post text + hashtags
- POST /api/validate-image: Validate image properties
- POST /api/validate-video: Validate video properties
- POST /api/generate-post: Generate a post with the LLM

An unknown platform on a validation endpoint is not an HTTP error: the
response is a normal ValidationResult with valid=false.
"""

import json
import logging
import os
import uuid
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from social_genius import __version__
from social_genius.core.config import get_model
from social_genius.core.interfaces import GenerationError, LLMError, UnknownPlatformError
from social_genius.core.llm_client import LLMClient
from social_genius.core.platform_specs import (
    get_optimal_aspect_ratio,
    get_platform_spec,
    get_supported_platforms,
    is_platform_supported,
)
from social_genius.core.post_generator import PostGenerator
from social_genius.core.prompt import PostRequest
from social_genius.core.validators import validate_image, validate_post, validate_video
from social_genius.gateway.models import (
    ErrorResponse,
    GeneratePostRequest,
    HealthCheckResponse,
    PlatformListResponse,
    PlatformSummary,
    ValidateContentRequest,
    ValidateImageRequest,
    ValidateVideoRequest,
    ValidationResponse,
)

# Configure structured JSON logging
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"), format="%(message)s")
logger = logging.getLogger(__name__)


def log_structured(level: str, message: str, **extra: str | int | float | bool) -> None:
    """
    Log structured JSON for Cloud Logging.

    Args:
        level: Log level (INFO, WARNING, ERROR, etc.)
        message: Log message
        **extra: Additional fields to include in log entry
    """
    log_entry = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "severity": level,
        "message": message,
        "component": "gateway",
        **extra,
    }
    getattr(logger, level.lower())(json.dumps(log_entry))


app = FastAPI(
    title="Social Genius Gateway",
    version=__version__,
    description="Platform-tailored social media post generation and validation",
)

# Built on first use so the validation endpoints never need model credentials
_post_generator: PostGenerator | None = None


def get_post_generator() -> PostGenerator:
    global _post_generator
    if _post_generator is None:
        model_name = os.getenv("MODEL_NAME", "gemini-2.5-flash")
        _post_generator = PostGenerator(LLMClient(get_model(), model=model_name))
    return _post_generator


def set_post_generator(generator: PostGenerator | None) -> None:
    """Replace the post generator (tests inject one backed by MockChatModel)."""
    global _post_generator
    _post_generator = generator


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=message).model_dump(exclude_none=True),
    )


@app.get("/health", response_model=HealthCheckResponse)
async def health() -> HealthCheckResponse:
    """
    Health check endpoint.

    The registry is static, so the service is healthy whenever it can serve
    requests. The post generator is reported as configured or not without
    contacting the model.
    """
    checks = {
        "platform_registry": "ok" if get_supported_platforms() else "empty",
        "post_generator": "ok" if _post_generator is not None else "not_initialized",
    }

    return HealthCheckResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=__version__,
        checks=checks,
    )


@app.get("/api/platforms", response_model=PlatformListResponse)
async def list_platforms() -> PlatformListResponse:
    """List supported platforms in declaration order."""
    summaries = []
    for key in get_supported_platforms():
        spec = get_platform_spec(key)
        summaries.append(
            PlatformSummary(
                key=key,
                name=spec.name if spec else key,
                optimal_aspect_ratio=get_optimal_aspect_ratio(key),
            )
        )
    return PlatformListResponse(platforms=summaries, count=len(summaries))


@app.get("/api/platforms/{platform}")
async def platform_detail(platform: str) -> JSONResponse:
    """Return the full specification for one platform (404 when unknown)."""
    spec = get_platform_spec(platform)
    if spec is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": f"Unsupported platform: {platform}"},
        )
    return JSONResponse(content={"key": platform.lower(), **spec.to_dict()})


@app.post("/api/validate-content", response_model=ValidationResponse)
async def validate_content(payload: ValidateContentRequest):
    """
    Validate post text and hashtags.

    Returns:
        ValidationResult from validate_post, verbatim

    Errors:
        400: If platform or content is missing
    """
    if not payload.platform or payload.content is None:
        return _bad_request("Missing required fields: platform, content")

    result = validate_post(payload.platform, payload.content, payload.hashtags or [])

    log_structured(
        "INFO",
        "Content validated",
        platform=payload.platform,
        valid=result.valid,
        error_count=len(result.errors),
        warning_count=len(result.warnings),
    )
    return result.to_dict()


@app.post("/api/validate-image", response_model=ValidationResponse)
async def validate_image_endpoint(payload: ValidateImageRequest):
    """Validate image width, height, size and format for a platform."""
    missing = [
        name
        for name, value in (
            ("platform", payload.platform),
            ("width", payload.width),
            ("height", payload.height),
            ("fileSizeMB", payload.file_size_mb),
            ("format", payload.format),
        )
        if value is None or value == ""
    ]
    if missing:
        return _bad_request(f"Missing required fields: {', '.join(missing)}")

    result = validate_image(
        payload.platform, payload.width, payload.height, payload.file_size_mb, payload.format
    )
    log_structured("INFO", "Image validated", platform=payload.platform, valid=result.valid)
    return result.to_dict()


@app.post("/api/validate-video", response_model=ValidationResponse)
async def validate_video_endpoint(payload: ValidateVideoRequest):
    """Validate video width, height, duration, size and format for a platform."""
    missing = [
        name
        for name, value in (
            ("platform", payload.platform),
            ("width", payload.width),
            ("height", payload.height),
            ("durationSeconds", payload.duration_seconds),
            ("fileSizeMB", payload.file_size_mb),
            ("format", payload.format),
        )
        if value is None or value == ""
    ]
    if missing:
        return _bad_request(f"Missing required fields: {', '.join(missing)}")

    result = validate_video(
        payload.platform,
        payload.width,
        payload.height,
        payload.duration_seconds,
        payload.file_size_mb,
        payload.format,
    )
    log_structured("INFO", "Video validated", platform=payload.platform, valid=result.valid)
    return result.to_dict()


@app.post("/api/generate-post")
async def generate_post(payload: GeneratePostRequest):
    """
    Generate a platform-optimized post.

    Process flow:
    1. Check required fields and platform support
    2. Build prompts and call the LLM
    3. Parse, validate and truncate hashtag overflow
    4. Return post, validation, usage and timing

    Errors:
        400: Missing platform/postType/topic, or unsupported platform
        500: LLM failure or unparseable model output
    """
    trace_id = str(uuid.uuid4())

    if not payload.platform or not payload.post_type or not payload.topic:
        return _bad_request("Missing required fields: platform, postType, topic")

    if not is_platform_supported(payload.platform):
        return _bad_request(f"Unsupported platform: {payload.platform}")

    log_structured(
        "INFO",
        "Post generation requested",
        trace_id=trace_id,
        platform=payload.platform,
        post_type=payload.post_type,
    )

    request = PostRequest(
        platform=payload.platform.lower(),
        post_type=payload.post_type,
        topic=payload.topic,
        tone=payload.tone,
        content_length=payload.content_length,
        include_hashtags=payload.include_hashtags,
        include_image=payload.include_image,
        image_style=payload.image_style,
        include_video=payload.include_video,
        video_style=payload.video_style,
        additional_instructions=payload.additional_instructions,
    )

    try:
        post = await get_post_generator().generate(request)
    except UnknownPlatformError as e:
        return _bad_request(str(e))
    except (LLMError, GenerationError) as e:
        log_structured(
            "ERROR",
            f"Post generation failed: {e}",
            trace_id=trace_id,
            error_type=type(e).__name__,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Failed to generate post", details=str(e)).model_dump(),
        )

    log_structured(
        "INFO",
        "Post generation completed",
        trace_id=trace_id,
        platform=post.platform,
        valid=post.validation.valid,
        total_tokens=post.usage.total_tokens,
        generation_time_ms=post.generation_time_ms,
    )
    return post.to_dict()


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler for unhandled errors.

    Logs the error with trace context and returns a generic error response
    to avoid leaking internal details to users.
    """
    trace_id = str(uuid.uuid4())

    log_structured(
        "ERROR",
        f"Unhandled exception: {str(exc)}",
        trace_id=trace_id,
        error_type=type(exc).__name__,
        path=str(request.url),
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "trace_id": trace_id,
        },
    )
