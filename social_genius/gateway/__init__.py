"""Gateway module - HTTP interface for validation and post generation."""

from social_genius.gateway.models import (
    GeneratePostRequest,
    HealthCheckResponse,
    ValidateContentRequest,
    ValidationResponse,
)

__all__ = [
    "GeneratePostRequest",
    "HealthCheckResponse",
    "ValidateContentRequest",
    "ValidationResponse",
]
