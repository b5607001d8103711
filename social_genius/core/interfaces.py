"""Shared interfaces for Social Genius components.

Single source of truth for the custom exceptions used across the project.
The validation engine itself never raises: unknown platforms and rule
violations are reported through ``ValidationResult``. These exceptions cover
the I/O-bound layers around it (LLM calls, post generation, prompt building).
"""


class SocialGeniusError(Exception):
    """Base exception for all Social Genius errors.

    All custom exceptions inherit from this base class so callers can catch
    every project-specific error with a single except clause.
    """

    pass


class LLMError(SocialGeniusError):
    """Raised when the LLM API call fails.

    Examples:
        - Vertex AI timeout
        - Rate limit exceeded (429)
        - Model unavailable (503)
        - Invalid API credentials
    """

    pass


class GenerationError(SocialGeniusError):
    """Raised when a model response cannot be turned into a post.

    Examples:
        - No JSON object in the model output
        - Malformed JSON
    """

    def __init__(self, message: str, raw_output: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.raw_output = raw_output


class UnknownPlatformError(SocialGeniusError):
    """Raised when a generation path is asked for a platform with no spec."""

    def __init__(self, platform: str) -> None:
        super().__init__(f"Unknown platform: {platform}")
        self.platform = platform
