"""Social Genius - platform-tailored social media post generation and validation."""

from .core.validators import validate_post

__version__ = "1.0.0"

__all__ = [
    "validate_post",
]
