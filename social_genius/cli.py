#!/usr/bin/env python3
"""
Command-line access to the platform registry and content validator.

Examples:
    social-genius platforms
    social-genius validate --platform twitter --content "Hello" --hashtags "#AI" "#Tech"
    social-genius validate-image --platform instagram --width 1080 --height 1350 --size-mb 2 --format JPEG
    social-genius validate-video --platform tiktok --width 1080 --height 1920 --duration 45 --size-mb 20 --format MP4 --json
"""

import argparse
import json
import logging
import sys

from social_genius.core.formatting import format_duration, format_file_size, truncate
from social_genius.core.platform_specs import get_platform_spec, get_supported_platforms
from social_genius.core.validators import (
    ValidationResult,
    validate_image,
    validate_post,
    validate_video,
)

logging.basicConfig(level=logging.INFO, format="%(message)s")

CONTENT_PREVIEW_CHARS = 60


def _number(value: str) -> int | float:
    """argparse type: integral values stay int so messages read ``1000s``, not ``1000.0s``."""
    number = float(value)
    return int(number) if number.is_integer() else number


def _print_result(result: ValidationResult, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result.to_dict(), indent=2))
        return

    print(f"\n{'✅ Valid' if result.valid else '❌ Invalid'}")
    for error in result.errors:
        print(f"  error:   {error}")
    for warning in result.warnings:
        print(f"  warning: {warning}")
    if result.stats:
        stats = ", ".join(f"{key}={value}" for key, value in result.stats.items())
        print(f"  stats:   {stats}")


def _print_platforms(as_json: bool) -> None:
    platforms = get_supported_platforms()
    if as_json:
        print(json.dumps({key: get_platform_spec(key).to_dict() for key in platforms}, indent=2))
        return

    for key in platforms:
        spec = get_platform_spec(key)
        max_duration = spec.videos.max_duration_seconds
        print(
            f"{key:<10} {spec.name:<12} "
            f"text {spec.text.max_chars} chars, "
            f"hashtags {spec.hashtags.recommended}/{spec.hashtags.max}, "
            f"image {format_file_size(int(spec.images.max_size_mb * 1024 * 1024))}, "
            f"video {format_duration(max_duration) if max_duration else 'n/a'}"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="social-genius",
        description="Check social media content against platform limits",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    platforms = subparsers.add_parser("platforms", help="List supported platforms")
    platforms.add_argument("--json", action="store_true", help="Output full specs as JSON")

    validate = subparsers.add_parser("validate", help="Validate post text and hashtags")
    validate.add_argument("--platform", required=True)
    validate.add_argument("--content", required=True, help="Post text")
    validate.add_argument("--hashtags", nargs="*", default=[], help="Hashtags, '#' optional")
    validate.add_argument("--json", action="store_true", help="Output as JSON")

    image = subparsers.add_parser("validate-image", help="Validate image properties")
    image.add_argument("--platform", required=True)
    image.add_argument("--width", type=int, required=True)
    image.add_argument("--height", type=int, required=True)
    image.add_argument("--size-mb", type=_number, required=True)
    image.add_argument("--format", required=True)
    image.add_argument("--json", action="store_true", help="Output as JSON")

    video = subparsers.add_parser("validate-video", help="Validate video properties")
    video.add_argument("--platform", required=True)
    video.add_argument("--width", type=int, required=True)
    video.add_argument("--height", type=int, required=True)
    video.add_argument("--duration", type=_number, required=True, help="Duration in seconds")
    video.add_argument("--size-mb", type=_number, required=True)
    video.add_argument("--format", required=True)
    video.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns 0 when the checked content is valid, 1 otherwise."""
    args = build_parser().parse_args(argv)

    if args.command == "platforms":
        _print_platforms(args.json)
        return 0

    if args.command == "validate":
        if not args.json:
            print(f"Checking {args.platform}: \"{truncate(args.content, CONTENT_PREVIEW_CHARS)}\"")
        result = validate_post(args.platform, args.content, args.hashtags)
    elif args.command == "validate-image":
        result = validate_image(args.platform, args.width, args.height, args.size_mb, args.format)
    else:
        result = validate_video(
            args.platform, args.width, args.height, args.duration, args.size_mb, args.format
        )

    _print_result(result, args.json)
    return 0 if result.valid else 1


if __name__ == "__main__":
    sys.exit(main())
