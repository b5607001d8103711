"""Human-readable formatting helpers."""


def format_file_size(size_bytes: int) -> str:
    """
    Format a byte count.

    Example:
        >>> format_file_size(512)
        '512 B'
        >>> format_file_size(1536)
        '1.50 KB'
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.2f} KB"
    return f"{size_bytes / (1024 * 1024):.2f} MB"


def format_duration(seconds: int) -> str:
    """Format seconds as ``45s``, ``2m`` or ``2m 5s``."""
    if seconds < 60:
        return f"{seconds}s"
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}m {secs}s" if secs > 0 else f"{minutes}m"


def truncate(text: str, max_length: int) -> str:
    """Truncate text to ``max_length`` characters, ellipsis included."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."
