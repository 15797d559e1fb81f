"""Human-readable formatting of sizes and durations."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

SIZE_UNITS = ("B", "KB", "MB", "GB")

_ONE_DECIMAL = Decimal("0.1")


def format_size(size_bytes: int | float | None) -> str:
    """Convert bytes to human-readable string.

    None means the size is unknown. Zero is a real size and renders as
    "0.0 B". Ties round up ("1.25" -> "1.3").
    """
    if size_bytes is None:
        return "Unknown size"
    size = float(size_bytes)
    unit_index = 0
    while size >= 1024 and unit_index < len(SIZE_UNITS) - 1:
        size /= 1024
        unit_index += 1
    rounded = Decimal(size).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
    return f"{rounded} {SIZE_UNITS[unit_index]}"


def format_duration(total_seconds: int | float | None) -> str:
    """Format seconds as m:ss (minutes are not wrapped into hours)."""
    if not total_seconds:
        return "Unknown"
    seconds = int(total_seconds)
    minutes, remainder = divmod(seconds, 60)
    return f"{minutes}:{remainder:02d}"


def display_duration(value: str | None) -> str | None:
    """Format a VideoRecord duration that may be preformatted or raw seconds.

    Args:
        value: "3:45", "225" or None

    Returns:
        A display string, or None when no duration is known (including zero)
    """
    if value is None:
        return None
    if value.isascii() and value.isdigit():
        seconds = int(value)
        return format_duration(seconds) if seconds else None
    return value
