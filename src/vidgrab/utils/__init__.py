"""Utility functions for vidgrab."""

from .format import display_duration, format_duration, format_size
from .url_parser import PLATFORM_DOMAINS, classify_platform, is_valid_url, validate_url

__all__ = [
    # Formatting
    "format_size",
    "format_duration",
    "display_duration",
    # URLs
    "classify_platform",
    "validate_url",
    "is_valid_url",
    "PLATFORM_DOMAINS",
]
