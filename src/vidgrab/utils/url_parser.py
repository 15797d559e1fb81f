"""URL utilities for video platforms.

Recognizes:
- YouTube: youtube.com, youtu.be
- Instagram, TikTok, Facebook, Vimeo, Dailymotion
- Twitter: twitter.com, x.com
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from vidgrab.errors import ValidationError
from vidgrab.models import PlatformIdentity

YOUTUBE = PlatformIdentity(label="YouTube", icon_key="youtube", accent_color="#ff0000")
INSTAGRAM = PlatformIdentity(label="Instagram", icon_key="instagram", accent_color="#e4405f")
TIKTOK = PlatformIdentity(label="TikTok", icon_key="tiktok", accent_color="#000000")
TWITTER = PlatformIdentity(label="Twitter", icon_key="twitter", accent_color="#1da1f2")
FACEBOOK = PlatformIdentity(label="Facebook", icon_key="facebook", accent_color="#1877f2")
VIMEO = PlatformIdentity(label="Vimeo", icon_key="vimeo", accent_color="#1ab7ea")
DAILYMOTION = PlatformIdentity(label="Dailymotion", icon_key="play-circle", accent_color="#0066cc")
UNKNOWN = PlatformIdentity(label="Unknown", icon_key="globe", accent_color="#64748b")

# Domain substring -> identity. Order matters: first match wins, and
# aliases share one identity object.
PLATFORM_DOMAINS: tuple[tuple[str, PlatformIdentity], ...] = (
    ("youtube.com", YOUTUBE),
    ("youtu.be", YOUTUBE),
    ("instagram.com", INSTAGRAM),
    ("tiktok.com", TIKTOK),
    ("twitter.com", TWITTER),
    ("x.com", TWITTER),
    ("facebook.com", FACEBOOK),
    ("vimeo.com", VIMEO),
    ("dailymotion.com", DAILYMOTION),
)

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*$")


def classify_platform(url: str) -> PlatformIdentity:
    """Detect which platform a URL belongs to.

    Matching is a case-sensitive substring test against PLATFORM_DOMAINS.

    Args:
        url: Video URL

    Returns:
        PlatformIdentity of the first matching domain, or UNKNOWN
    """
    for domain, identity in PLATFORM_DOMAINS:
        if domain in url:
            return identity
    return UNKNOWN


def validate_url(url: str | None) -> str:
    """Check that a user-supplied value is an absolute URL.

    Args:
        url: Raw input, surrounding whitespace is ignored

    Returns:
        The trimmed URL

    Raises:
        ValidationError: If the value is empty or not an absolute URL
    """
    candidate = (url or "").strip()
    if not candidate:
        raise ValidationError("Please enter a video URL")

    try:
        parts = urlsplit(candidate)
        # Raises ValueError for a non-numeric or out-of-range port
        parts.port
    except ValueError as e:
        raise ValidationError("Please enter a valid URL") from e

    if not parts.scheme or not _SCHEME_RE.match(parts.scheme) or not parts.hostname:
        raise ValidationError("Please enter a valid URL")

    return candidate


def is_valid_url(url: str | None) -> bool:
    """Check if a value would pass validate_url."""
    try:
        validate_url(url)
    except ValidationError:
        return False
    return True
