"""Quality classification for renditions.

Three ladders map a rendition's height to a badge tier, a display label
and an icon key. They are related but not identical: the badge ladder
bottoms out at "quality-360p" for anything under 480, while the label
ladder has its own 360 step and falls back to "Standard Quality" below
that.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

AUDIO_TIER = "quality-audio"
AUDIO_LABEL = "Audio Only"
AUDIO_ICON = "music"

# (minimum height, value); evaluated top-down, first match wins
BADGE_LADDER: tuple[tuple[int, str], ...] = (
    (2160, "quality-4k"),
    (1080, "quality-1080p"),
    (720, "quality-720p"),
    (480, "quality-480p"),
)
BADGE_FLOOR = "quality-360p"

LABEL_LADDER: tuple[tuple[int, str], ...] = (
    (2160, "4K Ultra HD"),
    (1080, "Full HD 1080p"),
    (720, "HD 720p"),
    (480, "SD 480p"),
    (360, "SD 360p"),
)
LABEL_FLOOR = "Standard Quality"

ICON_LADDER: tuple[tuple[int, str], ...] = (
    (2160, "gem"),
    (1080, "crown"),
    (720, "star"),
)
ICON_FLOOR = "play"

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


@dataclass(frozen=True)
class RenditionClass:
    """Classification of one rendition."""

    tier: str
    label: str
    icon_key: str


def parse_height(quality_raw: str | None) -> int | None:
    """Parse the leading integer of a quality token.

    "1080p" -> 1080, " 720" -> 720, "128k" -> 128, "abc" -> None.
    None stands for "not a number" and never matches a ladder step.
    """
    if not quality_raw:
        return None
    match = _LEADING_INT_RE.match(quality_raw)
    if not match:
        return None
    return int(match.group(1))


def is_audio_format(container_format: str | None) -> bool:
    """Check if a format token denotes an audio-only rendition."""
    return bool(container_format) and "audio" in container_format


def _climb(height: int | None, ladder: tuple[tuple[int, str], ...], floor: str) -> str:
    if height is not None:
        for minimum, value in ladder:
            if height >= minimum:
                return value
    return floor


def quality_badge(quality_raw: str | None, container_format: str | None) -> str:
    """Return the badge tier, e.g. "quality-1080p"."""
    if is_audio_format(container_format):
        return AUDIO_TIER
    return _climb(parse_height(quality_raw), BADGE_LADDER, BADGE_FLOOR)


def quality_label(quality_raw: str | None, container_format: str | None) -> str:
    """Return the display label, e.g. "Full HD 1080p"."""
    if is_audio_format(container_format):
        return AUDIO_LABEL
    return _climb(parse_height(quality_raw), LABEL_LADDER, LABEL_FLOOR)


def quality_icon(quality_raw: str | None, container_format: str | None) -> str:
    """Return the icon key, e.g. "crown"."""
    if is_audio_format(container_format):
        return AUDIO_ICON
    return _climb(parse_height(quality_raw), ICON_LADDER, ICON_FLOOR)


def classify_rendition(quality_raw: str | None, container_format: str | None) -> RenditionClass:
    """Classify a rendition by quality token and container format.

    Args:
        quality_raw: Provider quality token ("1080p", "720", "audio")
        container_format: Format token ("mp4", "audio/mp3")

    Returns:
        RenditionClass with badge tier, label and icon key
    """
    return RenditionClass(
        tier=quality_badge(quality_raw, container_format),
        label=quality_label(quality_raw, container_format),
        icon_key=quality_icon(quality_raw, container_format),
    )
