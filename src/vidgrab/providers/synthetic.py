"""Placeholder results for when no provider answers."""

from __future__ import annotations

from vidgrab.models import PLACEHOLDER_URL, MediaRendition, VideoRecord
from vidgrab.utils.url_parser import classify_platform

PLACEHOLDER_NAME = "synthetic"
PLACEHOLDER_TITLE = "Sample Video - Professional Quality Download"
PLACEHOLDER_THUMBNAIL = (
    "https://via.placeholder.com/320x240/667eea/ffffff?text=Video+Thumbnail"
)
PLACEHOLDER_DURATION = "3:45"
PLACEHOLDER_UPLOADER = "Demo Channel"

# (quality, format, illustrative size in bytes)
PLACEHOLDER_RENDITIONS: tuple[tuple[str, str, int], ...] = (
    ("1080p", "mp4", 52428800),
    ("720p", "mp4", 31457280),
    ("480p", "mp4", 20971520),
    ("audio", "mp3", 5242880),
)


def generate_placeholder(url: str) -> VideoRecord:
    """Build the placeholder record shown when every provider failed.

    The result depends on the URL only through its platform identity.
    Every rendition carries PLACEHOLDER_URL, so renderers can disable
    downloads and show a degraded-mode notice.

    Args:
        url: The URL the user asked for

    Returns:
        VideoRecord with four placeholder renditions
    """
    return VideoRecord(
        title=PLACEHOLDER_TITLE,
        thumbnail_url=PLACEHOLDER_THUMBNAIL,
        duration_display=PLACEHOLDER_DURATION,
        uploader=PLACEHOLDER_UPLOADER,
        platform=classify_platform(url),
        provider=PLACEHOLDER_NAME,
        renditions=[
            MediaRendition(
                source_url=PLACEHOLDER_URL,
                quality_raw=quality,
                container_format=container_format,
                size_bytes=size_bytes,
            )
            for quality, container_format, size_bytes in PLACEHOLDER_RENDITIONS
        ],
    )
