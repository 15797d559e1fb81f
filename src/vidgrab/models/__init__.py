"""Pydantic models for vidgrab."""

from .media import DEFAULT_TITLE, PLACEHOLDER_URL, UNKNOWN_QUALITY, MediaRendition, VideoRecord
from .platform import PlatformIdentity
from .view import RenderModel, RenditionView

__all__ = [
    # Canonical result
    "VideoRecord",
    "MediaRendition",
    "PLACEHOLDER_URL",
    "UNKNOWN_QUALITY",
    "DEFAULT_TITLE",
    # Platform
    "PlatformIdentity",
    # Presentation
    "RenderModel",
    "RenditionView",
]
