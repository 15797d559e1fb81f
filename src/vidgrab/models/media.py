"""Canonical media models shared by every provider."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .platform import PlatformIdentity

# Sentinel source URL of a rendition that cannot be downloaded
PLACEHOLDER_URL = "#"

# Quality token used when a provider does not report one
UNKNOWN_QUALITY = "unknown"

DEFAULT_TITLE = "Downloaded Video"


def _optional_count(value: Any) -> int | None:
    """Coerce a provider-reported count to a non-negative int or None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        count = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return None
    return count if count >= 0 else None


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class MediaRendition(BaseModel):
    """One downloadable variant of a video or audio asset."""

    model_config = ConfigDict(frozen=True)

    source_url: str
    quality_raw: str = UNKNOWN_QUALITY
    container_format: str = Field(min_length=1)
    size_bytes: int | None = Field(default=None, ge=0)
    fps: int | None = Field(default=None, gt=0)

    @field_validator("quality_raw", mode="before")
    @classmethod
    def _quality_or_unknown(cls, value: Any) -> str:
        return _optional_text(value) or UNKNOWN_QUALITY

    @field_validator("container_format", mode="before")
    @classmethod
    def _lowercase_format(cls, value: Any) -> Any:
        if value is None:
            return value
        return str(value).strip().lower()

    @field_validator("size_bytes", mode="before")
    @classmethod
    def _size(cls, value: Any) -> int | None:
        return _optional_count(value)

    @field_validator("fps", mode="before")
    @classmethod
    def _fps(cls, value: Any) -> int | None:
        if value is None or isinstance(value, bool):
            return None
        try:
            fps = round(float(value))
        except (TypeError, ValueError, OverflowError):
            return None
        return fps if fps > 0 else None

    @property
    def is_placeholder(self) -> bool:
        """Check if this rendition is a non-functional placeholder."""
        return self.source_url == PLACEHOLDER_URL


class VideoRecord(BaseModel):
    """Normalized result of resolving one URL.

    Produced by a provider adapter or by the placeholder generator. The
    record is frozen and owns its renditions; consumers only read it.

    ``duration_display`` holds either a preformatted string ("3:45") or a
    raw second count ("225"). Format it once, with
    ``vidgrab.utils.display_duration``.
    """

    model_config = ConfigDict(frozen=True)

    title: str = DEFAULT_TITLE
    thumbnail_url: str | None = None
    duration_display: str | None = None
    uploader: str | None = None
    view_count: int | None = Field(default=None, ge=0)
    renditions: tuple[MediaRendition, ...] = Field(min_length=1)

    # Set by the placeholder generator only
    platform: PlatformIdentity | None = None
    # Name of the provider that produced the record
    provider: str | None = None

    @field_validator("title", mode="before")
    @classmethod
    def _title_or_default(cls, value: Any) -> str:
        return _optional_text(value) or DEFAULT_TITLE

    @field_validator("thumbnail_url", "uploader", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> str | None:
        return _optional_text(value)

    @field_validator("duration_display", mode="before")
    @classmethod
    def _duration(cls, value: Any) -> str | None:
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            seconds = _optional_count(value)
            return None if seconds is None else str(seconds)
        return _optional_text(value)

    @field_validator("view_count", mode="before")
    @classmethod
    def _views(cls, value: Any) -> int | None:
        return _optional_count(value)

    @property
    def is_placeholder(self) -> bool:
        """Check if every rendition is a placeholder (no provider answered)."""
        return all(r.is_placeholder for r in self.renditions)
