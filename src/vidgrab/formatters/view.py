"""Presentation mapper: VideoRecord -> RenderModel."""

from __future__ import annotations

import re

from vidgrab.models import PLACEHOLDER_URL, MediaRendition, RenderModel, RenditionView, VideoRecord
from vidgrab.quality import classify_rendition
from vidgrab.utils.format import display_duration, format_size
from vidgrab.utils.url_parser import classify_platform

_UNSAFE_FILENAME_RE = re.compile(r"[^a-zA-Z0-9]")


def safe_filename(title: str, container_format: str) -> str:
    """Build a download filename: every non-alphanumeric char becomes "_"."""
    return f"{_UNSAFE_FILENAME_RE.sub('_', title)}.{container_format}"


def to_rendition_view(rendition: MediaRendition, title: str) -> RenditionView:
    """Map one rendition to its render-ready record."""
    quality = classify_rendition(rendition.quality_raw, rendition.container_format)
    return RenditionView(
        source_url=rendition.source_url,
        quality_raw=rendition.quality_raw,
        format_label=rendition.container_format.upper(),
        size=format_size(rendition.size_bytes),
        tier=quality.tier,
        label=quality.label,
        icon_key=quality.icon_key,
        filename=safe_filename(title, rendition.container_format),
        fps=rendition.fps,
        actionable=rendition.source_url != PLACEHOLDER_URL,
    )


def to_view_model(record: VideoRecord, source_url: str) -> RenderModel:
    """Convert a resolved record into data a renderer can display.

    The platform is recomputed from the URL the user asked for rather
    than taken from the record.

    Args:
        record: Result of resolve()
        source_url: URL originally submitted

    Returns:
        RenderModel with one RenditionView per rendition
    """
    return RenderModel(
        platform=classify_platform(source_url),
        title=record.title,
        thumbnail_url=record.thumbnail_url,
        duration=display_duration(record.duration_display),
        uploader=record.uploader,
        view_count=record.view_count,
        is_placeholder=record.is_placeholder,
        renditions=[to_rendition_view(r, record.title) for r in record.renditions],
    )
