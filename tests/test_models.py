"""Tests for the canonical media models."""

import pydantic
import pytest

from vidgrab.models import (
    DEFAULT_TITLE,
    PLACEHOLDER_URL,
    UNKNOWN_QUALITY,
    MediaRendition,
    VideoRecord,
)


def _rendition(**kwargs):
    values = {"source_url": "https://cdn.example.com/a.mp4", "container_format": "mp4"}
    values.update(kwargs)
    return MediaRendition(**values)


class TestMediaRendition:
    """Test MediaRendition normalization."""

    def test_missing_quality_becomes_unknown(self):
        assert _rendition().quality_raw == UNKNOWN_QUALITY
        assert _rendition(quality_raw="").quality_raw == UNKNOWN_QUALITY
        assert _rendition(quality_raw=None).quality_raw == UNKNOWN_QUALITY

    def test_numeric_quality_is_stringified(self):
        assert _rendition(quality_raw=720).quality_raw == "720"

    def test_format_is_lowercased(self):
        assert _rendition(container_format=" MP4 ").container_format == "mp4"

    def test_format_required(self):
        with pytest.raises(pydantic.ValidationError):
            _rendition(container_format="")

    def test_size_coercion(self):
        assert _rendition(size_bytes="1024").size_bytes == 1024
        assert _rendition(size_bytes=2048.0).size_bytes == 2048
        assert _rendition(size_bytes=-1).size_bytes is None
        assert _rendition(size_bytes="n/a").size_bytes is None
        assert _rendition(size_bytes=0).size_bytes == 0

    def test_fps_coercion(self):
        assert _rendition(fps=29.97).fps == 30
        assert _rendition(fps=0).fps is None

    def test_placeholder(self):
        assert _rendition(source_url=PLACEHOLDER_URL).is_placeholder
        assert not _rendition().is_placeholder

    def test_frozen(self):
        rendition = _rendition()
        with pytest.raises(pydantic.ValidationError):
            rendition.quality_raw = "1080p"


class TestVideoRecord:
    """Test VideoRecord normalization."""

    def test_blank_title_uses_default(self):
        record = VideoRecord(title="  ", renditions=[_rendition()])
        assert record.title == DEFAULT_TITLE
        assert VideoRecord(title=None, renditions=[_rendition()]).title == DEFAULT_TITLE

    def test_renditions_required(self):
        with pytest.raises(pydantic.ValidationError):
            VideoRecord(title="x", renditions=[])

    def test_numeric_duration_kept_as_seconds(self):
        record = VideoRecord(duration_display=225.0, renditions=[_rendition()])
        assert record.duration_display == "225"

    def test_empty_optional_strings_are_absent(self):
        record = VideoRecord(thumbnail_url="", uploader="", renditions=[_rendition()])
        assert record.thumbnail_url is None
        assert record.uploader is None

    def test_is_placeholder_requires_all(self):
        mixed = VideoRecord(renditions=[_rendition(), _rendition(source_url=PLACEHOLDER_URL)])
        assert not mixed.is_placeholder
        only = VideoRecord(renditions=[_rendition(source_url=PLACEHOLDER_URL)])
        assert only.is_placeholder

    def test_renditions_are_owned(self):
        source = [_rendition()]
        record = VideoRecord(renditions=source)
        source.append(_rendition(quality_raw="1080p"))
        assert len(record.renditions) == 1
