"""InstaVideo API provider.

Returns the full format list of a video, one entry per rendition, along
with title, thumbnail, duration and uploader.

API Field: formats (non-empty list of {url, height, ext, filesize, fps})
"""

from __future__ import annotations

from typing import Any, ClassVar

import httpx

from vidgrab.errors import ProviderError
from vidgrab.models import MediaRendition, VideoRecord

from .base import BaseProvider


class InstaVideoProvider(BaseProvider):
    """Resolve a URL to every format InstaVideo knows about."""

    name: ClassVar[str] = "instavideo"
    priority: ClassVar[int] = 20
    default_endpoint: ClassVar[str] = "https://instavideo-uhd.onrender.com/api/video-info"

    async def fetch(self, url: str, client: httpx.AsyncClient) -> VideoRecord:
        response = await client.get(self.endpoint, params={"url": url})
        data = self._payload(response)

        formats = data.get("formats")
        if not isinstance(formats, list) or not formats:
            raise ProviderError(self.name, "response has no formats")

        renditions = [self._rendition(f) for f in formats if isinstance(f, dict) and f.get("url")]
        if not renditions:
            raise ProviderError(self.name, "no format carries a url")

        return VideoRecord(
            title=data.get("title"),
            thumbnail_url=data.get("thumbnail"),
            duration_display=data.get("duration"),
            uploader=data.get("uploader"),
            view_count=data.get("view_count"),
            provider=self.name,
            renditions=renditions,
        )

    @staticmethod
    def _rendition(item: dict[str, Any]) -> MediaRendition:
        """Map one format entry; entries without a height are audio."""
        height = item.get("height")
        return MediaRendition(
            source_url=item["url"],
            quality_raw=f"{height}p" if height else "Audio",
            container_format=item.get("ext") or "mp4",
            size_bytes=item.get("filesize"),
            fps=item.get("fps"),
        )
