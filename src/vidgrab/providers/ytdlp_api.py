"""yt-dlp web API provider.

A hosted yt-dlp wrapper that answers with one download URL.

API Field: download_url
"""

from __future__ import annotations

from typing import ClassVar

import httpx

from vidgrab.errors import ProviderError
from vidgrab.models import MediaRendition, VideoRecord

from .base import BaseProvider


class YtDlpApiProvider(BaseProvider):
    """Resolve a URL to a single rendition through a yt-dlp web API."""

    name: ClassVar[str] = "ytdlp-api"
    priority: ClassVar[int] = 30
    default_endpoint: ClassVar[str] = "https://yt-dlp-api.herokuapp.com/download"

    DEFAULT_QUALITY = "720p"
    DEFAULT_FORMAT = "mp4"

    async def fetch(self, url: str, client: httpx.AsyncClient) -> VideoRecord:
        response = await client.get(self.endpoint, params={"url": url})
        data = self._payload(response)

        download_url = data.get("download_url")
        if not download_url:
            raise ProviderError(self.name, "response has no download_url")

        return VideoRecord(
            title=data.get("title"),
            thumbnail_url=data.get("thumbnail"),
            provider=self.name,
            renditions=[
                MediaRendition(
                    source_url=download_url,
                    quality_raw=data.get("quality") or self.DEFAULT_QUALITY,
                    container_format=data.get("format") or self.DEFAULT_FORMAT,
                    size_bytes=data.get("filesize"),
                ),
            ],
        )
