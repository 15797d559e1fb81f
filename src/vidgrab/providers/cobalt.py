"""Cobalt API provider.

Cobalt takes a JSON POST describing the wanted codec and quality and
answers with a single direct asset URL.

API Field: status == "success", or a top-level "url"
"""

from __future__ import annotations

from typing import ClassVar

import httpx

from vidgrab.errors import ProviderError
from vidgrab.models import MediaRendition, VideoRecord

from .base import BaseProvider


class CobaltProvider(BaseProvider):
    """Resolve a URL to one h264 1080p rendition through Cobalt."""

    name: ClassVar[str] = "cobalt"
    priority: ClassVar[int] = 10
    default_endpoint: ClassVar[str] = "https://api.cobalt.tools/api/json"

    VIDEO_CODEC = "h264"
    VIDEO_QUALITY = "1080"
    AUDIO_FORMAT = "mp3"

    async def fetch(self, url: str, client: httpx.AsyncClient) -> VideoRecord:
        response = await client.post(
            self.endpoint,
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            json={
                "url": url,
                "vCodec": self.VIDEO_CODEC,
                "vQuality": self.VIDEO_QUALITY,
                "aFormat": self.AUDIO_FORMAT,
                "isAudioOnly": False,
            },
        )
        data = self._payload(response)

        if data.get("status") != "success" and not data.get("url"):
            raise ProviderError(self.name, f"no media in response (status={data.get('status')!r})")
        if not data.get("url"):
            raise ProviderError(self.name, "success status without an asset url")

        return VideoRecord(
            title=data.get("filename"),
            thumbnail_url=data.get("thumb"),
            provider=self.name,
            renditions=[
                MediaRendition(
                    source_url=data["url"],
                    quality_raw=f"{self.VIDEO_QUALITY}p",
                    container_format="mp4",
                ),
            ],
        )
