"""Pytest configuration and fixtures."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from vidgrab import config
from vidgrab.models import MediaRendition, VideoRecord
from vidgrab.providers import BaseProvider


class FakeProvider(BaseProvider):
    """Provider returning a canned record or raising a canned error."""

    def __init__(
        self,
        name: str,
        record: VideoRecord | None = None,
        error: BaseException | None = None,
        delay: float = 0.0,
    ):
        super().__init__("https://provider.invalid/api")
        self.name = name
        self.record = record
        self.error = error
        self.delay = delay
        self.calls: list[str] = []

    async def fetch(self, url: str, client: httpx.AsyncClient) -> VideoRecord:
        self.calls.append(url)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        assert self.record is not None
        return self.record


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch):
    """Ignore user config files and VIDGRAB_* variables."""
    monkeypatch.setattr(config, "CONFIG_LOCATIONS", [])
    for key in ("TIMEOUT", "USER_AGENT", "PROVIDERS", "COBALT_URL", "INSTAVIDEO_URL", "YTDLP_URL"):
        monkeypatch.delenv(f"VIDGRAB_{key}", raising=False)
    config.reset_config()
    yield
    config.reset_config()


@pytest.fixture
def make_record() -> Callable[..., VideoRecord]:
    """Build a VideoRecord with one real rendition."""

    def _make(title: str = "Test Video", provider: str = "fake", **kwargs: Any) -> VideoRecord:
        renditions = kwargs.pop(
            "renditions",
            [
                MediaRendition(
                    source_url=f"https://cdn.example.com/{provider}.mp4",
                    quality_raw="720p",
                    container_format="mp4",
                    size_bytes=1048576,
                )
            ],
        )
        return VideoRecord(title=title, provider=provider, renditions=renditions, **kwargs)

    return _make


@pytest.fixture
def fake_provider() -> type[FakeProvider]:
    """The FakeProvider class."""
    return FakeProvider


@pytest.fixture
def make_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Build an AsyncClient whose requests are answered by a handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make
