"""Tests for the resolution orchestrator."""

import asyncio

import httpx
import pytest

from vidgrab import config
from vidgrab.errors import ProviderError, ValidationError
from vidgrab.formatters import to_view_model
from vidgrab.models import PLACEHOLDER_URL
from vidgrab.providers import Failure
from vidgrab.resolve import attempt, resolve, resolve_sync

URL = "https://www.tiktok.com/@user/video/1234567890"


def _no_network(request: httpx.Request) -> httpx.Response:
    raise AssertionError(f"unexpected request to {request.url}")


class TestResolve:
    """Test resolve."""

    @pytest.mark.asyncio
    async def test_first_success_wins(self, fake_provider, make_record, make_client):
        """A fails, B succeeds, C is never invoked."""
        a = fake_provider("a", error=ProviderError("a", "no media"))
        b = fake_provider("b", record=make_record(title="From B", provider="b"))
        c = fake_provider("c", record=make_record(title="From C", provider="c"))

        async with make_client(_no_network) as client:
            record = await resolve(URL, providers=[a, b, c], client=client)

        assert record.title == "From B"
        assert a.calls == [URL]
        assert b.calls == [URL]
        assert c.calls == []

    @pytest.mark.asyncio
    async def test_unexpected_exception_moves_on(self, fake_provider, make_record, make_client):
        a = fake_provider("a", error=RuntimeError("boom"))
        b = fake_provider("b", record=make_record(provider="b"))

        async with make_client(_no_network) as client:
            record = await resolve(URL, providers=[a, b], client=client)

        assert record.provider == "b"

    @pytest.mark.asyncio
    async def test_exhaustion_returns_placeholder(self, fake_provider, make_client):
        providers = [
            fake_provider("a", error=ProviderError("a", "x")),
            fake_provider("b", error=ValueError("bad json")),
            fake_provider("c", error=httpx.ReadTimeout("slow")),
        ]

        async with make_client(_no_network) as client:
            record = await resolve(URL, providers=providers, client=client)

        assert record.is_placeholder
        assert len(record.renditions) == 4
        assert all(r.source_url == PLACEHOLDER_URL for r in record.renditions)
        assert all(p.calls == [URL] for p in providers)

        view = to_view_model(record, URL)
        assert view.is_placeholder
        assert [r.actionable for r in view.renditions] == [False] * 4

    @pytest.mark.asyncio
    async def test_no_providers_returns_placeholder(self, make_client):
        async with make_client(_no_network) as client:
            record = await resolve(URL, providers=[], client=client)
        assert record.is_placeholder
        assert record.platform.label == "TikTok"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_url", ["", "   ", "tiktok.com/@u/video/1", "hello world"])
    async def test_validation_before_network(self, fake_provider, make_record, make_client, bad_url):
        provider = fake_provider("a", record=make_record())

        async with make_client(_no_network) as client:
            with pytest.raises(ValidationError):
                await resolve(bad_url, providers=[provider], client=client)

        assert provider.calls == []

    @pytest.mark.asyncio
    async def test_url_is_trimmed(self, fake_provider, make_record, make_client):
        provider = fake_provider("a", record=make_record())
        async with make_client(_no_network) as client:
            await resolve(f"  {URL}\n", providers=[provider], client=client)
        assert provider.calls == [URL]

    @pytest.mark.asyncio
    async def test_idempotent(self, fake_provider, make_record, make_client):
        record = make_record(title="Same")
        providers = [fake_provider("a", error=ProviderError("a", "x")), fake_provider("b", record=record)]

        async with make_client(_no_network) as client:
            first = await resolve(URL, providers=providers, client=client)
            second = await resolve(URL, providers=providers, client=client)

        assert first == second

    @pytest.mark.asyncio
    async def test_placeholder_idempotent(self, fake_provider, make_client):
        providers = [fake_provider("a", error=ProviderError("a", "x"))]
        async with make_client(_no_network) as client:
            first = await resolve(URL, providers=providers, client=client)
            second = await resolve(URL, providers=providers, client=client)
        assert first == second

    @pytest.mark.asyncio
    async def test_timeout_moves_to_next_provider(self, fake_provider, make_record, make_client):
        slow = fake_provider("slow", record=make_record(provider="slow"), delay=5)
        fast = fake_provider("fast", record=make_record(provider="fast"))

        async with make_client(_no_network) as client:
            record = await resolve(URL, providers=[slow, fast], client=client, timeout=0.05)

        assert record.provider == "fast"
        assert slow.calls == [URL]

    @pytest.mark.asyncio
    async def test_timeout_from_config(self, monkeypatch, fake_provider, make_record, make_client):
        monkeypatch.setenv("VIDGRAB_TIMEOUT", "0.05")
        config.reset_config()
        slow = fake_provider("slow", record=make_record(provider="slow"), delay=5)

        async with make_client(_no_network) as client:
            record = await resolve(URL, providers=[slow], client=client)

        assert record.is_placeholder

    @pytest.mark.asyncio
    async def test_provider_cancellation_is_a_failure(self, fake_provider, make_record, make_client):
        cancelled = fake_provider("cancelled", error=asyncio.CancelledError())
        ok = fake_provider("ok", record=make_record(provider="ok"))

        async with make_client(_no_network) as client:
            record = await resolve(URL, providers=[cancelled, ok], client=client)

        assert record.provider == "ok"

    @pytest.mark.asyncio
    async def test_caller_cancellation_propagates(self, fake_provider, make_record, make_client):
        slow = fake_provider("slow", record=make_record(provider="slow"), delay=5)
        after = fake_provider("after", record=make_record(provider="after"))

        async with make_client(_no_network) as client:
            task = asyncio.create_task(
                resolve(URL, providers=[slow, after], client=client, timeout=10)
            )
            await asyncio.sleep(0.05)
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        assert slow.calls == [URL]
        assert after.calls == []

    @pytest.mark.asyncio
    async def test_owned_client_sends_user_agent(self, monkeypatch, make_record):
        """Without a client, resolve opens one with the configured User-Agent."""
        seen = []

        class RecordingProvider:
            name = "recording"

            async def resolve(self, url, client):
                seen.append(client.headers["user-agent"])
                return Failure(self.name, "recorded")

        monkeypatch.setenv("VIDGRAB_USER_AGENT", "test-agent/1.0")
        config.reset_config()
        record = await resolve(URL, providers=[RecordingProvider()])

        assert seen == ["test-agent/1.0"]
        assert record.is_placeholder


class TestAttempt:
    """Test attempt."""

    @pytest.mark.asyncio
    async def test_timeout_failure(self, fake_provider, make_record, make_client):
        slow = fake_provider("slow", record=make_record(), delay=5)
        async with make_client(_no_network) as client:
            outcome = await attempt(slow, URL, client, 0.01)
        assert not outcome.ok
        assert "timed out" in outcome.reason

    @pytest.mark.asyncio
    async def test_success(self, fake_provider, make_record, make_client):
        record = make_record()
        async with make_client(_no_network) as client:
            outcome = await attempt(fake_provider("a", record=record), URL, client, None)
        assert outcome.ok
        assert outcome.record is record


def test_resolve_sync(fake_provider, make_record):
    record = resolve_sync(URL, providers=[fake_provider("a", record=make_record(title="Sync"))])
    assert record.title == "Sync"


def test_resolve_sync_validation():
    with pytest.raises(ValidationError):
        resolve_sync("not a url")
