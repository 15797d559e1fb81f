"""Core resolution functions."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

import httpx

from vidgrab.config import get_config
from vidgrab.models import VideoRecord
from vidgrab.providers import (
    BaseProvider,
    Failure,
    ProviderOutcome,
    Success,
    generate_placeholder,
    get_providers,
)
from vidgrab.utils.url_parser import validate_url

logger = logging.getLogger(__name__)


async def attempt(
    provider: BaseProvider, url: str, client: httpx.AsyncClient, timeout: float | None
) -> ProviderOutcome:
    """Run one provider with a time bound.

    Timeouts, unexpected exceptions and cancellation that did not come
    from our own caller all become a Failure. Cancellation of the
    calling task is re-raised.
    """
    try:
        return await asyncio.wait_for(provider.resolve(url, client), timeout)
    except TimeoutError as e:
        return Failure(provider.name, f"{provider.name}: timed out (limit {timeout}s)", e)
    except asyncio.CancelledError as e:
        task = asyncio.current_task()
        if task is not None and task.cancelling():
            raise
        return Failure(provider.name, f"{provider.name}: cancelled", e)
    except Exception as e:
        return Failure(provider.name, f"{provider.name}: unexpected error: {e!r}", e)


async def _resolve_with(
    url: str,
    providers: Sequence[BaseProvider],
    client: httpx.AsyncClient,
    timeout: float | None,
) -> VideoRecord:
    for provider in providers:
        logger.debug("Trying provider %s for %s", provider.name, url)
        outcome = await attempt(provider, url, client, timeout)
        if isinstance(outcome, Success):
            return outcome.record
        reason = outcome.reason if isinstance(outcome, Failure) else repr(outcome)
        logger.debug("Provider %s failed: %s", provider.name, reason)

    logger.warning("All providers failed for %s, returning placeholder result", url)
    return generate_placeholder(url)


async def resolve(
    url: str,
    providers: Sequence[BaseProvider] | None = None,
    client: httpx.AsyncClient | None = None,
    timeout: float | None = None,
) -> VideoRecord:
    """Resolve a video URL to a list of downloadable renditions.

    This is the main entry point. It:
    1. Validates the URL (no network activity on failure)
    2. Tries each provider in priority order, one at a time
    3. Returns the first successful record
    4. Falls back to a placeholder record when every provider fails

    A placeholder result is not an error; check ``record.is_placeholder``
    to decide whether to tell the user real data was unavailable.

    Args:
        url: Video page URL
        providers: Providers to try, in order; configured providers by default
        client: HTTP client to use; a client is opened and closed per call by default
        timeout: Seconds allowed per provider attempt; from config by default

    Returns:
        VideoRecord from the first provider that answered, or the placeholder

    Raises:
        ValidationError: If the URL is empty or not absolute
    """
    url = validate_url(url)

    config = get_config()
    if providers is None:
        providers = get_providers(config)
    if timeout is None:
        timeout = config.resolver.timeout_seconds

    if client is not None:
        return await _resolve_with(url, providers, client, timeout)

    async with httpx.AsyncClient(
        headers={"User-Agent": config.resolver.user_agent},
        timeout=timeout,
        follow_redirects=True,
    ) as owned_client:
        return await _resolve_with(url, providers, owned_client, timeout)


def resolve_sync(
    url: str,
    providers: Sequence[BaseProvider] | None = None,
    timeout: float | None = None,
) -> VideoRecord:
    """Blocking wrapper around resolve() for synchronous callers."""
    return asyncio.run(resolve(url, providers=providers, timeout=timeout))
