"""Base provider class and provider outcomes."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Union

import httpx

from vidgrab.errors import ProviderError
from vidgrab.models import VideoRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success:
    """A provider answered with a usable record."""

    provider: str
    record: VideoRecord

    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class Failure:
    """A provider could not answer; ``error`` holds the cause if any."""

    provider: str
    reason: str
    error: BaseException | None = None

    ok: ClassVar[bool] = False


ProviderOutcome = Union[Success, Failure]


class BaseProvider(ABC):
    """Abstract base class for media lookup providers.

    A provider wraps one external API that can answer "which renditions
    exist for this URL". Subclasses implement fetch(), which issues a
    single request and maps the provider's own response shape into a
    VideoRecord, raising ProviderError when the response carries no
    success indicator.

    resolve() is the boundary the orchestrator calls. It never raises:
    every fault becomes a Failure outcome.

    Attributes:
        name: Short provider name, used in config and logs
        priority: Lower numbers are tried first
        default_endpoint: Hardcoded API endpoint
    """

    name: ClassVar[str] = "base"
    priority: ClassVar[int] = 100
    default_endpoint: ClassVar[str] = ""

    def __init__(self, endpoint: str | None = None):
        self.endpoint = endpoint or self.default_endpoint

    @abstractmethod
    async def fetch(self, url: str, client: httpx.AsyncClient) -> VideoRecord:
        """Look up a URL and return the canonical record.

        Args:
            url: Validated video page URL
            client: Shared HTTP client for this resolution

        Returns:
            VideoRecord built from the provider response

        Raises:
            ProviderError: If the response does not signal success
        """
        pass

    async def resolve(self, url: str, client: httpx.AsyncClient) -> ProviderOutcome:
        """Run fetch() and convert any fault into a Failure.

        Args:
            url: Validated video page URL
            client: Shared HTTP client for this resolution

        Returns:
            Success with the record, or Failure with the reason
        """
        try:
            record = await self.fetch(url, client)
        except ProviderError as e:
            return self._failure(str(e), e)
        except httpx.HTTPError as e:
            return self._failure(f"{self.name}: request failed: {e}", e)
        except ValueError as e:
            # Invalid JSON and model validation errors both land here
            return self._failure(f"{self.name}: unusable response: {e}", e)
        except Exception as e:
            return self._failure(f"{self.name}: unexpected error: {e!r}", e)

        logger.debug("%s resolved %s (%d renditions)", self.name, url, len(record.renditions))
        return Success(provider=self.name, record=record)

    def _failure(self, reason: str, error: BaseException) -> Failure:
        logger.debug("Provider failed: %s", reason)
        return Failure(provider=self.name, reason=reason, error=error)

    def _payload(self, response: httpx.Response) -> dict[str, Any]:
        """Check the HTTP status and decode a JSON object body."""
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise ProviderError(self.name, f"expected a JSON object, got {type(data).__name__}")
        return data

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, priority={self.priority})"
