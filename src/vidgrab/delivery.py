"""Hand a chosen rendition over to the host environment.

vidgrab never transfers media bytes itself. The host's "open URL"
facility (a web browser by default) takes care of the download.
"""

from __future__ import annotations

import logging
import webbrowser
from collections.abc import Callable
from dataclasses import dataclass

from vidgrab.errors import DeliveryError
from vidgrab.models import PLACEHOLDER_URL

logger = logging.getLogger(__name__)

# Called with (url, suggested filename); returns True if the host accepted it
Opener = Callable[[str, str], bool]

DEMO_MESSAGE = (
    "This is a demo version. In the real version, this would start the actual download."
)
FAILURE_MESSAGE = "Download failed. Please try again or use the preview link."


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome of a delivery request."""

    ok: bool
    url: str
    filename: str
    message: str | None = None


def open_in_browser(url: str, filename: str) -> bool:
    """Open a URL in a new browser tab; the browser picks the filename."""
    return webbrowser.open(url, new=2)


def deliver(source_url: str, filename: str, opener: Opener | None = None) -> DeliveryResult:
    """Ask the host environment to open or save a media URL.

    Never raises: placeholder URLs and opener failures are reported in
    the returned DeliveryResult.

    Args:
        source_url: Direct media URL of the chosen rendition
        filename: Suggested filename
        opener: Host open facility; open_in_browser by default

    Returns:
        DeliveryResult with ok=False and a user-facing message on failure
    """
    if source_url == PLACEHOLDER_URL:
        return DeliveryResult(ok=False, url=source_url, filename=filename, message=DEMO_MESSAGE)

    opener = opener or open_in_browser
    filename = filename or "video"
    try:
        if not opener(source_url, filename):
            raise DeliveryError(f"host refused to open {source_url}")
    except Exception as e:
        logger.error("Download error: %s", e)
        return DeliveryResult(ok=False, url=source_url, filename=filename, message=FAILURE_MESSAGE)

    return DeliveryResult(ok=True, url=source_url, filename=filename)
