"""Media lookup providers for vidgrab.

Supported services (tried in this order):
- Cobalt (single h264 rendition)
- InstaVideo (full format list)
- yt-dlp web API (single rendition)
"""

from __future__ import annotations

from vidgrab.config import VidgrabConfig, get_config

from .base import BaseProvider, Failure, ProviderOutcome, Success
from .cobalt import CobaltProvider
from .instavideo import InstaVideoProvider
from .synthetic import PLACEHOLDER_NAME, generate_placeholder
from .ytdlp_api import YtDlpApiProvider

# All provider classes (order doesn't matter, priority is used)
_PROVIDERS: list[type[BaseProvider]] = [
    CobaltProvider,
    InstaVideoProvider,
    YtDlpApiProvider,
]


def _endpoint_overrides(config: VidgrabConfig) -> dict[str, str | None]:
    return {
        CobaltProvider.name: config.providers.cobalt_url,
        InstaVideoProvider.name: config.providers.instavideo_url,
        YtDlpApiProvider.name: config.providers.ytdlp_url,
    }


def get_providers(config: VidgrabConfig | None = None) -> list[BaseProvider]:
    """Get enabled provider instances, sorted by priority.

    Args:
        config: Configuration to read; the global config by default

    Returns:
        Fresh provider instances, lowest priority number first
    """
    config = config or get_config()
    enabled = config.providers.enabled
    endpoints = _endpoint_overrides(config)

    providers = [
        provider_cls(endpoints.get(provider_cls.name))
        for provider_cls in _PROVIDERS
        if enabled is None or provider_cls.name in enabled
    ]
    providers.sort(key=lambda p: p.priority)
    return providers


def get_provider_status(config: VidgrabConfig | None = None) -> dict[str, bool]:
    """Get enabled status of every registered provider, in priority order."""
    enabled = {p.name for p in get_providers(config)}
    return {
        provider_cls.name: provider_cls.name in enabled
        for provider_cls in sorted(_PROVIDERS, key=lambda cls: cls.priority)
    }


def print_provider_status(config: VidgrabConfig | None = None) -> None:
    """Print provider order and enabled status."""
    print("vidgrab providers (priority order):")
    print("-" * 40)

    for name, enabled in get_provider_status(config).items():
        icon = "✓" if enabled else "✗"
        print(f"  {icon} {name}")
    print(f"  ✓ {PLACEHOLDER_NAME} (fallback)")


__all__ = [
    # Base class and outcomes
    "BaseProvider",
    "ProviderOutcome",
    "Success",
    "Failure",
    # Providers
    "CobaltProvider",
    "InstaVideoProvider",
    "YtDlpApiProvider",
    # Fallback
    "generate_placeholder",
    # Functions
    "get_providers",
    "get_provider_status",
    "print_provider_status",
]
