"""Configuration management for vidgrab.

Supports loading configuration from:
1. Environment variables (VIDGRAB_*)
2. Config file (~/.vidgrab/config.yaml)
3. Default values

Example config file (~/.vidgrab/config.yaml):
    resolver:
      timeout_seconds: 10
    providers:
      enabled: [cobalt, ytdlp-api]
      cobalt_url: "https://cobalt.example.org/api/json"
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from vidgrab._version import __version__

# Config file search locations (in priority order)
CONFIG_LOCATIONS = [
    Path.home() / ".vidgrab" / "config.yaml",
    Path.home() / ".config" / "vidgrab" / "config.yaml",
    Path(".vidgrab.yaml"),
]

DEFAULT_USER_AGENT = f"vidgrab/{__version__}"


@dataclass
class ResolverConfig:
    """Resolution pipeline configuration."""

    timeout_seconds: float = 15.0
    user_agent: str = DEFAULT_USER_AGENT


@dataclass
class ProvidersConfig:
    """Provider selection and endpoint overrides."""

    # None means every registered provider
    enabled: list[str] | None = None
    cobalt_url: str | None = None
    instavideo_url: str | None = None
    ytdlp_url: str | None = None


@dataclass
class VidgrabConfig:
    """Main configuration for vidgrab."""

    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    providers: ProvidersConfig = field(default_factory=ProvidersConfig)


def _load_yaml_config() -> dict[str, Any]:
    """Load configuration from the first YAML file found."""
    for config_path in CONFIG_LOCATIONS:
        if config_path.exists():
            try:
                with open(config_path) as f:
                    data = yaml.safe_load(f)
                    return data if isinstance(data, dict) else {}
            except (OSError, yaml.YAMLError):
                continue
    return {}


def _get_env(key: str, default: Any = None) -> Any:
    """Get environment variable with VIDGRAB_ prefix."""
    return os.environ.get(f"VIDGRAB_{key}", default)


def _parse_list(value: str | list[str] | None) -> list[str] | None:
    """Parse a comma separated list ("cobalt, ytdlp-api")."""
    if value is None:
        return None
    if isinstance(value, list):
        items = [str(v).strip() for v in value]
    else:
        items = [v.strip() for v in value.split(",")]
    return [v for v in items if v]


def load_config() -> VidgrabConfig:
    """Load configuration from file and environment variables.

    Priority (highest first):
    1. Environment variables (VIDGRAB_*)
    2. Config file (~/.vidgrab/config.yaml)
    3. Default values
    """
    file_config = _load_yaml_config()

    # Resolver
    resolver_config = file_config.get("resolver") or {}
    resolver = ResolverConfig(
        timeout_seconds=float(
            _get_env("TIMEOUT") or resolver_config.get("timeout_seconds", 15.0)
        ),
        user_agent=_get_env("USER_AGENT") or resolver_config.get("user_agent", DEFAULT_USER_AGENT),
    )

    # Providers
    providers_config = file_config.get("providers") or {}
    providers = ProvidersConfig(
        enabled=_parse_list(_get_env("PROVIDERS") or providers_config.get("enabled")),
        cobalt_url=_get_env("COBALT_URL") or providers_config.get("cobalt_url"),
        instavideo_url=_get_env("INSTAVIDEO_URL") or providers_config.get("instavideo_url"),
        ytdlp_url=_get_env("YTDLP_URL") or providers_config.get("ytdlp_url"),
    )

    return VidgrabConfig(resolver=resolver, providers=providers)


# Global config instance (lazy loaded)
_config: VidgrabConfig | None = None


def get_config() -> VidgrabConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
