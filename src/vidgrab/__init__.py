"""vidgrab - find downloadable renditions of social/video platform URLs.

Several independent lookup services are queried in a fixed order and their
answers normalized into one VideoRecord. When none answers, a clearly
marked placeholder record is returned instead.

Usage:
    from vidgrab import resolve_sync, to_view_model

    record = resolve_sync("https://youtube.com/watch?v=dQw4w9WgXcQ")
    if record.is_placeholder:
        print("No provider answered, showing sample data")

    view = to_view_model(record, "https://youtube.com/watch?v=dQw4w9WgXcQ")
    for option in view.renditions:
        print(option.label, option.size, option.filename)
"""

from vidgrab._version import __version__
from vidgrab.delivery import DeliveryResult, deliver
from vidgrab.errors import DeliveryError, ProviderError, ValidationError, VidgrabError
from vidgrab.formatters import (
    format_default,
    format_json,
    format_quiet,
    to_dict,
    to_view_model,
)
from vidgrab.models import (
    PLACEHOLDER_URL,
    MediaRendition,
    PlatformIdentity,
    RenderModel,
    RenditionView,
    VideoRecord,
)
from vidgrab.providers import (
    BaseProvider,
    generate_placeholder,
    get_provider_status,
    get_providers,
)
from vidgrab.quality import RenditionClass, classify_rendition
from vidgrab.resolve import resolve, resolve_sync
from vidgrab.utils import (
    classify_platform,
    display_duration,
    format_duration,
    format_size,
    validate_url,
)

__all__ = [
    # Version
    "__version__",
    # Main functions
    "resolve",
    "resolve_sync",
    "to_view_model",
    "deliver",
    # Models
    "VideoRecord",
    "MediaRendition",
    "PlatformIdentity",
    "RenderModel",
    "RenditionView",
    "DeliveryResult",
    "PLACEHOLDER_URL",
    # Errors
    "VidgrabError",
    "ValidationError",
    "ProviderError",
    "DeliveryError",
    # Providers
    "BaseProvider",
    "get_providers",
    "get_provider_status",
    "generate_placeholder",
    # Classification and formatting
    "classify_platform",
    "classify_rendition",
    "RenditionClass",
    "validate_url",
    "format_size",
    "format_duration",
    "display_duration",
    # Formatters
    "format_default",
    "format_json",
    "format_quiet",
    "to_dict",
]
