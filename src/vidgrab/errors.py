"""Exception types for vidgrab."""


class VidgrabError(Exception):
    """Base class for vidgrab errors."""

    pass


class ValidationError(VidgrabError, ValueError):
    """The input URL is empty or not an absolute URL."""

    pass


class ProviderError(VidgrabError):
    """A provider could not answer for a URL.

    Raised inside provider adapters and converted to a failed outcome at
    the adapter boundary, so callers of ``resolve`` never see it.
    """

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider


class DeliveryError(VidgrabError):
    """The host environment could not open a media URL."""

    pass
