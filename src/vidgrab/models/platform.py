"""Platform identity model."""

from pydantic import BaseModel, ConfigDict


class PlatformIdentity(BaseModel):
    """Display identity of a source platform (name, icon, accent color)."""

    model_config = ConfigDict(frozen=True)

    label: str
    icon_key: str
    accent_color: str
