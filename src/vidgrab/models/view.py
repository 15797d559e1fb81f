"""Render-ready records produced by the presentation mapper."""

from pydantic import BaseModel, ConfigDict, Field

from .platform import PlatformIdentity


class RenditionView(BaseModel):
    """Everything a renderer needs to show one download option."""

    model_config = ConfigDict(frozen=True)

    source_url: str
    quality_raw: str
    format_label: str
    size: str
    tier: str
    label: str
    icon_key: str
    filename: str
    fps: int | None = None
    actionable: bool = True


class RenderModel(BaseModel):
    """Render-ready view of a resolved video."""

    model_config = ConfigDict(frozen=True)

    platform: PlatformIdentity
    title: str
    thumbnail_url: str | None = None
    duration: str | None = None
    uploader: str | None = None
    view_count: int | None = None
    is_placeholder: bool = False
    renditions: list[RenditionView] = Field(default_factory=list)

    @property
    def option_count(self) -> int:
        """Return number of download options."""
        return len(self.renditions)
