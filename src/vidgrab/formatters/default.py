"""Default output formatter - video details and download options."""

from vidgrab.models import RenderModel

PLACEHOLDER_NOTICE = (
    "Failed to fetch video information. Showing sample data for demonstration."
)


def format_default(view: RenderModel) -> str:
    """Format a resolved video as a multi-line text block.

    Shows:
    - Title, platform and display metadata
    - One numbered line per download option with label, format and size
    - A notice when no provider answered
    """
    lines = []

    lines.append("=" * 70)
    lines.append(f"Title: {view.title}")
    lines.append("=" * 70)

    lines.append(f"  Platform:     {view.platform.label}")
    if view.duration:
        lines.append(f"  Duration:     {view.duration}")
    if view.uploader:
        lines.append(f"  By:           {view.uploader}")
    if view.view_count:
        lines.append(f"  Views:        {view.view_count:,}")
    if view.thumbnail_url:
        lines.append(f"  Thumbnail:    {view.thumbnail_url}")

    lines.append("")
    lines.append(f"## AVAILABLE DOWNLOADS ({view.option_count} options)")
    for index, option in enumerate(view.renditions, start=1):
        details = [option.format_label, option.size]
        if option.fps:
            details.append(f"{option.fps} fps")
        lines.append(f"  [{index}] {option.label:<17} {' | '.join(details)}")
        if option.actionable:
            lines.append(f"      File: {option.filename}")
            lines.append(f"      URL:  {option.source_url}")
        else:
            lines.append("      (preview only)")

    if view.is_placeholder:
        lines.append("")
        lines.append(f"Note: {PLACEHOLDER_NOTICE}")

    return "\n".join(lines)
