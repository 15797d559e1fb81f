"""Quiet output formatter - one-line summary."""

from vidgrab.models import RenderModel


def format_quiet(view: RenderModel) -> str:
    """Format a resolved video as a one-line summary.

    Format: title | platform | duration | N options (best label) [| placeholder]
    """
    parts = [view.title, view.platform.label, view.duration or "Unknown"]

    if view.renditions:
        parts.append(f"{view.option_count} options ({view.renditions[0].label})")
    else:
        parts.append("0 options")

    if view.is_placeholder:
        parts.append("placeholder")

    return " | ".join(parts)
