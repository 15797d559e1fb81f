"""JSON output formatter."""

from typing import Any

from vidgrab.models import RenderModel


def format_json(view: RenderModel, indent: int = 2) -> str:
    """Format a render model as JSON string.

    Args:
        view: RenderModel object
        indent: JSON indentation level

    Returns:
        JSON formatted string
    """
    return view.model_dump_json(indent=indent)


def to_dict(view: RenderModel) -> dict[str, Any]:
    """Convert a render model to dictionary."""
    return view.model_dump(mode="json")
