"""Presentation mapping and output formatters for vidgrab."""

from .default import format_default
from .json import format_json, to_dict
from .quiet import format_quiet
from .view import safe_filename, to_rendition_view, to_view_model

__all__ = [
    "to_view_model",
    "to_rendition_view",
    "safe_filename",
    "format_default",
    "format_json",
    "format_quiet",
    "to_dict",
]
