"""Utility functions."""

from .formatting import format_count, format_error, format_status
from .view_state import ContentMode, content_mode, show_error_banner, show_loading_footer

__all__ = [
    "ContentMode",
    "content_mode",
    "format_count",
    "format_error",
    "format_status",
    "show_error_banner",
    "show_loading_footer",
]
