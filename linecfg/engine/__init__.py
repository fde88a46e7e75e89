"""Load and rewrite passes over settings streams."""

from .load import load_settings
from .rewrite import RewriteSummary, format_setting, rewrite_document, rewrite_line

__all__ = [
    "RewriteSummary",
    "format_setting",
    "load_settings",
    "rewrite_document",
    "rewrite_line",
]
