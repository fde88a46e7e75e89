"""Shared typed data models for linecfg.

This package contains dataclasses and enums used across parsing, rewriting,
and the public settings accessor to avoid circular imports.
"""

from .datatypes import (
    LineClassification,
    LineKind,
    LineRewrite,
    MalformedReason,
    RewriteMode,
    SettingsSyntax,
    default_char_accepted,
)

__all__ = [
    "LineClassification",
    "LineKind",
    "LineRewrite",
    "MalformedReason",
    "RewriteMode",
    "SettingsSyntax",
    "default_char_accepted",
]
