"""Top-level package for linecfg.

This package parses and rewrites line-oriented `name = value # comment`
settings files while keeping every untouched line byte-for-byte. The main
entry point is `SettingsFile`.
"""

from .errors import (
    FormatViolationError,
    InvalidArgumentError,
    SettingNotFoundError,
    SettingsError,
)
from .io.document import open_settings_file
from .settings_file import SettingsFile

__all__ = [
    "FormatViolationError",
    "InvalidArgumentError",
    "SettingNotFoundError",
    "SettingsError",
    "SettingsFile",
    "open_settings_file",
    "__version__",
]

__version__ = "0.1.0"
