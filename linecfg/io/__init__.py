"""Stream access for settings documents."""

from .document import (
    SettingsStream,
    iter_lines,
    open_settings_file,
    replace_contents,
    split_line_ending,
)

__all__ = [
    "SettingsStream",
    "iter_lines",
    "open_settings_file",
    "replace_contents",
    "split_line_ending",
]
