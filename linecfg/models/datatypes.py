"""Core datatypes shared across linecfg modules.

Responsibilities:
- Describe the syntax characters and name policy of a settings document.
- Represent the transient per-line classification produced by the classifier.
- Represent the per-line output of the rewrite engine.

Key types:
- `SettingsSyntax`, `LineKind`, `MalformedReason`, `LineClassification`,
  `RewriteMode`, and `LineRewrite`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable


def default_char_accepted(character: str) -> bool:
    """Accept letters, digits, and the underscore character in setting names."""

    return character.isalnum() or character == "_"


@dataclass(frozen=True, slots=True)
class SettingsSyntax:
    """Syntax characters and name policy of one settings document.

    Attributes:
        separator: Character between a setting name and its value.
        comment: Character starting a comment for the rest of the line.
        char_accepted: Predicate deciding whether a character may appear in a name.
    """

    separator: str = "="
    comment: str = "#"
    char_accepted: Callable[[str], bool] = default_char_accepted


class LineKind(str, Enum):
    """Kind of one physical line of a settings document."""

    BLANK = "blank"
    COMMENT = "comment"
    SETTING = "setting"
    MALFORMED = "malformed"


class MalformedReason(str, Enum):
    """Reason a line or a setting name failed to parse."""

    EMPTY_NAME = "empty name"
    MISSING_SEPARATOR = "missing separator"
    COMMENT_BEFORE_SEPARATOR = "comment before separator"
    ILLEGAL_CHARACTER = "illegal character in name"
    SPACE_IN_NAME = "space inside name"
    COMMENT_IN_NAME = "comment character in name"
    LINE_BREAK_IN_VALUE = "line break in value"


@dataclass(frozen=True, slots=True)
class LineClassification:
    """Classification of one line, without its line ending.

    Only `SETTING` results carry the name and field offsets, and only
    `MALFORMED` results carry a reason and diagnostic. Offsets index into
    `text`; `value_end` is exclusive and already excludes trailing whitespace
    before the comment or the end of the line.

    Attributes:
        kind: Line kind.
        text: Raw line text.
        name: Setting name.
        separator_index: Offset of the separator character.
        value_start: Offset of the first value character.
        value_end: Offset just past the last value character.
        comment_start: Offset of the trailing comment character, if any.
        reason: Malformed reason.
        detail: Human-readable diagnostic for malformed lines.
    """

    kind: LineKind
    text: str
    name: str | None = None
    separator_index: int | None = None
    value_start: int | None = None
    value_end: int | None = None
    comment_start: int | None = None
    reason: MalformedReason | None = None
    detail: str | None = None

    @property
    def value(self) -> str:
        """Return the raw value span of a setting line, or `""` otherwise."""

        if self.value_start is None or self.value_end is None:
            return ""
        return self.text[self.value_start : self.value_end]


class RewriteMode(str, Enum):
    """Rewrite engine mode."""

    SAVE = "save"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class LineRewrite:
    """Output of the rewrite engine for one input line.

    Attributes:
        text: Replacement text including the line ending, or `None` when omitted.
        consumed_name: Setting name matched and rewritten or removed, if any.
    """

    text: str | None
    consumed_name: str | None = None
