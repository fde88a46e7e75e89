"""Line classification for settings documents.

Responsibilities:
- Classify one physical line as blank, comment, setting, or malformed.
- Locate the name, separator, value span, and trailing comment of settings.

Key public functions:
- `classify_line`: total classifier used by load, save, and delete.
"""

from __future__ import annotations

from ..models.datatypes import (
    LineClassification,
    LineKind,
    MalformedReason,
    SettingsSyntax,
)
from .values import value_bounds


def _malformed(text: str, reason: MalformedReason, detail: str) -> LineClassification:
    return LineClassification(
        kind=LineKind.MALFORMED,
        text=text,
        reason=reason,
        detail=detail,
    )


def classify_line(text: str, syntax: SettingsSyntax) -> LineClassification:
    """Classify one line of a settings document.

    Args:
        text: Line content without its line ending.
        syntax: Syntax characters and name predicate of the document.

    Returns:
        A `LineClassification` of exactly one kind. Setting results carry the
        name and field offsets; malformed results carry a reason and detail.
    """

    length = len(text)
    index = 0
    while index < length and text[index].isspace():
        index += 1
    if index >= length:
        return LineClassification(kind=LineKind.BLANK, text=text)
    if text[index] == syntax.comment:
        return LineClassification(kind=LineKind.COMMENT, text=text)

    name_chars: list[str] = []
    seen_space = False
    while True:
        if index >= length:
            return _malformed(
                text,
                MalformedReason.MISSING_SEPARATOR,
                f"Could not find the separator {syntax.separator!r} in the line: {text!r}.",
            )
        character = text[index]
        if character == syntax.separator:
            break
        if character == syntax.comment:
            return _malformed(
                text,
                MalformedReason.COMMENT_BEFORE_SEPARATOR,
                f"Comment character {syntax.comment!r} before the separator "
                f"in the line: {text!r}.",
            )
        if character.isspace():
            seen_space = True
            index += 1
            continue
        if not syntax.char_accepted(character):
            return _malformed(
                text,
                MalformedReason.ILLEGAL_CHARACTER,
                f"Illegal character {character!r} in the line: {text!r}.",
            )
        # a valid name character after whitespace splits the name in two
        if seen_space:
            return _malformed(
                text,
                MalformedReason.SPACE_IN_NAME,
                f"Whitespace in the middle of the setting name in the line: {text!r}.",
            )
        name_chars.append(character)
        index += 1

    if not name_chars:
        return _malformed(
            text,
            MalformedReason.EMPTY_NAME,
            f"No setting name in the line: {text!r}.",
        )

    separator_index = index
    value_start, value_end, comment_start = value_bounds(
        text, separator_index + 1, syntax.comment
    )
    return LineClassification(
        kind=LineKind.SETTING,
        text=text,
        name="".join(name_chars),
        separator_index=separator_index,
        value_start=value_start,
        value_end=value_end,
        comment_start=comment_start,
    )
