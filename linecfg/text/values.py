"""Setting value normalization."""

from __future__ import annotations


def value_bounds(text: str, start: int, comment: str) -> tuple[int, int, int | None]:
    """Locate the canonical value span of `text` beginning at `start`.

    Leading whitespace is skipped, the scan stops at the comment character or
    the end of the text, and the whitespace run right before that boundary is
    excluded.

    Returns:
        `(value_start, value_end, comment_start)` offsets into `text`.
    """

    index = start
    length = len(text)
    while index < length and text[index].isspace():
        index += 1
    value_start = index

    trailing = 0
    comment_start: int | None = None
    while index < length:
        character = text[index]
        if character == comment:
            comment_start = index
            break
        trailing = trailing + 1 if character.isspace() else 0
        index += 1

    return value_start, index - trailing, comment_start


def normalize_value(raw: str | None, comment: str) -> str:
    """Return the canonical stored form of a raw setting value.

    `None` becomes `""`. Surrounding whitespace and anything from the comment
    character onward are dropped, so `normalize_value(" 25 # x", "#")` is `"25"`.
    """

    if raw is None:
        return ""
    value_start, value_end, _ = value_bounds(raw, 0, comment)
    return raw[value_start:value_end]
