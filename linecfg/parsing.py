"""Shared parsing helpers for option value normalization."""

from __future__ import annotations


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_single_char(value: object, field_name: str) -> str:
    """Parse a required single non-whitespace character.

    Args:
        value: Raw option value.
        field_name: Field name for an actionable validation error message.

    Raises:
        ValueError: If the value is blank or longer than one character.
    """

    normalized = normalize_optional_string(value)
    if normalized is None or len(normalized) != 1:
        raise ValueError(f"`{field_name}` must be exactly one non-whitespace character.")
    return normalized
