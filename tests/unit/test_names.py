"""Unit tests for setting name validation."""

from __future__ import annotations

import pytest

from linecfg.errors import FormatViolationError, InvalidArgumentError
from linecfg.models.datatypes import LineKind, MalformedReason, SettingsSyntax
from linecfg.text.classifier import classify_line
from linecfg.text.names import check_name, validate_name


SYNTAX = SettingsSyntax()


@pytest.mark.parametrize("name", ["pc_health", "A1", "_", "größe"])
def test_check_name_accepts_valid_names(name: str) -> None:
    """Letters, digits, and underscores should be accepted."""

    assert check_name(name, SYNTAX) is None
    assert validate_name(name, SYNTAX) == name


@pytest.mark.parametrize(
    ("name", "reason", "character"),
    [
        ("a b", MalformedReason.SPACE_IN_NAME, " "),
        ("a\tb", MalformedReason.SPACE_IN_NAME, "\t"),
        ("a#b", MalformedReason.COMMENT_IN_NAME, "#"),
        ("a-b", MalformedReason.ILLEGAL_CHARACTER, "-"),
        ("a=b", MalformedReason.ILLEGAL_CHARACTER, "="),
        ("a #", MalformedReason.SPACE_IN_NAME, " "),
    ],
)
def test_check_name_reports_first_problem(
    name: str, reason: MalformedReason, character: str
) -> None:
    """The first offending character in scan order should determine the reason."""

    problem = check_name(name, SYNTAX)

    assert problem is not None
    assert problem.reason is reason
    assert problem.character == character


@pytest.mark.parametrize("name", [None, ""])
def test_validate_name_rejects_missing_names_as_invalid_argument(name: str | None) -> None:
    """`None` and empty names should raise an invalid-argument error."""

    with pytest.raises(InvalidArgumentError, match="None or empty"):
        validate_name(name, SYNTAX)


def test_validate_name_raises_format_violation_with_reason() -> None:
    """Character-level problems should raise a format violation carrying the name."""

    with pytest.raises(FormatViolationError) as exc_info:
        validate_name("bad-name", SYNTAX)

    assert exc_info.value.reason is MalformedReason.ILLEGAL_CHARACTER
    assert exc_info.value.name == "bad-name"
    assert isinstance(exc_info.value, ValueError)


@pytest.mark.parametrize("name", ["pc_health", "x1", "a b", "a#b", "a-b"])
def test_valid_names_always_reparse_as_themselves(name: str) -> None:
    """A name accepted by the validator should classify back to the same name."""

    result = classify_line(f"{name} = 1", SYNTAX)

    if check_name(name, SYNTAX) is None:
        assert result.kind is LineKind.SETTING
        assert result.name == name
    else:
        assert result.kind is LineKind.MALFORMED
