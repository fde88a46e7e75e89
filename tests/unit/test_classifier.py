"""Unit tests for the line classifier."""

from __future__ import annotations

import pytest

from linecfg.models.datatypes import LineKind, MalformedReason, SettingsSyntax
from linecfg.text.classifier import classify_line


SYNTAX = SettingsSyntax()


@pytest.mark.parametrize("text", ["", "   ", "\t \t"])
def test_classify_line_detects_blank_lines(text: str) -> None:
    """Lines made only of whitespace should be blank."""

    assert classify_line(text, SYNTAX).kind is LineKind.BLANK


@pytest.mark.parametrize("text", ["#comment", "   # indented", "#name = value"])
def test_classify_line_detects_comment_lines(text: str) -> None:
    """A comment character as first non-whitespace makes the whole line a comment."""

    result = classify_line(text, SYNTAX)

    assert result.kind is LineKind.COMMENT
    assert result.name is None


def test_classify_line_locates_setting_fields() -> None:
    """Setting results should expose the name and exact field offsets."""

    text = "  name  =  value  # c"

    result = classify_line(text, SYNTAX)

    assert result.kind is LineKind.SETTING
    assert result.name == "name"
    assert result.separator_index == 8
    assert result.value_start == 11
    assert result.value_end == 16
    assert result.comment_start == 18
    assert result.value == "value"


def test_classify_line_keeps_inner_value_whitespace_and_separators() -> None:
    """Only the first separator splits the line; inner whitespace stays in the value."""

    result = classify_line("key = a = b  c", SYNTAX)

    assert result.name == "key"
    assert result.value == "a = b  c"
    assert result.comment_start is None


def test_classify_line_accepts_empty_values() -> None:
    """A separator followed by nothing or only a comment yields an empty value."""

    bare = classify_line("key=", SYNTAX)
    commented = classify_line("key = #only comment", SYNTAX)

    assert bare.kind is LineKind.SETTING
    assert bare.value == ""
    assert bare.value_start == bare.value_end == 4
    assert commented.value == ""
    assert commented.comment_start == 6


def test_classify_line_handles_tabs_and_unicode_letters() -> None:
    """Tabs count as whitespace and non-ASCII letters are accepted in names."""

    assert classify_line("\tkey\t=\tv\t", SYNTAX).value == "v"
    assert classify_line("größe = 3", SYNTAX).name == "größe"


@pytest.mark.parametrize(
    ("text", "reason"),
    [
        ("name", MalformedReason.MISSING_SEPARATOR),
        ("name   ", MalformedReason.MISSING_SEPARATOR),
        ("na#me = 1", MalformedReason.COMMENT_BEFORE_SEPARATOR),
        ("name # = 1", MalformedReason.COMMENT_BEFORE_SEPARATOR),
        ("na-me = 1", MalformedReason.ILLEGAL_CHARACTER),
        ("na me = 1", MalformedReason.SPACE_IN_NAME),
        ("  = 1", MalformedReason.EMPTY_NAME),
    ],
)
def test_classify_line_reports_malformed_reason(text: str, reason: MalformedReason) -> None:
    """Each malformed shape should map to its own reason and a diagnostic."""

    result = classify_line(text, SYNTAX)

    assert result.kind is LineKind.MALFORMED
    assert result.reason is reason
    assert result.detail
    assert result.name is None


def test_classify_line_uses_custom_syntax() -> None:
    """Custom separator, comment character, and name predicate should drive parsing."""

    syntax = SettingsSyntax(
        separator=":",
        comment=";",
        char_accepted=lambda character: character.isalnum() or character in "_.",
    )

    setting = classify_line("server.host: example.org ; primary", syntax)
    hash_value = classify_line("color: #ff0000", syntax)

    assert setting.name == "server.host"
    assert setting.value == "example.org"
    assert hash_value.value == "#ff0000"
    assert classify_line("; note", syntax).kind is LineKind.COMMENT
    assert classify_line("a = b", syntax).reason is MalformedReason.ILLEGAL_CHARACTER
