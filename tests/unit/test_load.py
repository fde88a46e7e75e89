"""Unit tests for loading settings from a stream."""

from __future__ import annotations

import io
from typing import Callable

import pytest

from linecfg.engine.load import load_settings
from linecfg.errors import FormatViolationError
from linecfg.models.datatypes import MalformedReason, SettingsSyntax


SYNTAX = SettingsSyntax()
StreamFactory = Callable[[str], io.StringIO]


def test_load_settings_parses_canonical_values(
    make_stream: StreamFactory, game_settings_text: str
) -> None:
    """Setting lines should load with whitespace and comments stripped."""

    settings: dict[str, str] = {}

    parsed = load_settings(make_stream(game_settings_text), SYNTAX, settings)

    assert parsed == 3
    assert settings == {"pc_health": "50", "zombie_health": "35", "offline": "true"}


def test_load_settings_last_duplicate_wins(make_stream: StreamFactory) -> None:
    """A name defined twice should keep the value of its last occurrence."""

    settings: dict[str, str] = {}

    load_settings(make_stream("a = 1\na = 2\n"), SYNTAX, settings)

    assert settings == {"a": "2"}


def test_load_settings_handles_mixed_line_endings(make_stream: StreamFactory) -> None:
    """CRLF, LF, CR, and a final unterminated line should all parse."""

    settings: dict[str, str] = {}

    load_settings(make_stream("a = 1\r\nb = 2\nc = 3\rd = 4"), SYNTAX, settings)

    assert settings == {"a": "1", "b": "2", "c": "3", "d": "4"}


def test_load_settings_restores_position_on_success(make_stream: StreamFactory) -> None:
    """The stream position before loading should be restored afterwards."""

    stream = make_stream("a = 1\nb = 2\n")
    stream.seek(3)

    load_settings(stream, SYNTAX, {})

    assert stream.tell() == 3


def test_load_settings_reports_missing_separator(make_stream: StreamFactory) -> None:
    """A bare name should abort loading with a missing-separator violation."""

    settings: dict[str, str] = {}

    with pytest.raises(FormatViolationError, match="separator") as exc_info:
        load_settings(make_stream("name\n"), SYNTAX, settings)

    assert exc_info.value.reason is MalformedReason.MISSING_SEPARATOR
    assert exc_info.value.line_number == 1
    assert exc_info.value.line == "name"
    assert settings == {}


def test_load_settings_keeps_entries_before_failure_and_stops_past_bad_line(
    make_stream: StreamFactory,
) -> None:
    """Entries before the bad line stay loaded and the stream is not rewound."""

    stream = make_stream("a = 1\n\nbad name = 2\nc = 3\n")
    settings: dict[str, str] = {}

    with pytest.raises(FormatViolationError) as exc_info:
        load_settings(stream, SYNTAX, settings)

    assert exc_info.value.reason is MalformedReason.SPACE_IN_NAME
    assert exc_info.value.line_number == 3
    assert "line 3" in str(exc_info.value)
    assert settings == {"a": "1"}
    assert stream.tell() == len("a = 1\n\nbad name = 2\n")


def test_load_settings_skips_leading_byte_order_mark(make_stream: StreamFactory) -> None:
    """A BOM before the first name should not be treated as a name character."""

    settings: dict[str, str] = {}

    load_settings(make_stream("\ufeffa = 1\nb = 2\n"), SYNTAX, settings)

    assert settings == {"a": "1", "b": "2"}
