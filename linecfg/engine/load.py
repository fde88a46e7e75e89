"""Settings document loading."""

from __future__ import annotations

from typing import MutableMapping

from ..errors import FormatViolationError
from ..io.document import SettingsStream, iter_lines, split_bom, split_line_ending
from ..models.datatypes import LineKind, MalformedReason, SettingsSyntax
from ..text.classifier import classify_line


def load_settings(
    stream: SettingsStream,
    syntax: SettingsSyntax,
    settings: MutableMapping[str, str],
) -> int:
    """Parse every setting line of the stream into `settings`.

    Values are stored in canonical form, the last occurrence of a duplicated
    name wins, and a leading byte order mark is skipped. The stream position
    is restored on success. On a malformed line the scan stops, entries
    parsed before it stay in `settings`, and the stream is left just past the
    offending line.

    Args:
        stream: Settings document positioned anywhere.
        syntax: Syntax characters and name predicate of the document.
        settings: Store to upsert parsed settings into.

    Returns:
        Number of setting lines parsed.

    Raises:
        FormatViolationError: On the first malformed line, with its 1-based number.
    """

    position = stream.tell()
    stream.seek(0)

    parsed = 0
    for line_number, raw in enumerate(iter_lines(stream), start=1):
        if line_number == 1:
            _, raw = split_bom(raw)
        body, _ = split_line_ending(raw)
        line = classify_line(body, syntax)
        if line.kind is LineKind.BLANK or line.kind is LineKind.COMMENT:
            continue
        if line.kind is LineKind.MALFORMED:
            raise FormatViolationError(
                reason=line.reason or MalformedReason.MISSING_SEPARATOR,
                detail=line.detail or "Malformed line.",
                line_number=line_number,
                line=body,
            )
        settings[line.name] = line.value
        parsed += 1

    stream.seek(position)
    return parsed
