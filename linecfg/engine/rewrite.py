"""Line-preserving rewrite engine for save and delete.

Responsibilities:
- Map one original line to its output line for a save or delete pass.
- Drive the per-line mapping over a whole stream and append unmatched settings.
- Write the rebuilt document back to the same stream.

Key public functions:
- `rewrite_line`: pure per-line mapping shared by save and delete.
- `rewrite_document`: full pass over a stream in a given `RewriteMode`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, MutableMapping

from ..io.document import (
    SettingsStream,
    iter_lines,
    replace_contents,
    split_bom,
    split_line_ending,
)
from ..models.datatypes import LineKind, LineRewrite, RewriteMode, SettingsSyntax
from ..text.classifier import classify_line


_DEFAULT_LINE_ENDING = "\n"


@dataclass(frozen=True, slots=True)
class RewriteSummary:
    """Counters describing one completed rewrite pass.

    Attributes:
        mode: Rewrite mode of the pass.
        lines_read: Number of physical lines read from the stream.
        rewritten: Names whose lines received a new value, in file order.
        removed: Number of lines omitted from the output.
        appended: Names appended after the last original line.
    """

    mode: RewriteMode
    lines_read: int
    rewritten: tuple[str, ...] = field(default_factory=tuple)
    removed: int = 0
    appended: tuple[str, ...] = field(default_factory=tuple)


def format_setting(name: str, value: str, syntax: SettingsSyntax) -> str:
    """Render a new setting line body as `name SEP value`."""

    if not value:
        return f"{name} {syntax.separator}"
    return f"{name} {syntax.separator} {value}"


def rewrite_line(
    raw: str,
    syntax: SettingsSyntax,
    settings: Mapping[str, str],
    mode: RewriteMode,
    target: str | None = None,
) -> LineRewrite:
    """Map one original line to its output for a save or delete pass.

    Blank, comment, and malformed lines, and settings unrelated to the pass,
    are returned verbatim. In `SAVE` mode a setting present in `settings` has
    its value span replaced and everything around it kept, including the
    whitespace before a trailing comment. In `DELETE` mode a setting named
    exactly `target` is omitted.

    Args:
        raw: Original line including its line ending.
        syntax: Syntax characters and name predicate of the document.
        settings: Current store contents.
        mode: Save or delete.
        target: Name to delete; ignored in `SAVE` mode.

    Returns:
        The output line (or `None` text when omitted) and the matched name.
    """

    body, ending = split_line_ending(raw)
    line = classify_line(body, syntax)
    if line.kind is not LineKind.SETTING:
        return LineRewrite(raw)

    if mode is RewriteMode.DELETE:
        if line.name == target:
            return LineRewrite(None, line.name)
        return LineRewrite(raw)

    if line.name not in settings:
        return LineRewrite(raw)
    text = body[: line.value_start] + settings[line.name] + body[line.value_end :] + ending
    return LineRewrite(text, line.name)


def _append_missing(
    output: list[str],
    settings: Mapping[str, str],
    found: set[str],
    syntax: SettingsSyntax,
    line_ending: str,
) -> tuple[str, ...]:
    """Append store entries absent from the document, each after a blank line."""

    appended: list[str] = []
    for name, value in settings.items():
        if name in found:
            continue
        if output:
            _, last_ending = split_line_ending(output[-1])
            if not last_ending:
                output.append(line_ending)
            output.append(line_ending)
        output.append(format_setting(name, value, syntax) + line_ending)
        appended.append(name)
    return tuple(appended)


def rewrite_document(
    stream: SettingsStream,
    syntax: SettingsSyntax,
    settings: MutableMapping[str, str],
    mode: RewriteMode,
    target: str | None = None,
) -> RewriteSummary:
    """Rewrite the whole stream in place for a save or delete pass.

    The stream is read from offset 0, rebuilt in memory, truncated, written
    back, flushed, and left at offset 0. A leading byte order mark is kept in
    front of the output. In `DELETE` mode `target` is also removed from
    `settings`, whether or not a line matched.

    Raises:
        OSError: Propagated from the stream. A failure after truncation can
            leave the stream with partial content.
    """

    stream.seek(0)
    output: list[str] = []
    found: set[str] = set()
    rewritten: list[str] = []
    removed = 0
    lines_read = 0
    line_ending: str | None = None
    bom = ""

    for raw in iter_lines(stream):
        lines_read += 1
        if lines_read == 1:
            bom, raw = split_bom(raw)
            if not raw:
                continue
        if line_ending is None:
            _, ending = split_line_ending(raw)
            line_ending = ending or None
        result = rewrite_line(raw, syntax, settings, mode, target)
        if result.text is None:
            removed += 1
            continue
        output.append(result.text)
        if result.consumed_name is not None:
            found.add(result.consumed_name)
            rewritten.append(result.consumed_name)

    appended: tuple[str, ...] = ()
    if mode is RewriteMode.SAVE:
        appended = _append_missing(
            output, settings, found, syntax, line_ending or _DEFAULT_LINE_ENDING
        )
    elif target is not None:
        settings.pop(target, None)

    replace_contents(stream, bom + "".join(output))
    return RewriteSummary(
        mode=mode,
        lines_read=lines_read,
        rewritten=tuple(rewritten),
        removed=removed,
        appended=appended,
    )
