"""Public settings file accessor.

Responsibilities:
- Hold the in-memory settings store for one settings stream.
- Validate names and normalize values assigned through the accessor.
- Expose load, save, and delete over the shared line engine.

Key types:
- `SettingsFile`: dictionary-style access plus `load`, `save`, and `delete`.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from .engine.load import load_settings
from .engine.rewrite import RewriteSummary, rewrite_document
from .errors import FormatViolationError, InvalidArgumentError, SettingNotFoundError
from .io.document import SettingsStream
from .models.datatypes import (
    MalformedReason,
    RewriteMode,
    SettingsSyntax,
    default_char_accepted,
)
from .parsing import parse_single_char
from .telemetry.logger import OperationLogger
from .text.names import check_name, validate_name
from .text.values import normalize_value


_OperationResult = TypeVar("_OperationResult")


class SettingsFile:
    """Settings document bound to a caller-owned stream.

    The stream must be readable, writable, and seekable. `SettingsFile` never
    closes it. Only one instance should operate on a stream at a time.

    Example:
        with open_settings_file(Path("game.cfg")) as stream:
            settings = SettingsFile(stream)
            settings.load()
            settings["pc_health"] = "25"
            settings.save()
    """

    def __init__(
        self,
        stream: SettingsStream,
        separator: str = "=",
        comment: str = "#",
        char_accepted: Callable[[str], bool] | None = None,
        *,
        run_logger: OperationLogger | None = None,
    ) -> None:
        """Initialize a settings file over `stream`.

        Args:
            stream: Settings document stream.
            separator: Character between setting names and values.
            comment: Character starting a comment.
            char_accepted: Name character predicate. Defaults to letters,
                digits, and underscore.
            run_logger: Optional operation logger.

        Raises:
            InvalidArgumentError: If `stream` is `None`, or `separator` and
                `comment` are not distinct single non-whitespace characters.
        """

        if stream is None:
            raise InvalidArgumentError("`stream` cannot be None.")
        try:
            separator = parse_single_char(separator, "separator")
            comment = parse_single_char(comment, "comment")
        except ValueError as exc:
            raise InvalidArgumentError(str(exc)) from exc
        if separator == comment:
            raise InvalidArgumentError(
                "`separator` and `comment` must be different characters."
            )
        self._stream = stream
        self._syntax = SettingsSyntax(
            separator=separator,
            comment=comment,
            char_accepted=char_accepted or default_char_accepted,
        )
        self._settings: dict[str, str] = {}
        self._run_logger = run_logger

    @classmethod
    def with_syntax(
        cls,
        stream: SettingsStream,
        syntax: SettingsSyntax,
        *,
        run_logger: OperationLogger | None = None,
    ) -> SettingsFile:
        """Create a settings file from a prepared `SettingsSyntax`."""

        return cls(
            stream,
            separator=syntax.separator,
            comment=syntax.comment,
            char_accepted=syntax.char_accepted,
            run_logger=run_logger,
        )

    @property
    def comment_char(self) -> str:
        return self._syntax.comment

    @property
    def separator_char(self) -> str:
        return self._syntax.separator

    @property
    def syntax(self) -> SettingsSyntax:
        return self._syntax

    def __getitem__(self, name: str) -> str:
        """Return the stored value of `name`.

        Raises:
            InvalidArgumentError: If `name` is `None` or empty.
            FormatViolationError: If `name` could never appear in the document.
            SettingNotFoundError: If `name` is not in the store.
        """

        validate_name(name, self._syntax)
        if name not in self._settings:
            raise SettingNotFoundError(name)
        return self._settings[name]

    def __setitem__(self, name: str, value: str | None) -> None:
        """Store the normalized `value` under `name` in memory only.

        Leading and trailing whitespace and any inline comment are dropped from
        `value`; `None` is stored as `""`. Call `save` to persist.

        Raises:
            InvalidArgumentError: If `name` is `None` or empty.
            FormatViolationError: If `name` could never appear in the document,
                or the normalized value still contains a line break.
        """

        validate_name(name, self._syntax)
        normalized = normalize_value(value, self._syntax.comment)
        if "\n" in normalized or "\r" in normalized:
            raise FormatViolationError(
                reason=MalformedReason.LINE_BREAK_IN_VALUE,
                detail=f"Value of setting {name!r} must fit on one line.",
                name=name,
            )
        self._settings[name] = normalized

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str) or check_name(name, self._syntax) is not None:
            return False
        return name in self._settings

    def __len__(self) -> int:
        return len(self._settings)

    def items(self) -> list[tuple[str, str]]:
        """Return a snapshot of `(name, value)` pairs in store order."""

        return list(self._settings.items())

    def load(self) -> int:
        """Load every setting of the stream into the store.

        The stream position is restored on success and left just past the
        offending line on failure.

        Returns:
            Number of setting lines parsed.

        Raises:
            FormatViolationError: On the first malformed line.
        """

        return self._run_operation(
            "load",
            lambda: load_settings(self._stream, self._syntax, self._settings),
        )

    def save(self) -> RewriteSummary:
        """Write the store back to the stream, preserving untouched lines.

        Existing settings get their value replaced in place; settings missing
        from the stream are appended. The stream is left at offset 0.
        """

        return self._run_operation(
            "save",
            lambda: rewrite_document(
                self._stream, self._syntax, self._settings, RewriteMode.SAVE
            ),
        )

    def delete(self, name: str) -> RewriteSummary:
        """Remove `name` from the stream and the store.

        Every line defining exactly `name` is dropped. Deleting a name that is
        not present leaves the stream content and the store unchanged. The
        stream is left at offset 0.

        Raises:
            InvalidArgumentError: If `name` is `None` or empty.
            FormatViolationError: If `name` could never appear in the document.
        """

        validate_name(name, self._syntax)
        return self._run_operation(
            "delete",
            lambda: rewrite_document(
                self._stream, self._syntax, self._settings, RewriteMode.DELETE, name
            ),
            name=name,
        )

    def _run_operation(
        self,
        operation: str,
        action: Callable[[], _OperationResult],
        **context: object,
    ) -> _OperationResult:
        """Run one named operation and emit start/complete/failure events."""

        if self._run_logger is not None:
            self._run_logger.log_start(operation, **context)
        try:
            result = action()
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_failure(operation, type(exc).__name__)
            raise
        if self._run_logger is not None:
            self._run_logger.log_complete(operation, **context, **_result_context(result))
        return result


def _result_context(result: object) -> dict[str, object]:
    """Summarize an operation result as loggable counters."""

    if isinstance(result, RewriteSummary):
        return {
            "lines": result.lines_read,
            "rewritten": len(result.rewritten),
            "removed": result.removed,
            "appended": len(result.appended),
        }
    if isinstance(result, int):
        return {"settings": result}
    return {}
