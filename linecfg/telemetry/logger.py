"""Structured operation logging utilities.

Responsibilities:
- Emit concise, deterministic operation-level logs through `loguru`.
- Never log setting values, only names and counts.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/", ","} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class OperationLogger:
    """Emit deterministic logs for load, save, and delete operations."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Initialize logger sink and configure deterministic formatting."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, operation: str, **context: object) -> None:
        """Emit one structured operation log line."""

        line = (
            f"[settings] level={level} operation={operation} event={event}"
            f"{_format_context(context)}"
        )
        _loguru_logger.log(level, line)

    def log_start(self, operation: str, **context: object) -> None:
        """Emit an operation-start event."""

        self._emit("INFO", "start", operation, **context)

    def log_complete(self, operation: str, **context: object) -> None:
        """Emit an operation-complete event with optional counters."""

        self._emit("INFO", "complete", operation, **context)

    def log_failure(self, operation: str, error_type: str) -> None:
        """Emit an operation-failure event without sensitive payload details."""

        self._emit("ERROR", "failure", operation, error_type=error_type)
