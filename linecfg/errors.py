"""Domain exceptions for settings parsing and CLI diagnostics."""

from __future__ import annotations

from .models.datatypes import MalformedReason


class SettingsError(Exception):
    """Base class for settings document errors."""


class InvalidArgumentError(SettingsError, ValueError):
    """Raised when a setting name argument is `None` or empty."""


class FormatViolationError(SettingsError, ValueError):
    """Raised when a line or a setting name violates the document format."""

    def __init__(
        self,
        *,
        reason: MalformedReason,
        detail: str,
        line_number: int | None = None,
        line: str | None = None,
        name: str | None = None,
    ) -> None:
        """Initialize a format violation with its reason and optional location."""

        message = detail if line_number is None else f"line {line_number}: {detail}"
        super().__init__(message)
        self.reason = reason
        self.detail = detail
        self.line_number = line_number
        self.line = line
        self.name = name


class SettingNotFoundError(SettingsError, KeyError):
    """Raised when a requested setting is not present in the store."""

    def __init__(self, name: str) -> None:
        """Initialize the error with the missing setting name."""

        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Setting `{self.name}` is not defined."


class CommandError(RuntimeError):
    """Raised when a CLI command fails at a specific stage."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
