"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
setting rows, and rewrite summaries.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .engine.rewrite import RewriteSummary
from .errors import CommandError, FormatViolationError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    elif isinstance(exc, FormatViolationError):
        typer.secho(
            f"{command_name} failed: {exc} ({exc.reason.value})",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.line is not None:
            typer.secho(f"Line: {exc.line}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_settings(rows: list[tuple[str, str]], separator: str) -> None:
    """Print `name SEP value` rows in store order."""

    for name, value in rows:
        typer.echo(f"{name} {separator} {value}".rstrip())


def echo_rewrite_summary(summary: RewriteSummary) -> None:
    """Print what a save or delete pass changed."""

    if summary.rewritten:
        typer.echo(f"Updated: {', '.join(summary.rewritten)}")
    if summary.appended:
        typer.echo(f"Added: {', '.join(summary.appended)}")
    if summary.removed:
        typer.echo(f"Removed lines: {summary.removed}")
    if not (summary.rewritten or summary.appended or summary.removed):
        typer.echo("No changes.")
