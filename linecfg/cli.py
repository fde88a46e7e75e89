"""Command-line interface for linecfg.

Responsibilities:
- Expose user-facing commands to inspect and edit settings files in place.
- Resolve syntax options from YAML, environment, and CLI overrides.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Annotated

import typer

from .cli_rendering import echo_rewrite_summary, echo_settings, exit_with_command_error
from .config import OptionsLoader, SyntaxOptions
from .errors import CommandError
from .io.document import open_settings_file
from .settings_file import SettingsFile
from .telemetry.logger import OperationLogger

app = typer.Typer(
    name="linecfg",
    no_args_is_help=True,
    help="Inspect and edit `name = value # comment` settings files in place.",
)

SettingsPathArgument = Annotated[Path, typer.Argument(help="Path to the settings file.")]
SeparatorOption = Annotated[
    str | None,
    typer.Option("--separator", help="Separator between names and values (default `=`)."),
]
CommentOption = Annotated[
    str | None,
    typer.Option("--comment", help="Comment character (default `#`)."),
]
OptionsFileOption = Annotated[
    Path | None,
    typer.Option("--options", help="Path to YAML file with syntax options."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", help="Log load/save/delete operations to stderr."),
]


def _load_yaml_options(options_path: Path | None) -> SyntaxOptions:
    """Load syntax options from YAML (or the environment) and map failures to stage errors."""

    if options_path is None:
        try:
            return OptionsLoader.from_env()
        except ValueError as exc:
            raise CommandError(
                stage="options",
                detail=str(exc),
                hint="Fix the `LINECFG_*` environment variables and rerun.",
            ) from exc

    try:
        return OptionsLoader.from_yaml(options_path)
    except FileNotFoundError as exc:
        raise CommandError(
            stage="options",
            detail=f"Options file not found: `{options_path}`.",
            hint="Provide an existing path via `--options <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandError(
            stage="options",
            detail=f"Invalid options file `{options_path}`: {exc}",
            hint="Fix option keys/values and rerun.",
        ) from exc


def _resolve_options(
    options_file: Path | None,
    separator: str | None,
    comment: str | None,
) -> SyntaxOptions:
    """Resolve effective syntax options from defaults and explicit CLI overrides."""

    base = _load_yaml_options(options_file)
    try:
        return OptionsLoader.merge(base, separator=separator, comment=comment)
    except ValueError as exc:
        raise CommandError(
            stage="options",
            detail=str(exc),
            hint="Pass single, distinct characters to `--separator` and `--comment`.",
        ) from exc


def _open_loaded(
    path: Path,
    options: SyntaxOptions,
    verbose: bool,
    create: bool,
) -> tuple[IO[str], SettingsFile]:
    """Open `path` and return the stream plus a loaded `SettingsFile`."""

    try:
        stream = open_settings_file(path, encoding=options.encoding, create=create)
    except FileNotFoundError as exc:
        raise CommandError(
            stage="open",
            detail=f"Settings file not found: `{path}`.",
            hint="Check the path, or use `set` to create a new file.",
        ) from exc

    settings = SettingsFile.with_syntax(
        stream,
        options.to_syntax(),
        run_logger=OperationLogger() if verbose else None,
    )
    try:
        settings.load()
    except Exception:
        stream.close()
        raise
    return stream, settings


@app.command("show")
def show_command(
    path: SettingsPathArgument,
    separator: SeparatorOption = None,
    comment: CommentOption = None,
    options_file: OptionsFileOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print every setting of a file."""

    try:
        options = _resolve_options(options_file, separator, comment)
        stream, settings = _open_loaded(path, options, verbose, create=False)
        with stream:
            rows = settings.items()
    except Exception as exc:
        exit_with_command_error("show", exc)

    echo_settings(rows, options.separator)


@app.command("get")
def get_command(
    path: SettingsPathArgument,
    name: Annotated[str, typer.Argument(help="Setting name.")],
    separator: SeparatorOption = None,
    comment: CommentOption = None,
    options_file: OptionsFileOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the value of one setting."""

    try:
        options = _resolve_options(options_file, separator, comment)
        stream, settings = _open_loaded(path, options, verbose, create=False)
        with stream:
            value = settings[name]
    except Exception as exc:
        exit_with_command_error("get", exc)

    typer.echo(value)


@app.command("set")
def set_command(
    path: SettingsPathArgument,
    name: Annotated[str, typer.Argument(help="Setting name.")],
    value: Annotated[str, typer.Argument(help="New value; surrounding whitespace is dropped.")],
    separator: SeparatorOption = None,
    comment: CommentOption = None,
    options_file: OptionsFileOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Assign a setting and save the file, creating it when missing."""

    try:
        options = _resolve_options(options_file, separator, comment)
        stream, settings = _open_loaded(path, options, verbose, create=True)
        with stream:
            settings[name] = value
            summary = settings.save()
    except Exception as exc:
        exit_with_command_error("set", exc)

    echo_rewrite_summary(summary)


@app.command("delete")
def delete_command(
    path: SettingsPathArgument,
    name: Annotated[str, typer.Argument(help="Setting name.")],
    separator: SeparatorOption = None,
    comment: CommentOption = None,
    options_file: OptionsFileOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Remove a setting from the file."""

    try:
        options = _resolve_options(options_file, separator, comment)
        stream, settings = _open_loaded(path, options, verbose, create=False)
        with stream:
            summary = settings.delete(name)
    except Exception as exc:
        exit_with_command_error("delete", exc)

    echo_rewrite_summary(summary)


@app.command("check")
def check_command(
    path: SettingsPathArgument,
    separator: SeparatorOption = None,
    comment: CommentOption = None,
    options_file: OptionsFileOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Validate that every line of a file parses."""

    try:
        options = _resolve_options(options_file, separator, comment)
        stream, settings = _open_loaded(path, options, verbose, create=False)
        with stream:
            count = len(settings)
    except Exception as exc:
        exit_with_command_error("check", exc)

    typer.echo(f"OK: {count} settings")


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
