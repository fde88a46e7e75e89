"""Settings stream access.

Responsibilities:
- Define the cursor-bearing stream contract consumed by load, save, and delete.
- Read lines with their original line endings from the current position.
- Replace the whole stream content in place.
- Open a settings file from disk, creating it when missing.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Iterator, Protocol


_LINE_ENDINGS = ("\r\n", "\n", "\r")
_BOM = "\ufeff"


class SettingsStream(Protocol):
    """Readable, writable, seekable text stream holding a settings document.

    Text streams must be opened with `newline=""` so that line endings reach
    the rewrite engine untranslated.
    """

    def readline(self) -> str: ...

    def seek(self, offset: int, whence: int = 0) -> int: ...

    def tell(self) -> int: ...

    def truncate(self, size: int | None = None) -> int: ...

    def write(self, text: str) -> int: ...

    def flush(self) -> None: ...


def iter_lines(stream: SettingsStream) -> Iterator[str]:
    """Yield lines, endings included, from the current stream position."""

    while True:
        raw = stream.readline()
        if not raw:
            return
        yield raw


def split_line_ending(raw: str) -> tuple[str, str]:
    """Split one raw line into its body and its line ending.

    Returns:
        `(body, ending)` where `ending` is `"\\r\\n"`, `"\\n"`, `"\\r"`, or `""`.
    """

    for ending in _LINE_ENDINGS:
        if raw.endswith(ending):
            return raw[: -len(ending)], ending
    return raw, ""


def split_bom(raw: str) -> tuple[str, str]:
    """Split a leading byte order mark off the first line of a document.

    Returns:
        `(bom, rest)` where `bom` is `"\\ufeff"` or `""`.
    """

    if raw.startswith(_BOM):
        return _BOM, raw[len(_BOM) :]
    return "", raw


def replace_contents(stream: SettingsStream, text: str) -> None:
    """Truncate the stream, write `text` from offset 0, flush, and rewind."""

    stream.seek(0)
    stream.truncate(0)
    stream.write(text)
    stream.flush()
    stream.seek(0)


def open_settings_file(path: Path, encoding: str = "utf-8", create: bool = True) -> IO[str]:
    """Open a settings file for in-place reading and rewriting.

    Args:
        path: Settings file path.
        encoding: Text encoding of the file.
        create: Create an empty file (and parent directories) when missing.

    Raises:
        FileNotFoundError: If the file is missing and `create` is false.
    """

    if create and not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
    return path.open("r+", encoding=encoding, newline="")
