"""Syntax options and loaders for linecfg.

Responsibilities:
- Define document syntax options as a typed dataclass.
- Provide loader entry points for file- and environment-based options.

Key types:
- `SyntaxOptions`: normalized separator, comment, and name policy settings.
- `OptionsLoader`: static construction helpers for `SyntaxOptions`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .models.datatypes import SettingsSyntax, default_char_accepted
from .parsing import normalize_optional_string, parse_single_char


_DEFAULT_SEPARATOR = "="
_DEFAULT_COMMENT = "#"
_DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True, slots=True)
class SyntaxOptions:
    """Syntax options for one settings document.

    Attributes:
        separator: Character between setting names and values.
        comment: Character starting a comment.
        extra_name_chars: Characters accepted in names besides letters,
            digits, and underscore.
        encoding: Text encoding of settings files opened from disk.
    """

    separator: str = _DEFAULT_SEPARATOR
    comment: str = _DEFAULT_COMMENT
    extra_name_chars: str = ""
    encoding: str = _DEFAULT_ENCODING

    def validate(self) -> None:
        """Validate that the syntax characters cannot be confused with each other."""

        separator = parse_single_char(self.separator, "separator")
        comment = parse_single_char(self.comment, "comment")
        if separator == comment:
            raise ValueError("`separator` and `comment` must be different characters.")
        for field_name, character in (("separator", separator), ("comment", comment)):
            if self._accepts(character):
                raise ValueError(
                    f"`{field_name}` {character!r} must not be accepted in setting names."
                )
        if any(character.isspace() for character in self.extra_name_chars):
            raise ValueError("`extra_name_chars` must not contain whitespace.")
        if not self.encoding.strip():
            raise ValueError("`encoding` must be a non-empty string.")

    def to_syntax(self) -> SettingsSyntax:
        """Build the `SettingsSyntax` used by the line engine."""

        return SettingsSyntax(
            separator=self.separator,
            comment=self.comment,
            char_accepted=self._accepts,
        )

    def _accepts(self, character: str) -> bool:
        return default_char_accepted(character) or character in self.extra_name_chars


class OptionsLoader:
    """Factory methods for creating `SyntaxOptions` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"separator", "comment", "extra_name_chars", "encoding"})
    _ENV_KEYS = {
        "separator": "LINECFG_SEPARATOR",
        "comment": "LINECFG_COMMENT",
        "extra_name_chars": "LINECFG_EXTRA_NAME_CHARS",
        "encoding": "LINECFG_ENCODING",
    }

    @staticmethod
    def from_yaml(path: Path) -> SyntaxOptions:
        """Create validated options from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = OptionsLoader._parse_yaml_payload(path_text, path)
        return OptionsLoader._build_options_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> SyntaxOptions:
        """Create validated options from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        payload = {
            field_name: env_map[env_key]
            for field_name, env_key in OptionsLoader._ENV_KEYS.items()
            if env_key in env_map
        }
        return OptionsLoader._build_options_from_mapping(payload, source_label="Environment")

    @staticmethod
    def merge(base: SyntaxOptions, **overrides: str | None) -> SyntaxOptions:
        """Return `base` with non-`None` overrides applied and validated."""

        options = SyntaxOptions(
            separator=overrides.get("separator") or base.separator,
            comment=overrides.get("comment") or base.comment,
            extra_name_chars=(
                overrides["extra_name_chars"]
                if overrides.get("extra_name_chars") is not None
                else base.extra_name_chars
            ),
            encoding=overrides.get("encoding") or base.encoding,
        )
        options.validate()
        return options

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML options `{path}` could not be parsed: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML options `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_options_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> SyntaxOptions:
        """Build validated options from a mapping payload."""

        unknown = sorted(set(payload).difference(OptionsLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        try:
            options = SyntaxOptions(
                separator=OptionsLoader._optional_char(payload, "separator")
                or _DEFAULT_SEPARATOR,
                comment=OptionsLoader._optional_char(payload, "comment") or _DEFAULT_COMMENT,
                extra_name_chars=OptionsLoader._optional_raw_string(payload, "extra_name_chars"),
                encoding=normalize_optional_string(payload.get("encoding"))
                or _DEFAULT_ENCODING,
            )
            options.validate()
        except ValueError as exc:
            raise ValueError(f"{source_label}: {exc}") from exc
        return options

    @staticmethod
    def _optional_char(payload: Mapping[str, Any], key: str) -> str | None:
        """Read an optional single-character field."""

        if key not in payload or normalize_optional_string(payload[key]) is None:
            return None
        return parse_single_char(payload[key], key)

    @staticmethod
    def _optional_raw_string(payload: Mapping[str, Any], key: str) -> str:
        """Read an optional string field without trimming inner characters."""

        value = payload.get(key)
        if value is None:
            return ""
        return "".join(str(value).split())
