"""Setting name validation.

Responsibilities:
- Decide whether a programmatically supplied name could appear in a document.
- Reject exactly the names the line classifier would reject, so that every
  name entering the store can later be located and rewritten.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import FormatViolationError, InvalidArgumentError
from ..models.datatypes import MalformedReason, SettingsSyntax


@dataclass(frozen=True, slots=True)
class NameProblem:
    """First problem found in a candidate setting name.

    Attributes:
        reason: Malformed reason.
        detail: Human-readable diagnostic.
        character: Offending character, when the problem is character-level.
    """

    reason: MalformedReason
    detail: str
    character: str | None = None


def check_name(name: str | None, syntax: SettingsSyntax) -> NameProblem | None:
    """Return the first problem with `name`, or `None` when it is valid.

    Args:
        name: Candidate setting name.
        syntax: Syntax characters and name predicate of the document.

    Returns:
        `None` for a valid name, otherwise the first `NameProblem` in scan order.
    """

    if not name:
        return NameProblem(MalformedReason.EMPTY_NAME, "Setting name is None or empty.")

    for character in name:
        if character.isspace():
            return NameProblem(
                MalformedReason.SPACE_IN_NAME,
                f"Whitespace in the middle of the setting name: {name!r}.",
                character,
            )
        if character == syntax.comment:
            return NameProblem(
                MalformedReason.COMMENT_IN_NAME,
                f"Comment character {syntax.comment!r} in the setting name: {name!r}.",
                character,
            )
        if not syntax.char_accepted(character):
            return NameProblem(
                MalformedReason.ILLEGAL_CHARACTER,
                f"Illegal character {character!r} in the setting name: {name!r}.",
                character,
            )
    return None


def validate_name(name: str | None, syntax: SettingsSyntax) -> str:
    """Validate a setting name and return it unchanged.

    Raises:
        InvalidArgumentError: If the name is `None` or empty.
        FormatViolationError: If the name contains whitespace, the comment
            character, or a character rejected by the name predicate.
    """

    problem = check_name(name, syntax)
    if problem is None:
        return name  # type: ignore[return-value]
    if problem.reason is MalformedReason.EMPTY_NAME:
        raise InvalidArgumentError(problem.detail)
    raise FormatViolationError(reason=problem.reason, detail=problem.detail, name=name)
