"""Errors raised by the envelope codec and directive construction."""

from typing import Any, Callable, Sequence

from pydantic import ValidationError

# (loc, index) -> whether loc[index] is a union tag pydantic inserted
TagLocator = Callable[[Sequence[Any], int], bool]


class EnvelopeError(Exception):
    """Base class for every error this package raises."""


def format_path(loc: Sequence[Any], is_tag: TagLocator | None = None) -> str:
    """
    Render a pydantic error location as a JSONPath-style string.

    ``is_tag`` recognizes the union tags pydantic inserts into locations;
    they are not wire keys and are left out. Every other part is kept, even
    when it happens to spell a tag name.
    """
    path = "$"
    for index, part in enumerate(loc):
        if isinstance(part, int):
            path += f"[{part}]"
        elif is_tag is None or not is_tag(loc, index):
            path += f".{part}"
    return path


class DeserializationError(EnvelopeError):
    """
    A payload could not be turned into a model.

    Raised for malformed JSON and for missing or mistyped required fields.
    ``path`` points at the first offending field, ``errors`` lists all of them.
    """

    def __init__(self, path: str, reason: str, errors: list[tuple[str, str]] | None = None) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
        self.errors = errors or [(path, reason)]

    @classmethod
    def from_validation_error(
        cls, exc: ValidationError, is_tag: TagLocator | None = None
    ) -> "DeserializationError":
        errors = [
            (format_path(error.get("loc", ()), is_tag), error.get("msg") or error.get("type", "invalid"))
            for error in exc.errors()
        ]
        if not errors:
            return cls("$", str(exc))
        path, reason = errors[0]
        return cls(path, reason, errors)


class InvalidDirective(EnvelopeError, ValueError):
    """A directive was built with a semantically invalid combination of fields."""

    def __init__(self, directive_type: str, reason: str) -> None:
        super().__init__(f"{directive_type}: {reason}")
        self.directive_type = directive_type
        self.reason = reason
