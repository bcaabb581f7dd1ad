from __future__ import annotations

"""Exceptions raised by the :mod:`mini_yaml` package."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .tokens import Token


class YAMLError(Exception):
    """Base class for every error raised while reading front-matter."""


class UnexpectedToken(YAMLError):
    """Raised when the token stream does not match the grammar."""

    def __init__(
        self,
        found: Optional["Token"],
        expected: Optional["Token"] = None,
    ) -> None:
        self.found = found
        self.expected = expected
        got = "end of input" if found is None else repr(found)
        if expected is None:
            message = f"Unexpected token: {got}"
        else:
            message = f"Unexpected token: {got} (expected {expected!r})"
        super().__init__(message)


class LexError(YAMLError):
    """Raised in strict mode when the lexer meets an unrecognized character."""

    def __init__(self, offset: int, char: str) -> None:
        self.offset = offset
        self.char = char
        super().__init__(f"Unrecognized character {char!r} at offset {offset}")
