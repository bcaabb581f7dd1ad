from __future__ import annotations

"""Lexical units produced by :class:`mini_yaml.lexer.Lexer`."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class TokenType(Enum):
    INDENT = "indent"
    DASH = "dash"
    COLON = "colon"
    VALUE = "value"
    END_LINE = "end_line"


@dataclass(frozen=True)
class Token:
    """A single token.

    ``payload`` is the space count for ``INDENT``, the matched text for
    ``VALUE`` and ``None`` for every other type.  Two tokens are equal when
    both the type and the payload match.
    """

    type: TokenType
    payload: Union[int, str, None] = None

    @classmethod
    def indent(cls, count: int) -> "Token":
        return cls(TokenType.INDENT, count)

    @classmethod
    def value(cls, text: str) -> "Token":
        return cls(TokenType.VALUE, text)

    def get_value(self) -> Optional[str]:
        """Return the text of a ``VALUE`` token, ``None`` otherwise."""

        if self.type is TokenType.VALUE:
            return self.payload  # type: ignore[return-value]
        return None

    def __repr__(self) -> str:
        if self.payload is None:
            return f"Token.{self.type.name}"
        return f"Token.{self.type.name}({self.payload!r})"


DASH = Token(TokenType.DASH)
COLON = Token(TokenType.COLON)
END_LINE = Token(TokenType.END_LINE)

__all__ = ["TokenType", "Token", "DASH", "COLON", "END_LINE"]
