from __future__ import annotations

"""Tokenizer for the front-matter YAML subset.

The lexer walks the input once, front to back, slicing consumed characters
off the remaining text.  It never backtracks and never looks further ahead
than the token it is currently matching.
"""

import logging
from typing import Callable, Iterator, List, Optional

from .errors import LexError
from .tokens import COLON, DASH, END_LINE, Token

logger = logging.getLogger(__name__)

# Characters allowed inside a value run after its first alphanumeric char.
VALUE_PUNCTUATION = frozenset("-/,'.!?")


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _is_value_char(char: str) -> bool:
    return _is_alnum(char) or char in VALUE_PUNCTUATION


class Lexer:
    """Split ``text`` into :class:`Token` objects.

    When an unrecognized character is reached the lexer stops: ``next``
    returns ``None`` from then on.  With ``strict=True`` a :class:`LexError`
    is raised instead.
    """

    def __init__(self, text: str, *, strict: bool = False) -> None:
        self._text = text
        self._pos = 0
        self.strict = strict
        self._stopped = False

    @property
    def contents(self) -> str:
        """The text not consumed yet."""

        return self._text[self._pos :]

    @property
    def offset(self) -> int:
        return self._pos

    def _at_end(self) -> bool:
        return self._pos >= len(self._text)

    def chop(self, n: int) -> str:
        chunk = self._text[self._pos : self._pos + n]
        self._pos += len(chunk)
        return chunk

    def chop_while(self, predicate: Callable[[str], bool]) -> str:
        text = self._text
        end = self._pos
        while end < len(text) and predicate(text[end]):
            end += 1
        return self.chop(end - self._pos)

    def _skip_endline(self) -> bool:
        if self._text.startswith("\r\n", self._pos):
            self.chop(2)
            return True
        if self._text.startswith("\n", self._pos):
            self.chop(1)
            return True
        return False

    def _skip_indent(self) -> int:
        return len(self.chop_while(lambda c: c == " "))

    def next(self) -> Optional[Token]:
        if self._stopped or self._at_end():
            return None

        if self._skip_endline():
            return END_LINE

        indent = self._skip_indent()
        if indent > 0:
            return Token.indent(indent)

        head = self._text[self._pos]
        if head == ":":
            self.chop(1)
            return COLON
        if head == "-":
            self.chop(1)
            return DASH
        if _is_alnum(head):
            return Token.value(self.chop_while(_is_value_char))

        if self.strict:
            raise LexError(self.offset, head)
        logger.warning(
            "Stopped tokenizing at offset %d: unrecognized character %r",
            self.offset,
            head,
        )
        self._stopped = True
        return None

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next()
            if token is None:
                return
            yield token


def tokenize(text: str, *, strict: bool = False) -> List[Token]:
    """Return every token of ``text`` as a list."""

    return list(Lexer(text, strict=strict))


__all__ = ["Lexer", "tokenize", "VALUE_PUNCTUATION"]
