from __future__ import annotations

"""Recursive descent parser for the front-matter YAML subset.

The grammar understands two kinds of top-level entries::

    key: some scalar text
    key:
      - item
      - another item

Indentation tokens act as the block delimiters.  Every violation raises
:class:`~mini_yaml.errors.UnexpectedToken`; there is no recovery and no
partial result.
"""

import logging
from typing import Any, Dict, List, Optional

from config.parser_options import get_parser_options

from .errors import UnexpectedToken
from .lexer import Lexer
from .tokens import COLON, DASH, Token, TokenType
from .values import Mapping, Scalar, Sequence, Value, to_python

logger = logging.getLogger(__name__)

# Width of the separator between a list dash and its item.
ITEM_SEPARATOR = Token.indent(1)


class Parser:
    """Parse ``text`` into a list of :class:`Scalar` / :class:`Sequence`.

    Parameters
    ----------
    text:
        Raw document.  It is tokenized completely on construction.
    strict_indent:
        Reject top-level keys preceded by indentation.  ``None`` reads the
        configured default from :mod:`config.parser_options`.
    strict_lexing:
        Raise :class:`~mini_yaml.errors.LexError` on unrecognized characters
        instead of stopping silently.  ``None`` reads the configured default.
    """

    def __init__(
        self,
        text: str,
        *,
        strict_indent: Optional[bool] = None,
        strict_lexing: Optional[bool] = None,
    ) -> None:
        options = get_parser_options()
        if strict_indent is None:
            strict_indent = options.strict_indent
        if strict_lexing is None:
            strict_lexing = options.strict_lexing
        self.strict_indent = strict_indent
        self.tokens: List[Token] = list(Lexer(text, strict=strict_lexing))
        self.pos = 0
        logger.debug("Buffered %d tokens", len(self.tokens))

    def __enter__(self) -> "Parser":
        return self

    def __exit__(self, *_exc: Any) -> None:
        self.close()

    def close(self) -> None:
        """Drop the token buffer.  Returned values stay valid."""

        self.tokens = []
        self.pos = 0

    # ------------------------------------------------------------------
    # Cursor primitives

    def is_empty(self) -> bool:
        return self.pos >= len(self.tokens)

    def advance(self) -> None:
        self.pos += 1

    def current(self) -> Optional[Token]:
        if self.is_empty():
            return None
        return self.tokens[self.pos]

    def peek_next(self) -> Optional[Token]:
        if self.pos + 1 >= len(self.tokens):
            return None
        return self.tokens[self.pos + 1]

    def check(self, expected: Token) -> bool:
        return self.current() == expected

    def consume(self, expected: Token) -> None:
        if not self.check(expected):
            raise UnexpectedToken(self.current(), expected)
        self.advance()

    # ------------------------------------------------------------------
    # Grammar

    def parse(self) -> List[Value]:
        values: List[Value] = []
        indent = 0
        while not self.is_empty():
            tok = self.tokens[self.pos]
            if tok.type is TokenType.INDENT:
                indent = tok.payload  # type: ignore[assignment]
                self.advance()
            elif tok.type is TokenType.VALUE:
                values.append(self._parse_value(indent))
                indent = 0
            elif tok.type is TokenType.END_LINE:
                indent = 0
                self.advance()
            else:
                raise UnexpectedToken(tok)
        logger.debug("Parsed %d top-level entries", len(values))
        return values

    def _parse_value(self, indent: int) -> Value:
        tok = self.current()
        key = tok.get_value() if tok is not None else None
        if key is None:
            raise UnexpectedToken(tok)
        if self.strict_indent and indent:
            raise UnexpectedToken(Token.indent(indent))

        self.advance()
        self.consume(COLON)

        tok = self.current()
        if tok is None:
            raise UnexpectedToken(None)

        if tok.type is TokenType.INDENT:
            self.advance()
            return Scalar(key=key, value=self._get_multiple_value())

        if tok.type is TokenType.END_LINE:
            self.advance()
            block = self.current()
            if block is None or block.type is not TokenType.INDENT:
                raise UnexpectedToken(block)
            following = self.peek_next()
            if following is not None and following.type is TokenType.VALUE:
                return self._parse_mapping(block.payload)  # type: ignore[arg-type]
            items = self._parse_sequence(block.payload)  # type: ignore[arg-type]
            return Sequence(key=key, value=items)

        raise UnexpectedToken(tok)

    def _get_multiple_value(self) -> str:
        """Collect the rest of the line as one string."""

        parts: List[str] = []
        while not self.is_empty():
            tok = self.tokens[self.pos]
            if tok.type is TokenType.END_LINE:
                self.advance()
                break
            if tok.type is TokenType.INDENT:
                parts.append(" " * tok.payload)  # type: ignore[operator]
            elif tok.type is TokenType.COLON:
                parts.append(":")
            elif tok.type is TokenType.VALUE:
                parts.append(tok.payload)  # type: ignore[arg-type]
            else:
                raise UnexpectedToken(tok)
            self.advance()
        return "".join(parts)

    def _parse_sequence(self, indent: int) -> List[str]:
        marker = Token.indent(indent)
        items: List[str] = []
        # An item at any other width ends the block without an error.
        while self.check(marker):
            self.consume(marker)
            self.consume(DASH)
            self.consume(ITEM_SEPARATOR)
            tok = self.current()
            if tok is None or tok.type is not TokenType.VALUE:
                raise UnexpectedToken(tok)
            items.append(self._get_multiple_value())
        return items

    def _parse_mapping(self, indent: int) -> Mapping:
        # Nested mappings are not supported yet.
        raise UnexpectedToken(self.peek_next(), DASH)


def parse(text: str, **options: Any) -> List[Value]:
    """Parse ``text`` and return its top-level entries."""

    with Parser(text, **options) as parser:
        return parser.parse()


def safe_load(text: str, **options: Any) -> Dict[str, Any]:
    """Parse ``text`` into a plain ``dict`` of strings and string lists."""

    return to_python(parse(text, **options))


__all__ = ["Parser", "parse", "safe_load", "ITEM_SEPARATOR"]
