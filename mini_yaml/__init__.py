"""Parser for the small YAML subset used in note front-matter.

Only flat ``key: value`` pairs and ``key:`` followed by an indented list of
``- item`` lines are understood.  See :mod:`mini_yaml.parser` for the grammar.
"""
from .errors import LexError, UnexpectedToken, YAMLError
from .lexer import Lexer, tokenize
from .parser import Parser, parse, safe_load
from .tokens import COLON, DASH, END_LINE, Token, TokenType
from .values import Mapping, Scalar, Sequence, Value, to_python

__all__ = [
    "YAMLError",
    "UnexpectedToken",
    "LexError",
    "Lexer",
    "tokenize",
    "Parser",
    "parse",
    "safe_load",
    "Token",
    "TokenType",
    "DASH",
    "COLON",
    "END_LINE",
    "Scalar",
    "Sequence",
    "Mapping",
    "Value",
    "to_python",
]
