"""Note parsing utilities."""
from .frontmatter import Post, dumps, load, loads
from .parser import ParsedNote, NoteParseError, parse_note

__all__ = [
    "ParsedNote",
    "parse_note",
    "NoteParseError",
    "Post",
    "load",
    "loads",
    "dumps",
]
