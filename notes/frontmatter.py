from __future__ import annotations

"""Front-matter reader and writer for Markdown notes.

A note carries front-matter when its first line is ``---`` and a later line
is also ``---``.  The text between the fences is handed to
:func:`mini_yaml.safe_load`; everything after the closing fence is the body.
"""

from dataclasses import dataclass, field
from io import StringIO
from typing import Any, Dict, IO, Optional, Tuple

import mini_yaml as yaml

FENCE = "---"


@dataclass
class Post:
    content: str
    metadata: Dict[str, Any] = field(default_factory=dict)


def split(text: str) -> Tuple[Optional[str], str]:
    """Return ``(frontmatter, body)`` for ``text``.

    ``frontmatter`` is ``None`` when the note has no complete fenced block.
    """

    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip("\r\n") != FENCE:
        return None, text
    for index in range(1, len(lines)):
        if lines[index].rstrip("\r\n") == FENCE:
            return "".join(lines[1:index]), "".join(lines[index + 1 :])
    # No closing fence; treat the entire file as content
    return None, text


def load(fh: IO[str], **options: Any) -> Post:
    text = fh.read()
    fm, body = split(text)
    if fm is None:
        return Post(content=text, metadata={})
    metadata = yaml.safe_load(fm, **options)
    return Post(content=body, metadata=metadata)


def loads(text: str, **options: Any) -> Post:
    """Parse a string containing frontmatter into a :class:`Post`."""

    return load(StringIO(text), **options)


def _format_entry(key: str, value: Any) -> list[str]:
    if isinstance(value, (list, tuple)):
        if not value:
            raise yaml.YAMLError(f"Cannot write empty list for {key!r}")
        items = [str(item) for item in value]
        lines = [f"{key}:"] + [f"  - {item}" for item in items]
        expected: yaml.Value = yaml.Sequence(key=str(key), value=items)
    else:
        lines = [f"{key}: {value}"]
        expected = yaml.Scalar(key=str(key), value=str(value))
    # Every entry must read back as exactly what was written.
    try:
        parsed = yaml.parse("\n".join(lines), strict_indent=True, strict_lexing=True)
    except yaml.YAMLError as exc:
        raise yaml.YAMLError(f"Cannot write {key!r}: {exc}") from exc
    if parsed != [expected]:
        raise yaml.YAMLError(f"Cannot write {key!r}: value does not read back unchanged")
    return lines


def dumps(post: Post) -> str:
    """Serialise ``post`` back into a frontmatter string."""

    lines = [FENCE]
    for key, value in post.metadata.items():
        lines.extend(_format_entry(key, value))
    lines.append(FENCE)
    body = "\n".join(lines) + "\n"
    content = post.content or ""
    if content:
        body += content
        if not content.endswith("\n"):
            body += "\n"
    return body


__all__ = ["FENCE", "Post", "split", "load", "loads", "dumps"]
