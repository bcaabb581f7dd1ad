from __future__ import annotations

"""Utilities for parsing Obsidian style Markdown notes.

This module exposes :func:`parse_note` which loads the frontmatter and
content of a note, returning a :class:`ParsedNote` dataclass with the body
text, the raw metadata and the list-valued ``tags``, ``aliases`` and
``cssclasses`` properties Obsidian understands.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List
import logging
import re

import mini_yaml as yaml

from . import frontmatter

logger = logging.getLogger(__name__)


class NoteParseError(Exception):
    """Raised when a note cannot be parsed."""


@dataclass
class ParsedNote:
    """Result of :func:`parse_note`.

    Attributes
    ----------
    text:
        Note body with the frontmatter removed.
    metadata:
        Every frontmatter entry, in source order.
    tags:
        Tags from the frontmatter. Always a list.
    aliases:
        Aliases from the frontmatter. Always a list.
    cssclasses:
        CSS classes from the frontmatter. Always a list.
    """

    text: str
    metadata: Dict[str, Any]
    tags: List[str]
    aliases: List[str]
    cssclasses: List[str]


def _parse_frontmatter(path: Path, **options: Any) -> frontmatter.Post:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return frontmatter.load(fh, **options)
    except UnicodeDecodeError as exc:  # non UTF-8 file
        raise NoteParseError(f"{path} is not UTF-8 encoded") from exc
    except yaml.YAMLError as exc:  # malformed YAML frontmatter
        raise NoteParseError(f"Malformed frontmatter in {path}: {exc}") from exc


def _as_list(value: Any) -> List[str]:
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, list):
        return list(value)
    return []


def parse_note(path: Path, **options: Any) -> ParsedNote:
    """Parse ``path`` into a :class:`ParsedNote`.

    Parameters
    ----------
    path:
        Location of the Markdown note to parse.
    options:
        Forwarded to :class:`mini_yaml.Parser`.
    """

    post = _parse_frontmatter(Path(path), **options)
    metadata = post.metadata or {}

    tags = metadata.get("tags", [])
    if isinstance(tags, str):
        tags = [t for t in re.split(r"[ ,]+", tags) if t]
    else:
        tags = _as_list(tags)

    logger.debug("Parsed %s with %d frontmatter entries", path, len(metadata))
    return ParsedNote(
        text=(post.content or "").strip(),
        metadata=metadata,
        tags=tags,
        aliases=_as_list(metadata.get("aliases")),
        cssclasses=_as_list(metadata.get("cssclasses")),
    )
