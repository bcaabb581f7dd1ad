from __future__ import annotations

"""Parser options resolved from the environment or ``mini_yaml.json``.

Both options default to ``False`` which keeps the permissive behavior: an
indented top-level key is accepted and an unrecognized character silently
ends tokenizing.
"""

from dataclasses import dataclass
import json
import os
from pathlib import Path
from typing import Any, Optional

__all__ = [
    "OPTIONS_FILE_NAME",
    "PROJECT_ROOT",
    "ParserOptions",
    "get_parser_options",
]

OPTIONS_FILE_NAME = "mini_yaml.json"

# Repository root used for the project-level options file.
PROJECT_ROOT = Path(__file__).resolve().parent.parent

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class ParserOptions:
    strict_indent: bool = False
    strict_lexing: bool = False


_OPTIONS: Optional[ParserOptions] = None


def _env_flag(name: str) -> Optional[bool]:
    raw = os.getenv(name)
    if not isinstance(raw, str):
        return None
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return None


def _read_section(path: Path) -> dict[str, Any]:
    """Return the ``parser`` section of ``path`` or an empty dict."""

    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, ValueError):
        return {}
    if not isinstance(data, dict):
        return {}
    section = data.get("parser")
    return section if isinstance(section, dict) else {}


def get_parser_options(force_reload: bool = False) -> ParserOptions:
    """Return the configured :class:`ParserOptions`.

    Environment variables ``MINI_YAML_STRICT_INDENT`` and
    ``MINI_YAML_STRICT_LEXING`` take precedence over the JSON file.
    """

    global _OPTIONS
    if not force_reload and _OPTIONS is not None:
        return _OPTIONS

    section = _read_section(PROJECT_ROOT / OPTIONS_FILE_NAME)

    strict_indent = _env_flag("MINI_YAML_STRICT_INDENT")
    if strict_indent is None:
        strict_indent = bool(section.get("strictIndent", False))

    strict_lexing = _env_flag("MINI_YAML_STRICT_LEXING")
    if strict_lexing is None:
        strict_lexing = bool(section.get("strictLexing", False))

    _OPTIONS = ParserOptions(strict_indent=strict_indent, strict_lexing=strict_lexing)
    return _OPTIONS
