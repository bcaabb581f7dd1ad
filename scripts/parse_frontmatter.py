from __future__ import annotations

"""CLI utility that prints the frontmatter of a note as JSON."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import IO

import mini_yaml as yaml
from notes import frontmatter

logger = logging.getLogger("parse_frontmatter")


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def run(source: str, *, strict: bool = False, out: IO[str] | None = None) -> int:
    """Parse ``source`` and write its metadata to ``out``.

    Returns the process exit code.
    """

    stream = out or sys.stdout
    try:
        text = _read_source(source)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Failed to read %s: %s", source, exc)
        return 1

    fm, _body = frontmatter.split(text)
    # Bare YAML files are accepted as well as fenced notes.
    document = text if fm is None else fm
    flag = True if strict else None
    try:
        metadata = yaml.safe_load(document, strict_indent=flag, strict_lexing=flag)
    except yaml.YAMLError as exc:
        logger.error("Failed to parse %s: %s", source, exc)
        return 1

    logger.info("Parsed %d entries from %s", len(metadata), source)
    stream.write(json.dumps(metadata, ensure_ascii=False, indent=2))
    stream.write("\n")
    return 0


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print note frontmatter as JSON")
    parser.add_argument(
        "source",
        help="Path to a Markdown note or YAML file, or '-' for stdin",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject indented top-level keys and unrecognized characters",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))
    return run(args.source, strict=args.strict)


if __name__ == "__main__":
    sys.exit(main())
