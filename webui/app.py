from __future__ import annotations

"""HTTP front-end exposing the frontmatter parser."""

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

import mini_yaml as yaml
from mini_yaml import Scalar, Sequence
from notes import frontmatter

logger = logging.getLogger(__name__)

app = FastAPI()


class ParseRequest(BaseModel):
    text: str
    strict: bool = False


def _entry(value: yaml.Value) -> dict[str, Any]:
    if isinstance(value, Scalar):
        return {"kind": "scalar", "key": value.key, "value": value.value}
    if isinstance(value, Sequence):
        return {"kind": "sequence", "key": value.key, "value": list(value.value)}
    raise TypeError(f"Unsupported value: {value!r}")


@app.get("/health")
async def health() -> dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "ok"}


@app.post("/frontmatter/parse")
async def parse_frontmatter(req: ParseRequest) -> dict[str, Any]:
    """Parse the frontmatter of ``req.text``.

    A text without ``---`` fences is parsed as a bare YAML document and
    reported with an empty ``content``.
    """

    fm, body = frontmatter.split(req.text)
    if fm is None:
        fm, body = req.text, ""
    flag = True if req.strict else None
    try:
        entries = yaml.parse(fm, strict_indent=flag, strict_lexing=flag)
    except yaml.YAMLError as exc:
        logger.info("Rejected frontmatter: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))
    return {
        "metadata": yaml.to_python(entries),
        "entries": [_entry(entry) for entry in entries],
        "content": body,
    }
