from pathlib import Path

import pytest

from notes.parser import NoteParseError, parse_note


def test_parse_note(tmp_path: Path) -> None:
    note = tmp_path / "note.md"
    note.write_text(
        "---\naliases:\n  - Bob\n  - Bobby\ntags:\n  - npc\n  - human\n---\nHello\nWorld",
        encoding="utf-8",
    )
    parsed = parse_note(note)
    assert parsed.text == "Hello\nWorld"
    assert parsed.aliases == ["Bob", "Bobby"]
    assert parsed.tags == ["npc", "human"]
    assert parsed.metadata == {"aliases": ["Bob", "Bobby"], "tags": ["npc", "human"]}


def test_bad_frontmatter(tmp_path: Path) -> None:
    note = tmp_path / "bad.md"
    note.write_text("---\naliases:\n---\ntext", encoding="utf-8")
    with pytest.raises(NoteParseError):
        parse_note(note)


def test_nested_mapping_frontmatter(tmp_path: Path) -> None:
    note = tmp_path / "nested.md"
    note.write_text("---\nstats:\n  strength: 10\n---\ntext", encoding="utf-8")
    with pytest.raises(NoteParseError):
        parse_note(note)


def test_non_utf8(tmp_path: Path) -> None:
    note = tmp_path / "latin1.md"
    note.write_bytes(b"---\naliases: Bob\n---\n\xff")
    with pytest.raises(NoteParseError):
        parse_note(note)


def test_strict_lexing_is_forwarded(tmp_path: Path) -> None:
    note = tmp_path / "comment.md"
    note.write_text("---\ntitle: Note\n# comment\n---\n", encoding="utf-8")
    assert parse_note(note, strict_lexing=False).metadata == {"title": "Note"}
    with pytest.raises(NoteParseError):
        parse_note(note, strict_lexing=True)
