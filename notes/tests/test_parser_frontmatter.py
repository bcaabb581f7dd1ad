from __future__ import annotations

from textwrap import dedent

import pytest

from notes.parser import NoteParseError, parse_note


def test_parse_note_handles_block_list_frontmatter(tmp_path):
    path = tmp_path / "bane.md"
    path.write_text(
        dedent(
            """\
            ---
            tags:
              - pantheon
              - deity
              - war
            alignment: chaotic evil
            ---
            # Bane
            """
        ),
        encoding="utf-8",
    )

    parsed = parse_note(path)

    assert parsed.metadata["tags"] == ["pantheon", "deity", "war"]
    assert parsed.metadata["alignment"] == "chaotic evil"
    assert parsed.tags == ["pantheon", "deity", "war"]
    assert parsed.text == "# Bane"


def test_parse_note_normalises_string_properties(tmp_path):
    path = tmp_path / "bob.md"
    path.write_text(
        "---\naliases: Bob\ntags: npc, human merchant\ncssclasses: wide\n---\nHello\n",
        encoding="utf-8",
    )

    parsed = parse_note(path)

    assert parsed.aliases == ["Bob"]
    assert parsed.tags == ["npc", "human", "merchant"]
    assert parsed.cssclasses == ["wide"]


def test_parse_note_without_frontmatter(tmp_path):
    path = tmp_path / "plain.md"
    path.write_text("Just text.\n", encoding="utf-8")

    parsed = parse_note(path)

    assert parsed.metadata == {}
    assert parsed.tags == []
    assert parsed.aliases == []
    assert parsed.cssclasses == []
    assert parsed.text == "Just text."


def test_parse_note_rejects_zero_indent_lists(tmp_path):
    path = tmp_path / "flat.md"
    path.write_text("---\ntags:\n- entry\n---\nBody text.\n", encoding="utf-8")

    with pytest.raises(NoteParseError, match="Malformed frontmatter"):
        parse_note(path)
