from __future__ import annotations

import pytest

import mini_yaml as yaml
from notes import frontmatter


def test_split_fenced_note():
    fm, body = frontmatter.split("---\ntitle: A\n---\nBody\n")
    assert fm == "title: A\n"
    assert body == "Body\n"


def test_split_handles_crlf_fences():
    fm, body = frontmatter.split("---\r\ntitle: A\r\n---\r\nBody")
    assert fm == "title: A\r\n"
    assert body == "Body"


def test_missing_closing_fence_is_content():
    text = "---\ntitle: A\nBody\n"
    post = frontmatter.loads(text)
    assert post.metadata == {}
    assert post.content == text


def test_loads_sample_note():
    post = frontmatter.loads(
        "---\ntags:\n  - fleeting\ncreated: 2025-08-08T03:02:00\n"
        "cssclasses:\n  - center-h1\n---\n# Title\n"
    )
    assert post.metadata == {
        "tags": ["fleeting"],
        "created": "2025-08-08T03:02:00",
        "cssclasses": ["center-h1"],
    }
    assert post.content == "# Title\n"


def test_dumps_then_loads_keeps_metadata():
    post = frontmatter.Post(
        content="Body",
        metadata={"title": "Agusta Nana", "names": ["Agustine", "Haruka"]},
    )
    text = frontmatter.dumps(post)
    assert text == "---\ntitle: Agusta Nana\nnames:\n  - Agustine\n  - Haruka\n---\nBody\n"
    again = frontmatter.loads(text)
    assert again.metadata == post.metadata
    assert again.content == "Body\n"


def test_dumps_rejects_empty_lists():
    with pytest.raises(yaml.YAMLError):
        frontmatter.dumps(frontmatter.Post(content="", metadata={"tags": []}))


def test_loads_propagates_grammar_errors():
    with pytest.raises(yaml.UnexpectedToken):
        frontmatter.loads("---\nouter:\n  inner: x\n---\n")


@pytest.mark.parametrize(
    "metadata",
    [
        {"title": "x\nadmin: yes"},
        {"title": "x\r\nadmin: yes"},
        {"tags": ["a\nadmin: yes"]},
        {"tags": ["", "a"]},
        {"": "value"},
        {"my key": "value"},
        {"title": "a - b"},
        {"title": "50% done"},
    ],
)
def test_dumps_rejects_entries_that_do_not_read_back(metadata):
    with pytest.raises(yaml.YAMLError):
        frontmatter.dumps(frontmatter.Post(content="", metadata=metadata))


def test_dumps_writes_non_string_scalars_as_text():
    text = frontmatter.dumps(frontmatter.Post(content="", metadata={"count": 3, "ids": [1, 2]}))
    assert frontmatter.loads(text).metadata == {"count": "3", "ids": ["1", "2"]}
