from __future__ import annotations

import pytest

import docmatter
from docmatter.errors import EngineError
from docmatter.stringifier import ensure_newline


def test_stringify_yaml_front_matter() -> None:
    assert docmatter.stringify("Body", {"title": "Hello"}) == "---\ntitle: Hello\n---\nBody\n"


def test_empty_data_emits_no_block() -> None:
    assert docmatter.stringify("Body", {}) == "Body\n"
    assert docmatter.stringify("Body") == "Body\n"
    assert docmatter.stringify("Body", {}, language="json") == "Body\n"


def test_missing_or_empty_content_is_omitted() -> None:
    assert docmatter.stringify(None, {"title": "Hello"}) == "---\ntitle: Hello\n---\n"
    assert docmatter.stringify("", {"title": "Hello"}) == "---\ntitle: Hello\n---\n"
    assert docmatter.stringify() == ""


def test_trailing_newline_is_not_doubled() -> None:
    assert docmatter.stringify("Body\n", {"a": 1}) == "---\na: 1\n---\nBody\n"


def test_stringify_json() -> None:
    assert docmatter.stringify("Body", {"a": 1}, language="json") == '---\n{\n  "a": 1\n}\n---\nBody\n'


def test_stringify_with_excerpt() -> None:
    assert docmatter.stringify("Rest", {"a": 1}, excerpt="Intro") == "---\na: 1\n---\nIntro\n---\nRest\n"


def test_stringify_with_excerpt_separator() -> None:
    result = docmatter.stringify("Rest", {"a": 1}, excerpt="Intro\n", excerpt_separator="<!-- more -->")
    assert result == "---\na: 1\n---\nIntro\n<!-- more -->\nRest\n"


def test_stringify_with_delimiter_pair() -> None:
    result = docmatter.stringify("Body", {"a": 1}, delimiters=["<!--", "-->"])
    assert result == "<!--\na: 1\n-->\nBody\n"


def test_stringify_unknown_language_raises() -> None:
    with pytest.raises(EngineError) as excinfo:
        docmatter.stringify("Body", {"a": 1}, language="toml")
    assert excinfo.value.language == "toml"


def test_stringify_custom_engine() -> None:
    engines = {"kv": (lambda text: {}, lambda data: "\n".join(f"{k}={v}" for k, v in data.items()))}
    assert docmatter.stringify("Body", {"a": 1}, language="kv", engines=engines) == "---\na=1\n---\nBody\n"


def test_round_trip() -> None:
    data = {"title": "Hello", "tags": ["x", "y"], "count": 3, "nested": {"draft": True}}
    content = "Body text\n\nMore text.\n"
    doc = docmatter.parse(docmatter.stringify(content, data))
    assert doc.data == data
    assert doc.content == content


def test_round_trip_json() -> None:
    data = {"title": "Hello", "count": 3}
    doc = docmatter.parse(docmatter.stringify("Body\n", data, language="json"), language="json")
    assert doc.data == data
    assert doc.content == "Body\n"


def test_stringify_of_parse_is_stable() -> None:
    first = docmatter.stringify("Body\n", {"b": 2, "a": 1})
    second = docmatter.parse(first).stringify()
    assert second == first
    assert docmatter.parse(second).data == {"b": 2, "a": 1}


def test_ensure_newline() -> None:
    assert ensure_newline("a") == "a\n"
    assert ensure_newline("a\n") == "a\n"
    assert ensure_newline("") == "\n"
