from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from docmatter.engines.base import Engine, encode_matter
from docmatter.models.delimiters import Delimiters

EMPTY_MAPPING = "{}"


def ensure_newline(text: str) -> str:
    return text if text.endswith("\n") else f"{text}\n"


def _matter_block(data: Mapping[str, Any], delimiters: Delimiters, language: str, engines: Mapping[str, Engine]) -> str:
    encoded = encode_matter(engines, language, data)
    if encoded.strip() == EMPTY_MAPPING:
        return ""
    return ensure_newline(delimiters.opening) + ensure_newline(encoded) + ensure_newline(delimiters.closing)


def stringify_document(
    content: str | None,
    data: Mapping[str, Any],
    *,
    delimiters: Delimiters,
    language: str,
    engines: Mapping[str, Engine],
    excerpt: str | None = None,
    excerpt_separator: str | None = None,
) -> str:
    """Assemble front matter, an optional excerpt and content into one string.

    Data that encodes to an empty mapping produces no front matter block.
    """
    parts = [_matter_block(data, delimiters, language, engines)]
    if excerpt is not None:
        separator = excerpt_separator if excerpt_separator is not None else delimiters.closing
        parts.append(ensure_newline(excerpt) + ensure_newline(separator))
    if content:
        parts.append(ensure_newline(content))
    return "".join(parts)
