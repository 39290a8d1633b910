from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from docmatter.parsing.parser import ParsedDocument

ExcerptOption = Union[bool, str, Callable[..., Any], None]


def excerpt_requested(excerpt: ExcerptOption, excerpt_separator: str | None) -> bool:
    if excerpt is None or excerpt is False:
        return excerpt_separator is not None
    return True


def excerpt_separator_for(excerpt: ExcerptOption, excerpt_separator: str | None, closing: str) -> str:
    if isinstance(excerpt, str):
        return excerpt
    if excerpt_separator is not None:
        return excerpt_separator
    return closing


def extract_excerpt(
    document: ParsedDocument,
    content: str,
    *,
    excerpt: ExcerptOption,
    excerpt_separator: str | None,
    closing: str,
) -> Any:
    """Return the part of ``content`` before the excerpt separator.

    A callable ``excerpt`` receives the parsed document and its return value
    is used as is. Otherwise the separator is searched for in ``content`` and
    ``None`` is returned when it does not occur.
    """
    if not excerpt_requested(excerpt, excerpt_separator):
        return None
    if callable(excerpt):
        return excerpt(document)

    separator = excerpt_separator_for(excerpt, excerpt_separator, closing)
    index = content.find(separator)
    if index < 0:
        return None
    return content[:index]
