"""Public entry points for parsing, testing and stringifying front matter."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from docmatter.defaults import ALIASES, DELIMITERS, LANGUAGE
from docmatter.engines import DEFAULT_ENGINES, normalize_engines
from docmatter.models.delimiters import Delimiters
from docmatter.parsing.excerpt import ExcerptOption
from docmatter.parsing.parser import ParsedDocument
from docmatter.stringifier import stringify_document

logger = logging.getLogger(__name__)


def parse(
    source: str,
    *,
    delimiters: str | Sequence[str] = DELIMITERS,
    language: str = LANGUAGE,
    aliases: Mapping[str, str] = ALIASES,
    engines: Mapping[Any, object] = DEFAULT_ENGINES,
    excerpt: ExcerptOption = None,
    excerpt_separator: str | None = None,
) -> ParsedDocument:
    """Parse ``source`` into front matter, excerpt and content.

    Args:
        source: Document text that may start with front matter.
        delimiters: One delimiter used for both ends, or an
            ``(opening, closing)`` pair.
        language: Language used when the block has no directive.
        aliases: Lowercase alias to language name mapping.
        engines: Language name to ``Engine`` (or ``(decode, encode)`` pair).
        excerpt: ``True`` to extract an excerpt up to the separator, a string
            to use as the separator, or a callable receiving the parsed
            document and returning the excerpt.
        excerpt_separator: Separator used when ``excerpt`` is not a string.
            Defaults to the closing delimiter.

    Returns:
        A lazily evaluated ``ParsedDocument``.
    """
    return ParsedDocument(
        source,
        delimiters=Delimiters.coerce(delimiters),
        language=language,
        aliases=aliases,
        engines=normalize_engines(engines),
        excerpt=excerpt,
        excerpt_separator=excerpt_separator,
    )


def read(path: str | Path, **options: Any) -> ParsedDocument:
    """Read ``path`` as UTF-8 and parse it. ``OSError`` propagates unchanged."""
    file_path = Path(path)
    logger.debug("Reading front matter from %s", file_path)
    return parse(file_path.read_text(encoding="utf-8"), **options)


def test(source: str, *, delimiters: str | Sequence[str] = DELIMITERS) -> bool:
    """Whether ``source`` starts with front matter."""
    return ParsedDocument(source, delimiters=Delimiters.coerce(delimiters)).has_matter


def language(source: str, *, delimiters: str | Sequence[str] = DELIMITERS) -> str | None:
    """Language directive written after the opening delimiter, if any."""
    return ParsedDocument(source, delimiters=Delimiters.coerce(delimiters)).directive.name


def stringify(
    content: str | None = None,
    data: Mapping[str, Any] | None = None,
    *,
    delimiters: str | Sequence[str] = DELIMITERS,
    language: str = LANGUAGE,
    engines: Mapping[Any, object] = DEFAULT_ENGINES,
    excerpt: str | None = None,
    excerpt_separator: str | None = None,
) -> str:
    """Build a document from ``data``, an optional ``excerpt`` and ``content``.

    Raises:
        EngineError: No engine is registered for ``language``.
    """
    return stringify_document(
        content,
        data or {},
        delimiters=Delimiters.coerce(delimiters),
        language=language,
        engines=normalize_engines(engines),
        excerpt=excerpt,
        excerpt_separator=excerpt_separator,
    )
