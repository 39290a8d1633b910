from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import cached_property
from typing import Any

from docmatter.defaults import ALIASES, LANGUAGE
from docmatter.engines import DEFAULT_ENGINES
from docmatter.engines.base import Engine, decode_matter
from docmatter.models.delimiters import Delimiters
from docmatter.models.document import Directive, DocumentReport
from docmatter.parsing.directive import extract_directive, resolve_language
from docmatter.parsing.excerpt import ExcerptOption, extract_excerpt
from docmatter.parsing.locator import BlockLocation, is_block_empty, locate
from docmatter.stringifier import stringify_document

logger = logging.getLogger(__name__)


class ParsedDocument:
    """Front matter, excerpt and content of one source document.

    Every accessor is computed on first use and cached. The source string is
    never modified.
    """

    def __init__(
        self,
        source: str,
        *,
        delimiters: Delimiters,
        language: str = LANGUAGE,
        aliases: Mapping[str, str] = ALIASES,
        engines: Mapping[str, Engine] = DEFAULT_ENGINES,
        excerpt: ExcerptOption = None,
        excerpt_separator: str | None = None,
    ) -> None:
        self.original = source
        self.delimiters = delimiters
        self.default_language = language
        self.aliases = aliases
        self.engines = engines
        self._excerpt = excerpt
        self._excerpt_separator = excerpt_separator

    def __repr__(self) -> str:
        return f"ParsedDocument(has_matter={self.has_matter!r}, language={self.directive.name!r})"

    @cached_property
    def location(self) -> BlockLocation:
        return locate(self.original, self.delimiters.opening, self.delimiters.closing)

    @property
    def has_matter(self) -> bool:
        return self.location.has_matter

    @property
    def matter(self) -> str:
        """Raw front matter block, comments included."""
        return self.location.matter

    @property
    def content(self) -> str:
        return self.location.content

    @cached_property
    def directive(self) -> Directive:
        return extract_directive(self.location)

    @cached_property
    def language(self) -> str:
        """Directive name, or the default language, after alias mapping."""
        return resolve_language(self.directive, self.default_language, self.aliases)

    @cached_property
    def empty(self) -> str | None:
        """The original document when the matter block has no data, else ``None``."""
        if is_block_empty(self.matter):
            return self.original
        return None

    @property
    def is_empty(self) -> bool:
        return self.empty is not None

    @cached_property
    def data(self) -> dict[str, Any]:
        if self.is_empty:
            return {}
        logger.debug("Decoding %d characters of %s front matter", len(self.matter), self.language)
        return decode_matter(self.engines, self.language, self.matter)

    @cached_property
    def excerpt(self) -> Any:
        return extract_excerpt(
            self,
            self.content,
            excerpt=self._excerpt,
            excerpt_separator=self._excerpt_separator,
            closing=self.delimiters.closing,
        )

    def stringify(self) -> str:
        """Rebuild a document from this document's data, excerpt and content."""
        excerpt = self.excerpt if isinstance(self.excerpt, str) else None
        return stringify_document(
            self.content,
            self.data,
            delimiters=self.delimiters,
            language=self.language,
            engines=self.engines,
            excerpt=excerpt,
            excerpt_separator=self._excerpt_separator,
        )

    def to_report(self) -> DocumentReport:
        excerpt = self.excerpt
        return DocumentReport(
            has_matter=self.has_matter,
            language=self.language,
            directive=self.directive,
            matter=self.matter,
            is_empty=self.is_empty,
            data=self.data,
            excerpt=excerpt if isinstance(excerpt, str) else None,
            content=self.content,
        )
