"""
Front matter block location.

Finds where a front matter block starts and ends inside a document using
plain prefix checks and substring searches. Every offset is derived from the
previous one in a fixed order: directive, start, finish, after.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

NEWLINE_RE = re.compile(r"\r?\n")
LEADING_NEWLINE_RE = re.compile(r"\A\r?\n")
COMMENT_RE = re.compile(r"^[ \t]*#[^\n]*", re.MULTILINE)


@dataclass(frozen=True)
class BlockLocation:
    """
    Offsets of a front matter block within ``source``.

    Attributes:
        source: The document the offsets refer to.
        opening: Opening delimiter.
        closing: Closing delimiter, without the leading newline.
        has_matter: Whether the document opens with front matter.
        directive_raw: Text between the opening delimiter and the first
            newline, or ``None`` without front matter.
        start: Offset of the first character of the matter block.
        finish: Offset of the newline preceding the closing delimiter, or
            the document length when the block is unterminated.
        after: Offset right past the closing delimiter.
    """

    source: str
    opening: str
    closing: str
    has_matter: bool
    directive_raw: str | None
    start: int
    finish: int
    after: int

    @property
    def terminated(self) -> bool:
        return self.finish < len(self.source)

    @property
    def matter(self) -> str:
        if not self.has_matter:
            return ""
        return self.source[self.start:self.finish]

    @property
    def content(self) -> str:
        if not self.has_matter:
            return self.source
        if not self.terminated:
            return ""
        return LEADING_NEWLINE_RE.sub("", self.source[self.after:], count=1)


def has_front_matter(source: str, opening: str, closing: str) -> bool:
    """
    Check whether ``source`` opens with a front matter block.

    The character right after the opening delimiter must differ from the
    last character of the closing delimiter, so ``----`` is not read as
    ``---`` followed by a directive.
    """
    if not source.startswith(opening):
        return False
    following = source[len(opening):len(opening) + 1]
    return following != closing[-1]


def _directive_raw(source: str, opening: str) -> str:
    rest = source[len(opening):]
    match = NEWLINE_RE.search(rest)
    if match is None:
        return rest
    return rest[:match.start()]


def locate(source: str, opening: str, closing: str) -> BlockLocation:
    """
    Locate the front matter block of ``source``.

    An opening delimiter without a matching closing delimiter is not an
    error: the block then runs to the end of the document.

    Args:
        source: Full document text.
        opening: Opening delimiter.
        closing: Closing delimiter.

    Returns:
        The computed ``BlockLocation``.
    """
    size = len(source)
    if not has_front_matter(source, opening, closing):
        return BlockLocation(source, opening, closing, False, None, 0, 0, 0)

    directive_raw = _directive_raw(source, opening)
    start = len(opening) + len(directive_raw)
    marker = "\n" + closing
    finish = source.find(marker, start)
    if finish < 0:
        logger.debug("Front matter opened with %r is unterminated, using the rest of the document", opening)
        return BlockLocation(source, opening, closing, True, directive_raw, start, size, size)
    return BlockLocation(source, opening, closing, True, directive_raw, start, finish, finish + len(marker))


def strip_comments(text: str) -> str:
    """Remove ``#`` comment lines from a matter block."""
    return COMMENT_RE.sub("", text)


def is_block_empty(text: str) -> bool:
    """Whether a matter block holds nothing but whitespace and comments."""
    return not strip_comments(text).strip()
