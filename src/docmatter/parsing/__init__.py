"""Front matter location, directive and excerpt extraction."""

from docmatter.parsing.directive import extract_directive, resolve_language
from docmatter.parsing.excerpt import extract_excerpt
from docmatter.parsing.locator import BlockLocation, has_front_matter, is_block_empty, locate, strip_comments
from docmatter.parsing.parser import ParsedDocument

__all__ = [
    "BlockLocation",
    "ParsedDocument",
    "extract_directive",
    "extract_excerpt",
    "has_front_matter",
    "is_block_empty",
    "locate",
    "resolve_language",
    "strip_comments",
]
