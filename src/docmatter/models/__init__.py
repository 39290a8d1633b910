"""Domain models."""

from docmatter.models.delimiters import Delimiters
from docmatter.models.document import Directive, DocumentReport

__all__ = ["Delimiters", "Directive", "DocumentReport"]
