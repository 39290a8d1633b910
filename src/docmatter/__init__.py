"""docmatter package."""

from importlib.metadata import PackageNotFoundError, version

from docmatter.api import language, parse, read, stringify, test
from docmatter.errors import EngineError
from docmatter.parsing.parser import ParsedDocument

__all__ = [
    "EngineError",
    "ParsedDocument",
    "__version__",
    "language",
    "parse",
    "read",
    "stringify",
    "test",
]

try:
    __version__ = version("docmatter")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0+unknown"
