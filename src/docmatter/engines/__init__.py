"""Front matter engine registry."""

from types import MappingProxyType

from docmatter.engines.base import (
    Engine,
    FunctionEngine,
    available_engines,
    decode_matter,
    encode_matter,
    get_engine,
    normalize_engines,
)
from docmatter.engines.json_engine import JsonEngine
from docmatter.engines.yaml_engine import YamlEngine

DEFAULT_ENGINES: MappingProxyType[str, Engine] = MappingProxyType(
    {"yaml": YamlEngine(), "json": JsonEngine()}
)

__all__ = [
    "DEFAULT_ENGINES",
    "Engine",
    "FunctionEngine",
    "JsonEngine",
    "YamlEngine",
    "available_engines",
    "decode_matter",
    "encode_matter",
    "get_engine",
    "normalize_engines",
]
