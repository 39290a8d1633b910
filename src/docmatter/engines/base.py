from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from docmatter.errors import EngineError

logger = logging.getLogger(__name__)

Decoder = Callable[[str], Any]
Encoder = Callable[[Mapping[str, Any]], str]


class Engine(ABC):
    name: str = "unknown"

    @abstractmethod
    def decode(self, text: str) -> Any:
        raise NotImplementedError

    @abstractmethod
    def encode(self, data: Mapping[str, Any]) -> str:
        raise NotImplementedError


class FunctionEngine(Engine):
    """Engine built from a plain ``(decode, encode)`` function pair."""

    def __init__(self, decode: Decoder, encode: Encoder, name: str = "custom") -> None:
        self._decode = decode
        self._encode = encode
        self.name = name

    def decode(self, text: str) -> Any:
        return self._decode(text)

    def encode(self, data: Mapping[str, Any]) -> str:
        return self._encode(data)


def _language_key(key: object) -> str:
    if isinstance(key, Enum):
        return str(key.value)
    return str(key)


def _coerce_engine(key: str, value: object) -> Engine:
    if isinstance(value, Engine):
        return value
    if isinstance(value, Mapping):
        decode = value.get("decode", value.get("parse"))
        encode = value.get("encode", value.get("stringify"))
    elif isinstance(value, tuple | list) and len(value) == 2:
        decode, encode = value
    else:
        decode = encode = None
    if not callable(decode) or not callable(encode):
        msg = f"Engine for {key!r} must provide callable decode and encode functions"
        raise TypeError(msg)
    return FunctionEngine(decode, encode, name=key)


def normalize_engines(engines: Mapping[Any, object]) -> dict[str, Engine]:
    """Stringify registry keys and wrap function pairs into engines."""
    normalized: dict[str, Engine] = {}
    for key, value in engines.items():
        language = _language_key(key)
        normalized[language] = _coerce_engine(language, value)
    return normalized


def get_engine(engines: Mapping[str, Engine], language: str) -> Engine:
    if language not in engines:
        logger.debug("No engine for %r. Available: %s", language, ", ".join(sorted(engines)))
        raise EngineError(language)
    return engines[language]


def decode_matter(engines: Mapping[str, Engine], language: str, text: str) -> dict[str, Any]:
    engine = get_engine(engines, language)
    logger.debug("Decoding %r front matter with the %s engine", language, engine.name)
    value = engine.decode(text)
    if not isinstance(value, Mapping):
        if value is not None:
            logger.debug("Engine %s returned %s, using an empty mapping", engine.name, type(value).__name__)
        return {}
    return dict(value)


def encode_matter(engines: Mapping[str, Engine], language: str, data: Mapping[str, Any]) -> str:
    return get_engine(engines, language).encode(data)


def available_engines(engines: Mapping[str, Engine]) -> list[str]:
    return sorted(engines)
