from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from docmatter.defaults import ALIASES, DELIMITERS, LANGUAGE
from docmatter.models.delimiters import Delimiters

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    delimiters: tuple[str, str] = (DELIMITERS, DELIMITERS)
    language: str = LANGUAGE
    aliases: dict[str, str] = Field(default_factory=lambda: dict(ALIASES))
    excerpt_separator: str | None = None

    @field_validator("delimiters", mode="before")
    @classmethod
    def _coerce_delimiters(cls, value: object) -> tuple[str, str]:
        if isinstance(value, str | Sequence):
            return tuple(Delimiters.coerce(value))
        msg = f"Invalid delimiters: {value!r}"
        raise ValueError(msg)

    @field_validator("aliases")
    @classmethod
    def _lowercase_aliases(cls, value: dict[str, str]) -> dict[str, str]:
        return {key.lower(): name for key, name in value.items()}


def _config_candidates() -> list[Path]:
    return [Path.cwd() / "docmatter.toml", Path.home() / ".config/docmatter/config.toml"]


def _load_config_file() -> dict[str, object]:
    for candidate in _config_candidates():
        if not candidate.exists():
            continue
        try:
            return tomllib.loads(candidate.read_text(encoding="utf-8"))
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.warning("Ignoring config file %s: %s", candidate, exc)
            continue
    return {}


def _split_delimiters(value: str) -> list[str]:
    return [part.strip() for part in value.split(",")]


def load_settings(
    *,
    delimiters: str | None = None,
    language: str | None = None,
    excerpt_separator: str | None = None,
) -> Settings:
    payload: dict[str, object] = _load_config_file()

    aliases = dict(ALIASES)
    file_aliases = payload.get("aliases")
    if isinstance(file_aliases, dict):
        aliases.update({str(key): str(name) for key, name in file_aliases.items()})

    raw_delimiters = delimiters or os.getenv("DOCMATTER_DELIMITERS")
    resolved_delimiters: object = (
        _split_delimiters(raw_delimiters) if raw_delimiters else payload.get("delimiters", DELIMITERS)
    )

    return Settings(
        delimiters=resolved_delimiters,
        language=language or os.getenv("DOCMATTER_LANGUAGE") or str(payload.get("language", LANGUAGE)),
        aliases=aliases,
        excerpt_separator=(
            excerpt_separator
            or os.getenv("DOCMATTER_EXCERPT_SEPARATOR")
            or _read_optional_str(payload, "excerpt_separator")
        ),
    )


def _read_optional_str(payload: dict[str, object], key: str) -> str | None:
    value = payload.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)
