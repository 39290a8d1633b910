"""Default configuration shared by the public entry points."""

from __future__ import annotations

from types import MappingProxyType

DELIMITERS = "---"
LANGUAGE = "yaml"
ALIASES: MappingProxyType[str, str] = MappingProxyType({"yml": "yaml"})
