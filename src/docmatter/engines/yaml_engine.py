from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

import yaml

from docmatter.engines.base import Engine

DOCUMENT_START_RE = re.compile(r"\A---(?:\n|\s)?")


class YamlEngine(Engine):
    name = "yaml"

    def decode(self, text: str) -> Any:
        return yaml.safe_load(text)

    def encode(self, data: Mapping[str, Any]) -> str:
        payload = yaml.safe_dump(dict(data), sort_keys=False, allow_unicode=True, default_flow_style=False)
        return DOCUMENT_START_RE.sub("", payload, count=1)
