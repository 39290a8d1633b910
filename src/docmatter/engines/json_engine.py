from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from docmatter.engines.base import Engine


class JsonEngine(Engine):
    name = "json"

    def decode(self, text: str) -> Any:
        return json.loads(text)

    def encode(self, data: Mapping[str, Any]) -> str:
        return json.dumps(dict(data), indent=2, ensure_ascii=False)
