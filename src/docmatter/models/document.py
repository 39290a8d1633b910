from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Directive(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw: str | None = None
    name: str | None = None


class DocumentReport(BaseModel):
    has_matter: bool
    language: str | None = None
    directive: Directive = Field(default_factory=Directive)
    matter: str = ""
    is_empty: bool = False
    data: dict[Any, Any] = Field(default_factory=dict)
    excerpt: str | None = None
    content: str = ""
