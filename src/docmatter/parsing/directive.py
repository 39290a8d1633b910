from __future__ import annotations

from collections.abc import Mapping

from docmatter.models.document import Directive
from docmatter.parsing.locator import BlockLocation


def extract_directive(location: BlockLocation) -> Directive:
    raw = location.directive_raw
    if raw is None:
        return Directive()
    name = raw.strip()
    return Directive(raw=raw, name=name or None)


def resolve_language(directive: Directive, default: str, aliases: Mapping[str, str]) -> str:
    """Pick the directive name, or ``default``, and map it through ``aliases``.

    Alias lookup is case-insensitive; the returned value keeps the casing
    stored in ``aliases``.
    """
    handle = directive.name or default
    return aliases.get(handle.lower(), handle)
