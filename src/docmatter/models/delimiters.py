from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple


class Delimiters(NamedTuple):
    opening: str
    closing: str

    @classmethod
    def coerce(cls, value: str | Sequence[str]) -> Delimiters:
        """Build a pair from a single delimiter or an ``(opening, closing)`` sequence."""
        if isinstance(value, Delimiters):
            return value
        if isinstance(value, str):
            pair = (value, value)
        else:
            items = list(value)
            if len(items) == 1:
                pair = (items[0], items[0])
            elif len(items) == 2:
                pair = (items[0], items[1])
            else:
                msg = f"Expected one or two delimiters, got {len(items)}"
                raise ValueError(msg)
        opening, closing = pair
        if not isinstance(opening, str) or not isinstance(closing, str) or not opening or not closing:
            msg = f"Delimiters must be non-empty strings: {pair!r}"
            raise ValueError(msg)
        return cls(opening, closing)
