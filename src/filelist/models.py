"""Data models for the line-oriented list file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Item:
    """A single (value, comment) line from a list file.

    ``Item()`` is the empty sentinel: lookups that find nothing return it,
    and the codec yields it for blank and comment-only lines.
    """

    value: str = ""
    comment: str = ""          # free text after the // marker, may be empty

    @property
    def is_empty(self) -> bool:
        return not self.value

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"value": self.value}
        if self.comment:
            d["comment"] = self.comment
        return d
