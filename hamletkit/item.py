"""Items that characters carry around."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Item:
    """A named object with a value."""

    name: str = "item"
    value: int = 0