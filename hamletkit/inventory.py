"""An ordered collection of items with search and sort helpers."""

from __future__ import annotations

from bisect import bisect_left
from operator import attrgetter
from typing import Iterable, Iterator, Optional

from hamletkit.item import Item

_by_name = attrgetter("name")
_by_value = attrgetter("value")


class Inventory:
    """Items held by a character, kept in insertion order until sorted."""

    def __init__(self, items: Optional[Iterable[Item]] = None) -> None:
        self._items: list[Item] = list(items) if items is not None else []

    def add_item(self, item: Item) -> None:
        """Append an item."""
        self._items.append(item)

    def remove_item(self, item: Item) -> None:
        """Remove every item equal to ``item``; absent items are ignored."""
        self._items = [held for held in self._items if held != item]

    def pop(self, index: int) -> Item:
        """Remove and return the item at ``index``."""
        return self._items.pop(index)

    @property
    def items(self) -> list[Item]:
        """A copy of the held items."""
        return list(self._items)

    def __getitem__(self, index: int) -> Item:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Inventory({self._items!r})"

    def find_item(self, name: str) -> Optional[int]:
        """Index of the first item called ``name``, or None."""
        return next((i for i, item in enumerate(self._items) if item.name == name), None)

    def find_item_by_value(self, value: int) -> Optional[int]:
        """Index of the first item worth ``value``, or None."""
        return next((i for i, item in enumerate(self._items) if item.value == value), None)

    def find_sorted_item(self, name: str) -> Optional[int]:
        """Binary search by name; the inventory must be sorted by name."""
        return self._bisect(name, _by_name)

    def find_sorted_item_by_value(self, value: int) -> Optional[int]:
        """Binary search by value; the inventory must be sorted by value."""
        return self._bisect(value, _by_value)

    def _bisect(self, target, key) -> Optional[int]:
        index = bisect_left(self._items, target, key=key)
        if index < len(self._items) and key(self._items[index]) == target:
            return index
        return None

    def sort_by_name(self) -> None:
        """Sort items by name, keeping the order of equal names."""
        self._items.sort(key=_by_name)

    def sort_by_value(self) -> None:
        """Sort items by value, keeping the order of equal values."""
        self._items.sort(key=_by_value)