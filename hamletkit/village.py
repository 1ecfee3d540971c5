"""A village and the NPCs who live in it."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from hamletkit.characters import NPC


class Village:
    """A named settlement holding NPC inhabitants."""

    def __init__(self, name: str = "Springfield", inhabitants: Optional[Iterable[NPC]] = None) -> None:
        self.name = name
        self._inhabitants: list[NPC] = list(inhabitants) if inhabitants is not None else []

    def add_inhabitant(self, npc: NPC) -> None:
        """Move an NPC into the village."""
        self._inhabitants.append(npc)

    def remove_inhabitant(self, npc: NPC) -> None:
        """Remove every occurrence of this NPC; absent NPCs are ignored."""
        self._inhabitants = [person for person in self._inhabitants if person is not npc]

    @property
    def inhabitants(self) -> list[NPC]:
        """A copy of the inhabitant list."""
        return list(self._inhabitants)

    def __getitem__(self, index: int) -> NPC:
        return self._inhabitants[index]

    def __len__(self) -> int:
        return len(self._inhabitants)

    def __iter__(self) -> Iterator[NPC]:
        return iter(self._inhabitants)

    def __repr__(self) -> str:
        return f"Village({self.name!r}, {len(self._inhabitants)} inhabitants)"

    def sort_by_name(self) -> None:
        """Order inhabitants by name."""
        self._inhabitants.sort(key=lambda npc: npc.name)

    def sort_by_power_level(self) -> None:
        """Order inhabitants by power level, weakest first."""
        self._inhabitants.sort(key=lambda npc: npc.power_level)