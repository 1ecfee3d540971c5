"""A short scenario: a rich hero's treasury and the warriors of Stonetown."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from hamletkit.characters import NPC, Hero
from hamletkit.item import Item
from hamletkit.village import Village

_TREASURES = (
    ("gold necklace", 20),
    ("pearl necklace", 70),
    ("gold ring with diamonds", 450),
    ("gold ring with a ruby", 80),
    ("silver spoon", 7),
)

_WARRIORS = (
    ("George", 12),
    ("Galahad", 11),
    ("Siegfried", 10),
    ("Robert the Crafty", 9),
    ("Rodrigo el Cid", 8),
    ("William the Great", 7),
    ("Richard the Lionhearted", 6),
    ("James", 5),
    ("Bertrand the Eagle", 4),
    ("Edward the Prince", 3),
    ("Henry the Hotspur", 2),
)


def build_treasury() -> Hero:
    """Ruport the Rich, holding the treasure trove."""
    hero = Hero("Ruport the Rich", 4)
    for name, value in _TREASURES:
        hero.inventory.add_item(Item(name, value))
    return hero


def build_stonetown() -> Village:
    """Stonetown, with its warriors moved in alphabetically."""
    village = Village("Stonetown")
    for name, power in sorted(_WARRIORS):
        village.add_inhabitant(NPC(name, power, "warrior"))
    return village


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the scenario: search and sort the treasury, then order Stonetown."""
    parser = argparse.ArgumentParser(prog="hamletkit", description=__doc__)
    parser.parse_args(argv)

    hero = build_treasury()
    hero.inventory.find_item("gold ring with a ruby")
    hero.inventory.sort_by_name()
    hero.inventory.sort_by_value()
    hero.inventory.find_sorted_item_by_value(70)

    stonetown = build_stonetown()
    stonetown.sort_by_power_level()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())