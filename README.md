# hamletkit

A small toolkit for role-playing games. It models items, inventories, characters and villages.

## Pieces

- `hamletkit.item.Item` is a dataclass with a `name` (default `"item"`) and a `value` (default `0`).
- `hamletkit.inventory.Inventory` is an ordered collection of items. It supports `len()`, iteration and indexing.
  - `add_item(item)` appends an item.
  - `remove_item(item)` removes every equal item. If no item matches, nothing happens.
  - `pop(index)` removes the item at `index` and returns it.
  - `items` returns a copy of the list.
  - `find_item(name)` and `find_item_by_value(value)` search linearly. They return the index of the first match, or `None` when nothing matches.
  - `find_sorted_item(name)` and `find_sorted_item_by_value(value)` do a binary search. The inventory must already be sorted by that key. They return an index or `None`.
  - `sort_by_name()` and `sort_by_value()` sort in place. The sort is stable.
- `hamletkit.characters` holds the character classes.
  - `GameCharacter` is an abstract base. Each character has a `name` (default `"John"`), a `health` that starts at 100, a `power_level` (default 1) and an `inventory`.
  - `act()` and `speak()` print a line and return it.
  - `interact_with(target)` makes this character act and speak, and then makes the target act and speak.
  - `trade(target, own_index, other_index)` swaps one item with the target. Each side gets the other's item at the end of its inventory.
  - `attack(target)` lowers the target's health by this character's power level.
  - `Hero(name, power_level, quest="TBD")` speaks before it acts in `interact_with`. It also has the target speak before acting.
  - `NPC(name, power_level, role="TBD")` takes away half its power level when it attacks. The resulting health is truncated toward zero.
  - `Villain(name, power_level, evil_points=1)` takes away `power_level * evil_points` when it attacks.
- `hamletkit.village.Village(name="Springfield", inhabitants=None)` is a named collection of `NPC`s. It supports `len()`, iteration and indexing.
  - `add_inhabitant` adds an NPC.
  - `remove_inhabitant` removes every occurrence of that very NPC object.
  - `inhabitants` returns a copy of the list.
  - `sort_by_name()` and `sort_by_power_level()` sort in place. Power level sorts weakest first.

## Example

```python
from hamletkit.item import Item
from hamletkit.characters import Hero, Villain

hero = Hero("Ruport the Rich", 4)
hero.inventory.add_item(Item("silver spoon", 7))
hero.inventory.add_item(Item("gold necklace", 20))
hero.inventory.sort_by_name()
print(hero.inventory.find_sorted_item("silver spoon"))  # 1

villain = Villain("Grim", 3, 2)
villain.attack(hero)
print(hero.health)  # 94
```

## Demo

`hamletkit.demo` has two builders:

- `build_treasury()` returns Ruport the Rich holding five treasures.
- `build_stonetown()` returns the village of Stonetown with eleven warriors.

`main()` runs the scene. It searches and sorts the treasury, then orders Stonetown by power level. It prints nothing and returns 0. To run it from the command line:

```
hamletkit-demo
```

## What it does not do

There is no game loop, no interactive play and no way to save or load state. The package only provides the model objects and the short scripted scene above.

## Tests

```
pip install -e .[test]
pytest
```