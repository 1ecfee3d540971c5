"""Characters of the game world: heroes, villagers and villains."""

from __future__ import annotations

from abc import ABC, abstractmethod

from hamletkit.inventory import Inventory

DEFAULT_NAME = "John"
STARTING_HEALTH = 100


def _announce(line: str) -> str:
    """Print a line of narration and hand it back to the caller."""
    print(line)
    return line


class GameCharacter(ABC):
    """Something with a name, health, power and an inventory that can act and speak."""

    def __init__(self, name: str = DEFAULT_NAME, power_level: int = 1) -> None:
        self.name = name
        self.health = STARTING_HEALTH
        self.power_level = power_level
        self.inventory = Inventory()

    @abstractmethod
    def act(self) -> str:
        """Print what the character does and return that line."""

    @abstractmethod
    def speak(self) -> str:
        """Print what the character says and return that line."""

    def interact_with(self, target: GameCharacter) -> None:
        """Act and speak, then let the target act and speak."""
        self.act()
        self.speak()
        target.act()
        target.speak()

    def trade(self, target: GameCharacter, own_index: int, other_index: int) -> None:
        """Swap one of our items with one of the target's.

        Each side receives the other's item at the end of its inventory.
        """
        own_item = self.inventory[own_index]
        other_item = target.inventory[other_index]
        self.inventory.pop(own_index)
        target.inventory.pop(other_index)
        self.inventory.add_item(other_item)
        target.inventory.add_item(own_item)

    def attack(self, target: GameCharacter) -> None:
        """Lower the target's health by this character's power level."""
        target.health -= self.power_level

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, health={self.health}, "
            f"power_level={self.power_level})"
        )


class Hero(GameCharacter):
    """A hero with a quest."""

    def __init__(self, name: str = DEFAULT_NAME, power_level: int = 1, quest: str = "TBD") -> None:
        super().__init__(name, power_level)
        self.quest = quest

    def act(self) -> str:
        return _announce(f"{self.name} poses heroically.")

    def speak(self) -> str:
        return _announce("If by my life or death I can protect you, I will.")

    def interact_with(self, target: GameCharacter) -> None:
        """Speak before acting, and expect the target to do the same."""
        self.speak()
        self.act()
        target.speak()
        target.act()

    def attack(self, target: GameCharacter) -> None:
        target.health -= self.power_level


class NPC(GameCharacter):
    """A non-player character with a role."""

    def __init__(self, name: str = DEFAULT_NAME, power_level: int = 1, role: str = "TBD") -> None:
        super().__init__(name, power_level)
        self.role = role

    def act(self) -> str:
        return _announce(f"{self.name} walks up.")

    def speak(self) -> str:
        return _announce("Strangers from distant lands, friends of old")

    def attack(self, target: GameCharacter) -> None:
        """Hit with half the power level; health stays whole, truncated toward zero."""
        target.health = int(target.health - self.power_level * 0.5)


class Villain(GameCharacter):
    """A villain whose attacks are scaled by evil points."""

    def __init__(self, name: str = DEFAULT_NAME, power_level: int = 1, evil_points: int = 1) -> None:
        super().__init__(name, power_level)
        self.evil_points = evil_points

    def act(self) -> str:
        return _announce(f"{self.name} glares, their eyes flaming red")

    def speak(self) -> str:
        return _announce("So . . . you have chosen death")

    def attack(self, target: GameCharacter) -> None:
        target.health -= self.power_level * self.evil_points