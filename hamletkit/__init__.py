"""Items, inventories, characters and villages for small role-playing games."""

__version__ = "0.1.0"
__all__ = ["item", "inventory", "characters", "village", "demo"]