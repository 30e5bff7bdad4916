"""Items, loot placement, inventory, equipment and inventory sorting for a cat-themed dungeon crawler."""

__version__ = "0.1.0"