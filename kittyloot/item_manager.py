"""Placement of loot on a map: hidden items and treasure chest contents."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import ClassVar, Optional

from kittyloot.catalog import (
    BlueGemstone,
    ClawNecklace,
    ElderWings,
    ExplosiveBomb,
    HealthPotion,
    IronSword,
    KittyBoots,
    KittyCoin,
    LuckyPaw,
    WoodenStaff,
)
from kittyloot.items import ItemBase, ItemRarity

logger = logging.getLogger(__name__)

CHEST_ITEM_SHARE = 0.35


@dataclass(frozen=True)
class Position:
    """A tile coordinate on the map."""

    x: int = 0
    y: int = 0


@dataclass
class PlacedItem:
    """An item lying at a map position, possibly inside a treasure chest."""

    position: Position
    item: ItemBase
    in_chest: bool = False


class RarityWeights:
    """Percentage weights used when rolling a random rarity."""

    COMMON: ClassVar[float] = 60.0
    UNCOMMON: ClassVar[float] = 25.0
    RARE: ClassVar[float] = 13.0
    LEGENDARY: ClassVar[float] = 2.0
    TOTAL: ClassVar[float] = COMMON + UNCOMMON + RARE + LEGENDARY


_ITEM_FACTORIES = {
    "HealthPotion": HealthPotion,
    "Bomb": ExplosiveBomb,
    "Sword": IronSword,
    "Staff": WoodenStaff,
    "BlueGemstone": BlueGemstone,
    "KittyBoots": KittyBoots,
    "ElderWings": ElderWings,
    "LuckyPaw": LuckyPaw,
    "ClawNecklace": ClawNecklace,
}

_TYPES_BY_RARITY = {
    ItemRarity.COMMON: ("KittyCoin",),
    ItemRarity.UNCOMMON: ("HealthPotion", "Bomb", "KittyBoots", "LuckyPaw"),
    ItemRarity.RARE: ("Sword", "Staff", "BlueGemstone", "ClawNecklace"),
    ItemRarity.LEGENDARY: ("ElderWings", "Staff"),
}


def _rng_or_default(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def random_rarity(rng: Optional[random.Random] = None) -> ItemRarity:
    """Roll a rarity according to :class:`RarityWeights`."""
    rng = _rng_or_default(rng)
    roll = rng.randint(0, 10000) / 100.0
    if roll < RarityWeights.COMMON:
        return ItemRarity.COMMON
    if roll < RarityWeights.COMMON + RarityWeights.UNCOMMON:
        return ItemRarity.UNCOMMON
    if roll < RarityWeights.COMMON + RarityWeights.UNCOMMON + RarityWeights.RARE:
        return ItemRarity.RARE
    return ItemRarity.LEGENDARY


def create_specific_item(item_type: str, rng: Optional[random.Random] = None) -> ItemBase:
    """Create an item by its type key; unknown keys yield a single coin."""
    if item_type == "KittyCoin":
        return KittyCoin(_rng_or_default(rng).randint(3, 12))
    factory = _ITEM_FACTORIES.get(item_type)
    if factory is None:
        return KittyCoin(1)
    return factory()


def create_random_item(
    rarity: ItemRarity = ItemRarity.COMMON, rng: Optional[random.Random] = None
) -> ItemBase:
    """Create a random item from the pool belonging to ``rarity``."""
    rng = _rng_or_default(rng)
    types = _TYPES_BY_RARITY.get(rarity, ())
    if not types:
        return KittyCoin(1)
    chosen = types[rng.randint(0, len(types) - 1)]
    return create_specific_item(chosen, rng)


def create_random_item_by_weight(rng: Optional[random.Random] = None) -> ItemBase:
    """Roll a rarity, then create a random item of it."""
    rng = _rng_or_default(rng)
    return create_random_item(random_rarity(rng), rng)


class ItemManager:
    """Holds the items placed on one map and the treasure chest positions."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = _rng_or_default(rng)
        self.items: list[PlacedItem] = []
        self._chest_positions: list[Position] = []

    # ------------------------------------------------------------ generation

    def generate_items_for_map(
        self, map_width: int, map_height: int, min_items: int = 5
    ) -> None:
        """Replace all items with a fresh random set for a map of this size."""
        if map_width < 1 or map_height < 3:
            raise ValueError(
                f"map of {map_width}x{map_height} has no room for items "
                "(needs width >= 1 and height >= 3)"
            )
        self.clear_all_items()

        total_items = max(min_items, self.rng.randint(min_items, min_items + 3))
        chest_items = max(1, int(total_items * CHEST_ITEM_SHARE))
        hidden_items = total_items - chest_items
        logger.info(
            "Generating %d items (%d in chests, %d hidden)",
            total_items,
            chest_items,
            hidden_items,
        )

        for _ in range(chest_items):
            chest_pos = self._random_position(map_width, map_height)
            roll = self.rng.randint(0, 100)
            if roll < 30:
                item = create_random_item(ItemRarity.RARE, self.rng)
            elif roll < 60:
                item = create_random_item(ItemRarity.UNCOMMON, self.rng)
            else:
                item = create_random_item_by_weight(self.rng)
            self.items.append(PlacedItem(chest_pos, item, True))
            self._chest_positions.append(chest_pos)

        free_tiles = map_width * (map_height - 2) - len(set(self._chest_positions))
        for _ in range(hidden_items):
            if free_tiles <= 0:
                raise ValueError("map has no tile left for hidden items")
            item_pos = self._random_position(map_width, map_height)
            while item_pos in self._chest_positions:
                item_pos = self._random_position(map_width, map_height)
            self.items.append(
                PlacedItem(item_pos, create_random_item_by_weight(self.rng), False)
            )

        if not any(isinstance(placed.item, KittyCoin) for placed in self.items):
            coin_pos = self._random_position(map_width, map_height)
            coins = KittyCoin(self.rng.randint(5, 15))
            self.items.append(PlacedItem(coin_pos, coins, False))
            logger.info("Added guaranteed kitty coins to map!")

    def clear_all_items(self) -> None:
        """Remove every item and forget all treasure chest positions."""
        self.items.clear()
        self._chest_positions.clear()

    def add_item(self, position: Position, item: ItemBase, in_chest: bool = False) -> None:
        """Place ``item`` at ``position``."""
        self.items.append(PlacedItem(position, item, in_chest))

    # ---------------------------------------------------------------- access

    def items_at(self, pos: Position) -> list[PlacedItem]:
        """All placed items at ``pos``, in placement order."""
        return [placed for placed in self.items if placed.position == pos]

    def treasure_chest_item(self, pos: Position) -> Optional[PlacedItem]:
        """The first chest item at ``pos``, or ``None``."""
        return next(
            (p for p in self.items if p.position == pos and p.in_chest), None
        )

    def remove_item_at(self, pos: Position, from_treasure_chest: bool = False) -> bool:
        """Discard the first matching item; return whether one was found."""
        return self.take_item_at(pos, from_treasure_chest) is not None

    def take_item_at(
        self, pos: Position, from_treasure_chest: bool = False
    ) -> Optional[ItemBase]:
        """Remove and return the first matching item, or ``None``."""
        for index, placed in enumerate(self.items):
            if placed.position == pos and placed.in_chest == from_treasure_chest:
                del self.items[index]
                return placed.item
        return None

    # --------------------------------------------------------------- queries

    def item_count_at(self, pos: Position) -> int:
        """Number of items at ``pos``, in chests or not."""
        return sum(1 for placed in self.items if placed.position == pos)

    def total_item_count(self) -> int:
        """Number of items on the map."""
        return len(self.items)

    def treasure_chest_positions(self) -> list[Position]:
        """Positions of the treasure chests placed by the last generation."""
        return list(self._chest_positions)

    def format_items_info(self) -> str:
        """Describe every placed item as text."""
        lines = ["=== GENERATED ITEMS ===", f"Total items: {len(self.items)}"]
        chest_count = 0
        for placed in self.items:
            chest_count += placed.in_chest
            where = "[CHEST]" if placed.in_chest else "[HIDDEN]"
            lines.append(
                f"- {placed.item.name} ({placed.item.rarity_name()}) "
                f"at ({placed.position.x},{placed.position.y}) {where}"
            )
        hidden_count = len(self.items) - chest_count
        lines.append(f"Chest items: {chest_count}, Hidden items: {hidden_count}")
        lines.append("=======================")
        return "\n".join(lines)

    # --------------------------------------------------------------- helpers

    def _random_position(self, map_width: int, map_height: int) -> Position:
        return Position(
            self.rng.randint(0, map_width - 1), self.rng.randint(1, map_height - 2)
        )