# kittyloot

Items, loot placement and inventory for a small cat-themed dungeon crawler.

## What is in the package

- `kittyloot.items`: the item hierarchy. `ItemBase` carries a name,
  description, weight (never below 0.1 kg), value in kitty coins and an
  `ItemRarity`. The categories are `WeaponItem`, `ArmorItem` (damage
  reduction clamped to 0..1), `AccessoryItem` (with a `SpecialEffectType`),
  `CollectibleItem`, `ConsumableItem` (with an `EffectType`) and
  `CurrencyItem` (stackable, always common). Every item's `use()` returns a
  text describing what using it does. `rarity_name()` gives display names.
- `kittyloot.catalog`: the concrete items: `IronSword`, `WoodenStaff`,
  `KittyBoots`, `ElderWings`, `LuckyPaw`, `ClawNecklace`, `BlueGemstone`,
  `HealthPotion`, `ExplosiveBomb` and `KittyCoin(amount)`.
- `kittyloot.equipment`: `EquipmentSlotType` (weapon, armor, accessory) and
  `equipment_slot_name()`.
- `kittyloot.inventory`: `Inventory`, a fixed number of regular slots plus one
  slot per equipment type. `add_item`, `remove_item`, `equip_item` and
  `unequip_item` raise `InventoryFullError`, `SlotError` or `EquipError`
  (all subclasses of `InventoryError`) when they cannot do their work.
  `total_strength_bonus()` sums the bonuses of what is equipped;
  `format_inventory()` and `format_equipment()` return text listings.
- `kittyloot.item_manager`: `ItemManager` places random loot on a map of a
  given size: treasure chest items and hidden items, with at least one stack
  of kitty coins. Rarities are rolled by `RarityWeights` (60/25/13/2 %).
  Pass a `random.Random` to make generation reproducible. Helper functions
  `random_rarity`, `create_random_item`, `create_random_item_by_weight` and
  `create_specific_item` are available on their own.
- `kittyloot.inventory_system`: `InventorySystem`, the player-facing layer.
  `handle_input()` takes the set of `Key` values pressed in a frame and
  drives opening and closing, slot selection, examining, dropping, equipping
  and unequipping. Outcomes appear in `status_message`, which `update()`
  fades out over time. It also handles treasure chests
  (`open_treasure_chest`), carry weight (`current_weight`,
  `max_carry_weight`, `is_overweight`; 2 kg per point of strength) and text
  listings.
- `kittyloot.sorting`: `sort_by_weight`, `sort_by_name`, `sort_by_value` and
  `sort_by_type` reorder an `InventorySystem`'s items and return a
  before/after report; `generate_test_inventory` fills it with sample items;
  `run_sorting_demo` runs the whole console demonstration.

## Installation

```
pip install .
```

## Example

```python
import random

from kittyloot.catalog import IronSword, KittyBoots
from kittyloot.equipment import EquipmentSlotType
from kittyloot.inventory import Inventory
from kittyloot.item_manager import ItemManager

inventory = Inventory(10)
inventory.add_item(IronSword())
inventory.add_item(KittyBoots())
inventory.equip_item(0, EquipmentSlotType.WEAPON)
inventory.equip_item(1, EquipmentSlotType.ARMOR)
print(inventory.total_strength_bonus())  # 5
print(inventory.format_equipment())

manager = ItemManager(random.Random(42))
manager.generate_items_for_map(15, 15, 5)
print(manager.format_items_info())
```

Driving the inventory screen from a game loop:

```python
from kittyloot.inventory_system import InventorySystem, Key

system = InventorySystem()
system.handle_input({Key.I})       # open the inventory window
system.handle_input({Key.RIGHT})   # select slot 1
system.update(0.016)               # advance the status message timer
print(system.status_message)
```

## Sorting demonstration

An interactive run that fills an inventory with sample items and shows
each sorting order in turn, pausing for ENTER between steps:

```
kittyloot-sort-demo
```

Add `--no-pause` to run it straight through without waiting.

## What the package does not do

It holds no map or terrain, no player character, no texture loading and no
drawing: nothing is rendered on screen. `InventorySystem` keeps the state of
the inventory window and reacts to keys it is given, but reading the keyboard
and painting the window are left to the game that uses it. Diagnostic
messages go to the standard `logging` module.

## Running the tests

```
pip install .[test]
pytest
```