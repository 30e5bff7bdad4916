"""A slot-based inventory with weapon, armor and accessory equipment slots."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from kittyloot.equipment import EquipmentSlotType, equipment_slot_name
from kittyloot.items import AccessoryItem, ArmorItem, ItemBase, WeaponItem

DEFAULT_SLOTS = 10

_EQUIPPABLE = {
    EquipmentSlotType.WEAPON: WeaponItem,
    EquipmentSlotType.ARMOR: ArmorItem,
    EquipmentSlotType.ACCESSORY: AccessoryItem,
}


class InventoryError(Exception):
    """Base class for inventory failures."""


class InventoryFullError(InventoryError):
    """No free regular slot is left."""


class SlotError(InventoryError, IndexError):
    """A regular slot is out of range or holds no item."""


class EquipError(InventoryError):
    """An item cannot go into, or come out of, an equipment slot."""


class Inventory:
    """Fixed number of regular slots plus one slot per equipment type."""

    def __init__(self, max_slots: int = DEFAULT_SLOTS) -> None:
        self.max_slots = max_slots if max_slots > 0 else DEFAULT_SLOTS
        self._slots: list[Optional[ItemBase]] = [None] * self.max_slots
        self._equipment: dict[EquipmentSlotType, Optional[ItemBase]] = {
            slot_type: None for slot_type in EquipmentSlotType
        }

    def __iter__(self) -> Iterator[Optional[ItemBase]]:
        """Iterate over the regular slots in order; empty slots yield ``None``."""
        return iter(self._slots)

    def __len__(self) -> int:
        return self.max_slots

    # ---------------------------------------------------------- regular slots

    def add_item(self, item: ItemBase) -> int:
        """Put ``item`` in the first empty slot and return that slot's index."""
        if item is None:
            raise ValueError("Cannot add null item to inventory.")
        slot = self._first_empty_slot()
        if slot is None:
            raise InventoryFullError(f"Inventory is full! Cannot add {item.name}")
        self._slots[slot] = item
        return slot

    def remove_item(self, slot: int) -> ItemBase:
        """Take the item out of ``slot`` and return it."""
        if not self._is_valid_slot(slot) or self._slots[slot] is None:
            raise SlotError(f"Cannot remove item from slot {slot} (invalid or empty)")
        item = self._slots[slot]
        self._slots[slot] = None
        return item

    def get_item(self, slot: int) -> Optional[ItemBase]:
        """Return the item in ``slot``, or ``None`` if empty or out of range."""
        if not self._is_valid_slot(slot):
            return None
        return self._slots[slot]

    # -------------------------------------------------------------- equipment

    def equip_item(
        self, inventory_slot: int, slot_type: EquipmentSlotType
    ) -> Optional[int]:
        """Move an item from a regular slot into an equipment slot.

        An item already equipped there goes back to the first free regular
        slot, whose index is returned; ``None`` if nothing was displaced.
        """
        if not self._is_valid_slot(inventory_slot) or self._slots[inventory_slot] is None:
            raise SlotError("Invalid inventory slot or empty slot.")
        item = self._slots[inventory_slot]
        if not self._can_equip(item, slot_type):
            raise EquipError(
                f"Cannot equip {item.name} in {equipment_slot_name(slot_type)} slot."
            )

        displaced_to: Optional[int] = None
        previous = self._equipment[slot_type]
        if previous is not None:
            if self.is_full():
                raise InventoryFullError(
                    "Cannot equip item - inventory full and equipment slot occupied."
                )
            displaced_to = self.add_item(previous)

        self._equipment[slot_type] = item
        self._slots[inventory_slot] = None
        return displaced_to

    def unequip_item(self, slot_type: EquipmentSlotType) -> int:
        """Move the equipped item back to the inventory; return its new slot."""
        item = self._equipment.get(slot_type)
        if item is None:
            raise EquipError(f"{equipment_slot_name(slot_type)} slot is already empty.")
        if self.is_full():
            raise InventoryFullError("Cannot unequip item - inventory is full.")
        self._equipment[slot_type] = None
        return self.add_item(item)

    def equipped(self, slot_type: EquipmentSlotType) -> Optional[ItemBase]:
        """Return the item in an equipment slot, or ``None``."""
        return self._equipment.get(slot_type)

    # ---------------------------------------------------------------- queries

    def used_slots(self) -> int:
        """Number of regular slots holding an item."""
        return sum(1 for item in self._slots if item is not None)

    def free_slots(self) -> int:
        """Number of empty regular slots."""
        return self.max_slots - self.used_slots()

    def is_full(self) -> bool:
        """True when no regular slot is empty."""
        return self.free_slots() == 0

    def is_slot_empty(self, slot: int) -> bool:
        """True when ``slot`` is in range and holds no item."""
        return self._is_valid_slot(slot) and self._slots[slot] is None

    def is_equipment_slot_occupied(self, slot_type: EquipmentSlotType) -> bool:
        """True when something is equipped in ``slot_type``."""
        return self.equipped(slot_type) is not None

    def total_strength_bonus(self) -> int:
        """Sum of the strength bonuses of all equipped items."""
        return sum(
            self._strength_of(self._equipment[slot_type], slot_type)
            for slot_type in EquipmentSlotType
        )

    # ------------------------------------------------------------- formatting

    def format_inventory(self) -> str:
        """Render the regular slots as text."""
        lines = [f"=== INVENTORY ({self.used_slots()}/{self.max_slots}) ==="]
        for index, item in enumerate(self._slots):
            if item is None:
                lines.append(f"Slot {index}: [Empty]")
            else:
                lines.append(
                    f"Slot {index}: {item.name} "
                    f"({item.type_description}, {item.rarity_name()})"
                )
        lines.append("====================")
        return "\n".join(lines)

    def format_equipment(self) -> str:
        """Render the equipment slots and the total strength bonus as text."""
        lines = ["=== EQUIPMENT ==="]
        for slot_type in EquipmentSlotType:
            item = self._equipment[slot_type]
            label = equipment_slot_name(slot_type)
            if item is None:
                lines.append(f"{label}: [Empty]")
            else:
                bonus = self._strength_of(item, slot_type)
                lines.append(f"{label}: {item.name} (+{bonus} STR)")
        lines.append(f"Total Strength Bonus: +{self.total_strength_bonus()}")
        lines.append("=================")
        return "\n".join(lines)

    # ---------------------------------------------------------------- helpers

    def _is_valid_slot(self, slot: int) -> bool:
        return 0 <= slot < self.max_slots

    def _first_empty_slot(self) -> Optional[int]:
        return next(
            (index for index, item in enumerate(self._slots) if item is None), None
        )

    @staticmethod
    def _can_equip(item: Optional[ItemBase], slot_type: EquipmentSlotType) -> bool:
        required = _EQUIPPABLE.get(slot_type)
        return item is not None and required is not None and isinstance(item, required)

    @staticmethod
    def _strength_of(item: Optional[ItemBase], slot_type: EquipmentSlotType) -> int:
        if item is None or not isinstance(item, _EQUIPPABLE[slot_type]):
            return 0
        return item.strength_bonus