"""Equipment slot kinds."""

from __future__ import annotations

from enum import Enum, auto


class EquipmentSlotType(Enum):
    """The three slots an item can be equipped in."""

    WEAPON = auto()
    ARMOR = auto()
    ACCESSORY = auto()


_SLOT_NAMES = {
    EquipmentSlotType.WEAPON: "Weapon",
    EquipmentSlotType.ARMOR: "Armor",
    EquipmentSlotType.ACCESSORY: "Accessory",
}


def equipment_slot_name(slot_type: EquipmentSlotType) -> str:
    """Return the display name of a slot, or ``"Unknown"``."""
    return _SLOT_NAMES.get(slot_type, "Unknown")