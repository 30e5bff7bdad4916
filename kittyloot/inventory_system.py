"""Player-facing inventory controller: key handling, status messages, equipment."""

from __future__ import annotations

import logging
from collections.abc import Collection
from contextlib import suppress
from enum import Enum, auto
from typing import Optional

from kittyloot.equipment import EquipmentSlotType
from kittyloot.inventory import Inventory, InventoryError
from kittyloot.item_manager import ItemManager, Position
from kittyloot.items import ItemBase

logger = logging.getLogger(__name__)

PLAYER_SLOTS = 10
SLOTS_PER_ROW = 5
KG_PER_STRENGTH = 2.0
DEFAULT_MESSAGE_DURATION = 3.0


class Key(Enum):
    """Keys the inventory screen reacts to."""

    I = auto()  # noqa: E741
    ESCAPE = auto()
    E = auto()
    RIGHT = auto()
    LEFT = auto()
    DOWN = auto()
    UP = auto()
    ENTER = auto()
    SPACE = auto()
    D = auto()
    ONE = auto()
    TWO = auto()
    THREE = auto()
    U = auto()
    Q = auto()
    W = auto()


_EQUIP_KEYS = {
    Key.ONE: (EquipmentSlotType.WEAPON, "weapon"),
    Key.TWO: (EquipmentSlotType.ARMOR, "armor"),
    Key.THREE: (EquipmentSlotType.ACCESSORY, "accessory"),
}

_UNEQUIP_KEYS = {
    Key.Q: (EquipmentSlotType.WEAPON, "weapon"),
    Key.W: (EquipmentSlotType.ARMOR, "armor"),
    Key.E: (EquipmentSlotType.ACCESSORY, "accessory"),
}


class InventorySystem:
    """The player's inventory together with the state of its on-screen window.

    UI actions report success as a bool and describe the outcome in
    :attr:`status_message`, which fades after its duration has passed.
    """

    def __init__(self) -> None:
        self.inventory = Inventory(PLAYER_SLOTS)
        self.is_open = False
        self.equip_mode = False
        self.selected_slot = 0
        self.status_message = ""
        self.status_timer = 0.0
        logger.info("InventorySystem initialized with %d item slots.", PLAYER_SLOTS)
        self.set_status_message("Inventory System Ready!", 2.0)

    # ---------------------------------------------------------------- input

    def handle_input(self, pressed: Collection[Key]) -> None:
        """React to the keys pressed during this frame."""
        if not self.is_open:
            if Key.I in pressed:
                self.open_inventory()
            return

        if Key.I in pressed or Key.ESCAPE in pressed:
            self.close_inventory()
            return

        if Key.E in pressed:
            self.equip_mode = not self.equip_mode
            self.set_status_message(
                "EQUIP MODE: Select item slot, then equipment slot"
                if self.equip_mode
                else "Browse Mode",
                2.0,
            )
            self.selected_slot = 0

        self._handle_slot_selection(pressed)

        if self.equip_mode:
            self._handle_equipment_actions(pressed)
            return

        if Key.ENTER in pressed or Key.SPACE in pressed:
            item = self.inventory.get_item(self.selected_slot)
            if item is not None:
                logger.info("%s", self._item_details(item))
                self.set_status_message(f"Examined: {item.name}", 2.0)
            else:
                self.set_status_message("Empty slot", 1.0)

        if Key.D in pressed:
            try:
                dropped = self.inventory.remove_item(self.selected_slot)
            except InventoryError:
                self.set_status_message("No item to drop", 1.0)
            else:
                self.set_status_message(f"Dropped: {dropped.name}", 2.0)

    def handle_equip_input(self, pressed: Collection[Key]) -> None:
        """Run only the equipment actions, and only in equip mode."""
        if self.equip_mode:
            self._handle_equipment_actions(pressed)

    def update(self, frame_time: float) -> None:
        """Advance the status message timer by ``frame_time`` seconds."""
        if self.status_timer > 0.0:
            self.status_timer -= frame_time
            if self.status_timer <= 0.0:
                self.status_message = ""

    def set_status_message(
        self, message: str, duration: float = DEFAULT_MESSAGE_DURATION
    ) -> None:
        """Show ``message`` for ``duration`` seconds."""
        self.status_message = message
        self.status_timer = duration

    # ---------------------------------------------------------------- state

    def open_inventory(self) -> None:
        """Open the window in browse mode with the first slot selected."""
        self.is_open = True
        self.equip_mode = False
        self.selected_slot = 0
        self.set_status_message(
            "Inventory opened. Press 'E' for equip mode, 'I' or 'ESC' to close", 3.0
        )

    def close_inventory(self) -> None:
        """Close the window and leave equip mode."""
        self.is_open = False
        self.equip_mode = False
        self.set_status_message("Inventory closed", 1.0)

    def toggle_inventory(self) -> None:
        """Open the window if closed, close it if open."""
        if self.is_open:
            self.close_inventory()
        else:
            self.open_inventory()

    # ---------------------------------------------------------------- items

    def add_item_to_inventory(self, item: Optional[ItemBase]) -> bool:
        """Add ``item`` to the first free slot; False if there is none."""
        if item is None:
            return False
        try:
            self.inventory.add_item(item)
        except InventoryError:
            self.set_status_message("Inventory is full!", 3.0)
            return False
        self.set_status_message("Item added to inventory!", 2.0)
        return True

    def open_treasure_chest(self, pos: Position, item_manager: ItemManager) -> bool:
        """Move the chest item at ``pos`` into the inventory.

        If the inventory is full the item goes back into the chest.
        """
        item = item_manager.take_item_at(pos, True)
        if item is None:
            self.set_status_message("No item in chest", 1.5)
            return False
        try:
            self.inventory.add_item(item)
        except InventoryError:
            logger.info("Inventory full! Cannot pick up: %s", item.name)
            self.set_status_message("Inventory full! Cannot pick up item.", 4.0)
            item_manager.add_item(pos, item, True)
            return False
        self.set_status_message(f"Found: {item.name}!", 3.0)
        return True

    def item_in_slot(self, slot: int) -> Optional[ItemBase]:
        """The item in a regular slot, or ``None``."""
        return self.inventory.get_item(slot)

    # ------------------------------------------------------------ equipment

    def equip_item_in_slot(
        self, inventory_slot: int, equipment_slot: EquipmentSlotType
    ) -> bool:
        """Equip the item in ``inventory_slot``; report whether it worked."""
        try:
            self.inventory.equip_item(inventory_slot, equipment_slot)
        except InventoryError:
            self.set_status_message("Failed to equip item", 2.0)
            return False
        self.set_status_message("Item equipped successfully!", 2.0)
        return True

    def unequip_equipment_slot(self, slot_type: EquipmentSlotType) -> bool:
        """Move the item in ``slot_type`` back to the inventory."""
        try:
            self.inventory.unequip_item(slot_type)
        except InventoryError:
            self.set_status_message("No item equipped in that slot", 2.0)
            return False
        self.set_status_message("Item unequipped successfully!", 2.0)
        return True

    def total_strength_bonus(self) -> int:
        """Strength added by everything equipped."""
        return self.inventory.total_strength_bonus()

    # --------------------------------------------------------------- weight

    def current_weight(self) -> float:
        """Total weight of carried and equipped items, in kg."""
        carried = sum(item.weight for item in self.inventory if item is not None)
        worn = sum(
            item.weight
            for item in map(self.inventory.equipped, EquipmentSlotType)
            if item is not None
        )
        return carried + worn

    def max_carry_weight(self, player_strength: int) -> float:
        """Weight a player of this strength can carry."""
        return player_strength * KG_PER_STRENGTH

    def is_overweight(self, player_strength: int) -> bool:
        """True when the load exceeds the carry limit."""
        return self.current_weight() > self.max_carry_weight(player_strength)

    # ----------------------------------------------------------- formatting

    def format_equip_menu(self) -> str:
        """Text listing of the three equipment slots."""
        lines = ["=== EQUIPMENT MENU ==="]
        labels = ("Weapon", "Armor", "Accessory")
        for number, (label, slot_type) in enumerate(
            zip(labels, EquipmentSlotType), start=1
        ):
            item = self.inventory.equipped(slot_type)
            lines.append(
                f"{number}. {label} Slot: {item.name if item is not None else '[Empty]'}"
            )
        lines.append(f"Total Strength Bonus: +{self.total_strength_bonus()}")
        lines.append("======================")
        return "\n".join(lines)

    def format_inventory_status(self) -> str:
        """Text listing of the regular slots followed by the equipment."""
        return (
            self.inventory.format_inventory()
            + "\n"
            + self.inventory.format_equipment()
        )

    # -------------------------------------------------------------- helpers

    def _handle_slot_selection(self, pressed: Collection[Key]) -> None:
        slots = self.inventory.max_slots
        old_slot = self.selected_slot
        if Key.RIGHT in pressed:
            self.selected_slot = (self.selected_slot + 1) % slots
        elif Key.LEFT in pressed:
            self.selected_slot = (self.selected_slot - 1) % slots
        elif Key.DOWN in pressed:
            self.selected_slot = (self.selected_slot + SLOTS_PER_ROW) % slots
        elif Key.UP in pressed:
            self.selected_slot = (self.selected_slot - SLOTS_PER_ROW) % slots

        if old_slot != self.selected_slot:
            item = self.inventory.get_item(self.selected_slot)
            if item is not None:
                self.set_status_message(f"Selected: {item.name}", 2.0)
            else:
                self.set_status_message(f"Slot {self.selected_slot} [Empty]", 1.0)

    def _handle_equipment_actions(self, pressed: Collection[Key]) -> None:
        for key, (slot_type, label) in _EQUIP_KEYS.items():
            if key in pressed:
                try:
                    self.inventory.equip_item(self.selected_slot, slot_type)
                except InventoryError:
                    self.set_status_message(f"Cannot equip as {label}", 2.0)
                else:
                    self.set_status_message(f"Equipped {label}!", 2.0)
                return

        if Key.U not in pressed:
            return
        for key, (slot_type, label) in _UNEQUIP_KEYS.items():
            if key in pressed:
                with suppress(InventoryError):
                    self.inventory.unequip_item(slot_type)
                self.set_status_message(f"Unequipped {label}", 2.0)
                return
        self.set_status_message(
            "Press Q/W/E after U to unequip Weapon/Armor/Accessory", 3.0
        )

    @staticmethod
    def _item_details(item: ItemBase) -> str:
        return "\n".join(
            [
                "=== ITEM DETAILS ===",
                f"Name: {item.name}",
                f"Description: {item.description}",
                f"Type: {item.type_description}",
                f"Rarity: {item.rarity_name()}",
                f"Weight: {item.weight:g} kg",
                f"Value: {item.value} kitty coins",
                "===================",
            ]
        )