"""Item model: rarities, effect kinds and the base item categories."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import ClassVar

MIN_WEIGHT = 0.1


class ItemRarity(Enum):
    """How rare an item is."""

    COMMON = auto()
    UNCOMMON = auto()
    RARE = auto()
    LEGENDARY = auto()


class SpecialEffectType(Enum):
    """Special effects an accessory can grant."""

    MAGIC_RESISTANCE = auto()
    CRITICAL_CHANCE = auto()
    NONE = auto()


class EffectType(Enum):
    """Effects a consumable applies when used."""

    HEALING = auto()
    DAMAGE = auto()
    BUFF = auto()
    DEBUFF = auto()


_RARITY_NAMES = {
    ItemRarity.COMMON: "Common",
    ItemRarity.UNCOMMON: "Uncommon",
    ItemRarity.RARE: "Rare",
    ItemRarity.LEGENDARY: "Legendary",
}

_SPECIAL_EFFECT_NAMES = {
    SpecialEffectType.MAGIC_RESISTANCE: "Magic Resistance",
    SpecialEffectType.CRITICAL_CHANCE: "Critical Chance",
    SpecialEffectType.NONE: "No Special Effect",
}

_EFFECT_NAMES = {
    EffectType.HEALING: "Healing",
    EffectType.DAMAGE: "Damage",
    EffectType.BUFF: "Buff",
    EffectType.DEBUFF: "Debuff",
}


def rarity_name(rarity: ItemRarity) -> str:
    """Return the display name of a rarity."""
    return _RARITY_NAMES.get(rarity, "Unknown")


class ItemBase(ABC):
    """Common data shared by every item; weight is always positive."""

    stackable: ClassVar[bool] = False
    stack_limit: ClassVar[int] = 1
    type_description: ClassVar[str] = ""

    def __init__(
        self,
        name: str,
        description: str,
        weight: float,
        value: int,
        rarity: ItemRarity,
    ) -> None:
        self.name = name
        self.description = description
        self.weight = float(weight) if weight > 0.0 else MIN_WEIGHT
        self.value = value
        self.rarity = rarity

    def rarity_name(self) -> str:
        """Return the display name of this item's rarity."""
        return rarity_name(self.rarity)

    @abstractmethod
    def use(self) -> str:
        """Describe what using the item does."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, weight={self.weight}, "
            f"value={self.value}, rarity={self.rarity.name})"
        )


class WeaponItem(ItemBase):
    """An equippable weapon that deals damage and adds strength."""

    type_description = "Weapon"

    def __init__(
        self,
        name: str,
        description: str,
        weight: float,
        value: int,
        rarity: ItemRarity,
        damage: int,
        strength_bonus: int,
    ) -> None:
        super().__init__(name, description, weight, value, rarity)
        self.damage = damage
        self.strength_bonus = strength_bonus

    def use(self) -> str:
        return (
            "Equipment items are equipped, not consumed!\n"
            f"{self.name} deals {self.damage} damage and provides "
            f"+{self.strength_bonus} strength."
        )


class ArmorItem(ItemBase):
    """Equippable armor; damage reduction is a fraction clamped to [0, 1]."""

    type_description = "Armor"

    def __init__(
        self,
        name: str,
        description: str,
        weight: float,
        value: int,
        rarity: ItemRarity,
        strength_bonus: int,
        damage_reduction: float,
    ) -> None:
        super().__init__(name, description, weight, value, rarity)
        self.strength_bonus = strength_bonus
        self.damage_reduction = min(max(float(damage_reduction), 0.0), 1.0)

    def use(self) -> str:
        return (
            "Armor items are equipped for protection, not consumed!\n"
            f"{self.name} provides +{self.strength_bonus} strength and "
            f"{self.damage_reduction * 100.0:g}% damage reduction."
        )


class AccessoryItem(ItemBase):
    """Equippable accessory adding strength and an optional special effect."""

    type_description = "Accessory"

    def __init__(
        self,
        name: str,
        description: str,
        weight: float,
        value: int,
        rarity: ItemRarity,
        strength_bonus: int,
        effect_type: SpecialEffectType,
        effect_value: float,
    ) -> None:
        super().__init__(name, description, weight, value, rarity)
        self.strength_bonus = strength_bonus
        self.effect_type = effect_type
        self.effect_value = float(effect_value)

    def special_effect_name(self) -> str:
        """Return the display name of the special effect."""
        return _SPECIAL_EFFECT_NAMES.get(self.effect_type, "No Special Effect")

    def use(self) -> str:
        text = (
            "Accessory items are equipped for special effects, not consumed!\n"
            f"{self.name} provides +{self.strength_bonus} strength"
        )
        if self.effect_type is not SpecialEffectType.NONE:
            text += f" and {self.special_effect_name()}: {self.effect_value:g}"
            if self.effect_type is SpecialEffectType.CRITICAL_CHANCE:
                text += "%"
        return text


class CollectibleItem(ItemBase):
    """An item kept for its collection value."""

    type_description = "Collectible"

    def __init__(
        self,
        name: str,
        description: str,
        weight: float,
        value: int,
        rarity: ItemRarity,
        collection_value: int,
    ) -> None:
        super().__init__(name, description, weight, value, rarity)
        self.collection_value = collection_value

    def use(self) -> str:
        return "Collectible items are kept for collection value!"


class ConsumableItem(ItemBase):
    """A stackable item that applies an effect when used."""

    stackable = True
    stack_limit = 99
    type_description = "Consumable"

    def __init__(
        self,
        name: str,
        description: str,
        weight: float,
        value: int,
        rarity: ItemRarity,
        effect_type: EffectType,
        effect_value: int,
    ) -> None:
        super().__init__(name, description, weight, value, rarity)
        self.effect_type = effect_type
        self.effect_value = effect_value

    def effect_name(self) -> str:
        """Return the display name of the effect."""
        return _EFFECT_NAMES.get(self.effect_type, "Unknown Effect")

    def use(self) -> str:
        return f"Using {self.name} - {self.effect_name()} effect: {self.effect_value}"


class CurrencyItem(ItemBase):
    """Stackable currency; always of common rarity."""

    stackable = True
    stack_limit = 999
    type_description = "Currency"

    def __init__(
        self,
        name: str,
        description: str,
        weight: float,
        value: int,
        stack_count: int = 1,
    ) -> None:
        super().__init__(name, description, weight, value, ItemRarity.COMMON)
        self.stack_count = stack_count

    def add_to_stack(self, amount: int) -> None:
        """Increase the stack by ``amount``."""
        self.stack_count += amount

    def use(self) -> str:
        return "Currency is spent at stores, not consumed directly!"