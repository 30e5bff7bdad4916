"""The concrete items that can appear in the game world."""

from __future__ import annotations

from kittyloot.items import (
    AccessoryItem,
    ArmorItem,
    CollectibleItem,
    ConsumableItem,
    CurrencyItem,
    EffectType,
    ItemRarity,
    SpecialEffectType,
    WeaponItem,
)


class ClawNecklace(AccessoryItem):
    """Rare accessory: +2 strength and a 5% critical chance."""

    def __init__(self) -> None:
        super().__init__(
            "Claw Necklace",
            "A fierce necklace made from sharp claws that increases critical strikes.",
            0.5,
            120,
            ItemRarity.RARE,
            2,
            SpecialEffectType.CRITICAL_CHANCE,
            5.0,
        )


class LuckyPaw(AccessoryItem):
    """Uncommon accessory: +1 strength and 25 points of magic resistance."""

    def __init__(self) -> None:
        super().__init__(
            "Lucky Paw",
            "A mystical paw charm that brings good fortune and magical protection.",
            0.3,
            90,
            ItemRarity.UNCOMMON,
            1,
            SpecialEffectType.MAGIC_RESISTANCE,
            25.0,
        )


class ElderWings(ArmorItem):
    """Rare armor: +3 strength and 15% damage reduction."""

    def __init__(self) -> None:
        super().__init__(
            "Elder Wings",
            "Ancient wings that grant both strength and exceptional protection from harm.",
            2.8,
            250,
            ItemRarity.RARE,
            3,
            0.15,
        )


class KittyBoots(ArmorItem):
    """Uncommon armor: +2 strength and 5% damage reduction."""

    def __init__(self) -> None:
        super().__init__(
            "Kitty Boots",
            "Adorable boots with tiny paw prints that boost your strength "
            "and provide protection.",
            1.2,
            80,
            ItemRarity.UNCOMMON,
            2,
            0.05,
        )


class BlueGemstone(CollectibleItem):
    """Rare collectible gemstone."""

    def __init__(self) -> None:
        super().__init__(
            "Blue Gemstone",
            "A beautiful blue gemstone that sparkles in the light.",
            0.3,
            200,
            ItemRarity.RARE,
            500,
        )


class ExplosiveBomb(ConsumableItem):
    """Uncommon consumable that deals area damage."""

    def __init__(self) -> None:
        super().__init__(
            "Explosive Bomb",
            "A dangerous bomb that deals area damage.",
            1.2,
            75,
            ItemRarity.UNCOMMON,
            EffectType.DAMAGE,
            100,
        )


class HealthPotion(ConsumableItem):
    """Uncommon consumable that restores health."""

    def __init__(self) -> None:
        super().__init__(
            "Health Potion",
            "A purple potion that restores health when consumed.",
            0.5,
            50,
            ItemRarity.UNCOMMON,
            EffectType.HEALING,
            50,
        )


class KittyCoin(CurrencyItem):
    """The game's currency; ``amount`` is the number of coins in the stack."""

    def __init__(self, amount: int = 1) -> None:
        super().__init__(
            "Kitty Coin",
            "Adorable currency featuring cute cat faces.",
            0.1,
            1,
            amount,
        )


class WoodenStaff(WeaponItem):
    """Rare weapon: 15 damage and +2 strength."""

    def __init__(self) -> None:
        super().__init__(
            "Wooden Staff",
            "A mystical wooden staff imbued with magic that strengthens the user.",
            1.8,
            120,
            ItemRarity.RARE,
            15,
            2,
        )


class IronSword(WeaponItem):
    """Rare weapon: 25 damage and +3 strength."""

    def __init__(self) -> None:
        super().__init__(
            "Iron Sword",
            "A sturdy iron sword with a sharp blade that enhances the wielder's strength.",
            2.5,
            150,
            ItemRarity.RARE,
            25,
            3,
        )