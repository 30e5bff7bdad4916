import pytest

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


def _one_of_each():
    return [
        ClawNecklace(),
        LuckyPaw(),
        ElderWings(),
        KittyBoots(),
        BlueGemstone(),
        ExplosiveBomb(),
        HealthPotion(),
        KittyCoin(),
        WoodenStaff(),
        IronSword(),
    ]


@pytest.mark.parametrize(
    "cls, name, value, base, rarity",
    [
        (ClawNecklace, "Claw Necklace", 120, AccessoryItem, ItemRarity.RARE),
        (LuckyPaw, "Lucky Paw", 90, AccessoryItem, ItemRarity.UNCOMMON),
        (ElderWings, "Elder Wings", 250, ArmorItem, ItemRarity.RARE),
        (KittyBoots, "Kitty Boots", 80, ArmorItem, ItemRarity.UNCOMMON),
        (BlueGemstone, "Blue Gemstone", 200, CollectibleItem, ItemRarity.RARE),
        (ExplosiveBomb, "Explosive Bomb", 75, ConsumableItem, ItemRarity.UNCOMMON),
        (HealthPotion, "Health Potion", 50, ConsumableItem, ItemRarity.UNCOMMON),
        (WoodenStaff, "Wooden Staff", 120, WeaponItem, ItemRarity.RARE),
        (IronSword, "Iron Sword", 150, WeaponItem, ItemRarity.RARE),
    ],
)
def test_catalog_entries(cls, name, value, base, rarity):
    item = cls()
    assert item.name == name
    assert item.value == value
    assert isinstance(item, base)
    assert item.rarity is rarity


def test_kitty_coin_defaults_and_amount():
    coin = KittyCoin()
    assert coin.name == "Kitty Coin"
    assert coin.description == "Adorable currency featuring cute cat faces."
    assert coin.stack_count == 1
    assert coin.rarity is ItemRarity.COMMON
    assert isinstance(coin, CurrencyItem)
    assert KittyCoin(25).stack_count == 25


def test_kitty_coins_are_independent():
    first = KittyCoin(5)
    second = KittyCoin(5)
    first.add_to_stack(10)
    assert first.stack_count == 15
    assert second.stack_count == 5


def test_type_descriptions():
    assert IronSword().type_description == "Weapon"
    assert ElderWings().type_description == "Armor"
    assert LuckyPaw().type_description == "Accessory"
    assert HealthPotion().type_description == "Consumable"
    assert KittyCoin().type_description == "Currency"
    assert BlueGemstone().type_description == "Collectible"


def test_accessory_effects():
    necklace = ClawNecklace()
    paw = LuckyPaw()
    assert necklace.effect_type is SpecialEffectType.CRITICAL_CHANCE
    assert necklace.special_effect_name() == "Critical Chance"
    assert necklace.use().endswith("%")
    assert paw.effect_type is SpecialEffectType.MAGIC_RESISTANCE
    assert paw.special_effect_name() == "Magic Resistance"
    assert not paw.use().endswith("%")
    assert necklace.strength_bonus > paw.strength_bonus


def test_consumable_effects():
    potion = HealthPotion()
    bomb = ExplosiveBomb()
    assert potion.effect_type is EffectType.HEALING
    assert potion.effect_name() == "Healing"
    assert bomb.effect_type is EffectType.DAMAGE
    assert bomb.effect_name() == "Damage"
    assert bomb.effect_value > potion.effect_value
    assert potion.stackable and bomb.stackable


def test_weapons_compare():
    sword = IronSword()
    staff = WoodenStaff()
    assert sword.damage > staff.damage
    assert sword.strength_bonus > staff.strength_bonus
    assert sword.weight > staff.weight
    assert not sword.stackable


def test_armor_reduction_within_range():
    wings = ElderWings()
    boots = KittyBoots()
    for armor in (wings, boots):
        assert 0.0 < armor.damage_reduction < 1.0
    assert wings.damage_reduction > boots.damage_reduction
    assert wings.strength_bonus > boots.strength_bonus


def test_gemstone_collection_value():
    gem = BlueGemstone()
    assert gem.collection_value == 500
    assert gem.use() == "Collectible items are kept for collection value!"


def test_weight_extremes():
    items = _one_of_each()
    assert all(item.weight > 0 for item in items)
    heaviest = max(items, key=lambda item: item.weight)
    lightest = min(items, key=lambda item: item.weight)
    assert heaviest.name == "Elder Wings"
    assert lightest.name == "Kitty Coin"


def test_names_are_unique():
    names = [item.name for item in _one_of_each()]
    assert len(names) == 10
    assert len(set(names)) == len(names)