import random

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
from kittyloot.item_manager import (
    ItemManager,
    PlacedItem,
    Position,
    create_random_item,
    create_random_item_by_weight,
    create_specific_item,
    random_rarity,
)
from kittyloot.items import ItemRarity


class FixedRng:
    """Returns preset values from randint, checking they are in range."""

    def __init__(self, *values):
        self._values = iter(values)

    def randint(self, a, b):
        value = next(self._values)
        assert a <= value <= b
        return value


@pytest.mark.parametrize(
    "roll, expected",
    [
        (0, ItemRarity.COMMON),
        (5999, ItemRarity.COMMON),
        (6000, ItemRarity.UNCOMMON),
        (8499, ItemRarity.UNCOMMON),
        (8500, ItemRarity.RARE),
        (9799, ItemRarity.RARE),
        (9800, ItemRarity.LEGENDARY),
        (10000, ItemRarity.LEGENDARY),
    ],
)
def test_random_rarity_thresholds(roll, expected):
    assert random_rarity(FixedRng(roll)) is expected


@pytest.mark.parametrize(
    "key, cls",
    [
        ("HealthPotion", HealthPotion),
        ("Bomb", ExplosiveBomb),
        ("Sword", IronSword),
        ("Staff", WoodenStaff),
        ("BlueGemstone", BlueGemstone),
        ("KittyBoots", KittyBoots),
        ("ElderWings", ElderWings),
        ("LuckyPaw", LuckyPaw),
        ("ClawNecklace", ClawNecklace),
    ],
)
def test_create_specific_item(key, cls):
    assert type(create_specific_item(key, random.Random(1))) is cls


def test_create_specific_coin_amount_in_range():
    rng = random.Random(7)
    for _ in range(50):
        coin = create_specific_item("KittyCoin", rng)
        assert isinstance(coin, KittyCoin)
        assert 3 <= coin.stack_count <= 12


def test_create_specific_unknown_falls_back_to_one_coin():
    item = create_specific_item("Nonexistent", random.Random(0))
    assert isinstance(item, KittyCoin)
    assert item.stack_count == 1


def test_create_random_item_common_is_coin():
    item = create_random_item(ItemRarity.COMMON, random.Random(3))
    assert item.name == "Kitty Coin"
    assert 3 <= item.stack_count <= 12


def test_create_random_item_picks_by_index():
    assert create_random_item(ItemRarity.LEGENDARY, FixedRng(0)).name == "Elder Wings"
    assert create_random_item(ItemRarity.LEGENDARY, FixedRng(1)).name == "Wooden Staff"
    assert create_random_item(ItemRarity.RARE, FixedRng(0)).name == "Iron Sword"


def test_create_random_item_by_weight_uses_roll():
    item = create_random_item_by_weight(FixedRng(9900, 0))
    assert item.name == "Elder Wings"
    assert item.rarity is ItemRarity.RARE


def test_generate_items_invariants():
    for seed in range(30):
        manager = ItemManager(random.Random(seed))
        manager.generate_items_for_map(15, 15, 5)
        assert 5 <= manager.total_item_count() <= 9
        chests = [p for p in manager.items if p.in_chest]
        assert [p.position for p in chests] == manager.treasure_chest_positions()
        assert len(chests) >= 1
        for placed in manager.items:
            assert 0 <= placed.position.x < 15
            assert 1 <= placed.position.y <= 13
        assert any(isinstance(p.item, KittyCoin) for p in manager.items)


def test_generate_hidden_items_avoid_chests():
    for seed in range(30):
        manager = ItemManager(random.Random(seed))
        manager.generate_items_for_map(15, 15, 5)
        chests = set(manager.treasure_chest_positions())
        hidden = [p for p in manager.items if not p.in_chest]
        has_coin_before = any(
            isinstance(p.item, KittyCoin) for p in manager.items[:-1]
        )
        checked = hidden if has_coin_before else hidden[:-1]
        assert all(p.position not in chests for p in checked)


def test_generate_replaces_previous_items():
    manager = ItemManager(random.Random(5))
    manager.add_item(Position(0, 0), KittyCoin(1))
    manager.generate_items_for_map(15, 15, 5)
    assert manager.item_count_at(Position(0, 0)) == 0


def test_generate_rejects_tiny_map():
    with pytest.raises(ValueError):
        ItemManager(random.Random(0)).generate_items_for_map(5, 2, 5)


def test_take_item_respects_chest_flag():
    manager = ItemManager(random.Random(0))
    pos = Position(2, 3)
    sword = IronSword()
    coin = KittyCoin(4)
    manager.add_item(pos, sword, True)
    manager.add_item(pos, coin, False)
    assert manager.item_count_at(pos) == 2
    assert manager.take_item_at(pos, True) is sword
    assert manager.take_item_at(pos, True) is None
    assert manager.take_item_at(pos) is coin
    assert manager.total_item_count() == 0


def test_remove_item_at():
    manager = ItemManager(random.Random(0))
    pos = Position(1, 1)
    manager.add_item(pos, HealthPotion(), False)
    assert manager.remove_item_at(pos, True) is False
    assert manager.remove_item_at(pos) is True
    assert manager.item_count_at(pos) == 0


def test_items_at_and_treasure_chest_item():
    manager = ItemManager(random.Random(0))
    pos = Position(4, 5)
    potion = HealthPotion()
    gem = BlueGemstone()
    manager.add_item(pos, potion, False)
    manager.add_item(pos, gem, True)
    manager.add_item(Position(0, 1), KittyCoin(2))
    found = manager.items_at(pos)
    assert [p.item for p in found] == [potion, gem]
    chest = manager.treasure_chest_item(pos)
    assert chest == PlacedItem(pos, gem, True)
    assert manager.treasure_chest_item(Position(0, 1)) is None


def test_clear_all_items():
    manager = ItemManager(random.Random(2))
    manager.generate_items_for_map(15, 15, 5)
    manager.clear_all_items()
    assert manager.total_item_count() == 0
    assert manager.treasure_chest_positions() == []


def test_treasure_chest_positions_is_a_copy():
    manager = ItemManager(random.Random(4))
    manager.generate_items_for_map(15, 15, 5)
    positions = manager.treasure_chest_positions()
    positions.clear()
    assert len(manager.treasure_chest_positions()) >= 1


def test_format_items_info():
    manager = ItemManager(random.Random(0))
    manager.add_item(Position(3, 4), IronSword(), True)
    manager.add_item(Position(1, 2), KittyCoin(5), False)
    text = manager.format_items_info()
    assert "Total items: 2" in text
    assert "- Iron Sword (Rare) at (3,4) [CHEST]" in text
    assert "- Kitty Coin (Common) at (1,2) [HIDDEN]" in text
    assert "Chest items: 1, Hidden items: 1" in text