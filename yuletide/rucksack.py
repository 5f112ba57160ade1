"""Rucksack reorganisation: find misplaced items and group badges."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def priority(item: str) -> int:
    """Return the priority of an item: a-z are 1-26, A-Z are 27-52."""
    if len(item) == 1:
        if "a" <= item <= "z":
            return ord(item) - 96
        if "A" <= item <= "Z":
            return ord(item) - 38
    raise ValueError(f"bad item character: {item!r}")


def item_counts(items: Iterable[str]) -> Counter[str]:
    """Count how often each item occurs, keeping first-seen order."""
    return Counter(items)


def _rucksacks(text: str) -> list[str]:
    return [line.strip() for line in text.strip().splitlines()]


def sum_misplaced_priorities(text: str) -> int:
    """Sum the priorities of items found in both compartments of each rucksack."""
    total = 0
    for line in _rucksacks(text):
        middle = len(line) // 2
        first = item_counts(line[:middle])
        second = item_counts(line[middle:])
        total += sum(priority(item) for item in first if item in second)
    return total


def sum_badge_priorities(text: str) -> int:
    """Sum the priorities of the badge item shared by each group of three rucksacks."""
    lines = _rucksacks(text)
    if len(lines) % 3:
        raise ValueError("rucksacks do not divide into groups of three")
    total = 0
    for start in range(0, len(lines), 3):
        a, b, c = (item_counts(line) for line in lines[start:start + 3])
        badge = next((item for item in a if item in b and item in c), None)
        if badge is not None:
            total += priority(badge)
    return total