"""Day 3: picking the largest joltage from each battery bank."""

from __future__ import annotations


def parse_banks(data: str) -> list[list[int]]:
    """Parse each line of digits into a list of battery ratings."""
    banks = []
    for line in data.splitlines():
        if not line.isdigit():
            raise ValueError(f"invalid battery bank: {line!r}")
        banks.append([int(c) for c in line])
    return banks


def _max_joltage(bank: list[int], count: int) -> int:
    if len(bank) < count:
        raise ValueError(f"bank of {len(bank)} batteries cannot turn on {count}")
    start = 0
    total = 0
    for remaining in range(count - 1, -1, -1):
        window = bank[start : len(bank) - remaining]
        largest = max(window)
        start += window.index(largest) + 1
        total = total * 10 + largest
    return total


def part1(data: str) -> int:
    """Sum the best two-battery joltage of each bank."""
    return sum(_max_joltage(bank, 2) for bank in parse_banks(data))


def part2(data: str) -> int:
    """Sum the best twelve-battery joltage of each bank."""
    return sum(_max_joltage(bank, 12) for bank in parse_banks(data))