"""Day 5: checking ingredients against fresh id ranges."""

from __future__ import annotations

import re
from collections.abc import Iterable

_RANGE = re.compile(r"(\d+)-(\d+)")


def parse_inventory(data: str) -> tuple[list[range], list[int]]:
    """Parse fresh id ranges and available ingredient ids."""
    head, separator, tail = data.partition("\n\n")
    if not separator:
        raise ValueError("missing blank line between ranges and ingredients")
    ranges = []
    for line in head.splitlines():
        match = _RANGE.fullmatch(line.strip())
        if match is None:
            raise ValueError(f"invalid range: {line!r}")
        ranges.append(range(int(match[1]), int(match[2]) + 1))
    ids = []
    for line in tail.strip().splitlines():
        if not line.strip().isdigit():
            raise ValueError(f"invalid ingredient id: {line!r}")
        ids.append(int(line))
    if not ranges or not ids:
        raise ValueError("inventory needs at least one range and one ingredient")
    return ranges, ids


def _overlaps(a: range, b: range) -> bool:
    return a.start in b or a.stop - 1 in b or b.start in a or b.stop - 1 in a


def merge_ranges(ranges: Iterable[range]) -> list[range]:
    """Merge overlapping ranges until no two of them overlap."""
    current = list(ranges)
    while True:
        merged: list[range] = []
        changed = False
        for candidate in current:
            index = next(
                (i for i, existing in enumerate(merged) if _overlaps(existing, candidate)),
                None,
            )
            if index is None:
                merged.append(candidate)
            else:
                existing = merged[index]
                merged[index] = range(
                    min(existing.start, candidate.start),
                    max(existing.stop, candidate.stop),
                )
                changed = True
        current = merged
        if not changed:
            return current


def part1(data: str) -> int:
    """Count available ingredients that fall in some fresh range."""
    ranges, ids = parse_inventory(data)
    return sum(any(i in r for r in ranges) for i in ids)


def part2(data: str) -> int:
    """Count all ids considered fresh by the ranges."""
    ranges, _ = parse_inventory(data)
    return sum(len(r) for r in merge_ranges(ranges))