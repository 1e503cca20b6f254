"""Day 2: summing product ids made of a repeated digit sequence."""

from __future__ import annotations

import re
from collections.abc import Iterator

_RANGE = re.compile(r"(\d+)-(\d+)")


def parse_ranges(data: str) -> list[tuple[int, int]]:
    """Parse ``a-b,c-d,...`` into inclusive (start, end) pairs."""
    ranges = []
    for part in data.strip().split(","):
        match = _RANGE.fullmatch(part.strip())
        if match is None:
            raise ValueError(f"invalid range: {part!r}")
        ranges.append((int(match[1]), int(match[2])))
    return ranges


def _ids(data: str) -> Iterator[int]:
    for start, end in parse_ranges(data):
        yield from range(start, end + 1)


def _is_doubled(product_id: int) -> bool:
    text = str(product_id)
    half, odd = divmod(len(text), 2)
    return not odd and text[:half] == text[half:]


def _is_repeated(product_id: int) -> bool:
    text = str(product_id)
    length = len(text)
    return any(
        text[:size] * (length // size) == text
        for size in range(1, length // 2 + 1)
        if length % size == 0
    )


def part1(data: str) -> int:
    """Sum ids whose digits are one sequence repeated exactly twice."""
    return sum(pid for pid in _ids(data) if _is_doubled(pid))


def part2(data: str) -> int:
    """Sum ids whose digits are one sequence repeated at least twice."""
    return sum(pid for pid in _ids(data) if _is_repeated(pid))