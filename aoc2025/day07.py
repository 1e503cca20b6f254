"""Day 7: following tachyon beams through a manifold of splitters."""

from __future__ import annotations

from collections import Counter
from enum import Enum


class Cell(Enum):
    """What occupies a manifold cell."""

    START = "S"
    SPLITTER = "^"
    EMPTY = "."


def parse_manifold(data: str) -> list[list[Cell]]:
    """Parse the manifold diagram into rows of cells."""
    grid = []
    for line in data.splitlines():
        try:
            grid.append([Cell(char) for char in line])
        except ValueError:
            raise ValueError(f"unexpected character in row: {line!r}") from None
    return grid


def part1(data: str) -> int:
    """Count how many times a beam is split."""
    grid = parse_manifold(data)
    if not grid:
        raise ValueError("empty manifold")
    width = len(grid[0])
    beams = [False] * width
    splits = 0
    for row in grid:
        for idx, cell in enumerate(row):
            if cell is Cell.START:
                beams[idx] = True
            elif cell is Cell.SPLITTER:
                if beams[idx]:
                    splits += 1
                    beams[idx] = False
                if idx > 0:
                    beams[idx - 1] = True
                if idx + 1 < width:
                    beams[idx + 1] = True
    return splits


def part2(data: str) -> int:
    """Count the distinct timelines a single particle can take."""
    grid = parse_manifold(data)
    if not grid or Cell.START not in grid[0]:
        raise ValueError("no start in the first row")
    timelines = Counter({grid[0].index(Cell.START): 1})
    for row in grid:
        following: Counter[int] = Counter()
        for col, count in timelines.items():
            if not 0 <= col < len(row):
                raise ValueError(f"beam leaves the manifold at column {col}")
            if row[col] is Cell.SPLITTER:
                following[col - 1] += count
                following[col + 1] += count
            else:
                following[col] += count
        timelines = following
    return sum(timelines.values())