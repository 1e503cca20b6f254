"""Day 4: finding paper rolls a forklift can reach."""

from __future__ import annotations

from enum import Enum

Position = tuple[int, int]

NEIGHBOURS = (
    (-1, 0),
    (0, -1),
    (1, 0),
    (0, 1),
    (1, 1),
    (-1, -1),
    (-1, 1),
    (1, -1),
)


class Tile(Enum):
    """What occupies a grid cell."""

    FLOOR = "."
    PAPER = "@"


def parse_grid(data: str) -> dict[Position, Tile]:
    """Parse the map into a dict keyed by (x, y)."""
    grid = {}
    for y, line in enumerate(data.splitlines()):
        for x, char in enumerate(line):
            try:
                grid[(x, y)] = Tile(char)
            except ValueError:
                raise ValueError(f"unknown map character: {char!r}") from None
    return grid


def accessible_rolls(grid: dict[Position, Tile]) -> list[Position]:
    """Positions of paper rolls with fewer than four paper neighbours."""
    def paper_neighbours(x: int, y: int) -> int:
        return sum(grid.get((x + dx, y + dy)) is Tile.PAPER for dx, dy in NEIGHBOURS)

    return [
        pos
        for pos, tile in grid.items()
        if tile is Tile.PAPER and paper_neighbours(*pos) < 4
    ]


def part1(data: str) -> int:
    """Count rolls that are accessible right away."""
    return len(accessible_rolls(parse_grid(data)))


def part2(data: str) -> int:
    """Count rolls removed by repeatedly taking every accessible roll."""
    grid = parse_grid(data)
    removed = 0
    while reachable := accessible_rolls(grid):
        for pos in reachable:
            grid[pos] = Tile.FLOOR
        removed += len(reachable)
    return removed