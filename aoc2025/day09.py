"""Day 9: largest rectangle with red tiles at opposite corners."""

from __future__ import annotations

import re
from itertools import combinations

from shapely.geometry import LineString, Point, Polygon, box
from shapely.prepared import prep

Tile = tuple[int, int]

_TILE = re.compile(r"(\d+),(\d+)")


def parse_tiles(data: str) -> list[Tile]:
    """Parse lines of ``x,y`` into tile coordinates."""
    tiles = []
    for line in data.strip().splitlines():
        match = _TILE.fullmatch(line.strip())
        if match is None:
            raise ValueError(f"invalid tile: {line!r}")
        tiles.append((int(match[1]), int(match[2])))
    return tiles


def _rectangles(tiles: list[Tile]) -> list[tuple[int, int, int, int, int]]:
    """(area, min_x, min_y, max_x, max_y) for every pair of tiles."""
    rects = []
    for (ax, ay), (bx, by) in combinations(tiles, 2):
        min_x, max_x = sorted((ax, bx))
        min_y, max_y = sorted((ay, by))
        area = (max_x - min_x + 1) * (max_y - min_y + 1)
        rects.append((area, min_x, min_y, max_x, max_y))
    if not rects:
        raise ValueError("at least two tiles are needed")
    return rects


def _shape(min_x: int, min_y: int, max_x: int, max_y: int):
    if min_x != max_x and min_y != max_y:
        return box(min_x, min_y, max_x, max_y)
    if min_x != max_x or min_y != max_y:
        return LineString([(min_x, min_y), (max_x, max_y)])
    return Point(min_x, min_y)


def part1(data: str) -> int:
    """Area of the largest rectangle spanned by two red tiles."""
    return max(rect[0] for rect in _rectangles(parse_tiles(data)))


def part2(data: str) -> int:
    """Area of the largest such rectangle lying inside the tile loop."""
    tiles = parse_tiles(data)
    rects = _rectangles(tiles)
    if len(tiles) < 3:
        raise ValueError("at least three tiles are needed to form a loop")
    region = prep(Polygon(tiles))
    for area, *bounds in sorted(rects, key=lambda rect: rect[0], reverse=True):
        if region.contains(_shape(*bounds)):
            return area
    raise ValueError("no rectangle fits inside the loop")