"""Day 8: wiring junction boxes into circuits, closest pairs first."""

from __future__ import annotations

import math
import re
from itertools import combinations

Point = tuple[int, int, int]

_BOX = re.compile(r"(\d+),(\d+),(\d+)")


def parse_boxes(data: str) -> list[Point]:
    """Parse lines of ``x,y,z`` into coordinates."""
    boxes = []
    for line in data.strip().splitlines():
        match = _BOX.fullmatch(line.strip())
        if match is None:
            raise ValueError(f"invalid junction box: {line!r}")
        boxes.append((int(match[1]), int(match[2]), int(match[3])))
    return boxes


def pairs_by_distance(boxes: list[Point]) -> list[tuple[int, Point, Point]]:
    """All pairs as (squared distance, a, b), closest first."""
    pairs = [
        (sum((p - q) ** 2 for p, q in zip(a, b)), a, b)
        for a, b in combinations(boxes, 2)
    ]
    pairs.sort(key=lambda pair: pair[0])
    return pairs


class _Circuits:
    """Circuits of boxes; each box starts in its own circuit."""

    def __init__(self, boxes: list[Point]) -> None:
        self.members: dict[int, set[Point]] = {}
        self.owner: dict[Point, int] = {}
        for ident, box in enumerate(boxes):
            self.members[ident] = {box}
            self.owner.setdefault(box, ident)

    def connect(self, a: Point, b: Point) -> None:
        first, second = self.owner[a], self.owner[b]
        if first == second:
            return
        if len(self.members[first]) < len(self.members[second]):
            first, second = second, first
        moved = self.members.pop(second)
        self.members[first] |= moved
        for box in moved:
            self.owner[box] = first

    def __len__(self) -> int:
        return len(self.members)

    def sizes(self) -> list[int]:
        return sorted(len(group) for group in self.members.values())


def part1(data: str, connections: int) -> int:
    """Multiply the sizes of the three largest circuits after some connections."""
    boxes = parse_boxes(data)
    circuits = _Circuits(boxes)
    for _, a, b in pairs_by_distance(boxes)[:connections]:
        circuits.connect(a, b)
    sizes = circuits.sizes()
    if len(sizes) < 3:
        raise ValueError("fewer than three circuits remain")
    return math.prod(sizes[-3:])


def part2(data: str, connections: int) -> int:
    """Multiply the x coordinates of the pair that joins everything into one circuit."""
    boxes = parse_boxes(data)
    circuits = _Circuits(boxes)
    for _, a, b in pairs_by_distance(boxes):
        circuits.connect(a, b)
        if len(circuits) == 1:
            return a[0] * b[0]
    return 0