import pytest

from aoc2025.day07 import Cell, parse_manifold, part1, part2

SAMPLE = """\
.......S.......
...............
.......^.......
...............
......^.^......
...............
.....^.^.^.....
...............
....^.^...^....
...............
...^.^...^.^...
...............
..^...^.....^..
...............
.^.^.^.^.^...^.
...............
"""


def test_part1_sample():
    assert part1(SAMPLE) == 21


def test_part2_sample():
    assert part2(SAMPLE) == 40


def test_part2_two_splitters():
    data = """\
.......S.......
...............
.......^.......
...............
......^........
..............."""
    assert part2(data) == 3


def test_part2_three_splitters():
    data = """\
.......S.......
...............
.......^.......
...............
......^.^......
..............."""
    assert part2(data) == 4


def test_part2_four_splitters():
    data = """\
.......S.......
...............
.......^.......
...............
......^.^......
.....^........."""
    assert part2(data) == 5


def test_part2_four_splitters_shared():
    data = """\
.......S.......
...............
.......^.......
...............
......^.^......
.......^......."""
    assert part2(data) == 6


def test_parse_manifold():
    assert parse_manifold("S.\n^.") == [
        [Cell.START, Cell.EMPTY],
        [Cell.SPLITTER, Cell.EMPTY],
    ]


def test_parse_rejects_unknown_character():
    with pytest.raises(ValueError):
        parse_manifold("S.x")


def test_part1_splitter_at_edge():
    assert part1("S\n^") == 1


def test_part2_without_start():
    with pytest.raises(ValueError):
        part2("...\n.^.")


def test_part2_beam_leaving_manifold():
    with pytest.raises(ValueError):
        part2("S\n^")