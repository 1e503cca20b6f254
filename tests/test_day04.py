import pytest

from aoc2025.day04 import Tile, accessible_rolls, parse_grid, part1, part2

BLOCK = "@@@\n@@@\n@@@"


def test_parse_grid():
    assert parse_grid(".@") == {(0, 0): Tile.FLOOR, (1, 0): Tile.PAPER}


def test_parse_grid_rejects_unknown():
    with pytest.raises(ValueError):
        parse_grid(".#")


def test_accessible_rolls_are_corners():
    assert sorted(accessible_rolls(parse_grid(BLOCK))) == [
        (0, 0),
        (0, 2),
        (2, 0),
        (2, 2),
    ]


def test_part1_block():
    assert part1(BLOCK) == 4


def test_part1_empty_floor():
    assert part1("...\n...") == 0


def test_part2_clears_block():
    assert part2(BLOCK) == 9


def test_part2_single_roll():
    assert part2("@") == 1