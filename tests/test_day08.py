import pytest

from aoc2025.day08 import pairs_by_distance, parse_boxes, part1, part2

SAMPLE = """\
162,817,812
57,618,57
906,360,560
592,479,940
352,342,300
466,668,158
542,29,236
431,825,988
739,650,466
52,470,668
216,146,977
819,987,18
117,168,530
805,96,715
346,949,466
970,615,88
941,993,340
862,61,35
984,92,344
425,690,689
"""


def test_part1_sample():
    assert part1(SAMPLE, 10) == 40


def test_part2_sample():
    assert part2(SAMPLE, 10) == 25272


def test_parse_boxes():
    assert parse_boxes("1,2,3\n40,50,60\n") == [(1, 2, 3), (40, 50, 60)]


def test_parse_rejects_bad_line():
    with pytest.raises(ValueError):
        parse_boxes("1,2\n")


def test_pairs_by_distance_sorted():
    pairs = pairs_by_distance(parse_boxes(SAMPLE))
    assert len(pairs) == 190
    distances = [d for d, _, _ in pairs]
    assert distances == sorted(distances)
    assert {pairs[0][1], pairs[0][2]} == {(162, 817, 812), (425, 690, 689)}


def test_pairs_by_distance_values():
    assert pairs_by_distance([(0, 0, 0), (1, 2, 2)]) == [(9, (0, 0, 0), (1, 2, 2))]


def test_part1_too_few_circuits():
    with pytest.raises(ValueError):
        part1("0,0,0\n1,1,1\n", 1)


def test_part2_single_box():
    assert part2("5,5,5\n", 1) == 0


def test_part2_two_boxes():
    assert part2("3,0,0\n7,0,0\n", 1) == 21