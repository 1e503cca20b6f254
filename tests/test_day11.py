import pytest

from aoc2025.day11 import parse_devices, parse_line, part1, part2

SAMPLE_1 = """\
aaa: you hhh
you: bbb ccc
bbb: ddd eee
ccc: ddd eee fff
ddd: ggg
eee: out
fff: out
ggg: out
hhh: ccc fff iii
iii: out
"""

SAMPLE_2 = """\
svr: aaa bbb
aaa: fft
fft: ccc
bbb: tty
tty: ccc
ccc: ddd eee
ddd: hub
hub: fff
eee: dac
dac: fff
fff: ggg hhh
ggg: out
hhh: out
"""


def test_part1_sample():
    assert part1(SAMPLE_1) == 5


def test_part2_sample():
    assert part2(SAMPLE_2) == 2


def test_parse_line():
    assert parse_line("aaa: you hhh") == ("aaa", ["you", "hhh"])


@pytest.mark.parametrize("line", ["aaa you", "aaa:", "a1: out", ": out"])
def test_parse_line_rejects_invalid(line):
    with pytest.raises(ValueError):
        parse_line(line)


def test_parse_devices_keys():
    devices = parse_devices(SAMPLE_1)
    assert len(devices) == 10
    assert devices["ccc"] == ["ddd", "eee", "fff"]


def test_part1_missing_device_raises():
    with pytest.raises(ValueError):
        part1("you: zzz")


def test_part1_missing_start_raises():
    with pytest.raises(ValueError):
        part1(SAMPLE_2)


def test_part2_without_server_is_zero():
    assert part2(SAMPLE_1) == 0


def test_part2_ignores_cycles():
    data = "svr: fft\nfft: dac\ndac: svr out"
    assert part2(data) == 1


def test_part2_requires_both_waypoints():
    assert part2("svr: fft\nfft: out") == 0