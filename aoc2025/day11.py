"""Day 11: counting paths through a network of devices."""

from __future__ import annotations

import re

_LINE = re.compile(r"([A-Za-z]+): ([A-Za-z]+(?: +[A-Za-z]+)*)")


def parse_line(line: str) -> tuple[str, list[str]]:
    """Parse ``name: out1 out2 ...`` into the device and its outputs."""
    match = _LINE.fullmatch(line.strip())
    if match is None:
        raise ValueError(f"invalid device line: {line!r}")
    return match[1], match[2].split()


def parse_devices(data: str) -> dict[str, list[str]]:
    """Parse every line into a mapping of device to its outputs."""
    devices = dict(parse_line(line) for line in data.strip().splitlines())
    if not devices:
        raise ValueError("no devices in input")
    return devices


def part1(data: str) -> int:
    """Count the paths from ``you`` to ``out``."""
    devices = parse_devices(data)
    counts: dict[str, int] = {}
    active: set[str] = set()

    def paths_from(node: str) -> int:
        if node == "out":
            return 1
        if node in counts:
            return counts[node]
        if node in active:
            raise ValueError(f"cycle through device {node!r}")
        if node not in devices:
            raise ValueError(f"device {node!r} has no outputs listed")
        active.add(node)
        total = sum(paths_from(output) for output in devices[node])
        active.discard(node)
        counts[node] = total
        return total

    return paths_from("you")


def part2(data: str) -> int:
    """Count the paths from ``svr`` to ``out`` that pass both ``fft`` and ``dac``."""
    devices = parse_devices(data)
    cache: dict[tuple[str, bool, bool], int] = {}
    visiting: set[str] = set()

    def paths_from(node: str, has_fft: bool, has_dac: bool) -> int:
        has_fft = has_fft or node == "fft"
        has_dac = has_dac or node == "dac"
        if node == "out":
            return int(has_fft and has_dac)
        key = (node, has_fft, has_dac)
        if key in cache:
            return cache[key]
        if node in visiting:
            return 0
        visiting.add(node)
        total = sum(
            paths_from(output, has_fft, has_dac) for output in devices.get(node, ())
        )
        visiting.discard(node)
        cache[key] = total
        return total

    return paths_from("svr", False, False)