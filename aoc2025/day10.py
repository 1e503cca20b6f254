"""Day 10: starting factory machines with the fewest button presses."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

_LINE = re.compile(r"\[([.#]+)\]((?:\s*\(\d+(?:,\d+)*\))+)\s*\{(\d+(?:,\d+)*)\}")
_BUTTON = re.compile(r"\((\d+(?:,\d+)*)\)")


@dataclass(frozen=True)
class Machine:
    """Indicator light diagram, button wirings and joltage requirements."""

    lights: tuple[bool, ...]
    buttons: tuple[tuple[int, ...], ...]
    joltages: tuple[int, ...]


def _numbers(text: str) -> tuple[int, ...]:
    return tuple(int(part) for part in text.split(","))


def parse_machines(data: str) -> list[Machine]:
    """Parse one machine per line, e.g. ``[.##.] (3) (1,3) {3,5,4,7}``."""
    machines = []
    for line in data.strip().splitlines():
        match = _LINE.fullmatch(line.strip())
        if match is None:
            raise ValueError(f"invalid machine: {line!r}")
        lights = tuple(char == "#" for char in match[1])
        buttons = tuple(_numbers(group) for group in _BUTTON.findall(match[2]))
        machines.append(Machine(lights, buttons, _numbers(match[3])))
    if not machines:
        raise ValueError("no machines in input")
    return machines


def _check_wiring(buttons: Sequence[Sequence[int]], size: int) -> None:
    for button in buttons:
        for index in button:
            if not 0 <= index < size:
                raise ValueError(f"button {tuple(button)} wired to missing index {index}")


def fewest_toggle_presses(lights: Sequence[bool], buttons: Sequence[Sequence[int]]) -> int:
    """Fewest presses that toggle all-off lights into the wanted pattern; 0 if impossible."""
    _check_wiring(buttons, len(lights))
    target = sum(1 << i for i, on in enumerate(lights) if on)
    masks = {sum(1 << i for i in set(button)) for button in buttons}
    frontier = {0}
    seen = {0}
    presses = 0
    while frontier:
        if target in frontier:
            return presses
        presses += 1
        frontier = {state ^ mask for state in frontier for mask in masks} - seen
        seen |= frontier
    return 0


def fewest_joltage_presses(joltages: Sequence[int], buttons: Sequence[Sequence[int]]) -> int:
    """Fewest presses that raise all-zero counters to the wanted joltages; 0 if impossible."""
    _check_wiring(buttons, len(joltages))
    target = tuple(joltages)
    start = (0,) * len(target)
    frontier = {start}
    seen = {start}
    presses = 0
    while frontier:
        if target in frontier:
            return presses
        presses += 1
        following = set()
        for state in frontier:
            for button in buttons:
                counters = list(state)
                for index in button:
                    counters[index] += 1
                candidate = tuple(counters)
                if candidate in seen:
                    continue
                if any(value > wanted for value, wanted in zip(candidate, target)):
                    continue
                following.add(candidate)
        seen |= following
        frontier = following
    return 0


def part1(data: str) -> int:
    """Total presses needed to configure every machine's indicator lights."""
    return sum(fewest_toggle_presses(m.lights, m.buttons) for m in parse_machines(data))


def part2(data: str) -> int:
    """Total presses needed to reach every machine's joltage requirements."""
    return sum(fewest_joltage_presses(m.joltages, m.buttons) for m in parse_machines(data))