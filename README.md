# aoc2025

Solutions to the 2025 Advent of Code puzzles, days 2 to 11. Each day lives in
its own module (`aoc2025.day02` to `aoc2025.day11`). Each module has a parser
for that day's input and two functions, `part1` and `part2`, that take the
puzzle input as text and return the answer as an integer.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Usage

```python
from aoc2025 import day02, day08

with open("input.txt") as handle:
    text = handle.read()

print(day02.part1(text))
print(day02.part2(text))

# Day 8 also takes the number of closest pairs to connect.
print(day08.part1(text, 1000))
print(day08.part2(text, 1000))
```

## What each day covers

| Module  | Puzzle input                                   | Parser              |
|---------|------------------------------------------------|---------------------|
| day02   | comma-separated ID ranges such as `11-22`      | `parse_ranges`      |
| day03   | rows of battery joltage digits                 | `parse_banks`       |
| day04   | a grid of paper rolls (`@`) and floor (`.`)    | `parse_grid`        |
| day05   | fresh ID ranges, a blank line, then IDs        | `parse_inventory`   |
| day06   | a column-wise arithmetic worksheet             | `parse_worksheet`   |
| day07   | a tachyon manifold with a start and splitters  | `parse_manifold`    |
| day08   | 3D junction box coordinates                    | `parse_boxes`       |
| day09   | red tile coordinates forming a polygon         | `parse_tiles`       |
| day10   | machines with lights, buttons and joltages     | `parse_machines`    |
| day11   | a device graph, one `name: outputs` per line   | `parse_devices`     |

Some modules expose further helpers:

- `day04.accessible_rolls(grid)` lists the rolls with fewer than four paper
  neighbours; `day04.Tile` is the cell type.
- `day05.merge_ranges(ranges)` merges overlapping `range` objects.
- `day06.Op` is the operator type, with `Op.apply(numbers)`.
- `day07.Cell` is the manifold cell type.
- `day08.pairs_by_distance(boxes)` returns every pair with its squared
  distance, closest first. `day08.part2` ignores its `connections` argument
  and returns 0 if the boxes never join into one circuit.
- `day09.part2` uses shapely to test which rectangles lie inside the tile loop.
- `day10.Machine` holds one parsed machine;
  `day10.fewest_toggle_presses(lights, buttons)` and
  `day10.fewest_joltage_presses(joltages, buttons)` solve a single machine and
  return 0 when the target cannot be reached.
- `day11.parse_line(line)` parses one device line.

Malformed input raises `ValueError` rather than producing an answer.

## What this package does not do

- It has no solution for day 1.
- It has no command-line program: read the puzzle input yourself and call the
  functions from Python. It does not download puzzle inputs.