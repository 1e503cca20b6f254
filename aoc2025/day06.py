"""Day 6: solving the cephalopod maths worksheet."""

from __future__ import annotations

import math
from enum import Enum


class Op(Enum):
    """Operator written under a problem."""

    MUL = "*"
    ADD = "+"

    def apply(self, numbers: list[int]) -> int:
        """Combine the numbers with this operator."""
        return math.prod(numbers) if self is Op.MUL else sum(numbers)


def _lines(data: str) -> list[str]:
    lines = data.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    if len(lines) < 2:
        raise ValueError("worksheet needs number rows and an operator row")
    return lines


def _is_number(text: str) -> bool:
    return text.isascii() and text.isdigit()


def parse_worksheet(data: str) -> tuple[list[list[int]], list[Op]]:
    """Parse rows of numbers and the final row of operators."""
    *number_lines, op_line = _lines(data)
    rows = []
    for line in number_lines:
        tokens = line.split()
        if not tokens or not all(_is_number(token) for token in tokens):
            raise ValueError(f"invalid number row: {line!r}")
        rows.append([int(token) for token in tokens])
    try:
        ops = [Op(token) for token in op_line.split()]
    except ValueError:
        raise ValueError(f"invalid operator row: {op_line!r}") from None
    if not ops:
        raise ValueError("operator row is empty")
    return rows, ops


def part1(data: str) -> int:
    """Sum the answers of problems read row by row."""
    rows, ops = parse_worksheet(data)
    if any(len(row) < len(ops) for row in rows):
        raise ValueError("a number row has fewer entries than there are operators")
    return sum(op.apply([row[i] for row in rows]) for i, op in enumerate(ops))


def part2(data: str) -> int:
    """Sum the answers of problems whose numbers are read down each column."""
    *number_lines, op_line = _lines(data)
    width = max(len(line) for line in number_lines)
    current: str | None = None
    running = 0
    total = 0
    for col in range(width):
        digits = "".join(line[col] if col < len(line) else " " for line in number_lines).strip()
        number = int(digits) if _is_number(digits) else None
        symbol = op_line[col] if col < len(op_line) else " "
        if symbol == "*":
            current = "*"
            total += running
            running = 1 if number is None else number
        elif symbol == "+":
            current = "+"
            total += running
            running = 0 if number is None else number
        elif current == "*":
            running *= 1 if number is None else number
        elif current == "+":
            running += 0 if number is None else number
        else:
            raise ValueError("column appears before any operator")
    return total + running