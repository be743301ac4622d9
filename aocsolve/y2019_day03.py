"""Crossed wires: the intersection nearest the origin and the one reached soonest."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

_COUNT = re.compile(r"\d+")


class Direction(Enum):
    U = (0, 1)
    R = (1, 0)
    D = (0, -1)
    L = (-1, 0)


@dataclass(frozen=True)
class Move:
    direction: Direction
    steps: int


def parse_move(text: str) -> Move:
    """Parse a move such as 'R75'."""
    text = text.strip()
    try:
        direction = Direction[text[:1]]
    except KeyError:
        raise ValueError(f"invalid direction: {text!r}") from None
    if not _COUNT.fullmatch(text[1:]):
        raise ValueError(f"invalid step count: {text!r}")
    return Move(direction, int(text[1:]))


def parse_wire(line: str) -> list[Move]:
    """Parse a comma-separated path of moves."""
    return [parse_move(part) for part in line.split(",")]


def trace_wire(moves: Iterable[Move]) -> dict[tuple[int, int], int]:
    """Map every position the wire visits to the step count of its first visit."""
    visited: dict[tuple[int, int], int] = {}
    x = y = steps = 0
    for move in moves:
        dx, dy = move.direction.value
        for _ in range(move.steps):
            x, y, steps = x + dx, y + dy, steps + 1
            visited.setdefault((x, y), steps)
    return visited


def _crossings(
    wires: Iterable[Sequence[Move]],
) -> tuple[list[dict[tuple[int, int], int]], set[tuple[int, int]]]:
    traces = [trace_wire(wire) for wire in wires]
    if not traces:
        return traces, set()
    return traces, set(traces[0]).intersection(*traces[1:])


def closest_intersection(wires: Iterable[Sequence[Move]]) -> int | None:
    """Manhattan distance from the origin to the nearest crossing, or None."""
    _, common = _crossings(wires)
    return min((abs(x) + abs(y) for x, y in common), default=None)


def fewest_combined_steps(wires: Iterable[Sequence[Move]]) -> int | None:
    """Fewest steps, summed over all wires, to reach a crossing, or None."""
    traces, common = _crossings(wires)
    return min((sum(trace[p] for trace in traces) for p in common), default=None)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find where the wires cross.")
    parser.add_argument("input", nargs="?", type=Path, help="read standard input if absent")
    args = parser.parse_args(argv)
    text = args.input.read_text() if args.input else sys.stdin.read()
    wires = [parse_wire(line) for line in text.splitlines() if line.strip()]
    print(closest_intersection(wires))
    print(fewest_combined_steps(wires))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())