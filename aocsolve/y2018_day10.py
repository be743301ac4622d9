"""Moving lights: step the points until they spell a message."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass, replace
from pathlib import Path

MAX_WIDTH = 159
MAX_HEIGHT = 44

_NUMBER = re.compile(r"-?\d+")


@dataclass(frozen=True)
class Point:
    x: int
    y: int
    vx: int
    vy: int

    def step(self) -> Point:
        """Return the point one second later."""
        return replace(self, x=self.x + self.vx, y=self.y + self.vy)

    def distance(self, other: Point) -> int:
        """Manhattan distance between the two positions."""
        return abs(self.x - other.x) + abs(self.y - other.y)


def parse_point(line: str) -> Point:
    """Parse 'position=<x, y> velocity=<vx, vy>'."""
    numbers = [int(n) for n in _NUMBER.findall(line)]
    if len(numbers) != 4:
        raise ValueError(f"invalid point: {line!r}")
    return Point(*numbers)


def render(
    points: Iterable[Point], max_width: int = MAX_WIDTH, max_height: int = MAX_HEIGHT
) -> str | None:
    """Draw the points with '#', one line per occupied row.

    Returns None when the points spread wider or taller than the limits.
    """
    points = list(points)
    if not points:
        raise ValueError("no points to render")
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    min_x = min(xs)
    if max(xs) - min_x > max_width or max(ys) - min(ys) > max_height:
        return None
    rows: dict[int, set[int]] = {}
    for p in points:
        rows.setdefault(p.y, set()).add(p.x)
    return "\n".join(
        "".join("#" if x in rows[y] else " " for x in range(min_x, max(rows[y]) + 1))
        for y in sorted(rows)
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Show the lights whenever they are close; type 'quit' to stop."
    )
    parser.add_argument("input", nargs="?", default="input", type=Path)
    args = parser.parse_args(argv)
    points = [parse_point(line) for line in args.input.read_text().splitlines() if line.strip()]
    seconds = 0
    while True:
        picture = render(points)
        if picture is not None:
            print("===")
            print(picture)
            answer = sys.stdin.readline()
            if not answer or "quit" in answer:
                break
        points = [p.step() for p in points]
        seconds += 1
    print(f"Total time: {seconds}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())