"""Chronal coordinates: the largest closest-point area and the safe region."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

SAFE_LIMIT = 10_000


@dataclass(frozen=True)
class Dot:
    id: str
    x: int
    y: int
    extreme: bool = False


def parse_coordinate(line: str) -> tuple[int, int]:
    """Parse an 'x, y' coordinate."""
    x, y = line.split(",")
    return int(x), int(y)


def make_dots(coordinates: Iterable[tuple[int, int]]) -> list[Dot]:
    """Label coordinates from 'A' upwards and flag the extreme ones.

    A dot is extreme when no coordinate lies strictly diagonal to it.
    """
    coordinates = list(coordinates)
    return [
        Dot(
            id=chr(ord("A") + index),
            x=x,
            y=y,
            extreme=not any(cx != x and cy != y for cx, cy in coordinates),
        )
        for index, (x, y) in enumerate(coordinates)
    ]


def manhattan_distance(point: tuple[int, int], dot: Dot) -> int:
    """Manhattan distance between a point and a dot."""
    return abs(point[0] - dot.x) + abs(point[1] - dot.y)


def closest(point: tuple[int, int], dots: Sequence[Dot]) -> Dot | None:
    """Return the dot nearest to the point, or None on a tie for nearest."""
    if len(dots) < 2:
        raise ValueError("at least two dots are needed")
    ranked = sorted(dots, key=lambda dot: manhattan_distance(point, dot))
    nearest, runner_up = ranked[0], ranked[1]
    if manhattan_distance(point, nearest) == manhattan_distance(point, runner_up):
        return None
    return nearest


def _bounds(dots: Sequence[Dot]) -> tuple[range, range]:
    xs = [dot.x for dot in dots]
    ys = [dot.y for dot in dots]
    return range(min(xs), max(xs)), range(min(ys), max(ys))


def largest_finite_area(dots: Sequence[Dot]) -> tuple[Dot, int] | None:
    """Return the non-extreme dot owning the most cells inside the bounding box."""
    xs, ys = _bounds(dots)
    counts: Counter[Dot] = Counter(
        owner for x in xs for y in ys if (owner := closest((x, y), dots)) is not None
    )
    for dot, area in counts.most_common():
        if not dot.extreme:
            return dot, area
    return None


def safe_region_size(dots: Sequence[Dot], limit: int = SAFE_LIMIT) -> int:
    """Count bounding-box cells whose total distance to all dots is below the limit."""
    xs, ys = _bounds(dots)
    return sum(
        sum(manhattan_distance((x, y), dot) for dot in dots) < limit
        for x in xs
        for y in ys
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Measure areas around coordinates.")
    parser.add_argument("input", nargs="?", default="input", type=Path)
    args = parser.parse_args(argv)
    lines = args.input.read_text().splitlines()
    dots = make_dots(parse_coordinate(line) for line in lines if line.strip())
    largest = largest_finite_area(dots)
    if largest is not None:
        dot, area = largest
        print(f"{area} {dot.id}")
    print(f"area: {safe_region_size(dots)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())