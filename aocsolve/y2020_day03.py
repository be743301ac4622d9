"""Toboggan slopes: trees hit on a map that repeats to the right."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path


class Tile(IntEnum):
    SPACE = 0
    TREE = 1

    @classmethod
    def from_char(cls, char: str) -> Tile:
        """Read '#' as a tree and '.' as open space."""
        if char == "#":
            return cls.TREE
        if char == ".":
            return cls.SPACE
        raise ValueError(f"invalid tile: {char!r}")


@dataclass(frozen=True)
class Slope:
    right: int
    down: int


SLOPES = (Slope(1, 1), Slope(3, 1), Slope(5, 1), Slope(7, 1), Slope(1, 2))


@dataclass(frozen=True)
class TreeMap:
    rows: tuple[tuple[Tile, ...], ...]

    def __len__(self) -> int:
        return len(self.rows)

    def tile(self, row: int, column: int) -> Tile:
        """The tile at a position; rows and columns both wrap around."""
        line = self.rows[row % len(self.rows)]
        return line[column % len(line)]


def parse_map(lines: Iterable[str]) -> TreeMap:
    """Build a map from lines of '#' and '.'; blank or unreadable lines are skipped."""
    rows = []
    for line in lines:
        try:
            row = tuple(Tile.from_char(char) for char in line)
        except ValueError:
            continue
        if row:
            rows.append(row)
    return TreeMap(tuple(rows))


def count_trees(tree_map: TreeMap, slope: Slope) -> int:
    """Trees met going from the top left corner down to the bottom along a slope."""
    if slope.down < 1 or slope.right < 0:
        raise ValueError(f"slope must move down and not left: {slope}")
    return sum(
        tree_map.tile(row, step * slope.right)
        for step, row in enumerate(range(0, len(tree_map), slope.down))
    )


def slope_product(tree_map: TreeMap, slopes: Iterable[Slope] = SLOPES) -> int:
    """Product of the trees met on each slope."""
    return math.prod(count_trees(tree_map, slope) for slope in slopes)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count trees on the toboggan slopes.")
    parser.add_argument("input", nargs="?", default="input", type=Path)
    args = parser.parse_args(argv)
    tree_map = parse_map(args.input.read_text().splitlines())
    print(slope_product(tree_map))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())