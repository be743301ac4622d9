"""Fuel cell grid: the square of any size with the most power."""

from __future__ import annotations

import argparse

GRID_SIZE = 300


def _truncating_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def power_level(x: int, y: int, serial: int) -> int:
    """Power of the fuel cell at (x, y) for a grid serial number."""
    rack_id = x + 10
    value = (rack_id * y + serial) * rack_id
    hundreds = _truncating_div(value, 100) - _truncating_div(value, 1000) * 10
    return hundreds - 5


def power_grid(serial: int) -> list[list[int]]:
    """All cell powers; grid[x - 1][y - 1] is the power at (x, y)."""
    return [
        [power_level(x, y, serial) for y in range(1, GRID_SIZE + 1)]
        for x in range(1, GRID_SIZE + 1)
    ]


def _summed_area(grid: list[list[int]]) -> list[list[int]]:
    size = len(grid)
    table = [[0] * (size + 1) for _ in range(size + 1)]
    for x in range(1, size + 1):
        row, previous, running = table[x], table[x - 1], 0
        for y in range(1, size + 1):
            running += grid[x - 1][y - 1]
            row[y] = previous[y] + running
    return table


def best_square(serial: int) -> tuple[int, int, int, int]:
    """Return (power, x, y, size) of the most powerful square.

    Ties go to the smallest x, then y, then size.
    """
    table = _summed_area(power_grid(serial))
    best: tuple[int, int, int, int] | None = None
    for size in range(1, GRID_SIZE + 1):
        for x in range(1, GRID_SIZE - size + 2):
            top, bottom = table[x + size - 1], table[x - 1]
            sums = [a - b - c + d for a, b, c, d in zip(top[size:], bottom[size:], top, bottom)]
            peak = max(sums)
            candidate = (peak, -x, -(sums.index(peak) + 1), -size)
            if best is None or candidate > best:
                best = candidate
    assert best is not None
    power, x, y, size = best
    return power, -x, -y, -size


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the most powerful fuel square.")
    parser.add_argument("serial", type=int)
    args = parser.parse_args(argv)
    power, x, y, size = best_square(args.serial)
    print(f"{power}, {x}, {y}, {size}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())