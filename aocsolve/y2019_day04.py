"""Password search: six-digit numbers with paired, never-decreasing digits."""

from __future__ import annotations

import argparse
from itertools import groupby, pairwise

PUZZLE_RANGE = (246515, 739105)
_DIGITS = 6


def digits(number: int) -> tuple[int, ...]:
    """The six least significant decimal digits, most significant first."""
    return tuple((number // 10**power) % 10 for power in range(_DIGITS - 1, -1, -1))


def has_double(number: int) -> bool:
    """True when two adjacent digits are equal."""
    return any(a == b for a, b in pairwise(digits(number)))


def has_exact_pair(number: int) -> bool:
    """True when some run of equal adjacent digits is exactly two long."""
    return any(len(list(run)) == 2 for _, run in groupby(digits(number)))


def never_decreases(number: int) -> bool:
    """True when the digits never decrease from left to right."""
    return all(a <= b for a, b in pairwise(digits(number)))


def count_passwords(low: int, high: int, strict: bool = False) -> int:
    """Count candidates in [low, high); strict demands a pair not part of a longer run."""
    repeat = has_exact_pair if strict else has_double
    return sum(1 for n in range(low, high) if repeat(n) and never_decreases(n))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count possible passwords.")
    parser.add_argument("low", nargs="?", type=int, default=PUZZLE_RANGE[0])
    parser.add_argument("high", nargs="?", type=int, default=PUZZLE_RANGE[1])
    args = parser.parse_args(argv)
    print(count_passwords(args.low, args.high))
    print(count_passwords(args.low, args.high, strict=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())