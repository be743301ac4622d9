"""Frequency drift: the resulting frequency and the first one reached twice."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from itertools import accumulate, cycle
from pathlib import Path


def parse_changes(lines: Iterable[str]) -> list[int]:
    """Parse one signed integer change per line."""
    return [int(line) for line in lines]


def total_frequency(changes: Iterable[int]) -> int:
    """Return the frequency after applying every change once, starting at zero."""
    return sum(changes)


def first_repeated_frequency(changes: Iterable[int]) -> int:
    """Return the first frequency reached twice while cycling through the changes.

    The starting frequency of zero only counts once a change has produced it.
    """
    changes = list(changes)
    if not changes:
        raise ValueError("no frequency changes given")
    seen: set[int] = set()
    for frequency in accumulate(cycle(changes)):
        if frequency in seen:
            return frequency
        seen.add(frequency)
    raise AssertionError("unreachable")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Calibrate the device frequency.")
    parser.add_argument("input", nargs="?", default="input", type=Path)
    args = parser.parse_args(argv)
    changes = parse_changes(args.input.read_text().splitlines())
    print(total_frequency(changes))
    print(f"Freq: {first_repeated_frequency(changes)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())