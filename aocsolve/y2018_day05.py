"""Polymer reactions: adjacent units differing only by case annihilate."""

from __future__ import annotations

import argparse
from pathlib import Path

_CASE_GAP = 32


def _reacts(a: str, b: str) -> bool:
    return abs(ord(a) - ord(b)) == _CASE_GAP


def react(polymer: str) -> str:
    """Return the polymer after every possible reaction has taken place."""
    stack: list[str] = []
    for unit in polymer:
        if stack and _reacts(stack[-1], unit):
            stack.pop()
        else:
            stack.append(unit)
    return "".join(stack)


def reacted_length(polymer: str) -> int:
    """Return how many units remain after full reaction."""
    return len(react(polymer))


def shortest_improved_length(polymer: str) -> int:
    """Shortest fully reacted length after removing one unit type, A through Y."""
    lengths = []
    for code in range(ord("A"), ord("Z")):
        removed = "".join(
            unit for unit in polymer if ord(unit) != code and ord(unit) - _CASE_GAP != code
        )
        lengths.append(reacted_length(removed))
    return min(lengths)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Reduce a polymer.")
    parser.add_argument("input", nargs="?", default="input", type=Path)
    args = parser.parse_args(argv)
    lines = args.input.read_text().splitlines()
    polymer = lines[0].strip() if lines else ""
    print(reacted_length(polymer))
    print(shortest_improved_length(polymer))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())