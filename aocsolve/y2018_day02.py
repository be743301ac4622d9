"""Box identifiers: a checksum of letter repeats and the common letters of near twins."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Iterable
from pathlib import Path


def letter_repeats(box_id: str) -> tuple[int, int]:
    """Return (1 if some letter appears exactly twice, 1 if some letter appears exactly thrice)."""
    counts = set(Counter(box_id).values())
    return int(2 in counts), int(3 in counts)


def checksum(ids: Iterable[str]) -> int:
    """Multiply the number of ids with a doubled letter by those with a tripled letter."""
    twos = threes = 0
    for box_id in ids:
        two, three = letter_repeats(box_id)
        twos += two
        threes += three
    return twos * threes


def differ_by_one(a: str, b: str) -> bool:
    """True when the ids have equal length and differ in at most one position."""
    if len(a) != len(b):
        return False
    return sum(x != y for x, y in zip(a, b)) < 2


def common_letters(a: str, b: str) -> str:
    """Return the letters that match at the same position in both ids."""
    return "".join(x for x, y in zip(a, b) if x == y)


def find_common_id(ids: Iterable[str]) -> str:
    """Return the common letters of the first id that nearly matches an earlier one."""
    earlier: list[str] = []
    for box_id in ids:
        match = next((other for other in earlier if differ_by_one(box_id, other)), None)
        if match is not None:
            return common_letters(match, box_id)
        earlier.append(box_id)
    return ""


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Inventory box identifiers.")
    parser.add_argument("input", nargs="?", default="input", type=Path)
    args = parser.parse_args(argv)
    ids = args.input.read_text().splitlines()
    print(checksum(ids))
    print(f"common: {find_common_id(ids)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())