"""Password policies: validity by letter count and by letter position."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Policy:
    low: int
    high: int
    letter: str
    password: str

    def valid_by_count(self) -> bool:
        """The letter occurs between low and high times, inclusive."""
        return self.low <= self.password.count(self.letter) <= self.high

    def valid_by_position(self) -> bool:
        """Exactly one of the 1-based positions low and high holds the letter."""
        for position in (self.low, self.high):
            if not 1 <= position <= len(self.password):
                raise ValueError(f"position {position} outside {self.password!r}")
        first = self.password[self.low - 1] == self.letter
        second = self.password[self.high - 1] == self.letter
        return first != second


def parse_policy(line: str) -> Policy:
    """Parse 'low-high letter: password'."""
    parts = line.split(" ")
    if len(parts) < 3 or not parts[1]:
        raise ValueError(f"invalid policy: {line!r}")
    bounds = [int(bound) for bound in parts[0].split("-") if bound]
    if len(bounds) < 2:
        raise ValueError(f"invalid bounds: {line!r}")
    return Policy(bounds[0], bounds[1], parts[1][0], parts[2])


def count_valid(lines: Iterable[str], rule: Callable[[Policy], bool]) -> int:
    """Count lines whose policy satisfies the rule; lines that do not parse are skipped."""
    count = 0
    for line in lines:
        try:
            policy = parse_policy(line)
        except ValueError:
            continue
        count += bool(rule(policy))
    return count


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check passwords against their policies.")
    parser.add_argument("input", nargs="?", default="input", type=Path)
    args = parser.parse_args(argv)
    lines = args.input.read_text().splitlines()
    print(count_valid(lines, Policy.valid_by_count))
    print(count_valid(lines, Policy.valid_by_position))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())