"""Fabric claims: overlapping square inches and claims that overlap nothing."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

FABRIC_SIZE = 1000

_CLAIM = re.compile(r"#\s*(\d+)\s*@\s*(\d+)\s*,\s*(\d+)\s*:\s*(\d+)\s*x\s*(\d+)\s*")


@dataclass(frozen=True)
class Claim:
    id: int
    x: int
    y: int
    width: int
    height: int

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield every square inch the claim covers."""
        for i in range(self.x, self.x + self.width):
            for j in range(self.y, self.y + self.height):
                yield i, j


def parse_claim(line: str) -> Claim:
    """Parse a claim of the form '#id @ x,y: WxH'."""
    match = _CLAIM.fullmatch(line.strip())
    if match is None:
        raise ValueError(f"invalid claim: {line!r}")
    return Claim(*map(int, match.groups()))


def build_fabric(claims: Iterable[Claim]) -> dict[tuple[int, int], list[int]]:
    """Map each claimed square inch to the ids of the claims covering it."""
    fabric: dict[tuple[int, int], list[int]] = {}
    for claim in claims:
        if claim.x + claim.width > FABRIC_SIZE or claim.y + claim.height > FABRIC_SIZE:
            raise ValueError(f"claim #{claim.id} lies outside the fabric")
        for cell in claim.cells():
            fabric.setdefault(cell, []).append(claim.id)
    return fabric


def overlap_count(claims: Iterable[Claim]) -> int:
    """Count the square inches covered by more than one claim."""
    return sum(len(ids) > 1 for ids in build_fabric(claims).values())


def intact_claims(claims: Iterable[Claim]) -> list[int]:
    """Return, sorted, the ids of claims that cover area and share none of it."""
    intact: dict[int, bool] = {}
    for ids in build_fabric(claims).values():
        if len(ids) == 1:
            intact.setdefault(ids[0], True)
        else:
            intact.update(dict.fromkeys(ids, False))
    return sorted(claim_id for claim_id, ok in intact.items() if ok)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find overlapping fabric claims.")
    parser.add_argument("input", nargs="?", default="input", type=Path)
    args = parser.parse_args(argv)
    claims = [parse_claim(line) for line in args.input.read_text().splitlines()]
    print(f"overlap: {overlap_count(claims)}")
    print(" ".join(str(claim_id) for claim_id in intact_claims(claims)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())