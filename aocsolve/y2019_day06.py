"""Orbit map: the total number of orbits and the transfers between two bodies."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Mapping
from pathlib import Path

YOU = "YOU"
SANTA = "SAN"


def parse_orbits(lines: Iterable[str]) -> dict[str, str]:
    """Map each body to the body it orbits, from 'PARENT)CHILD' lines."""
    orbits: dict[str, str] = {}
    for line in lines:
        parts = line.strip().split(")")
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"invalid orbit: {line!r}")
        parent, child = parts
        if child in orbits:
            raise ValueError(f"{child} orbits more than one body")
        orbits[child] = parent
    return orbits


def _check_single_tree(orbits: Mapping[str, str]) -> None:
    roots = set(orbits.values()) - set(orbits)
    if len(roots) != 1:
        raise ValueError(f"expected one centre of mass, found {len(roots)}")


def _ancestors(orbits: Mapping[str, str], body: str) -> list[str]:
    chain: list[str] = []
    seen = {body}
    while body in orbits:
        body = orbits[body]
        if body in seen:
            raise ValueError(f"orbit cycle through {body}")
        seen.add(body)
        chain.append(body)
    return chain


def total_orbits(orbits: Mapping[str, str]) -> int:
    """Sum of direct and indirect orbits over every body in the map."""
    _check_single_tree(orbits)
    depths: dict[str, int] = {}
    for body in orbits:
        chain = [body]
        current = body
        while current in orbits and current not in depths:
            current = orbits[current]
            chain.append(current)
            if len(chain) > len(orbits) + 1:
                raise ValueError(f"orbit cycle through {current}")
        depth = depths.get(current, 0)
        for node in reversed(chain[:-1]):
            depth += 1
            depths[node] = depth
    return sum(depths.values())


def transfer_count(orbits: Mapping[str, str], start: str = YOU, goal: str = SANTA) -> int:
    """Orbital transfers needed to move from what start orbits to what goal orbits.

    Returns 0 when one of the two bodies orbits the other, directly or not.
    """
    _check_single_tree(orbits)
    for body in (start, goal):
        if body not in orbits:
            raise ValueError(f"unknown body {body}")
    start_chain = _ancestors(orbits, start)
    goal_chain = _ancestors(orbits, goal)
    if goal in start_chain or start in goal_chain:
        return 0
    goal_index = {body: index for index, body in enumerate(goal_chain)}
    for index, body in enumerate(start_chain):
        if body in goal_index:
            return index + goal_index[body]
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count orbits in the map.")
    parser.add_argument("input", nargs="?", default="input", type=Path)
    args = parser.parse_args(argv)
    lines = [line for line in args.input.read_text().splitlines() if line.strip()]
    orbits = parse_orbits(lines)
    print(f"total orb: {total_orbits(orbits)}")
    print(transfer_count(orbits))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())