"""Rocket fuel: fuel for module masses, with and without fuel for the fuel."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from pathlib import Path


def fuel_for_mass(mass: int) -> int:
    """Fuel for a mass: a third of it, rounded down, minus two."""
    if mass < 0:
        raise ValueError("Bad number")
    fuel = mass // 3 - 2
    if fuel < 0:
        raise ValueError(f"mass {mass} is too small to need fuel")
    return fuel


def total_fuel_for_mass(mass: int) -> int:
    """Fuel for a mass, plus the fuel that fuel needs, until nothing more is needed."""
    if mass < 0:
        raise ValueError("Bad number")
    total = 0
    fuel = max(mass // 3 - 2, 0)
    while fuel:
        total += fuel
        fuel = max(fuel // 3 - 2, 0)
    return total


def _parse_masses(lines: Iterable[str]) -> list[int]:
    masses = []
    for line in lines:
        try:
            mass = int(line)
        except ValueError:
            raise ValueError("Bad number") from None
        if mass < 0:
            raise ValueError("Bad number")
        masses.append(mass)
    return masses


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum the fuel the modules need.")
    parser.add_argument("input", nargs="?", type=Path, help="read standard input if absent")
    args = parser.parse_args(argv)
    text = args.input.read_text() if args.input else sys.stdin.read()
    masses = _parse_masses(text.splitlines())
    print(f"total fuel: {sum(fuel_for_mass(m) for m in masses)}")
    print(f"total fuel: {sum(total_fuel_for_mass(m) for m in masses)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())