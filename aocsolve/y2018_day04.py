"""Guard sleep records: which guard sleeps most and on which minute."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

MINUTES = 60


def is_start_shift(line: str) -> bool:
    """True for a 'Guard #N begins shift' record."""
    return line[19] == "G"


def parse_guard_id(line: str) -> int:
    """Return the guard number of a shift-start record."""
    return int(line[26:].split(" ")[0])


def parse_event(line: str) -> tuple[int, bool]:
    """Return (minute, falls_asleep) for a sleep or wake record.

    Records outside the midnight hour are taken to happen at minute zero.
    """
    minute = int(line[15:17]) if line[12:14] == "00" else 0
    return minute, line[19] == "f"


def sleep_minutes(lines: Iterable[str]) -> dict[int, list[int]]:
    """Count, per guard, how often each midnight minute was spent asleep."""
    guards: dict[int, list[int]] = {}
    guard_id = 0
    start = 0
    for line in sorted(set(lines)):
        if is_start_shift(line):
            guard_id = parse_guard_id(line)
            start = 0
            continue
        minute, falls_asleep = parse_event(line)
        if not falls_asleep:
            counts = guards.setdefault(guard_id, [0] * MINUTES)
            for asleep in range(start, minute):
                counts[asleep] += 1
        start = minute
    return guards


def sleepiest_minute(minutes: Sequence[int]) -> int:
    """Return the first minute with the highest count, or zero if all are zero."""
    best_minute, best = 0, 0
    for minute, count in enumerate(minutes):
        if count > best:
            best_minute, best = minute, count
    return best_minute


def _pick(sleep: Mapping[int, Sequence[int]], key) -> int:
    if not sleep:
        raise ValueError("no guard ever slept")
    guard_id, minutes = max(sleep.items(), key=lambda item: key(item[1]))
    return guard_id * sleepiest_minute(minutes)


def strategy_one(sleep: Mapping[int, Sequence[int]]) -> int:
    """Guard with the most total sleep times that guard's sleepiest minute."""
    return _pick(sleep, sum)


def strategy_two(sleep: Mapping[int, Sequence[int]]) -> int:
    """Guard most often asleep on one minute times that minute."""
    return _pick(sleep, max)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Analyse guard sleep records.")
    parser.add_argument("input", nargs="?", default="input", type=Path)
    args = parser.parse_args(argv)
    sleep = sleep_minutes(args.input.read_text().splitlines())
    print(strategy_one(sleep))
    print(strategy_two(sleep))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())