"""Marble game: the winning elf's score."""

from __future__ import annotations

import argparse
from collections import deque
from pathlib import Path

_SCORING_MARBLE = 23
_BONUS_OFFSET = 7
_MARBLE_FACTOR = 100


def parse_game(text: str) -> tuple[int, int]:
    """Return (players, last marble worth) from 'N players; last marble is worth M points'."""
    words = text.split()
    try:
        return int(words[0]), int(words[6])
    except (IndexError, ValueError):
        raise ValueError(f"invalid game description: {text!r}") from None


def high_score(players: int, last_marble: int) -> int:
    """Play marbles up to last_marble and return the highest score."""
    if players < 1:
        raise ValueError("at least one player is needed")
    scores = [0] * players
    circle = deque([0])
    for marble in range(1, last_marble + 1):
        if marble % _SCORING_MARBLE == 0:
            circle.rotate(_BONUS_OFFSET)
            scores[marble % players] += marble + circle.pop()
            circle.rotate(-1)
        else:
            circle.rotate(-1)
            circle.append(marble)
    return max(scores)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play the marble game.")
    parser.add_argument("input", nargs="?", default="input", type=Path)
    parser.add_argument("--output", default="output", type=Path)
    args = parser.parse_args(argv)
    players, last_marble = parse_game(args.input.read_text())
    result = str(high_score(players, last_marble * _MARBLE_FACTOR))
    print(result)
    args.output.write_text(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())