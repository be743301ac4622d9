"""Gravity assist: a machine of add and multiply opcodes, and the noun/verb search."""

from __future__ import annotations

import argparse
import operator
import sys
from collections.abc import Sequence
from pathlib import Path

TARGET = 19690720
_SEARCH_LIMIT = 99
_OPERATIONS = {1: operator.add, 2: operator.mul}
_HALT = 99


def parse_program(text: str) -> list[int]:
    """Parse comma-separated non-negative integers."""
    program = []
    for token in text.split(","):
        try:
            value = int(token.strip())
        except ValueError:
            raise ValueError(f"invalid number: {token!r}") from None
        if value < 0:
            raise ValueError(f"invalid number: {token!r}")
        program.append(value)
    return program


def run_program(code: Sequence[int]) -> int:
    """Run a copy of the program until it halts and return position 0."""
    memory = list(code)
    pc = 0
    try:
        while (opcode := memory[pc]) != _HALT:
            operation = _OPERATIONS.get(opcode)
            if operation is None:
                raise ValueError(f"invalid opcode {opcode} at {pc}")
            lhs, rhs, out = memory[pc + 1], memory[pc + 2], memory[pc + 3]
            if min(lhs, rhs, out) < 0:
                raise ValueError(f"negative address at {pc}")
            memory[out] = operation(memory[lhs], memory[rhs])
            pc += 4
    except IndexError as exc:
        raise ValueError(f"address out of range at {pc}") from exc
    return memory[0]


def find_noun_verb(code: Sequence[int], target: int = TARGET) -> int | None:
    """Return 100 * noun + verb for the first pair producing target, or None."""
    if len(code) < 3:
        raise ValueError("program too short to patch")
    for noun in range(_SEARCH_LIMIT):
        for verb in range(_SEARCH_LIMIT):
            patched = list(code)
            patched[1:3] = [noun, verb]
            if run_program(patched) == target:
                return 100 * noun + verb
    return None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the gravity assist program.")
    parser.add_argument("input", nargs="?", type=Path, help="read standard input if absent")
    args = parser.parse_args(argv)
    text = args.input.read_text() if args.input else sys.stdin.read()
    code = parse_program(text)
    print(run_program(code))
    answer = find_noun_verb(code)
    if answer is not None:
        print(f"100 * noun + verb: {answer}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())