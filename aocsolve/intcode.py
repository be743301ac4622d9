"""A machine for intcode programs with parameter modes and relative addressing."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from enum import IntEnum
from pathlib import Path


class IntcodeError(Exception):
    """Raised when a program cannot continue."""


class Mode(IntEnum):
    POSITION = 0
    IMMEDIATE = 1
    RELATIVE = 2


class Opcode(IntEnum):
    ADD = 1
    MUL = 2
    READ = 3
    WRITE = 4
    JUMP_TRUE = 5
    JUMP_FALSE = 6
    LESS_THAN = 7
    EQUALS = 8
    ADJUST_RELATIVE = 9
    HALT = 99

    @property
    def arity(self) -> int:
        """Number of parameters the instruction takes."""
        return _ARITY[self]


_ARITY = {
    Opcode.ADD: 3,
    Opcode.MUL: 3,
    Opcode.READ: 1,
    Opcode.WRITE: 1,
    Opcode.JUMP_TRUE: 2,
    Opcode.JUMP_FALSE: 2,
    Opcode.LESS_THAN: 3,
    Opcode.EQUALS: 3,
    Opcode.ADJUST_RELATIVE: 1,
    Opcode.HALT: 0,
}

_Param = tuple[int, Mode]


def parse_program(text: str) -> list[int]:
    """Parse comma-separated integers."""
    try:
        return [int(token.strip()) for token in text.split(",")]
    except ValueError as exc:
        raise ValueError(f"invalid program: {exc}") from None


class Machine:
    """Runs one intcode program, reading from an iterable and collecting outputs."""

    def __init__(
        self,
        program: Iterable[int],
        inputs: Iterable[int] = (),
        on_output: Callable[[int], None] | None = None,
    ) -> None:
        self.memory: list[int] = list(program)
        self.pc = 0
        self.relative_base = 0
        self.outputs: list[int] = []
        self.halted = False
        self._inputs: Iterator[int] = iter(inputs)
        self._on_output = on_output

    def _cell(self, address: int) -> int:
        if address < 0:
            raise IntcodeError(f"negative address {address}")
        if address >= len(self.memory):
            self.memory.extend([0] * (address + 1 - len(self.memory)))
        return address

    def _address(self, param: _Param) -> int | None:
        value, mode = param
        if mode is Mode.POSITION:
            return self._cell(value)
        if mode is Mode.RELATIVE:
            return self._cell(self.relative_base + value)
        return None

    def _read(self, param: _Param) -> int:
        address = self._address(param)
        return param[0] if address is None else self.memory[address]

    def _write(self, param: _Param, value: int) -> None:
        address = self._address(param)
        if address is not None:
            self.memory[address] = value

    def _decode(self) -> tuple[Opcode, list[_Param]]:
        instruction = self.memory[self._cell(self.pc)]
        try:
            if instruction < 0:
                raise ValueError
            opcode = Opcode(instruction % 100)
        except ValueError:
            raise IntcodeError(
                f"Invalid opcode: {instruction % 100} from {instruction}"
            ) from None
        params = []
        for k in range(opcode.arity):
            try:
                mode = Mode((instruction // 10 ** (k + 2)) % 10)
            except ValueError:
                raise IntcodeError(f"Invalid mode in {instruction}") from None
            params.append((self.memory[self._cell(self.pc + 1 + k)], mode))
        return opcode, params

    def _jump_target(self, param: _Param) -> int:
        target = self._read(param)
        if target < 0:
            raise IntcodeError(f"Invalid jump address {target}")
        return target

    def step(self) -> bool:
        """Execute one instruction; return False once the program has halted."""
        if self.halted:
            return False
        opcode, params = self._decode()
        next_pc = self.pc + 1 + len(params)
        match opcode:
            case Opcode.HALT:
                self.halted = True
                return False
            case Opcode.ADD:
                self._write(params[2], self._read(params[0]) + self._read(params[1]))
            case Opcode.MUL:
                self._write(params[2], self._read(params[0]) * self._read(params[1]))
            case Opcode.READ:
                try:
                    value = next(self._inputs)
                except StopIteration:
                    raise IntcodeError("Error reading a line") from None
                self._write(params[0], int(value))
            case Opcode.WRITE:
                value = self._read(params[0])
                self.outputs.append(value)
                if self._on_output is not None:
                    self._on_output(value)
            case Opcode.JUMP_TRUE:
                target = self._jump_target(params[1])
                if self._read(params[0]) != 0:
                    next_pc = target
            case Opcode.JUMP_FALSE:
                target = self._jump_target(params[1])
                if self._read(params[0]) == 0:
                    next_pc = target
            case Opcode.LESS_THAN:
                self._write(params[2], int(self._read(params[0]) < self._read(params[1])))
            case Opcode.EQUALS:
                self._write(params[2], int(self._read(params[0]) == self._read(params[1])))
            case Opcode.ADJUST_RELATIVE:
                base = self.relative_base + self._read(params[0])
                if base < 0:
                    raise IntcodeError(f"negative relative base {base}")
                self.relative_base = base
        self.pc = next_pc
        return True

    def run(self) -> int:
        """Run until the program halts and return the value at address 0."""
        while self.step():
            pass
        return self.memory[0]


def run(program: Iterable[int], inputs: Iterable[int] = ()) -> list[int]:
    """Run a program to completion and return everything it wrote."""
    machine = Machine(program, inputs)
    machine.run()
    return machine.outputs


def _stdin_values() -> Iterator[int]:
    for line in sys.stdin:
        try:
            yield int(line.strip())
        except ValueError:
            raise IntcodeError("Error parsing input") from None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run an intcode program.")
    parser.add_argument("program", nargs="?", default="input", type=Path)
    args = parser.parse_args(argv)
    program = parse_program(args.program.read_text())
    machine = Machine(program, _stdin_values(), on_output=print)
    print(f"code[0] = {machine.run()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())