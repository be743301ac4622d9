"""Amplifier chains: the highest thruster signal, straight and with feedback."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterator, Sequence
from itertools import permutations
from pathlib import Path

from aocsolve.intcode import IntcodeError, Machine, Opcode, parse_program

SERIAL_PHASES = range(0, 5)
FEEDBACK_PHASES = range(5, 10)


def _feed(queue: deque[int]) -> Iterator[int]:
    while True:
        yield queue.popleft()


class _Amplifier:
    """An intcode machine reading from its own queue of pending inputs."""

    def __init__(self, program: Sequence[int], phase: int) -> None:
        self.queue: deque[int] = deque([phase])
        self.machine = Machine(program, _feed(self.queue))

    @property
    def halted(self) -> bool:
        return self.machine.halted

    def _waiting(self) -> bool:
        memory, pc = self.machine.memory, self.machine.pc
        return pc < len(memory) and memory[pc] % 100 == Opcode.READ and not self.queue

    def run_until_blocked(self) -> list[int]:
        """Run until the machine halts or needs input; return the new outputs."""
        produced = len(self.machine.outputs)
        while not self.halted and not self._waiting():
            self.machine.step()
        return self.machine.outputs[produced:]


def amplify(program: Sequence[int], phases: Sequence[int]) -> int:
    """Pass a zero signal through amplifiers in series; return the last one's first output."""
    signal = 0
    for phase in phases:
        machine = Machine(program, [phase, signal])
        machine.run()
        if not machine.outputs:
            raise IntcodeError("amplifier produced no output")
        signal = machine.outputs[0]
    return signal


def amplify_feedback(program: Sequence[int], phases: Sequence[int]) -> int:
    """Loop the last amplifier's output back into the first until all halt.

    Returns the last value the final amplifier wrote, or 0 if it wrote nothing.
    """
    amplifiers = [_Amplifier(program, phase) for phase in phases]
    if not amplifiers:
        raise ValueError("no phases given")
    amplifiers[0].queue.append(0)
    last = 0
    while not all(amp.halted for amp in amplifiers):
        progressed = False
        for index, amp in enumerate(amplifiers):
            if amp.halted:
                continue
            before = (amp.machine.pc, len(amp.queue))
            outputs = amp.run_until_blocked()
            if outputs or amp.halted or before != (amp.machine.pc, len(amp.queue)):
                progressed = True
            if index == len(amplifiers) - 1 and outputs:
                last = outputs[-1]
            target = amplifiers[(index + 1) % len(amplifiers)]
            if not target.halted:
                target.queue.extend(outputs)
        if not progressed:
            raise IntcodeError("amplifiers are all waiting for input")
    return last


def best_signal(program: Sequence[int]) -> int:
    """Highest signal over every ordering of the phases 0 to 4."""
    return max(amplify(program, phases) for phases in permutations(SERIAL_PHASES))


def best_feedback_signal(program: Sequence[int]) -> int:
    """Highest feedback signal over every ordering of the phases 5 to 9."""
    return max(
        amplify_feedback(program, phases) for phases in permutations(FEEDBACK_PHASES)
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Tune the amplifier phases.")
    parser.add_argument("input", nargs="?", default="input", type=Path)
    args = parser.parse_args(argv)
    program = parse_program(args.input.read_text())
    print(best_signal(program))
    print(best_feedback_signal(program))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())