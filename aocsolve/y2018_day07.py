"""Sleigh assembly: step ordering and the time a team of workers needs."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Mapping
from pathlib import Path

Graph = dict[str, set[str]]

DEFAULT_WORKERS = 5
DEFAULT_BASE = 60


def parse_instruction(line: str) -> tuple[str, str]:
    """Return (requirement, step) from 'Step X must be finished before step Y can begin.'."""
    if len(line) < 37:
        raise ValueError(f"invalid instruction: {line!r}")
    return line[5], line[36]


def make_graph(lines: Iterable[str]) -> Graph:
    """Map each step to the steps that depend on it."""
    graph: Graph = {}
    for line in lines:
        requirement, step = parse_instruction(line)
        graph.setdefault(requirement, set()).add(step)
        graph.setdefault(step, set())
    return graph


def available_tasks(graph: Mapping[str, set[str]]) -> set[str]:
    """Steps that no other remaining step blocks."""
    return {step for step in graph if all(step not in deps for deps in graph.values())}


def _copy(graph: Mapping[str, set[str]]) -> Graph:
    return {step: set(deps) for step, deps in graph.items()}


def _release(todo: set[str], graph: Graph, done: Iterable[str]) -> None:
    for step in done:
        todo.discard(step)
        followers = graph.pop(step, set())
        todo.update(
            follower
            for follower in followers
            if all(follower not in deps for deps in graph.values())
        )


def step_order(graph: Mapping[str, set[str]]) -> str:
    """Return the order in which one worker completes the steps, alphabetical on ties."""
    graph = _copy(graph)
    todo = available_tasks(graph)
    sequence = []
    while todo:
        step = min(todo)
        _release(todo, graph, [step])
        sequence.append(step)
    return "".join(sequence)


def task_cost(task: str, base: int = DEFAULT_BASE) -> int:
    """Seconds a step takes: base plus its position in the alphabet."""
    return base + 1 + (ord(task) - ord("A"))


def _work(slots: list[list | None]) -> list[str]:
    for slot in slots:
        if slot is not None and slot[1] > 0:
            slot[1] -= 1
    done = [slot[0] for slot in slots if slot is not None and slot[1] == 0]
    slots[:] = [None if slot is not None and slot[1] == 0 else slot for slot in slots]
    return done


def _assign(slots: list[list | None], task: str, base: int) -> None:
    if any(slot is not None and slot[0] == task for slot in slots):
        return
    slots[slots.index(None)] = [task, task_cost(task, base)]


def assembly_time(
    graph: Mapping[str, set[str]],
    workers: int = DEFAULT_WORKERS,
    base: int = DEFAULT_BASE,
) -> int:
    """Seconds needed to finish every step with the given number of workers."""
    if workers < 1:
        raise ValueError("at least one worker is needed")
    graph = _copy(graph)
    todo = available_tasks(graph)
    slots: list[list | None] = [None] * workers
    time = -1
    while todo:
        _release(todo, graph, _work(slots))
        for task in sorted(todo):
            if None not in slots:
                break
            _assign(slots, task, base)
        time += 1
    return time


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Order the sleigh assembly steps.")
    parser.add_argument("input", nargs="?", default="input", type=Path)
    args = parser.parse_args(argv)
    graph = make_graph(args.input.read_text().splitlines())
    print(step_order(graph))
    print(assembly_time(graph))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())