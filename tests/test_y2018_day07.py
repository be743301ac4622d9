import pytest

from aocsolve.y2018_day07 import (
    assembly_time,
    available_tasks,
    main,
    make_graph,
    parse_instruction,
    step_order,
    task_cost,
)

EXAMPLE = [
    "Step C must be finished before step A can begin.",
    "Step C must be finished before step F can begin.",
    "Step A must be finished before step B can begin.",
    "Step A must be finished before step D can begin.",
    "Step B must be finished before step E can begin.",
    "Step D must be finished before step E can begin.",
    "Step F must be finished before step E can begin.",
]


def test_parse_instruction():
    assert parse_instruction(EXAMPLE[0]) == ("C", "A")


def test_parse_instruction_rejects_short_line():
    with pytest.raises(ValueError):
        parse_instruction("Step C")


def test_make_graph_adds_leaf_steps():
    graph = make_graph(EXAMPLE)
    assert graph["C"] == {"A", "F"}
    assert not graph["E"]


def test_available_tasks():
    assert available_tasks(make_graph(EXAMPLE)) == {"C"}


def test_step_order_example():
    assert step_order(make_graph(EXAMPLE)) == "CABDFE"


def test_step_order_is_permutation_and_keeps_graph():
    graph = make_graph(EXAMPLE)
    before = {step: set(deps) for step, deps in graph.items()}
    order = step_order(graph)
    assert sorted(order) == sorted(graph)
    assert graph == before


def test_task_cost():
    assert task_cost("A") == 61
    assert task_cost("C", 0) - task_cost("A", 0) == ord("C") - ord("A")


def test_assembly_time_example():
    assert assembly_time(make_graph(EXAMPLE), 2, 0) == 15


def test_single_worker_takes_sum_of_costs():
    graph = make_graph(EXAMPLE)
    assert assembly_time(graph, 1, 0) == sum(task_cost(step, 0) for step in graph)


def test_more_workers_are_never_slower():
    graph = make_graph(EXAMPLE)
    assert assembly_time(graph, 5, 0) <= assembly_time(graph, 2, 0)


def test_assembly_time_needs_workers():
    with pytest.raises(ValueError):
        assembly_time(make_graph(EXAMPLE), 0, 0)


def test_main(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text("\n".join(EXAMPLE) + "\n")
    main([str(path)])
    graph = make_graph(EXAMPLE)
    assert capsys.readouterr().out.splitlines() == [
        step_order(graph),
        str(assembly_time(graph)),
    ]