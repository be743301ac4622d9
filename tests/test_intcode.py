import pytest

from aocsolve.intcode import (
    IntcodeError,
    Machine,
    Mode,
    Opcode,
    parse_program,
    run,
)


def test_parse_program_round_trip():
    program = [1, 9, 10, 3, -2, 99]
    assert parse_program(",".join(map(str, program)) + "\n") == program


def test_parse_program_rejects_garbage():
    with pytest.raises(ValueError):
        parse_program("1,x,3")


def test_add_and_multiply_program():
    machine = Machine([1, 9, 10, 3, 2, 3, 11, 0, 99, 30, 40, 50])
    assert machine.run() == 3500


def test_immediate_mode_multiply_writes_halt():
    machine = Machine([1002, 4, 3, 4, 33])
    machine.run()
    assert machine.memory[4] == Opcode.HALT


def test_echo_returns_input():
    assert run([3, 0, 4, 0, 99], [1234]) == [1234]


def test_equals_comparison():
    program = [3, 9, 8, 9, 10, 9, 4, 9, 99, -1, 8]
    assert run(program, [8]) == [1]
    assert run(program, [7]) == [0]


def test_quine_outputs_itself():
    program = [109, 1, 204, -1, 1001, 100, 1, 100, 1008, 100, 16, 101, 1006, 101, 0, 99]
    assert run(program) == program


def test_large_numbers():
    assert run([104, 1125899906842624, 99]) == [1125899906842624]
    (value,) = run([1102, 34915192, 34915192, 7, 4, 7, 99, 0])
    assert len(str(value)) == 16


def test_relative_mode_output():
    program = [109, 5, 204, -3, 99]
    assert run(program) == [program[2]]


def test_memory_grows_on_write():
    machine = Machine([1101, 7, 0, 10, 99])
    machine.run()
    assert len(machine.memory) == 11
    assert machine.memory[10] == 7


def test_immediate_write_is_discarded():
    machine = Machine([11101, 1, 1, 0, 99])
    assert machine.run() == 11101


def test_step_advances_and_halts():
    machine = Machine([1101, 2, 3, 5, 99, 0])
    assert machine.step() is True
    assert machine.pc == 4
    assert machine.memory[5] == 5
    assert machine.step() is False
    assert machine.halted
    assert machine.step() is False


def test_on_output_callback_receives_values():
    seen = []
    machine = Machine([104, 7, 104, 8, 99], on_output=seen.append)
    machine.run()
    assert seen == machine.outputs == [7, 8]


def test_mode_values():
    assert [Mode(0), Mode(1), Mode(2)] == [Mode.POSITION, Mode.IMMEDIATE, Mode.RELATIVE]


@pytest.mark.parametrize(
    "program",
    [
        [42],
        [-1],
        [301, 0, 0, 0, 99],
        [1, -1, 0, 0, 99],
        [3, 0, 99],
        [1105, 1, -1],
        [109, -5, 99],
    ],
)
def test_errors(program):
    with pytest.raises(IntcodeError):
        Machine(program).run()


def test_main_prints_outputs_and_cell_zero(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text("104,7,99\n")
    from aocsolve.intcode import main

    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "7\ncode[0] = 104\n"