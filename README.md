# aocsolve

Solvers for a set of Advent of Code puzzles from 2018, 2019 and 2020. Each
day is a module of small functions plus a command that solves the puzzle for
your own input. The package also has an Intcode machine (`aocsolve.intcode`),
which the 2019 Intcode puzzles use. It has no dependencies beyond the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

Unless noted otherwise, a command takes the path of a puzzle input as an
optional argument, defaulting to a file named `input` in the current
directory, and prints its answers.

| Command       | Module                  | Puzzle                                      |
|---------------|-------------------------|---------------------------------------------|
| `aoc-2018-01` | `aocsolve.y2018_day01`  | 2018 day 1: frequency calibration           |
| `aoc-2018-02` | `aocsolve.y2018_day02`  | 2018 day 2: box identifiers                 |
| `aoc-2018-03` | `aocsolve.y2018_day03`  | 2018 day 3: overlapping fabric claims       |
| `aoc-2018-04` | `aocsolve.y2018_day04`  | 2018 day 4: guard sleep records             |
| `aoc-2018-05` | `aocsolve.y2018_day05`  | 2018 day 5: polymer reactions               |
| `aoc-2018-06` | `aocsolve.y2018_day06`  | 2018 day 6: chronal coordinates             |
| `aoc-2018-07` | `aocsolve.y2018_day07`  | 2018 day 7: step order and assembly time    |
| `aoc-2018-08` | `aocsolve.y2018_day08`  | 2018 day 8: license tree                    |
| `aoc-2018-09` | `aocsolve.y2018_day09`  | 2018 day 9: marble game                     |
| `aoc-2018-10` | `aocsolve.y2018_day10`  | 2018 day 10: moving lights                  |
| `aoc-2018-11` | `aocsolve.y2018_day11`  | 2018 day 11: fuel cell power grid           |
| `aoc-2019-01` | `aocsolve.y2019_day01`  | 2019 day 1: rocket fuel                     |
| `aoc-2019-02` | `aocsolve.y2019_day02`  | 2019 day 2: gravity assist program          |
| `aoc-2019-03` | `aocsolve.y2019_day03`  | 2019 day 3: crossed wires                   |
| `aoc-2019-04` | `aocsolve.y2019_day04`  | 2019 day 4: password candidates             |
| `aoc-2019-06` | `aocsolve.y2019_day06`  | 2019 day 6: orbit map                       |
| `aoc-2019-07` | `aocsolve.y2019_day07`  | 2019 day 7: amplifier chains                |
| `aoc-2019-08` | `aocsolve.y2019_day08`  | 2019 day 8: space image format              |
| `aoc-2020-02` | `aocsolve.y2020_day02`  | 2020 day 2: password policies               |
| `aoc-2020-03` | `aocsolve.y2020_day03`  | 2020 day 3: toboggan slopes                 |
| `aoc-intcode` | `aocsolve.intcode`      | run an Intcode program                      |

Commands that differ from the rule above:

- `aoc-2019-01`, `aoc-2019-02` and `aoc-2019-03` read standard input when no
  path is given.
- `aoc-2018-09` multiplies the last marble's worth by 100 before playing,
  prints the high score and also writes it to a file, `output` by default
  (`--output PATH` to change it).
- `aoc-2018-10` prints the lights, after a `===` line, whenever they fit in a
  159 by 44 box, then waits for a line on standard input. Typing a line that
  contains `quit`, or ending the input, stops it and prints the number of
  seconds elapsed.
- `aoc-2018-11` takes the grid serial number as a required argument and
  prints `power, x, y, size` of the most powerful square.
- `aoc-2019-04` takes the low and high ends of the range as optional
  arguments; the upper end is excluded.
- `aoc-2019-08` accepts `--width` and `--height` (default 25 by 6).
- `aoc-intcode` reads the program from the given path (default `input`),
  reads each input value as one integer per line from standard input, prints
  every output as it is written and finally prints `code[0] = N`.

## Using the library

The functions can be called directly:

```python
from aocsolve.y2019_day01 import fuel_for_mass
from aocsolve.y2018_day11 import power_level

fuel_for_mass(12)        # 2
power_level(3, 5, 8)     # 4
```

The Intcode machine takes a program and a sequence of inputs and returns what
the program wrote:

```python
from aocsolve.intcode import Machine, parse_program, run

program = parse_program("3,0,4,0,99")
run(program, [42])       # [42]

machine = Machine(program, [7])
machine.run()            # value at address 0 once halted: 7
machine.outputs          # [7]
```

`Machine.step()` executes a single instruction and returns `False` once the
program has halted. A program that cannot continue (an unknown opcode or
mode, a negative address, missing input) raises `IntcodeError`.

## What the package does not do

It does not fetch puzzle inputs or submit answers; every command works on an
input you supply. There is no separate command for the 2019 day 5 and day 9
puzzles: run those programs with `aoc-intcode`, which supports every opcode
and parameter mode they use, including relative addressing.