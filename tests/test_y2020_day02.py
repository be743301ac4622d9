import pytest

from aocsolve.y2020_day02 import Policy, count_valid, main, parse_policy

EXAMPLE = ["1-3 a: abcde", "1-3 b: cdefg", "2-9 c: ccccccccc"]


def test_parse_policy_fields():
    assert parse_policy("1-3 a: abcde") == Policy(1, 3, "a", "abcde")


@pytest.mark.parametrize("line", ["x-3 a: abc", "13 a: abc", "1-3"])
def test_parse_policy_rejects_bad_lines(line):
    with pytest.raises(ValueError):
        parse_policy(line)


@pytest.mark.parametrize(
    "line, expected", [(EXAMPLE[0], True), (EXAMPLE[1], False), (EXAMPLE[2], True)]
)
def test_valid_by_count(line, expected):
    assert parse_policy(line).valid_by_count() is expected


@pytest.mark.parametrize(
    "line, expected", [(EXAMPLE[0], True), (EXAMPLE[1], False), (EXAMPLE[2], False)]
)
def test_valid_by_position(line, expected):
    assert parse_policy(line).valid_by_position() is expected


def test_position_out_of_range_raises():
    with pytest.raises(ValueError):
        Policy(1, 9, "a", "abc").valid_by_position()


def test_count_valid_example():
    assert count_valid(EXAMPLE, Policy.valid_by_count) == 2
    assert count_valid(EXAMPLE, Policy.valid_by_position) == 1


def test_count_valid_skips_unparsable_lines():
    lines = EXAMPLE + ["garbage line here", "a-b c: ccc"]
    assert count_valid(lines, Policy.valid_by_count) == count_valid(
        EXAMPLE, Policy.valid_by_count
    )


def test_main_prints_counts(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.split()
    assert out == [
        str(count_valid(EXAMPLE, Policy.valid_by_count)),
        str(count_valid(EXAMPLE, Policy.valid_by_position)),
    ]