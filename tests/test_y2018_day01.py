import pytest

from aocsolve.y2018_day01 import (
    first_repeated_frequency,
    main,
    parse_changes,
    total_frequency,
)


def test_parse_changes_accepts_signs():
    assert parse_changes(["+1", "-2", "+3"]) == [1, -2, 3]


def test_parse_changes_rejects_garbage():
    with pytest.raises(ValueError):
        parse_changes(["+1", "abc"])


def test_total_frequency_cancelling_changes_equals_empty():
    assert total_frequency([5, -5]) == total_frequency([])


def test_total_frequency_is_order_independent():
    assert total_frequency([4, -9, 2]) == total_frequency([2, 4, -9])


def test_first_repeat_does_not_count_start():
    assert first_repeated_frequency([7, -7]) == 7


@pytest.mark.parametrize(
    "changes, expected",
    [([3, 3, 4, -2, -4], 10), ([-6, 3, 8, 5, -6], 5)],
)
def test_first_repeat_examples(changes, expected):
    assert first_repeated_frequency(changes) == expected


def test_first_repeat_requires_changes():
    with pytest.raises(ValueError):
        first_repeated_frequency([])


def test_main_prints_both_answers(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text("+3\n-3\n")
    assert main([str(path)]) == total_frequency([])
    out = capsys.readouterr().out.splitlines()
    assert out == ["0", "Freq: 3"]