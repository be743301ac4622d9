import pytest

from aocsolve.y2018_day09 import high_score, main, parse_game


def test_parse_game():
    assert parse_game("9 players; last marble is worth 25 points\n") == (9, 25)


def test_parse_game_rejects_short_text():
    with pytest.raises(ValueError):
        parse_game("9 players")


def test_example_small():
    assert high_score(9, 25) == 32


def test_example_large():
    assert high_score(10, 1618) == 8317


def test_no_scoring_before_marble_23():
    assert high_score(5, 22) == 0


def test_single_player_score_never_decreases():
    scores = [high_score(1, n) for n in range(0, 200)]
    assert scores == sorted(scores)


@pytest.mark.parametrize("players", [2, 7, 13])
def test_no_player_beats_the_total(players):
    assert high_score(players, 500) <= high_score(1, 500)


def test_zero_players_rejected():
    with pytest.raises(ValueError):
        high_score(0, 10)


def test_main_writes_output(tmp_path, capsys):
    source = tmp_path / "input"
    source.write_text("3 players; last marble is worth 1 points\n")
    target = tmp_path / "output"
    assert main([str(source), "--output", str(target)]) == 0
    expected = str(high_score(3, 100))
    assert target.read_text() == expected
    assert capsys.readouterr().out.strip() == expected