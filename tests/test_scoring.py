import pytest

from mazerace.domain.scoring import RaceResult, calculate_score, percentage_difference


def test_matching_the_computer_scores_1000():
    assert calculate_score(50, 60, 50, 60) == 1000


def test_twice_as_fast_and_efficient():
    assert calculate_score(25, 30, 50, 60) == 16000


def test_slower_player_scores_less():
    assert calculate_score(50, 120, 50, 60) == 250
    assert calculate_score(3, 7, 2, 5) == 227


@pytest.mark.parametrize("args", [(0, 10, 5, 5), (5, 0, 5, 5), (5, 5, -1, 5), (5, 5, 5, 0)])
def test_non_positive_inputs_rejected(args):
    with pytest.raises(ValueError):
        calculate_score(*args)


def test_percentage_difference():
    assert percentage_difference(75, 50) == 50.0
    assert percentage_difference(25, 50) == -50.0
    with pytest.raises(ValueError):
        percentage_difference(10, 0)


def test_summary_for_equal_race():
    result = RaceResult(player_moves=50, player_time=60, computer_moves=50, computer_time=60)
    assert result.score == 1000
    assert result.summary() == [
        "Your path was the same length as the computer.",
        "You solved the maze at the same speed as the computer.",
    ]


def test_summary_for_better_player():
    result = RaceResult(player_moves=25, player_time=30, computer_moves=50, computer_time=60)
    assert result.summary() == [
        "Your path was 50.0% shorter than the computer.",
        "You solved the maze 50.0% faster than the computer.",
    ]


def test_summary_for_worse_player():
    result = RaceResult(player_moves=60, player_time=90, computer_moves=50, computer_time=60)
    assert result.path_difference_pct == pytest.approx(20.0)
    assert result.summary() == [
        "Your path was 20.0% longer than the computer.",
        "You solved the maze 50.0% slower than the computer.",
    ]


def test_result_rejects_zero_time():
    with pytest.raises(ValueError):
        RaceResult(player_moves=10, player_time=0, computer_moves=10, computer_time=5)
