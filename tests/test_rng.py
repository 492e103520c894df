import pytest

from mazerace.utils.rng import SeededRNG, default_rng, set_global_seed


def test_same_seed_same_sequence():
    first, second = SeededRNG(5), SeededRNG(5)
    assert [first.randint(0, 100) for _ in range(10)] == [second.randint(0, 100) for _ in range(10)]
    assert first.random() == second.random()


def test_reseed_restarts_sequence():
    rng = SeededRNG(9)
    draws = [rng.random() for _ in range(3)]
    rng.reseed(9)
    assert [rng.random() for _ in range(3)] == draws
    assert rng.seed == 9


def test_shuffle_and_choice():
    rng = SeededRNG(1)
    items = list(range(10))
    rng.shuffle(items)
    assert sorted(items) == list(range(10))
    assert rng.choice(items) in items
    with pytest.raises(ValueError):
        rng.choice([])


def test_global_seed():
    set_global_seed(3)
    draw = default_rng.random()
    set_global_seed(3)
    assert default_rng.random() == draw
    assert default_rng.seed == 3
    set_global_seed(None)
