import pytest

from pancake_run.rng import RandomFunction


def test_same_seed_gives_same_sequence():
    a = RandomFunction(42)
    b = RandomFunction(42)
    assert [a.get_int(1000) for _ in range(20)] == [b.get_int(1000) for _ in range(20)]


def test_get_int_range():
    rng = RandomFunction(1)
    values = {rng.get_int(5) for _ in range(500)}
    assert values == set(range(5))


def test_get_from_int_to_is_inclusive():
    rng = RandomFunction(2)
    values = {rng.get_from_int_to(150, 155) for _ in range(1000)}
    assert values == set(range(150, 156))


def test_get_from_int_to_single_value():
    rng = RandomFunction(3)
    assert rng.get_from_int_to(7, 7) == 7


@pytest.mark.parametrize("num", [0, -3])
def test_get_int_rejects_non_positive(num):
    with pytest.raises(ValueError):
        RandomFunction(4).get_int(num)


def test_get_from_int_to_rejects_reversed_range():
    with pytest.raises(ValueError):
        RandomFunction(5).get_from_int_to(10, 1)


def test_get_float_bounds():
    rng = RandomFunction(6)
    assert all(0.0 <= rng.get_float() <= 1.0 for _ in range(200))
    assert all(0.0 <= rng.get_float(3.5) <= 3.5 for _ in range(200))


def test_get_from_float_to_bounds():
    rng = RandomFunction(7)
    assert all(-2.0 <= rng.get_from_float_to(-2.0, 4.0) <= 4.0 for _ in range(200))