import pytest

from bundlebash import util


def test_seed_makes_draws_reproducible():
    util.seed(42)
    first = [util.get_random_int(0, 100) for _ in range(20)]
    first_f = [util.get_random_float(-1.0, 1.0) for _ in range(20)]
    util.seed(42)
    second = [util.get_random_int(0, 100) for _ in range(20)]
    second_f = [util.get_random_float(-1.0, 1.0) for _ in range(20)]
    assert first == second
    assert first_f == second_f


def test_int_range_is_inclusive():
    util.seed(7)
    draws = {util.get_random_int(0, 1) for _ in range(200)}
    assert draws == {0, 1}


def test_int_within_bounds():
    util.seed(3)
    for _ in range(500):
        value = util.get_random_int(-5, 5)
        assert -5 <= value <= 5


def test_float_within_half_open_bounds():
    util.seed(11)
    for _ in range(500):
        value = util.get_random_float(-15.0, 15.0)
        assert -15.0 <= value < 15.0


def test_float_degenerate_range_returns_bound():
    assert util.get_random_float(2.5, 2.5) == 2.5


def test_int_degenerate_range_returns_bound():
    assert util.get_random_int(4, 4) == 4


def test_reversed_int_range_raises():
    with pytest.raises(ValueError):
        util.get_random_int(1, 0)


def test_reversed_float_range_raises():
    with pytest.raises(ValueError):
        util.get_random_float(1.0, 0.0)