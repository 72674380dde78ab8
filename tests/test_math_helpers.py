import random

from analog_digital.utils.math_helpers import random_range, step_toward, trunc_div


def test_step_toward_settles_on_target():
    assert step_toward(0, 3) == 1
    assert step_toward(0, -3) == -1
    assert step_toward(4, 4) == 4


def test_random_range_handles_empty_range():
    rng = random.Random(0)
    assert random_range(rng, 10, 10) == 10
    assert random_range(rng, 10, 3) == 10
    assert all(27 <= random_range(rng, 27, 30) < 30 for _ in range(50))


def test_trunc_div_rounds_toward_zero():
    assert trunc_div(-105, 25) == -4
    assert trunc_div(105, 25) == 4
    assert trunc_div(-160, 11) == -14
    assert trunc_div(7, -2) == -3
