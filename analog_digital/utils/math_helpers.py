import random


def step_toward(current: int, target: int) -> int:
    """Move current one unit toward target, stopping exactly on it."""
    if current < target:
        return current + 1
    if current > target:
        return current - 1
    return current


def random_range(rng: random.Random, low: int, high: int) -> int:
    """Random int in [low, high). Returns low when the range is empty."""
    if high <= low:
        return low
    return rng.randrange(low, high)


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q
