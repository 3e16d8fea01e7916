import pytest
from hypothesis import given, strategies as st

from klib.rounding import div_round_up, round_down, round_up

xs = st.integers(min_value=0, max_value=10**12)
steps = st.integers(min_value=1, max_value=10**6)


@given(xs, steps)
def test_round_up_is_next_multiple(x, step):
    r = round_up(x, step)
    assert r % step == 0
    assert x <= r < x + step


@given(xs, steps)
def test_round_down_is_previous_multiple(x, step):
    r = round_down(x, step)
    assert r % step == 0
    assert x - step < r <= x


@given(xs, steps)
def test_div_round_up_consistent_with_round_up(x, step):
    assert div_round_up(x, step) * step == round_up(x, step)


@given(steps, st.integers(min_value=0, max_value=1000))
def test_exact_multiples_unchanged(step, k):
    x = step * k
    assert round_up(x, step) == x
    assert round_down(x, step) == x
    assert div_round_up(x, step) == k


def test_worked_example():
    assert round_up(10, 4) == 12


@pytest.mark.parametrize("func", [round_up, div_round_up, round_down])
@pytest.mark.parametrize("x, step", [(-1, 4), (5, 0), (5, -2)])
def test_invalid_arguments(func, x, step):
    with pytest.raises(ValueError):
        func(x, step)