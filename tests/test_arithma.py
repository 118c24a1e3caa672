import math

import numpy as np
import pytest

from aura import arithma
from aura.errors import InvalidArgumentError


def test_central_tendency():
    assert arithma.mean([2, 4, 6]) == 4
    assert arithma.median([1, 2, 3, 4]) == 2.5
    assert arithma.median([1, 2, 3]) == 2
    assert arithma.median([7.0]) == 7.0


def test_median_sorts_a_copy():
    values = [5, 1, 4, 2, 3]
    assert arithma.median(values) == 3
    assert values == [5, 1, 4, 2, 3]

    arr = np.array([3.0, 1.0, 2.0])
    assert arithma.median(arr) == 2.0
    assert arr.tolist() == [3.0, 1.0, 2.0]


def test_population_variance_and_std():
    assert arithma.variance([2, 2, 2]) == 0
    assert arithma.standard_deviation([2, 2, 2]) == 0
    data = [2, 4, 4, 4, 5, 5, 7, 9]
    assert math.isclose(arithma.variance(data), 4.0)
    assert math.isclose(arithma.standard_deviation(data), 2.0)
    assert math.isclose(arithma.variance(data), float(np.var(data)))


def test_reductions():
    data = [3.5, -1.0, 8.25, 0.0]
    assert arithma.max(data) == 8.25
    assert arithma.min(data) == -1.0
    assert arithma.sum(data) == 10.75


@pytest.mark.parametrize(
    "fn",
    [
        arithma.mean,
        arithma.median,
        arithma.variance,
        arithma.standard_deviation,
        arithma.max,
        arithma.min,
        arithma.sum,
    ],
)
def test_empty_input_raises(fn):
    with pytest.raises(InvalidArgumentError):
        fn([])


@pytest.mark.parametrize(
    "bad",
    [
        [1.0, float("nan")],
        [1.0, math.inf],
        "123",
        {"a": 1},
        [[1, 2], [3, 4]],
        ["a", "b"],
        [None],
    ],
)
def test_malformed_input_raises(bad):
    with pytest.raises(InvalidArgumentError):
        arithma.mean(bad)


def test_overflow_is_reported_not_propagated():
    with pytest.raises(InvalidArgumentError):
        arithma.sum([1e308, 1e308])
    with pytest.raises(InvalidArgumentError):
        arithma.variance([-1e308, 1e308])


def test_median_of_large_values_does_not_overflow():
    assert arithma.median([1e308, 1e308]) == 1e308


def test_scalar_helpers():
    assert arithma.area(3, 4) == 12
    assert arithma.volume(2, 3, 4) == 24
    assert arithma.clamp(5, 0, 3) == 3
    assert arithma.clamp(-5, 0, 3) == 0
    assert arithma.clamp(1.5, 0, 3) == 1.5
    assert arithma.lerp(0, 10, 0.25) == 2.5
    assert arithma.lerp(2, 4, 1.5) == 5.0


def test_clamp_rejects_inverted_bounds():
    with pytest.raises(InvalidArgumentError):
        arithma.clamp(1, 3, 0)


def test_median_keeps_subnormals():
    assert arithma.median([5e-324, 5e-324]) == 5e-324
    assert arithma.median([-1e308, 1e308]) == 0.0


def test_mean_of_large_values_is_representable():
    assert arithma.mean([1e308, 1e308]) == 1e308
    assert arithma.variance([1e308, 1e308]) == 0.0
