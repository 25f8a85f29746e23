import math

import pytest

from teil.distance import (
    DistanceMetric,
    calculate_distance,
    euclidean_distance,
    sqr_euclidean_distance,
)


def test_identical_points_have_zero_distance():
    point = [0.3, -1.2, 4.5]
    assert sqr_euclidean_distance(point, point) == 0.0
    assert euclidean_distance(point, point) == 0.0


def test_euclidean_pythagorean_example():
    assert euclidean_distance([0.0, 0.0], [3.0, 4.0]) == pytest.approx(5.0)


def test_euclidean_is_root_of_squared():
    a = [0.79, 0.34, 0.39, 0.86]
    b = [0.52, 0.08, 0.41, 0.96]
    assert euclidean_distance(a, b) ** 2 == pytest.approx(sqr_euclidean_distance(a, b))


def test_distance_is_symmetric():
    a = [1.0, 2.0, 3.0]
    b = [-4.0, 0.5, 7.25]
    assert sqr_euclidean_distance(a, b) == sqr_euclidean_distance(b, a)


def test_triangle_inequality():
    a, b, c = [0.0, 1.0], [2.0, 5.0], [-3.0, 2.0]
    assert euclidean_distance(a, c) <= euclidean_distance(a, b) + euclidean_distance(b, c)


@pytest.mark.parametrize(
    "metric, func",
    [
        (DistanceMetric.EUCLIDEAN, euclidean_distance),
        (DistanceMetric.SQUARE_EUCLIDEAN, sqr_euclidean_distance),
    ],
)
def test_calculate_distance_dispatches(metric, func):
    a = [0.1, 0.2, 0.9]
    b = [0.7, -0.3, 0.4]
    assert calculate_distance(a, b, metric) == func(a, b)


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        sqr_euclidean_distance([1.0, 2.0], [1.0])


def test_unknown_metric_raises():
    with pytest.raises(ValueError):
        calculate_distance([1.0], [2.0], 42)


def test_distance_non_negative():
    assert euclidean_distance([-5.0, 3.0], [2.0, -8.0]) >= 0.0
    assert not math.isnan(euclidean_distance([-5.0, 3.0], [2.0, -8.0]))