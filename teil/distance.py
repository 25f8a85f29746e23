"""Distance metrics between feature vectors."""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import Enum


class DistanceMetric(Enum):
    """Supported distance metrics."""

    EUCLIDEAN = 0
    SQUARE_EUCLIDEAN = 1


def sqr_euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the squared Euclidean distance between two vectors of equal length."""
    if len(a) != len(b):
        raise ValueError(f"vectors differ in length: {len(a)} != {len(b)}")
    return math.fsum((x - y) ** 2 for x, y in zip(a, b))


def euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the Euclidean distance between two vectors of equal length."""
    return math.sqrt(sqr_euclidean_distance(a, b))


def calculate_distance(
    a: Sequence[float], b: Sequence[float], metric: DistanceMetric
) -> float:
    """Return the distance between ``a`` and ``b`` under ``metric``."""
    metric = DistanceMetric(metric)
    if metric is DistanceMetric.EUCLIDEAN:
        return euclidean_distance(a, b)
    return sqr_euclidean_distance(a, b)