"""Kernel functions for support vector models."""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import IntEnum


class Kernel(IntEnum):
    """Kernel types."""

    LINEAR = 0
    POLY = 1
    RBF = 2
    TANH = 3


def _check(sample: Sequence[float], vector: Sequence[float]) -> None:
    if len(sample) != len(vector):
        raise ValueError(
            f"vector has {len(vector)} features, sample has {len(sample)}"
        )


def kernel_polynomial(
    sample: Sequence[float],
    vectors: Sequence[Sequence[float]],
    gamma: float,
    coef: float,
    degree: int,
) -> list[float]:
    """Return ``(gamma * <v, sample> + coef) ** degree`` for each vector."""
    kernels = []
    for vector in vectors:
        _check(sample, vector)
        dot = math.fsum(v * s for v, s in zip(vector, sample))
        kernels.append((gamma * dot + coef) ** degree)
    return kernels


def kernel_rbf(
    sample: Sequence[float],
    vectors: Sequence[Sequence[float]],
    gamma: float,
) -> list[float]:
    """Return ``exp(-gamma * |v - sample|^2)`` for each vector."""
    kernels = []
    for vector in vectors:
        _check(sample, vector)
        sq = math.fsum((v - s) ** 2 for v, s in zip(vector, sample))
        kernels.append(math.exp(-gamma * sq))
    return kernels