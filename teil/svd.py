"""Singular value decomposition of a square matrix by power iteration."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

_TOLERANCE = 1e-10


@dataclass(frozen=True)
class SVDResult:
    """Principal components with their singular values.

    ``components`` holds one row per component, already sign-flipped for use
    as PCA components.
    """

    components: tuple[tuple[float, ...], ...]
    singular_values: tuple[float, ...]
    explained_variance_ratio: tuple[float, ...]


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return math.fsum(x * y for x, y in zip(a, b))


def calculate_eigenvalue(row: Sequence[float], v: Sequence[float]) -> float:
    """Estimate the eigenvalue for ``v`` from the first row of the matrix."""
    if len(row) != len(v):
        raise ValueError(f"row has {len(row)} entries, vector has {len(v)}")
    if not v or v[0] == 0:
        raise ValueError("vector's first entry must be non-zero")
    return _dot(row, v) / v[0]


def _square(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    rows = [list(row) for row in matrix]
    if not rows:
        raise ValueError("matrix is empty")
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


def power_iteration(
    matrix: Sequence[Sequence[float]], max_iteration: int
) -> tuple[float, list[float]]:
    """Return the dominant eigenvalue and unit eigenvector of a square matrix.

    Starts from a vector of 0.5s and stops once the eigenvalue estimate moves
    by less than 1e-10, or after ``max_iteration`` steps.
    """
    a = _square(matrix)
    if max_iteration < 1:
        raise ValueError("max_iteration must be at least 1")
    v = [0.5] * len(a)
    eigenvalue = calculate_eigenvalue(a[0], v)
    for _ in range(max_iteration):
        av = [_dot(row, v) for row in a]
        norm = math.sqrt(math.fsum(x * x for x in av))
        if norm == 0:
            raise ValueError("matrix maps the iteration vector to zero")
        v = [x / norm for x in av]
        new = calculate_eigenvalue(a[0], v)
        converged = abs(eigenvalue - new) < _TOLERANCE
        eigenvalue = new
        if converged:
            break
    return eigenvalue, v


def svd(matrix: Sequence[Sequence[float]], max_iteration: int) -> SVDResult:
    """Decompose a square matrix by repeated power iteration and deflation."""
    a = _square(matrix)
    n = len(a)
    components: list[tuple[float, ...]] = []
    sigmas: list[float] = []
    prev: tuple[float, list[float], list[float]] | None = None
    for _ in range(n):
        if prev is not None:
            sigma, u, v_prev = prev
            a = [
                [a[i][j] - sigma * u[i] * v_prev[j] for j in range(n)]
                for i in range(n)
            ]
        _, v = power_iteration(a, max_iteration)
        u = [_dot(column, v) for column in zip(*a)]
        sigma = math.sqrt(math.fsum(x * x for x in u))
        if sigma == 0:
            raise ValueError("matrix has a zero singular value")
        u = [x / sigma for x in u]
        prev = (sigma, u, v)
        sigmas.append(sigma)
        components.append(tuple(-x for x in v))
    total = math.fsum(sigmas)
    return SVDResult(
        components=tuple(components),
        singular_values=tuple(sigmas),
        explained_variance_ratio=tuple(s / total for s in sigmas),
    )