"""Support vector classifier and regressor with fixed parameters."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import combinations

from teil.kernel import Kernel, kernel_polynomial, kernel_rbf


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return math.fsum(x * y for x, y in zip(a, b))


def _kernels(
    kernel: Kernel,
    sample: Sequence[float],
    vectors: Sequence[Sequence[float]],
    gamma: float,
    coef: float,
    degree: int,
) -> list[float]:
    if kernel is Kernel.POLY:
        return kernel_polynomial(sample, vectors, gamma, coef, degree)
    if kernel is Kernel.RBF:
        return kernel_rbf(sample, vectors, gamma)
    raise ValueError(f"unsupported kernel: {kernel.name}")


def _vote(n_classes: int, rules: Sequence[float], intercepts: Sequence[float]) -> int:
    """One-vs-one voting; the first class with the most votes wins."""
    amounts = [0] * n_classes
    for (i, j), rule, intercept in zip(
        combinations(range(n_classes), 2), rules, intercepts
    ):
        amounts[i if rule + intercept > 0 else j] += 1
    return max(range(n_classes), key=amounts.__getitem__)


@dataclass
class SVC:
    """One-vs-one support vector classifier.

    For the linear kernel ``weights`` holds one coefficient row per class pair.
    For other kernels it holds ``n_classes - 1`` rows of dual coefficients, one
    entry per support vector, and ``ranges`` gives where each class's support
    vectors start and end.
    """

    n_classes: int
    intercepts: Sequence[float]
    weights: Sequence[Sequence[float]]
    kernel: Kernel = Kernel.LINEAR
    support_vectors: Sequence[Sequence[float]] = field(default_factory=tuple)
    ranges: Sequence[int] = field(default_factory=tuple)
    gamma: float = 0.0
    coef: float = 0.0
    degree: int = 3

    def __post_init__(self) -> None:
        self.kernel = Kernel(self.kernel)
        self.intercepts = tuple(self.intercepts)
        self.weights = tuple(tuple(row) for row in self.weights)
        self.support_vectors = tuple(tuple(v) for v in self.support_vectors)
        self.ranges = tuple(self.ranges)
        if self.n_classes < 1:
            raise ValueError("at least one class is required")
        n_pairs = self.n_classes * (self.n_classes - 1) // 2
        if len(self.intercepts) != n_pairs:
            raise ValueError(
                f"{self.n_classes} classes need {n_pairs} intercepts, "
                f"got {len(self.intercepts)}"
            )
        if self.kernel is Kernel.LINEAR:
            if len(self.weights) != n_pairs:
                raise ValueError(f"linear model needs {n_pairs} weight rows")
            return
        n_support = len(self.support_vectors)
        if len(self.ranges) != self.n_classes + 1:
            raise ValueError(f"ranges needs {self.n_classes + 1} entries")
        if list(self.ranges) != sorted(self.ranges) or self.ranges[0] != 0:
            raise ValueError("ranges must start at 0 and never decrease")
        if self.ranges[-1] != n_support:
            raise ValueError("ranges must end at the number of support vectors")
        if len(self.weights) != self.n_classes - 1:
            raise ValueError(f"model needs {self.n_classes - 1} weight rows")
        if any(len(row) != n_support for row in self.weights):
            raise ValueError("every weight row needs one entry per support vector")

    def predict_linear(self, sample: Sequence[float]) -> int:
        """Classify ``sample`` using the weights as linear coefficients."""
        for row in self.weights:
            if len(row) != len(sample):
                raise ValueError(
                    f"sample has {len(sample)} features, model expects {len(row)}"
                )
        rules = [_dot(row, sample) for row in self.weights]
        return _vote(self.n_classes, rules, self.intercepts)

    def predict(self, sample: Sequence[float]) -> int:
        """Classify ``sample`` with the model's kernel."""
        if self.kernel is Kernel.LINEAR:
            return self.predict_linear(sample)
        kernels = _kernels(
            self.kernel, sample, self.support_vectors, self.gamma, self.coef, self.degree
        )
        r = self.ranges
        rules = []
        for i, j in combinations(range(self.n_classes), 2):
            own = zip(kernels[r[j]:r[j + 1]], self.weights[i][r[j]:r[j + 1]])
            other = zip(kernels[r[i]:r[i + 1]], self.weights[j - 1][r[i]:r[i + 1]])
            rules.append(math.fsum(k * w for k, w in (*own, *other)))
        return _vote(self.n_classes, rules, self.intercepts)


@dataclass
class SVR:
    """Support vector regressor.

    For the linear kernel ``weights`` are the feature coefficients; otherwise
    they are the dual coefficients, one per support vector.
    """

    intercept: float
    weights: Sequence[float]
    kernel: Kernel = Kernel.LINEAR
    support_vectors: Sequence[Sequence[float]] = field(default_factory=tuple)
    gamma: float = 0.0
    coef: float = 0.0
    degree: int = 3

    def __post_init__(self) -> None:
        self.kernel = Kernel(self.kernel)
        self.weights = tuple(self.weights)
        self.support_vectors = tuple(tuple(v) for v in self.support_vectors)
        if self.kernel is not Kernel.LINEAR and len(self.weights) != len(
            self.support_vectors
        ):
            raise ValueError("model needs one weight per support vector")

    def predict_linear(self, sample: Sequence[float]) -> float:
        """Return ``<weights, sample> + intercept``."""
        if len(sample) != len(self.weights):
            raise ValueError(
                f"sample has {len(sample)} features, model expects {len(self.weights)}"
            )
        return _dot(self.weights, sample) + self.intercept

    def predict(self, sample: Sequence[float]) -> float:
        """Return the regression value for ``sample`` with the model's kernel."""
        if self.kernel is Kernel.LINEAR:
            return self.predict_linear(sample)
        kernels = _kernels(
            self.kernel, sample, self.support_vectors, self.gamma, self.coef, self.degree
        )
        return _dot(kernels, self.weights) + self.intercept