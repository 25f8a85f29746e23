"""Naive Bayes classifiers with precomputed parameters."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass


def _matrix(rows: Sequence[Sequence[float]]) -> tuple[tuple[float, ...], ...]:
    return tuple(tuple(row) for row in rows)


def _argmax(values: Sequence[float]) -> int:
    """Index of the largest value; the first one wins a tie."""
    return max(range(len(values)), key=values.__getitem__)


@dataclass
class GaussianNB:
    """Gaussian naive Bayes classifier.

    ``pre_computed`` holds one row per class; the constant term added to each
    class's likelihood is taken from the last column of its row.
    """

    class_prior: Sequence[float]
    theta: Sequence[Sequence[float]]
    var: Sequence[Sequence[float]]
    pre_computed: Sequence[Sequence[float]]

    def __post_init__(self) -> None:
        self.class_prior = tuple(self.class_prior)
        self.theta = _matrix(self.theta)
        self.var = _matrix(self.var)
        self.pre_computed = _matrix(self.pre_computed)
        n = len(self.class_prior)
        if not n:
            raise ValueError("at least one class is required")
        if not (len(self.theta) == len(self.var) == len(self.pre_computed) == n):
            raise ValueError("every parameter needs one row per class")
        width = len(self.theta[0])
        if any(len(row) != width for row in (*self.theta, *self.var)):
            raise ValueError("theta and var rows must all have the same length")

    @property
    def n_classes(self) -> int:
        return len(self.class_prior)

    @property
    def n_features(self) -> int:
        return len(self.theta[0])

    def joint_log_likelihood(self, sample: Sequence[float]) -> list[float]:
        """Return the joint log-likelihood of ``sample`` for each class."""
        if len(sample) != self.n_features:
            raise ValueError(
                f"sample has {len(sample)} features, model expects {self.n_features}"
            )
        result = []
        for prior, theta, var, pre in zip(
            self.class_prior, self.theta, self.var, self.pre_computed
        ):
            spread = math.fsum((x - t) ** 2 / v for x, t, v in zip(sample, theta, var))
            constant = pre[-1] if pre else 0.0
            result.append(prior + constant - 0.5 * spread)
        return result

    def predict(self, sample: Sequence[float]) -> int:
        """Return the index of the most likely class."""
        return _argmax(self.joint_log_likelihood(sample))


@dataclass
class MultinomialNB:
    """Multinomial naive Bayes classifier."""

    class_log_prior: Sequence[float]
    feature_log_prob: Sequence[Sequence[float]]

    def __post_init__(self) -> None:
        self.class_log_prior = tuple(self.class_log_prior)
        self.feature_log_prob = _matrix(self.feature_log_prob)
        if not self.class_log_prior:
            raise ValueError("at least one class is required")
        if len(self.feature_log_prob) != len(self.class_log_prior):
            raise ValueError("feature_log_prob needs one row per class")
        width = len(self.feature_log_prob[0])
        if any(len(row) != width for row in self.feature_log_prob):
            raise ValueError("feature_log_prob rows must all have the same length")

    @property
    def n_classes(self) -> int:
        return len(self.class_log_prior)

    @property
    def n_features(self) -> int:
        return len(self.feature_log_prob[0])

    def joint_log_likelihood(self, sample: Sequence[float]) -> list[float]:
        """Return the joint log-likelihood of ``sample`` for each class."""
        if len(sample) != self.n_features:
            raise ValueError(
                f"sample has {len(sample)} features, model expects {self.n_features}"
            )
        return [
            math.fsum(x * p for x, p in zip(sample, row)) + prior
            for row, prior in zip(self.feature_log_prob, self.class_log_prior)
        ]

    def predict(self, sample: Sequence[float]) -> int:
        """Return the index of the most likely class."""
        return _argmax(self.joint_log_likelihood(sample))