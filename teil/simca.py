"""SIMCA class membership test over per-class PCA models."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from teil.pca import PCA


@dataclass
class SIMCA:
    """Soft independent modelling of class analogy.

    Each class has its own PCA model and F critical value. ``den`` is
    ``(n_features - n_components) * (n_train - 1 - n_components)``,
    ``squared_train`` the sum of the squared training data and
    ``feature_sum`` the per-feature sum of the training data.
    """

    pca_models: Sequence[PCA]
    f_crit: Sequence[float]
    n_train: int
    den: float
    squared_train: float
    feature_sum: Sequence[float]

    def __post_init__(self) -> None:
        self.pca_models = tuple(self.pca_models)
        self.f_crit = tuple(self.f_crit)
        self.feature_sum = tuple(self.feature_sum)
        if not self.pca_models:
            raise ValueError("at least one class model is required")
        if len(self.f_crit) != len(self.pca_models):
            raise ValueError("f_crit needs one value per class")
        if self.den == 0:
            raise ValueError("den must be non-zero")
        for model in self.pca_models:
            if model.n_features != len(self.feature_sum):
                raise ValueError("class models and feature_sum differ in features")

    @property
    def n_classes(self) -> int:
        return len(self.pca_models)

    @property
    def n_features(self) -> int:
        return len(self.feature_sum)

    def predict(self, sample: Sequence[float]) -> list[bool]:
        """Return, for each class, whether ``sample`` falls within it."""
        if len(sample) != self.n_features:
            raise ValueError(
                f"sample has {len(sample)} features, model expects {self.n_features}"
            )
        denominator = (
            self.squared_train
            + math.fsum(
                2 * x * s + x * x * self.n_train
                for x, s in zip(sample, self.feature_sum)
            )
        ) / self.den
        if denominator == 0:
            raise ValueError("sample gives a zero denominator")
        result = []
        for model, crit in zip(self.pca_models, self.f_crit):
            numerator = math.fsum(e * e for e in model.error(sample))
            result.append(numerator / denominator < crit)
        return result