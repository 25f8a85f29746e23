"""Principal component projection with fixed components."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class PCA:
    """Projects samples onto fixed principal components.

    ``components`` holds one row per principal component, each with one entry
    per feature.
    """

    components: Sequence[Sequence[float]]

    def __post_init__(self) -> None:
        self.components = tuple(tuple(row) for row in self.components)
        if not self.components:
            raise ValueError("at least one component is required")
        width = len(self.components[0])
        if not width:
            raise ValueError("components need at least one feature")
        if any(len(row) != width for row in self.components):
            raise ValueError("component rows must all have the same length")

    @property
    def n_features(self) -> int:
        return len(self.components[0])

    @property
    def n_pcs(self) -> int:
        return len(self.components)

    def transform(self, sample: Sequence[float]) -> list[float]:
        """Return the score of ``sample`` on each component."""
        if len(sample) != self.n_features:
            raise ValueError(
                f"sample has {len(sample)} features, model expects {self.n_features}"
            )
        return [
            math.fsum(x * c for x, c in zip(sample, row)) for row in self.components
        ]

    def inverse(self, scores: Sequence[float]) -> list[float]:
        """Map component scores back into feature space."""
        if len(scores) != self.n_pcs:
            raise ValueError(
                f"got {len(scores)} scores, model has {self.n_pcs} components"
            )
        return [
            math.fsum(s * c for s, c in zip(scores, column))
            for column in zip(*self.components)
        ]

    def error(self, sample: Sequence[float]) -> list[float]:
        """Return the residual of ``sample`` after projecting and reconstructing it."""
        reconstructed = self.inverse(self.transform(sample))
        return [x - r for x, r in zip(sample, reconstructed)]