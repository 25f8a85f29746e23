"""Feature scaling and normalisation."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum


def _pairs(sample: Sequence[float], params: Sequence[float], name: str):
    if len(sample) != len(params):
        raise ValueError(
            f"sample has {len(sample)} features, {name} has {len(params)}"
        )
    return zip(sample, params)


@dataclass
class StandardScaler:
    """Scales features by a fixed mean and standard deviation."""

    mean: Sequence[float] = field(default_factory=tuple)
    std: Sequence[float] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        self.mean = tuple(self.mean)
        self.std = tuple(self.std)
        if len(self.mean) != len(self.std):
            raise ValueError("mean and std must have the same length")

    def transform(self, sample: Sequence[float]) -> list[float]:
        """Return ``(x - mean) / std`` per feature."""
        _pairs(sample, self.mean, "mean")
        return [(x - m) / s for x, m, s in zip(sample, self.mean, self.std)]

    def inverse(self, sample: Sequence[float]) -> list[float]:
        """Undo :meth:`transform`."""
        _pairs(sample, self.mean, "mean")
        return [x * s + m for x, m, s in zip(sample, self.mean, self.std)]


@dataclass
class MinMaxScaler:
    """Scales features into the range given by fixed minima and maxima."""

    minimum: Sequence[float] = field(default_factory=tuple)
    maximum: Sequence[float] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        self.minimum = tuple(self.minimum)
        self.maximum = tuple(self.maximum)
        if len(self.minimum) != len(self.maximum):
            raise ValueError("minimum and maximum must have the same length")

    def transform(self, sample: Sequence[float]) -> list[float]:
        """Return ``(x - min) / (max - min)`` per feature."""
        _pairs(sample, self.minimum, "minimum")
        return [
            (x - lo) / (hi - lo)
            for x, lo, hi in zip(sample, self.minimum, self.maximum)
        ]

    def inverse(self, sample: Sequence[float]) -> list[float]:
        """Undo :meth:`transform`."""
        _pairs(sample, self.minimum, "minimum")
        return [
            x * (hi - lo) + lo
            for x, lo, hi in zip(sample, self.minimum, self.maximum)
        ]


class NormType(Enum):
    """Norms used by :func:`normalize`."""

    L1 = 0
    L2 = 1
    MAX = 2


def normalize(sample: Sequence[float], norm_type: NormType) -> list[float]:
    """Return the sample divided by its norm; a zero-norm sample is returned as is."""
    norm_type = NormType(norm_type)
    values = list(sample)
    if norm_type is NormType.L1:
        norm = math.fsum(abs(x) for x in values)
    elif norm_type is NormType.L2:
        norm = math.sqrt(math.fsum(x * x for x in values))
    else:
        norm = max((abs(x) for x in values), default=0.0)
    if norm == 0:
        return values
    return [x / norm for x in values]