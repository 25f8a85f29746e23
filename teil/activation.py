"""Neuron activation functions."""

from __future__ import annotations

import math
from collections.abc import Iterable
from enum import IntEnum


class Activation(IntEnum):
    """Activation function codes used by network layers."""

    TANH = 0
    SIGMOID = 1
    LOGISTIC = 2
    RELU = 3
    LEAKY_RELU = 4
    SOFTMAX = 5
    IDENTITY = 6
    SWISH = 7


def identity(neuron: float) -> float:
    """Return the value unchanged, as a float."""
    return float(neuron)


def logistic(neuron: float) -> float:
    """Return the logistic sigmoid of the value."""
    if neuron >= 0:
        return 1.0 / (1.0 + math.exp(-neuron))
    e = math.exp(neuron)
    return e / (1.0 + e)


def relu(neuron: float) -> float:
    """Return the value if positive, else zero."""
    return neuron if neuron > 0.0 else 0.0


def leaky_relu(neuron: float) -> float:
    """Return the value if positive, else a tenth of it."""
    return neuron if neuron > 0.0 else 0.1 * neuron


def softmax(neurons: Iterable[float]) -> list[float]:
    """Return the softmax of the values as a new list."""
    values = list(neurons)
    if not values:
        return []
    peak = max(values)
    exps = [math.exp(v - peak) for v in values]
    total = math.fsum(exps)
    return [e / total for e in exps]


def activate(activation: int, neuron: float) -> float:
    """Apply the per-neuron activation named by ``activation``.

    Softmax acts on a whole layer, so per neuron it leaves the value unchanged.
    """
    kind = Activation(activation)
    if kind is Activation.RELU:
        return relu(neuron)
    if kind is Activation.LEAKY_RELU:
        return leaky_relu(neuron)
    if kind in (Activation.SIGMOID, Activation.LOGISTIC):
        return logistic(neuron)
    if kind is Activation.SWISH:
        return neuron * logistic(neuron)
    if kind is Activation.TANH:
        return math.tanh(neuron)
    return identity(neuron)