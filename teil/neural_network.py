"""Multi-layer perceptron classifier and regressor with fixed weights."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import chain

from teil.activation import Activation, activate, softmax


@dataclass
class HiddenLayer:
    """A dense layer.

    ``weights`` has one row per input and one column per neuron, so the weight
    from input ``j`` to neuron ``i`` is ``weights[j][i]``.
    """

    weights: Sequence[Sequence[float]]
    bias: Sequence[float]
    activation: Activation = Activation.IDENTITY

    def __post_init__(self) -> None:
        self.weights = tuple(tuple(row) for row in self.weights)
        self.bias = tuple(self.bias)
        self.activation = Activation(self.activation)
        if not self.bias:
            raise ValueError("a layer needs at least one neuron")
        for row in self.weights:
            if len(row) != len(self.bias):
                raise ValueError(
                    f"weight row has {len(row)} columns, layer has "
                    f"{len(self.bias)} neurons"
                )

    @property
    def n_inputs(self) -> int:
        return len(self.weights)

    @property
    def n_neurons(self) -> int:
        return len(self.bias)

    def propagate(self, inputs: Sequence[float]) -> list[float]:
        """Return the activated neuron values for ``inputs``."""
        values = list(inputs)
        if len(values) != self.n_inputs:
            raise ValueError(
                f"layer expects {self.n_inputs} inputs, got {len(values)}"
            )
        columns = zip(*self.weights) if self.weights else (() for _ in self.bias)
        neurons = []
        for bias, column in zip(self.bias, columns):
            total = math.fsum(chain((bias,), (w * x for w, x in zip(column, values))))
            neurons.append(activate(self.activation, total))
        return neurons


def _check_layers(layers: Sequence[HiddenLayer]) -> tuple[HiddenLayer, ...]:
    layers = tuple(layers)
    if not layers:
        raise ValueError("a network needs at least one layer")
    for prev, layer in zip(layers, layers[1:]):
        if layer.n_inputs != prev.n_neurons:
            raise ValueError(
                f"layer expects {layer.n_inputs} inputs but the previous layer "
                f"has {prev.n_neurons} neurons"
            )
    return layers


def _run(layers: Sequence[HiddenLayer], sample: Sequence[float]) -> list[float]:
    values = list(sample)
    for layer in layers:
        values = layer.propagate(values)
    return values


@dataclass
class MLPClassifier:
    """Feed-forward classifier whose output layer is passed through softmax."""

    layers: Sequence[HiddenLayer]

    def __post_init__(self) -> None:
        self.layers = _check_layers(self.layers)

    @property
    def n_features(self) -> int:
        return self.layers[0].n_inputs

    def forward(self, sample: Sequence[float]) -> list[float]:
        """Return the softmax of the output layer for ``sample``."""
        return softmax(_run(self.layers, sample))

    def predict(self, sample: Sequence[float]) -> int:
        """Return the predicted class index.

        With a single output neuron the class is 1 when its value exceeds 0.5.
        Otherwise the first neuron holding the largest value wins.
        """
        outputs = self.forward(sample)
        if len(outputs) == 1:
            return 1 if outputs[0] > 0.5 else 0
        return max(range(len(outputs)), key=outputs.__getitem__)


@dataclass
class MLPRegressor:
    """Feed-forward regressor returning the first output neuron."""

    layers: Sequence[HiddenLayer]

    def __post_init__(self) -> None:
        self.layers = _check_layers(self.layers)

    @property
    def n_features(self) -> int:
        return self.layers[0].n_inputs

    def predict(self, sample: Sequence[float]) -> float:
        """Return the value of the first output neuron for ``sample``."""
        return _run(self.layers, sample)[0]