import math

import pytest

from teil.activation import Activation, activate
from teil.neural_network import HiddenLayer, MLPClassifier, MLPRegressor


def identity_layer(n, activation=Activation.IDENTITY, bias=None):
    weights = [[1.0 if i == j else 0.0 for i in range(n)] for j in range(n)]
    return HiddenLayer(weights, bias if bias is not None else [0.0] * n, activation)


def test_identity_layer_reproduces_inputs():
    layer = identity_layer(3)
    assert layer.propagate([0.5, -1.25, 3.0]) == pytest.approx([0.5, -1.25, 3.0])


def test_bias_is_added():
    layer = identity_layer(2, bias=[0.25, -0.5])
    zero = layer.propagate([0.0, 0.0])
    assert zero == pytest.approx([0.25, -0.5])


def test_relu_clears_negative_values():
    layer = identity_layer(2, Activation.RELU)
    assert layer.propagate([-2.0, 3.5]) == pytest.approx([0.0, 3.5])


@pytest.mark.parametrize(
    "kind",
    [
        Activation.TANH,
        Activation.SIGMOID,
        Activation.LOGISTIC,
        Activation.LEAKY_RELU,
        Activation.SWISH,
        Activation.SOFTMAX,
    ],
)
def test_layer_applies_activation_per_neuron(kind):
    layer = identity_layer(2, kind)
    values = [-0.7, 1.3]
    expected = [activate(kind, v) for v in values]
    assert layer.propagate(values) == pytest.approx(expected)


def test_weights_are_indexed_input_then_neuron():
    layer = HiddenLayer([[2.0, 0.0], [0.0, 0.0]], [0.0, 0.0])
    out = layer.propagate([1.5, 4.0])
    assert out[1] == 0.0
    assert out[0] == pytest.approx(2 * 1.5)


def test_layer_rejects_wrong_input_length():
    with pytest.raises(ValueError):
        identity_layer(2).propagate([1.0])


def test_layer_rejects_ragged_weights():
    with pytest.raises(ValueError):
        HiddenLayer([[1.0, 2.0], [1.0]], [0.0, 0.0])


def test_layer_requires_neurons():
    with pytest.raises(ValueError):
        HiddenLayer([], [])


def test_network_rejects_mismatched_layers():
    with pytest.raises(ValueError):
        MLPClassifier([identity_layer(2), identity_layer(3)])


def test_network_requires_layers():
    with pytest.raises(ValueError):
        MLPRegressor([])


def test_forward_is_a_distribution():
    model = MLPClassifier([identity_layer(3, Activation.RELU), identity_layer(3)])
    out = model.forward([0.2, 1.7, -0.4])
    assert math.fsum(out) == pytest.approx(1.0)
    assert all(0.0 < v < 1.0 for v in out)


def test_predict_picks_largest_output():
    model = MLPClassifier([identity_layer(4)])
    for sample in ([3.0, 1.0, 0.0, -1.0], [0.0, 0.1, 5.0, 2.0], [-1.0, -2.0, -3.0, 9.0]):
        out = model.forward(sample)
        assert model.predict(sample) == out.index(max(out))
        assert model.predict(sample) == sample.index(max(sample))


def test_predict_tie_goes_to_first_class():
    model = MLPClassifier([identity_layer(3)])
    assert model.predict([1.0, 1.0, 1.0]) == 0


def test_single_output_classifier_uses_threshold():
    model = MLPClassifier([HiddenLayer([[1.0]], [0.0])])
    # softmax of one neuron is always one, which lies above the threshold
    assert model.predict([-10.0]) == 1
    assert model.forward([-10.0]) == pytest.approx([1.0])


def test_regressor_returns_first_neuron():
    layers = [identity_layer(2, Activation.RELU), HiddenLayer([[1.0], [1.0]], [0.0])]
    model = MLPRegressor(layers)
    assert model.predict([1.5, 2.25]) == pytest.approx(1.5 + 2.25)
    assert model.predict([-1.5, 2.25]) == pytest.approx(2.25)


def test_regressor_is_linear_with_identity_layers():
    model = MLPRegressor([HiddenLayer([[0.3], [-1.1]], [0.0])])
    x = [2.0, 0.5]
    doubled = [4.0, 1.0]
    assert model.predict(doubled) == pytest.approx(2 * model.predict(x))