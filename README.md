# teil

Lightweight inference for machine-learning models whose parameters were
trained elsewhere. Each model is a dataclass that takes its fitted parameters
at construction and predicts one sample at a time. Samples are plain
sequences of floats. The package uses only the standard library.

## What is included

- `teil.distance`: `euclidean_distance`, `sqr_euclidean_distance` and
  `calculate_distance`, which picks one of them with a `DistanceMetric`.
- `teil.activation`: `identity`, `logistic`, `relu`, `leaky_relu` (slope 0.1)
  and `softmax`. `activate` applies the per-neuron function named by an
  `Activation` value (`TANH`, `SIGMOID`, `LOGISTIC`, `RELU`, `LEAKY_RELU`,
  `SOFTMAX`, `IDENTITY`, `SWISH`). `SOFTMAX` and `IDENTITY` leave the value
  unchanged.
- `teil.kernel`: `kernel_polynomial` and `kernel_rbf`. Each gives one kernel
  value per support vector. The module also holds the `Kernel` enum.
- `teil.scaler`: `StandardScaler` and `MinMaxScaler`, each with `transform`
  and `inverse`. `normalize` divides by the L1, L2 or max norm (`NormType`).
  A sample whose norm is zero comes back unchanged.
- `teil.bayes`: `GaussianNB` and `MultinomialNB`, each with
  `joint_log_likelihood` and `predict`.
- `teil.neural_network`: `HiddenLayer` (a dense layer with `propagate`),
  `MLPClassifier` (`forward` returns the softmax of the output layer and
  `predict` returns a class index) and `MLPRegressor` (`predict` returns the
  first output neuron).
- `teil.svm`: `SVC` is a one-vs-one classifier with linear, polynomial or RBF
  kernel, offering `predict` and `predict_linear`. `SVR` is a regressor with
  the same kernels.
- `teil.tree`: `predict_linked` walks a tree of `TreeNode`s and returns the
  leaf it reaches. `predict_array` walks a flat list of `ArrayNode`s and
  returns the `OutputNode` it reaches.
- `teil.pca`: `PCA` with fixed components, offering `transform`, `inverse`
  and `error`.
- `teil.svd`: `svd` decomposes a square matrix by power iteration and
  deflation. It returns an `SVDResult` with sign-flipped components,
  singular values and explained-variance ratios. The module also has
  `power_iteration` and `calculate_eigenvalue`.
- `teil.simca`: `SIMCA` tests class membership over per-class `PCA` models.
  `predict` returns one boolean per class.
- `teil.homology`: `ZeroHomology` is a zero-dimensional homology analysis. Two
  points count as connected when their squared Euclidean distance is at most
  the given distance. It offers these methods:
  - `connections_at` gives the points connected to a given point.
  - `cluster` gives the connected component of a point.
  - `cluster_analysis` counts the components at a distance.
  - `max_distance` searches the sorted pair distances for where all points
    join.

  The module also has `get_start_idx`.

## Installation

```
pip install .
```

To also install the test requirements:

```
pip install ".[test]"
```

## Example

```python
from teil.distance import euclidean_distance
from teil.activation import softmax
from teil.iris_svc import rbf_model

print(euclidean_distance([0.0, 0.0], [3.0, 4.0]))  # 5.0
print(softmax([1.0, 1.0]))                          # [0.5, 0.5]
print(rbf_model().predict([5.1, 3.5, 1.4, 0.2]))    # class index
```

## Commands

```
teil-homology-demo
```

This runs `ZeroHomology` on a built-in set of 16 four-feature points. It
prints the distance at which all points are connected. It then prints the
number of clusters at each sorted pair distance up to that point.

```
teil-iris-svc
```

This classifies 30 built-in Iris samples with three pre-trained `SVC` models,
which use linear, polynomial and RBF kernels. It prints the class each model
gives, one sample per line. The same models are available in Python as
`teil.iris_svc.linear_model`, `poly_model` and `rbf_model`, and the results
as `classify_dataset()`.

## What it does not do

- It does not train models. Apart from `svd`, which computes components from
  a given matrix, every parameter must be supplied ready-made.
- It does not load or save model files. Parameters are passed in as Python
  sequences.
- `SVC` and `SVR` predict only with linear, polynomial and RBF kernels. A
  model built with `Kernel.TANH` raises `ValueError` when it predicts.

## Tests

```
pytest
```