"""Three pre-trained support vector classifiers for the Iris flower data."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from teil.kernel import Kernel
from teil.svm import SVC

_GAMMA = 0.06416744863614975

_LINEAR_WEIGHTS = (
    (-0.046258538085542256, 0.5211827995531007, -1.0030446153124941, -0.4641297849669344),
    (-0.007223125656643181, 0.1789412101069795, -0.5383645876794639, -0.2923926281681868),
    (0.5954977630181517, 0.973900296706443, -2.03099957569016, -2.0063026699090667),
)
_LINEAR_INTERCEPTS = (1.4528444969775751, 1.5077131251781049, 6.780971185110271)

_POLY_SUPPORT = (
    (5.1, 3.3, 1.7, 0.5), (4.8, 3.4, 1.9, 0.2), (4.5, 2.3, 1.3, 0.3),
    (5.1, 3.8, 1.9, 0.4), (6.1, 2.9, 4.7, 1.4), (5.6, 3.0, 4.5, 1.5),
    (6.2, 2.2, 4.5, 1.5), (5.9, 3.2, 4.8, 1.8), (6.3, 2.5, 4.9, 1.5),
    (6.7, 3.0, 5.0, 1.7), (6.0, 2.7, 5.1, 1.6), (5.4, 3.0, 4.5, 1.5),
    (5.1, 2.5, 3.0, 1.1), (4.9, 2.5, 4.5, 1.7), (6.0, 2.2, 5.0, 1.5),
    (6.3, 2.7, 4.9, 1.8), (6.2, 2.8, 4.8, 1.8), (6.1, 3.0, 4.9, 1.8),
    (6.3, 2.8, 5.1, 1.5), (6.0, 3.0, 4.8, 1.8),
)
_POLY_WEIGHTS = (
    (0.5256715686008866, 0.0, 0.029973422330933305, 0.0, -0.0, -0.0, -0.0,
     -0.0, -0.0, -0.0, -0.0, -0.0, -0.55564499093182, -0.1074451016617149,
     -0.0, -0.0, -0.0, -0.0, -0.0, -0.0),
    (0.030213746660517862, 0.036900359151084, 0.0, 0.04033099585011306,
     0.015622358913985099, 0.8098069761580579, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
     0.0, -1.0, -0.8254293350720429, -1.0, -1.0, -1.0, -1.0, -1.0),
)
_POLY_INTERCEPTS = (1.1346038567888097, 1.1840816486018733, 3.6379873916673424)
_POLY_RANGES = (0, 4, 13, 20)

_RBF_SUPPORT = (
    (5.7, 3.8, 1.7, 0.3), (5.4, 3.4, 1.7, 0.2), (5.1, 3.3, 1.7, 0.5),
    (4.8, 3.4, 1.9, 0.2), (5.0, 3.0, 1.6, 0.2), (4.5, 2.3, 1.3, 0.3),
    (5.1, 3.8, 1.9, 0.4), (7.0, 3.2, 4.7, 1.4), (6.4, 3.2, 4.5, 1.5),
    (6.9, 3.1, 4.9, 1.5), (6.5, 2.8, 4.6, 1.5), (5.7, 2.8, 4.5, 1.3),
    (6.3, 3.3, 4.7, 1.6), (4.9, 2.4, 3.3, 1.0), (6.6, 2.9, 4.6, 1.3),
    (6.1, 2.9, 4.7, 1.4), (5.6, 2.9, 3.6, 1.3), (5.6, 3.0, 4.5, 1.5),
    (6.2, 2.2, 4.5, 1.5), (5.9, 3.2, 4.8, 1.8), (6.3, 2.5, 4.9, 1.5),
    (6.1, 2.8, 4.7, 1.2), (6.6, 3.0, 4.4, 1.4), (6.8, 2.8, 4.8, 1.4),
    (6.7, 3.0, 5.0, 1.7), (6.0, 2.9, 4.5, 1.5), (5.7, 2.6, 3.5, 1.0),
    (6.0, 2.7, 5.1, 1.6), (5.4, 3.0, 4.5, 1.5), (6.0, 3.4, 4.5, 1.6),
    (6.7, 3.1, 4.7, 1.5), (6.3, 2.3, 4.4, 1.3), (5.5, 2.6, 4.4, 1.2),
    (6.1, 3.0, 4.6, 1.4), (5.0, 2.3, 3.3, 1.0), (5.1, 2.5, 3.0, 1.1),
    (5.8, 2.7, 5.1, 1.9), (4.9, 2.5, 4.5, 1.7), (6.5, 3.2, 5.1, 2.0),
    (6.4, 2.7, 5.3, 1.9), (5.7, 2.5, 5.0, 2.0), (6.5, 3.0, 5.5, 1.8),
    (6.0, 2.2, 5.0, 1.5), (5.6, 2.8, 4.9, 2.0), (6.3, 2.7, 4.9, 1.8),
    (6.2, 2.8, 4.8, 1.8), (6.1, 3.0, 4.9, 1.8), (7.2, 3.0, 5.8, 1.6),
    (7.9, 3.8, 6.4, 2.0), (6.3, 2.8, 5.1, 1.5), (6.1, 2.6, 5.6, 1.4),
    (6.4, 3.1, 5.5, 1.8), (6.0, 3.0, 4.8, 1.8), (6.9, 3.1, 5.4, 2.1),
    (6.9, 3.1, 5.1, 2.3), (5.8, 2.7, 5.1, 1.9), (6.7, 3.0, 5.2, 2.3),
    (6.3, 2.5, 5.0, 1.9), (6.5, 3.0, 5.2, 2.0), (5.9, 3.0, 5.1, 1.8),
)
_RBF_WEIGHTS = (
    (0.0, 0.3169291682042101, 1.0, 1.0, 0.07471753254958248, 1.0, 1.0, -0.0,
     -0.0, -0.0, -0.0, -0.0, -0.0, -1.0, -0.0, -0.0, -0.39164670075379254,
     -0.0, -0.0, -0.0, -0.0, -0.0, -0.0, -0.0, -0.0, -0.0, -1.0, -0.0, -0.0,
     -0.0, -0.0, -0.0, -0.0, -0.0, -1.0, -1.0, -0.0, -1.0, -0.0, -0.0, -0.0,
     -0.0, -0.0, -0.0, -0.0, -0.0, -0.0, -0.0, -0.3447907051638908, -0.0,
     -0.0, -0.0, -0.6793035492280736, -0.0, -0.0, -0.0, -0.0, -0.0, -0.0,
     -0.0),
    (0.2681080283454389, 0.0, 0.021145270773092383, 0.26526426249873, 0.0,
     0.46957669277470304, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 0.0, 1.0, 1.0,
     0.0, 1.0, 1.0, 1.0, 1.0, 1.0, 0.29353550847347315, 1.0, 1.0, 1.0, 0.0,
     1.0, 1.0, 1.0, 1.0, 1.0, 0.7064644915265269, 1.0, 0.0, 0.0, -1.0, -1.0,
     -1.0, -1.0, -1.0, -1.0, -1.0, -1.0, -1.0, -1.0, -1.0, -1.0, -0.0, -1.0,
     -1.0, -1.0, -1.0, -1.0, -1.0, -1.0, -1.0, -1.0, -1.0, -1.0),
)
_RBF_INTERCEPTS = (0.1263169546904858, -0.06446388127928576, -0.10704314708709724)
_RBF_RANGES = (0, 7, 36, 60)

DATASET = (
    (6.0, 2.2, 5.0, 1.5), (7.3, 2.9, 6.3, 1.8), (4.8, 3.0, 1.4, 0.1),
    (6.4, 2.8, 5.6, 2.1), (5.4, 3.4, 1.7, 0.2), (5.1, 3.4, 1.5, 0.2),
    (5.0, 2.3, 3.3, 1.0), (7.7, 3.0, 6.1, 2.3), (5.6, 3.0, 4.5, 1.5),
    (5.5, 2.3, 4.0, 1.3), (5.2, 4.1, 1.5, 0.1), (5.1, 3.5, 1.4, 0.2),
    (7.4, 2.8, 6.1, 1.9), (5.7, 4.4, 1.5, 0.4), (5.8, 2.7, 5.1, 1.9),
    (6.0, 2.7, 5.1, 1.6), (6.4, 3.2, 4.5, 1.5), (6.6, 3.0, 4.4, 1.4),
    (6.7, 3.1, 4.7, 1.5), (6.4, 2.7, 5.3, 1.9), (5.8, 2.8, 5.1, 2.4),
    (5.1, 3.8, 1.5, 0.3), (4.4, 3.0, 1.3, 0.2), (4.9, 2.5, 4.5, 1.7),
    (4.8, 3.1, 1.6, 0.2), (5.7, 2.9, 4.2, 1.3), (5.2, 3.4, 1.4, 0.2),
    (7.0, 3.2, 4.7, 1.4), (6.2, 3.4, 5.4, 2.3), (5.8, 2.7, 5.1, 1.9),
)
"""Thirty Iris samples: sepal length, sepal width, petal length, petal width."""


def linear_model() -> SVC:
    """Return the linear-kernel Iris classifier."""
    return SVC(
        n_classes=3,
        intercepts=_LINEAR_INTERCEPTS,
        weights=_LINEAR_WEIGHTS,
        kernel=Kernel.LINEAR,
        degree=0,
    )


def poly_model() -> SVC:
    """Return the cubic polynomial-kernel Iris classifier."""
    return SVC(
        n_classes=3,
        intercepts=_POLY_INTERCEPTS,
        weights=_POLY_WEIGHTS,
        kernel=Kernel.POLY,
        support_vectors=_POLY_SUPPORT,
        ranges=_POLY_RANGES,
        gamma=_GAMMA,
        coef=0.0,
        degree=3,
    )


def rbf_model() -> SVC:
    """Return the RBF-kernel Iris classifier."""
    return SVC(
        n_classes=3,
        intercepts=_RBF_INTERCEPTS,
        weights=_RBF_WEIGHTS,
        kernel=Kernel.RBF,
        support_vectors=_RBF_SUPPORT,
        ranges=_RBF_RANGES,
        gamma=_GAMMA,
        coef=0.0,
        degree=3,
    )


def classify_dataset() -> list[tuple[int, int, int]]:
    """Classify every built-in sample with the linear, polynomial and RBF models."""
    linear, poly, rbf = linear_model(), poly_model(), rbf_model()
    return [
        (linear.predict_linear(sample), poly.predict(sample), rbf.predict(sample))
        for sample in DATASET
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the class each model gives to each built-in sample."""
    parser = argparse.ArgumentParser(
        description="Classify the built-in Iris samples with three SVM kernels."
    )
    parser.parse_args(argv)
    for linear, poly, rbf in classify_dataset():
        print(f"{linear}  {poly}  {rbf} ")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())