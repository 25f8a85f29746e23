import pytest

from teil.kernel import Kernel
from teil.svm import SVC, SVR

IRIS_LINEAR = SVC(
    n_classes=3,
    intercepts=[1.4528444969775751, 1.5077131251781049, 6.780971185110271],
    weights=[
        [-0.046258538085542256, 0.5211827995531007, -1.0030446153124941, -0.4641297849669344],
        [-0.007223125656643181, 0.1789412101069795, -0.5383645876794639, -0.2923926281681868],
        [0.5954977630181517, 0.973900296706443, -2.03099957569016, -2.0063026699090667],
    ],
)

IRIS_POLY = SVC(
    n_classes=3,
    intercepts=[1.1346038567888097, 1.1840816486018733, 3.6379873916673424],
    kernel=Kernel.POLY,
    degree=3,
    gamma=0.06416744863614975,
    coef=0.0,
    ranges=[0, 4, 13, 20],
    support_vectors=[
        [5.1, 3.3, 1.7, 0.5], [4.8, 3.4, 1.9, 0.2], [4.5, 2.3, 1.3, 0.3],
        [5.1, 3.8, 1.9, 0.4], [6.1, 2.9, 4.7, 1.4], [5.6, 3.0, 4.5, 1.5],
        [6.2, 2.2, 4.5, 1.5], [5.9, 3.2, 4.8, 1.8], [6.3, 2.5, 4.9, 1.5],
        [6.7, 3.0, 5.0, 1.7], [6.0, 2.7, 5.1, 1.6], [5.4, 3.0, 4.5, 1.5],
        [5.1, 2.5, 3.0, 1.1], [4.9, 2.5, 4.5, 1.7], [6.0, 2.2, 5.0, 1.5],
        [6.3, 2.7, 4.9, 1.8], [6.2, 2.8, 4.8, 1.8], [6.1, 3.0, 4.9, 1.8],
        [6.3, 2.8, 5.1, 1.5], [6.0, 3.0, 4.8, 1.8],
    ],
    weights=[
        [0.5256715686008866, 0.0, 0.029973422330933305, 0.0, -0.0, -0.0, -0.0,
         -0.0, -0.0, -0.0, -0.0, -0.0, -0.55564499093182, -0.1074451016617149,
         -0.0, -0.0, -0.0, -0.0, -0.0, -0.0],
        [0.030213746660517862, 0.036900359151084, 0.0, 0.04033099585011306,
         0.015622358913985099, 0.8098069761580579, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
         0.0, -1.0, -0.8254293350720429, -1.0, -1.0, -1.0, -1.0, -1.0],
    ],
)

DATASET = [
    [6.0, 2.2, 5.0, 1.5],
    [7.3, 2.9, 6.3, 1.8],
    [4.8, 3.0, 1.4, 0.1],
    [6.4, 2.8, 5.6, 2.1],
    [5.4, 3.4, 1.7, 0.2],
    [5.0, 2.3, 3.3, 1.0],
    [5.6, 3.0, 4.5, 1.5],
    [5.7, 4.4, 1.5, 0.4],
]


def test_linear_iris_setosa_sample():
    assert IRIS_LINEAR.predict_linear([4.8, 3.0, 1.4, 0.1]) == 0


def test_predict_dispatches_to_linear():
    for sample in DATASET:
        assert IRIS_LINEAR.predict(sample) == IRIS_LINEAR.predict_linear(sample)


def test_predictions_are_valid_classes():
    for sample in DATASET:
        assert IRIS_POLY.predict(sample) in range(3)
        assert IRIS_LINEAR.predict(sample) in range(3)


def test_two_class_sign_decides():
    model = SVC(n_classes=2, intercepts=[0.0], weights=[[1.0]])
    assert {model.predict([2.0]), model.predict([-2.0])} == {0, 1}
    assert model.predict([2.0]) != model.predict([-2.0])


def test_vote_tie_goes_to_first_class():
    model = SVC(n_classes=3, intercepts=[0.0, 0.0, 0.0], weights=[[-1.0], [1.0], [-1.0]])
    assert model.predict([1.0]) == 0


def test_degree_one_polynomial_matches_linear():
    w = [0.8, -1.3]
    poly = SVC(
        n_classes=2,
        intercepts=[0.2],
        kernel=Kernel.POLY,
        degree=1,
        gamma=1.0,
        coef=0.0,
        ranges=[0, 1, 2],
        support_vectors=[[1.0, 0.0], [0.0, 1.0]],
        weights=[w],
    )
    linear = SVC(n_classes=2, intercepts=[0.2], weights=[w])
    for sample in ([1.0, 0.0], [0.0, 1.0], [2.0, 1.0], [-1.0, 0.5], [0.3, 0.4]):
        assert poly.predict(sample) == linear.predict(sample)


def test_rbf_classifier_follows_nearest_support_vector():
    model = SVC(
        n_classes=2,
        intercepts=[0.0],
        kernel=Kernel.RBF,
        gamma=1.0,
        ranges=[0, 1, 2],
        support_vectors=[[0.0, 0.0], [10.0, 10.0]],
        weights=[[1.0, -1.0]],
    )
    near_first = model.predict([0.1, -0.1])
    near_second = model.predict([9.9, 10.1])
    assert near_first != near_second
    assert model.predict([0.0, 0.0]) == near_first


def test_tanh_kernel_is_rejected():
    model = SVC(
        n_classes=2,
        intercepts=[0.0],
        kernel=Kernel.TANH,
        ranges=[0, 1, 2],
        support_vectors=[[1.0], [2.0]],
        weights=[[1.0, 1.0]],
    )
    with pytest.raises(ValueError):
        model.predict([1.0])


def test_wrong_sample_length_is_rejected():
    with pytest.raises(ValueError):
        IRIS_LINEAR.predict([1.0, 2.0])
    with pytest.raises(ValueError):
        IRIS_POLY.predict([1.0, 2.0])


def test_wrong_intercept_count_is_rejected():
    with pytest.raises(ValueError):
        SVC(n_classes=3, intercepts=[0.0], weights=[[1.0]])


def test_bad_ranges_are_rejected():
    with pytest.raises(ValueError):
        SVC(
            n_classes=2,
            intercepts=[0.0],
            kernel=Kernel.RBF,
            ranges=[0, 1, 3],
            support_vectors=[[1.0], [2.0]],
            weights=[[1.0, 1.0]],
        )


def test_svr_linear_at_origin_is_intercept():
    model = SVR(intercept=0.75, weights=[2.0, -3.0])
    assert model.predict_linear([0.0, 0.0]) == pytest.approx(0.75)


def test_svr_linear_is_affine():
    model = SVR(intercept=0.75, weights=[2.0, -3.0])
    x = [1.5, 0.25]
    doubled = [3.0, 0.5]
    lhs = model.predict(doubled) - model.intercept
    rhs = 2 * (model.predict(x) - model.intercept)
    assert lhs == pytest.approx(rhs)


def test_svr_degree_one_polynomial_matches_linear():
    weights = [0.4, -2.2, 1.1]
    poly = SVR(
        intercept=-0.3,
        weights=weights,
        kernel=Kernel.POLY,
        degree=1,
        gamma=1.0,
        coef=0.0,
        support_vectors=[[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]],
    )
    linear = SVR(intercept=-0.3, weights=weights)
    for sample in ([1.0, 2.0, 3.0], [-0.5, 0.0, 4.0]):
        assert poly.predict(sample) == pytest.approx(linear.predict(sample))


def test_svr_rbf_at_support_vector():
    model = SVR(
        intercept=0.0,
        weights=[2.5],
        kernel=Kernel.RBF,
        gamma=0.5,
        support_vectors=[[1.0, 1.0]],
    )
    assert model.predict([1.0, 1.0]) == pytest.approx(2.5)


def test_svr_weight_count_is_checked():
    with pytest.raises(ValueError):
        SVR(intercept=0.0, weights=[1.0], kernel=Kernel.RBF, support_vectors=[[1.0], [2.0]])


def test_svr_wrong_sample_length_is_rejected():
    with pytest.raises(ValueError):
        SVR(intercept=0.0, weights=[1.0, 2.0]).predict([1.0])