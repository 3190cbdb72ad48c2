import math

import pytest

from distance_metrics import (
    CHEBYSHEV,
    MANHATTAN,
    SQUARED_EUCLIDEAN,
    DistanceMetric,
    chebyshev,
    manhattan,
    resolve_metric,
    squared_euclidean,
)


def test_squared_euclidean_is_exact_integer():
    assert squared_euclidean((0, 3), (2, 1)) == 8
    assert squared_euclidean((1, 2, 3), (1, 2, 3)) == 0
    assert isinstance(squared_euclidean((10 ** 9, 0), (0, 0)), int)
    assert squared_euclidean((10 ** 9, 0), (0, 0)) == 10 ** 18


def test_other_metrics():
    assert manhattan((0, 3), (2, 1)) == 4
    assert chebyshev((0, 3), (2, 0)) == 3
    assert chebyshev((), ()) == 0


@pytest.mark.parametrize("metric", [squared_euclidean, manhattan, chebyshev])
def test_dimension_mismatch_fails_fast(metric):
    with pytest.raises(ValueError, match="Dimensionality mismatch"):
        metric((1, 2), (1, 2, 3))


def test_metric_objects_are_callable_and_finalize():
    assert SQUARED_EUCLIDEAN((0, 0), (3, 4)) == 25
    assert SQUARED_EUCLIDEAN.finalize(25) == 5.0
    assert MANHATTAN.finalize(7) == 7.0
    assert CHEBYSHEV.finalize(3) == 3.0


def test_resolve_metric():
    assert resolve_metric("manhattan") is MANHATTAN
    assert resolve_metric(CHEBYSHEV) is CHEBYSHEV

    custom = resolve_metric(squared_euclidean)
    assert isinstance(custom, DistanceMetric)
    assert custom.name == "squared_euclidean"
    assert custom.finalize(2) == math.sqrt(2)

    with pytest.raises(ValueError):
        resolve_metric("cosine")
    with pytest.raises(ValueError):
        resolve_metric(42)
