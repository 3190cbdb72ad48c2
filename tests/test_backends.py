import math
import random

import pytest

from backend_numpy import directed_hausdorff_kdtree, directed_hausdorff_numpy
from hausdorff import directed_hausdorff

BACKENDS = [directed_hausdorff_numpy, directed_hausdorff_kdtree]


@pytest.mark.parametrize("backend", BACKENDS)
def test_corner_blocks(backend, corner_sets):
    X, Y = corner_sets
    result = backend(X, Y)
    assert result.value == 8
    assert result.distance == pytest.approx(math.sqrt(8))
    assert result.point_a == (0, 3)
    assert result.point_b == (2, 1)
    assert result.comparisons == 16


@pytest.mark.parametrize("backend", BACKENDS)
def test_agrees_with_pruned_search(backend):
    rng = random.Random(17)
    for dim in (1, 2, 3):
        for _ in range(10):
            X = [tuple(rng.randrange(20) for _ in range(dim)) for _ in range(rng.randint(1, 25))]
            Y = [tuple(rng.randrange(20) for _ in range(dim)) for _ in range(rng.randint(1, 25))]
            assert backend(X, Y).value == directed_hausdorff(X, Y).value


@pytest.mark.parametrize("backend", BACKENDS)
def test_empty_and_mismatch(backend):
    assert backend([], [(1, 1)]) is None
    assert backend([(1, 1)], []) is None
    with pytest.raises(ValueError):
        backend([(1, 1)], [(1, 1, 1)])


def test_torch_backend(corner_sets):
    pytest.importorskip("torch")
    from backend_torch import directed_hausdorff_torch

    X, Y = corner_sets
    result = directed_hausdorff_torch(X, Y, device="cpu")
    assert result.value == 8
    assert result.point_a == (0, 3)
    assert result.point_b == (2, 1)
    assert directed_hausdorff_torch([], Y) is None
    with pytest.raises(ValueError):
        directed_hausdorff_torch([(1, 1)], [(1, 1, 1)])
