import matplotlib

matplotlib.use("Agg")

import pytest


@pytest.fixture
def corner_sets():
    """Two 2x2 blocks in opposite corners of a 4x4 grid."""
    X = [(0, 2), (0, 3), (1, 2), (1, 3)]
    Y = [(2, 0), (2, 1), (3, 0), (3, 1)]
    return X, Y
