import numpy as np
import pytest

from grid_points import extract_points, points_to_array


def test_extracts_on_cells_as_int_tuples():
    grid = np.array([
        [0, 0, 1, 1],
        [0, 0, 1, 1],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ])
    points = extract_points(grid, lambda g: g > 0, random_state=0)
    assert sorted(points) == [(0, 2), (0, 3), (1, 2), (1, 3)]
    assert all(isinstance(c, int) for p in points for c in p)


def test_default_predicate_uses_truthiness():
    grid = np.array([True, False, True])
    assert sorted(extract_points(grid)) == [(0,), (2,)]


def test_three_dimensional_grid():
    grid = np.zeros((2, 3, 4), dtype=bool)
    grid[1, 2, 3] = True
    grid[0, 0, 0] = True
    assert sorted(extract_points(grid)) == [(0, 0, 0), (1, 2, 3)]


def test_empty_grid_yields_empty_list():
    assert extract_points(np.zeros((3, 3))) == []
    assert extract_points(np.zeros((0, 5))) == []


def test_same_seed_same_order():
    grid = np.ones((6, 6))
    first = extract_points(grid, random_state=42)
    second = extract_points(grid, random_state=42)
    assert first == second
    assert sorted(first) == sorted(extract_points(grid, random_state=7))


def test_accepts_generator():
    rng = np.random.default_rng(3)
    points = extract_points(np.ones((2, 2)), random_state=rng)
    assert len(points) == 4


def test_rejects_zero_dimensional_grid():
    with pytest.raises(ValueError):
        extract_points(np.array(1))


def test_rejects_predicate_with_wrong_shape():
    with pytest.raises(ValueError, match="Predicate returned shape"):
        extract_points(np.ones((2, 2)), lambda g: g.ravel() > 0)


def test_points_to_array():
    arr = points_to_array([(1, 2), (3, 4)])
    assert arr.shape == (2, 2)
    assert arr.dtype == np.int64
    assert points_to_array([]).shape == (0, 0)
