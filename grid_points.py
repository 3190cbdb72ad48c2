# grid_points.py
"""
grid_points.py

Turns a dense grid of arbitrary dimensionality into a point set: one integer
coordinate tuple per "on" cell. The points come back in random order so that
the pruning in the Hausdorff searches is not tied to the scan order of the
grid.
"""

from typing import Callable, List, Optional, Sequence, Tuple, Union

import numpy as np

Coord = Tuple[int, ...]
RandomState = Union[int, np.random.Generator, None]


def extract_points(
        grid: np.ndarray,
        predicate: Optional[Callable[[np.ndarray], np.ndarray]] = None,
        random_state: RandomState = None,
) -> List[Coord]:
    """
    Collect the coordinates of all cells accepted by `predicate`.

    Parameters
    ----------
    grid : np.ndarray
        Dense grid with at least one axis. Extents are arbitrary per axis.
    predicate : callable or None
        Vectorized test applied to the whole grid, e.g. ``lambda g: g > 0``.
        If None, cells are tested for truthiness.
    random_state : int, np.random.Generator or None
        Seed or generator used to shuffle the points (for reproducibility).

    Returns
    -------
    list of tuple of int
        Coordinates of the "on" cells in random order. Empty if no cell
        qualifies.
    """
    grid = np.asarray(grid)
    if grid.ndim < 1:
        raise ValueError("Grid must have at least one dimension")

    if predicate is None:
        mask = grid.astype(bool)
    else:
        mask = np.asarray(predicate(grid), dtype=bool)
        if mask.shape != grid.shape:
            raise ValueError(
                f"Predicate returned shape {mask.shape}, expected {grid.shape}"
            )

    coords = np.argwhere(mask)  # (N, D)
    if coords.shape[0] == 0:
        return []

    rng = np.random.default_rng(random_state)
    order = rng.permutation(coords.shape[0])
    return [tuple(int(c) for c in coords[i]) for i in order]


def points_to_array(points: Sequence[Coord]) -> np.ndarray:
    """
    Stack a point set into an int64 array of shape (N, D). An empty set gives
    shape (0, 0).
    """
    if len(points) == 0:
        return np.empty((0, 0), dtype=np.int64)
    return np.asarray(points, dtype=np.int64).reshape(len(points), -1)
