# backend_numpy.py
"""
backend_numpy.py

Vectorized reference implementations of the exact directed Hausdorff
distance (squared Euclidean metric, no pruning):

- directed_hausdorff_numpy: brute force via broadcasting, exact int64
  squared distances. Memory is O(|X| * |Y| * D).
- directed_hausdorff_kdtree: nearest neighbors from scipy's cKDTree, with the
  winning value recomputed exactly on integers.
"""

import math
from typing import Optional, Sequence, Tuple

import numpy as np
from scipy.spatial import cKDTree

from grid_points import points_to_array
from hausdorff import HausdorffResult

Coord = Tuple[int, ...]


def _as_arrays(
        X: Sequence[Coord],
        Y: Sequence[Coord],
) -> Optional[Tuple[np.ndarray, np.ndarray]]:
    if len(X) == 0 or len(Y) == 0:
        return None
    A = points_to_array(X)
    B = points_to_array(Y)
    if A.shape[1] != B.shape[1]:
        raise ValueError(
            f"Dimensionality mismatch: {A.shape[1]}-d X vs {B.shape[1]}-d Y"
        )
    return A, B


def _result(A: np.ndarray, B: np.ndarray, idx_a: int, idx_b: int) -> HausdorffResult:
    point_a = tuple(int(c) for c in A[idx_a])
    point_b = tuple(int(c) for c in B[idx_b])
    value = int(np.sum((A[idx_a] - B[idx_b]) ** 2))
    return HausdorffResult(
        distance=math.sqrt(value),
        point_a=point_a,
        point_b=point_b,
        value=value,
        comparisons=A.shape[0] * B.shape[0],
        pruned=0,
    )


def directed_hausdorff_numpy(
        X: Sequence[Coord],
        Y: Sequence[Coord],
) -> Optional[HausdorffResult]:
    """
    Brute-force directed Hausdorff distance from X to Y.

    Returns
    -------
    HausdorffResult or None
        None if X or Y is empty.
    """
    arrays = _as_arrays(X, Y)
    if arrays is None:
        return None
    A, B = arrays

    diff = A[:, None, :] - B[None, :, :]  # (Na, Nb, D)
    sq = np.sum(diff * diff, axis=-1)  # (Na, Nb)
    idx_near = sq.argmin(axis=1)  # (Na,)
    min_sq = sq[np.arange(A.shape[0]), idx_near]  # (Na,)
    idx_a_max = int(np.argmax(min_sq))
    return _result(A, B, idx_a_max, int(idx_near[idx_a_max]))


def directed_hausdorff_kdtree(
        X: Sequence[Coord],
        Y: Sequence[Coord],
) -> Optional[HausdorffResult]:
    """
    Directed Hausdorff distance from X to Y using a k-d tree over Y.
    """
    arrays = _as_arrays(X, Y)
    if arrays is None:
        return None
    A, B = arrays

    tree = cKDTree(B)
    dists, idxs = tree.query(A)
    idx_a_max = int(np.argmax(dists))
    return _result(A, B, idx_a_max, int(idxs[idx_a_max]))
