# backend_torch.py
"""
backend_torch.py

PyTorch brute-force directed Hausdorff distance (squared Euclidean, no
pruning). The full |X| x |Y| distance matrix is built on the selected device,
which pays off for large point sets on a GPU.
"""

import math
from typing import Literal, Optional, Sequence, Tuple

try:
    import torch
except ImportError as e:  # pragma: no cover
    raise ImportError(
        "backend_torch requires PyTorch to be installed. "
        "Install it via `pip install torch`."
    ) from e

from grid_points import points_to_array
from hausdorff import HausdorffResult

Coord = Tuple[int, ...]


def directed_hausdorff_torch(
        X: Sequence[Coord],
        Y: Sequence[Coord],
        device: Literal["cpu", "cuda"] = "cpu",
) -> Optional[HausdorffResult]:
    """
    Directed Hausdorff distance from X to Y on torch tensors.

    Parameters
    ----------
    X, Y : sequence of tuple of int
        Point sets of equal dimensionality.
    device : {"cpu", "cuda"}
        Device holding the distance matrix.

    Returns
    -------
    HausdorffResult or None
        None if X or Y is empty.
    """
    if len(X) == 0 or len(Y) == 0:
        return None

    a_t = torch.from_numpy(points_to_array(X)).to(device=device)  # (Na, D) int64
    b_t = torch.from_numpy(points_to_array(Y)).to(device=device)  # (Nb, D) int64
    if a_t.shape[1] != b_t.shape[1]:
        raise ValueError(
            f"Dimensionality mismatch: {a_t.shape[1]}-d X vs {b_t.shape[1]}-d Y"
        )

    diff = a_t[:, None, :] - b_t[None, :, :]  # (Na, Nb, D)
    sq = (diff * diff).sum(dim=-1)  # (Na, Nb)
    min_sq, idx_near = sq.min(dim=1)  # (Na,), (Na,)
    idx_a_max = int(torch.argmax(min_sq).item())
    idx_b = int(idx_near[idx_a_max].item())
    value = int(min_sq[idx_a_max].item())

    point_a = tuple(int(c) for c in a_t[idx_a_max].tolist())
    point_b = tuple(int(c) for c in b_t[idx_b].tolist())
    return HausdorffResult(
        distance=math.sqrt(value),
        point_a=point_a,
        point_b=point_b,
        value=value,
        comparisons=a_t.shape[0] * b_t.shape[0],
        pruned=0,
    )
