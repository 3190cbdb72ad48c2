# pipeline.py
"""
pipeline.py

High-level entry point: extract point sets from two grids and compute their
(directed or symmetric) Hausdorff distance, exactly or as a bounded
percentile, with a selectable backend.
"""

from dataclasses import dataclass
from typing import Callable, Literal, Optional, Sequence, Tuple, Union

import numpy as np

from distance_metrics import resolve_metric
from grid_points import extract_points
from hausdorff import HausdorffResult, directed_hausdorff, hausdorff_distance
from percentile import PercentileResult, check_percentile, directed_hausdorff_percentile
from backend_numpy import directed_hausdorff_kdtree, directed_hausdorff_numpy

try:
    from backend_torch import directed_hausdorff_torch

    HAS_TORCH_BACKEND = True
except ImportError:
    HAS_TORCH_BACKEND = False

BackendType = Literal["pruned", "numpy", "kdtree", "torch"]
MetricName = Literal["squared_euclidean", "manhattan", "chebyshev"]
Coord = Tuple[int, ...]
SearchResult = Union[HausdorffResult, PercentileResult, None]


@dataclass
class HausdorffConfig:
    """
    Configuration for a grid-to-grid Hausdorff computation.
    """
    backend: BackendType = "pruned"
    percentile: Optional[float] = None  # percentile mode if set
    metric: MetricName = "squared_euclidean"
    symmetric: bool = False
    random_state: Optional[int] = None
    torch_device: Literal["cpu", "cuda"] = "cpu"
    verbose: bool = False


def _validate(cfg: HausdorffConfig) -> None:
    if cfg.backend not in ("pruned", "numpy", "kdtree", "torch"):
        raise ValueError(f"Unknown backend: {cfg.backend}")
    resolve_metric(cfg.metric)
    if cfg.percentile is not None:
        check_percentile(cfg.percentile)
        if cfg.backend != "pruned":
            raise ValueError("Percentile mode is only available with the 'pruned' backend")
        if cfg.symmetric:
            raise ValueError("Percentile mode is directed only")
    if cfg.backend != "pruned" and cfg.metric != "squared_euclidean":
        raise ValueError(
            f"Backend '{cfg.backend}' only supports the squared_euclidean metric"
        )


def _directed(X: Sequence[Coord], Y: Sequence[Coord], cfg: HausdorffConfig) -> SearchResult:
    if cfg.backend == "pruned":
        if cfg.percentile is not None:
            return directed_hausdorff_percentile(
                X, Y, cfg.percentile, metric=cfg.metric, verbose=cfg.verbose
            )
        return directed_hausdorff(X, Y, metric=cfg.metric, verbose=cfg.verbose)
    elif cfg.backend == "numpy":
        return directed_hausdorff_numpy(X, Y)
    elif cfg.backend == "kdtree":
        return directed_hausdorff_kdtree(X, Y)
    elif cfg.backend == "torch":
        if not HAS_TORCH_BACKEND:
            raise RuntimeError("Torch backend requested but backend_torch is not available.")
        return directed_hausdorff_torch(X, Y, device=cfg.torch_device)
    else:
        raise ValueError(f"Unknown backend: {cfg.backend}")


def compute_point_hausdorff(
        X: Sequence[Coord],
        Y: Sequence[Coord],
        cfg: HausdorffConfig,
) -> SearchResult:
    """
    Run the configured search on two ready-made point sets.
    """
    _validate(cfg)
    if not cfg.symmetric:
        return _directed(X, Y, cfg)

    if cfg.backend == "pruned":
        return hausdorff_distance(X, Y, metric=cfg.metric)
    d_ab = _directed(X, Y, cfg)
    d_ba = _directed(Y, X, cfg)
    if d_ab is None or d_ba is None:
        return None
    if d_ab.value >= d_ba.value:
        return d_ab
    return HausdorffResult(
        distance=d_ba.distance,
        point_a=d_ba.point_b,
        point_b=d_ba.point_a,
        value=d_ba.value,
        comparisons=d_ab.comparisons + d_ba.comparisons,
        pruned=0,
    )


def compute_grid_hausdorff(
        grid_a: np.ndarray,
        grid_b: np.ndarray,
        cfg: HausdorffConfig,
        predicate: Optional[Callable[[np.ndarray], np.ndarray]] = None,
) -> SearchResult:
    """
    Compute the Hausdorff distance between the "on" cells of two grids.

    Parameters
    ----------
    grid_a, grid_b : np.ndarray
        Dense grids of equal dimensionality.
    cfg : HausdorffConfig
        Configuration parameters.
    predicate : callable or None
        Vectorized cell test, see grid_points.extract_points.

    Returns
    -------
    HausdorffResult, PercentileResult or None
        None if either grid has no "on" cell.
    """
    _validate(cfg)
    grid_a = np.asarray(grid_a)
    grid_b = np.asarray(grid_b)
    if grid_a.ndim != grid_b.ndim:
        raise ValueError(
            f"Grids differ in dimensionality: {grid_a.ndim} vs {grid_b.ndim}"
        )

    rng = np.random.default_rng(cfg.random_state)
    X = extract_points(grid_a, predicate, random_state=rng)
    Y = extract_points(grid_b, predicate, random_state=rng)
    return compute_point_hausdorff(X, Y, cfg)
