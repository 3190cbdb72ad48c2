# percentile.py
"""
percentile.py

Approximate percentile of the nearest-neighbor distances from X to Y.

Instead of collecting and sorting every per-x minimum, only the k largest are
kept in a BoundedTopSet, with

    k = max(1, ceil(|X| * |Y| * (1 - percentile))),

and the k-th largest (the smallest retained value) is reported. The current
admission threshold doubles as the early-stop bound of the inner scan, so
memory stays O(k) and most x's are rejected after a few comparisons.
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from distance_metrics import SQUARED_EUCLIDEAN, MetricLike, resolve_metric
from hausdorff import scan_nearest
from top_k import BoundedTopSet

Coord = Tuple[int, ...]


@dataclass
class PercentileResult:
    """
    Result of a bounded percentile search. `saturated` is False when fewer
    genuine candidates than `capacity` were found; the value is then the
    smallest of all candidates rather than a percentile estimate.
    """
    distance: float
    point_a: Coord
    point_b: Coord
    value: int
    percentile: float
    capacity: int
    filled: int
    comparisons: int = 0
    pruned: int = 0

    @property
    def saturated(self) -> bool:
        return self.filled >= self.capacity


def check_percentile(percentile: float) -> float:
    percentile = float(percentile)
    if not 0.0 <= percentile <= 1.0:  # also rejects NaN
        raise ValueError(f"Percentile must lie in [0, 1], got {percentile}")
    return percentile


def top_set_capacity(n_x: int, n_y: int, percentile: float) -> int:
    """
    Number of candidates retained for a given percentile, at least 1.
    """
    percentile = check_percentile(percentile)
    return max(1, math.ceil(n_x * n_y * (1.0 - percentile)))


def directed_hausdorff_percentile(
        X: Sequence[Coord],
        Y: Sequence[Coord],
        percentile: float,
        metric: MetricLike = SQUARED_EUCLIDEAN,
        verbose: bool = False,
) -> Optional[PercentileResult]:
    """
    Approximate the `percentile` of per-x nearest-neighbor distances.

    Parameters
    ----------
    X, Y : sequence of tuple of int
        Point sets of equal dimensionality.
    percentile : float
        Fraction in [0, 1]. Validated before any computation.
    metric : DistanceMetric, str or callable
        Distance strategy.
    verbose : bool
        Print a trace line per x.

    Returns
    -------
    PercentileResult or None
        None if no genuine candidate exists (X or Y empty).
    """
    capacity = top_set_capacity(len(X), len(Y), percentile)
    metric = resolve_metric(metric)
    if len(X) == 0 or len(Y) == 0:
        return None

    top = BoundedTopSet(capacity)
    comparisons = 0
    pruned = 0

    for x in X:
        threshold = top.threshold
        min_value, nearest, n = scan_nearest(x, Y, metric, threshold)
        comparisons += n
        if verbose:
            print(f"[Percentile] x={x}, min={min_value}, threshold={threshold}")
        if min_value is None:
            pruned += 1
            continue
        top.push(min_value, (x, nearest))

    value, (point_a, point_b) = top.peek_min()
    return PercentileResult(
        distance=metric.finalize(value),
        point_a=point_a,
        point_b=point_b,
        value=value,
        percentile=float(percentile),
        capacity=capacity,
        filled=top.filled,
        comparisons=comparisons,
        pruned=pruned,
    )
