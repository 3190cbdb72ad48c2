# hausdorff.py
"""
hausdorff.py

Exact directed Hausdorff distance between two finite point sets with integer
coordinates,

    d(X, Y) = max_{x in X} min_{y in Y} dist(x, y),

together with the pair (x, y) where it is attained.

The search keeps the best nearest-neighbor distance found so far and stops
scanning Y for an x as soon as some y is closer than that bound: the x can no
longer raise the maximum. Shuffled inputs (see grid_points.extract_points)
make the bound grow early and the pruning effective.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from distance_metrics import SQUARED_EUCLIDEAN, MetricLike, resolve_metric

Coord = Tuple[int, ...]


@dataclass
class HausdorffResult:
    """
    Container for Hausdorff distance computation results.
    """
    distance: float
    point_a: Coord
    point_b: Coord
    value: int
    comparisons: int = 0
    pruned: int = 0


def scan_nearest(
        x: Coord,
        Y: Sequence[Coord],
        metric,
        bound: int,
) -> Tuple[Optional[int], Optional[Coord], int]:
    """
    Find the nearest y to x, giving up once any y is strictly closer than
    `bound`.

    Returns
    -------
    min_value : int or None
        Nearest-neighbor value, or None if the scan was cut short (or Y is
        empty). A cut-short scan never yields a partial minimum.
    nearest : tuple or None
        The y attaining `min_value`.
    comparisons : int
        Number of metric evaluations performed.
    """
    min_value = None
    nearest = None
    comparisons = 0
    for y in Y:
        d = metric(x, y)
        comparisons += 1
        if d < bound:
            return None, None, comparisons
        if min_value is None or d < min_value:
            min_value = d
            nearest = y
    return min_value, nearest, comparisons


def directed_hausdorff(
        X: Sequence[Coord],
        Y: Sequence[Coord],
        metric: MetricLike = SQUARED_EUCLIDEAN,
        verbose: bool = False,
) -> Optional[HausdorffResult]:
    """
    Compute the directed Hausdorff distance from X to Y with early stopping.

    Parameters
    ----------
    X, Y : sequence of tuple of int
        Point sets of equal dimensionality.
    metric : DistanceMetric, str or callable
        Distance strategy. Bare callables are finalized with a square root.
    verbose : bool
        Print a trace line per x.

    Returns
    -------
    HausdorffResult or None
        None if X or Y is empty. A zero distance is a genuine result.
    """
    metric = resolve_metric(metric)
    if len(X) == 0 or len(Y) == 0:
        return None

    best_value = None
    best_pair = None
    comparisons = 0
    pruned = 0

    for x in X:
        bound = 0 if best_value is None else best_value
        min_value, nearest, n = scan_nearest(x, Y, metric, bound)
        comparisons += n
        if verbose:
            print(f"[Hausdorff] x={x}, min={min_value}, max so far={best_value}")
        if min_value is None:
            pruned += 1
            continue
        if best_value is None or min_value > best_value:
            best_value = min_value
            best_pair = (x, nearest)

    return HausdorffResult(
        distance=metric.finalize(best_value),
        point_a=best_pair[0],
        point_b=best_pair[1],
        value=best_value,
        comparisons=comparisons,
        pruned=pruned,
    )


def hausdorff_distance(
        A: Sequence[Coord],
        B: Sequence[Coord],
        metric: MetricLike = SQUARED_EUCLIDEAN,
) -> Optional[HausdorffResult]:
    """
    Compute the symmetric Hausdorff distance between two point sets.

        d_H(A,B) = max{ d(A,B), d(B,A) },

    where d is the directed Hausdorff distance.

    Returns
    -------
    HausdorffResult or None
        The larger directed result, with point_a taken from A and point_b
        from B. None if either set is empty.
    """
    d_ab = directed_hausdorff(A, B, metric)
    d_ba = directed_hausdorff(B, A, metric)
    if d_ab is None or d_ba is None:
        return None

    comparisons = d_ab.comparisons + d_ba.comparisons
    pruned = d_ab.pruned + d_ba.pruned
    if d_ab.value >= d_ba.value:
        winner, point_a, point_b = d_ab, d_ab.point_a, d_ab.point_b
    else:
        winner, point_a, point_b = d_ba, d_ba.point_b, d_ba.point_a

    return HausdorffResult(
        distance=winner.distance,
        point_a=point_a,
        point_b=point_b,
        value=winner.value,
        comparisons=comparisons,
        pruned=pruned,
    )
