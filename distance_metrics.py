# distance_metrics.py
"""
distance_metrics.py

Integer distance metrics between coordinate vectors. The searches only ever
compare raw metric values; a metric's `finalize` turns the winning value into
a real-valued length at the output boundary (square root for the squared
Euclidean distance).
"""

import math
from dataclasses import dataclass
from typing import Callable, Sequence, Union

Point = Sequence[int]


def _check_dims(a: Point, b: Point) -> None:
    if len(a) != len(b):
        raise ValueError(
            f"Dimensionality mismatch: {len(a)}-d point {tuple(a)} "
            f"vs {len(b)}-d point {tuple(b)}"
        )


def squared_euclidean(a: Point, b: Point) -> int:
    """
    Sum of squared per-axis differences, computed exactly on Python ints.
    """
    _check_dims(a, b)
    return sum((int(p) - int(q)) ** 2 for p, q in zip(a, b))


def manhattan(a: Point, b: Point) -> int:
    _check_dims(a, b)
    return sum(abs(int(p) - int(q)) for p, q in zip(a, b))


def chebyshev(a: Point, b: Point) -> int:
    _check_dims(a, b)
    return max((abs(int(p) - int(q)) for p, q in zip(a, b)), default=0)


def _identity(value: int) -> float:
    return float(value)


@dataclass(frozen=True)
class DistanceMetric:
    """
    A distance strategy: `distance(a, b)` for comparisons and `finalize(v)`
    to convert the extremal value into a reported length.
    """
    name: str
    distance: Callable[[Point, Point], int]
    finalize: Callable[[int], float] = math.sqrt

    def __call__(self, a: Point, b: Point) -> int:
        return self.distance(a, b)


SQUARED_EUCLIDEAN = DistanceMetric("squared_euclidean", squared_euclidean, math.sqrt)
MANHATTAN = DistanceMetric("manhattan", manhattan, _identity)
CHEBYSHEV = DistanceMetric("chebyshev", chebyshev, _identity)

METRICS = {m.name: m for m in (SQUARED_EUCLIDEAN, MANHATTAN, CHEBYSHEV)}

MetricLike = Union[str, DistanceMetric, Callable[[Point, Point], int]]


def resolve_metric(metric: MetricLike) -> DistanceMetric:
    """
    Normalize a metric given by name, as a DistanceMetric, or as a bare
    callable. Bare callables are assumed to return squared lengths and are
    finalized with a square root.
    """
    if isinstance(metric, DistanceMetric):
        return metric
    if isinstance(metric, str):
        try:
            return METRICS[metric]
        except KeyError:
            raise ValueError(f"Unknown metric: {metric}") from None
    if callable(metric):
        name = getattr(metric, "__name__", "custom")
        return DistanceMetric(name, metric, math.sqrt)
    raise ValueError(f"Unsupported metric: {metric!r}")
