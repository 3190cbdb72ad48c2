# plotting.py
"""
plotting.py

Visualization utilities: plot two 2-D point sets and the pair of points where
their (directed or percentile) Hausdorff distance is attained.
"""

from typing import Optional, Sequence, Tuple, Union

import matplotlib.pyplot as plt

from grid_points import points_to_array
from hausdorff import HausdorffResult
from percentile import PercentileResult


def plot_hausdorff_pair(
    X: Sequence[Tuple[int, ...]],
    Y: Sequence[Tuple[int, ...]],
    result: Union[HausdorffResult, PercentileResult],
    title: str = "Point sets and Hausdorff distance",
    save_path: Optional[str] = None,
) -> None:
    """
    Plot both point sets and visualize the extremal pair as a segment.

    Parameters
    ----------
    X, Y : sequence of tuple of int
        2-D point sets (grid row/column coordinates).
    result : HausdorffResult or PercentileResult
        Result whose pair is drawn.
    title : str
        Plot title.
    save_path : str or None
        If given, save the figure to this path. Otherwise, just show it.
    """
    A = points_to_array(X)
    B = points_to_array(Y)
    for pts in (A, B):
        if pts.size > 0 and pts.shape[1] != 2:
            raise ValueError(f"Only 2-D point sets can be plotted, got {pts.shape[1]}-d")

    fig, ax = plt.subplots(figsize=(6, 6))
    ax.set_aspect("equal", adjustable="box")

    if A.size > 0:
        ax.scatter(A[:, 1], A[:, 0], s=40, alpha=0.5, label="Set X")
    if B.size > 0:
        ax.scatter(B[:, 1], B[:, 0], s=40, alpha=0.5, marker="s", label="Set Y")

    pa = result.point_a
    pb = result.point_b
    ax.scatter([pa[1]], [pa[0]], color="red", s=60, label="Hausdorff point in X")
    ax.scatter([pb[1]], [pb[0]], color="green", s=60, label="Nearest point in Y")
    ax.plot([pa[1], pb[1]], [pa[0], pb[0]], linestyle="--", color="black",
            label=f"Hausdorff segment (d={result.distance:.3f})")

    # rows grow downwards, as in the grid
    ax.invert_yaxis()
    ax.set_xlabel("column")
    ax.set_ylabel("row")
    ax.set_title(title)
    ax.grid(True)
    ax.legend(loc="best")

    if save_path is not None:
        fig.savefig(save_path, bbox_inches="tight", dpi=150)
        plt.close(fig)
    else:
        plt.show()
