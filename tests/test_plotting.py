import math

import pytest

from experiment import run_example
from hausdorff import directed_hausdorff
from plotting import plot_hausdorff_pair


def test_plot_saves_figure(corner_sets, tmp_path):
    X, Y = corner_sets
    path = tmp_path / "pair.png"
    plot_hausdorff_pair(X, Y, directed_hausdorff(X, Y), save_path=str(path))
    assert path.exists()
    assert path.stat().st_size > 0


def test_plot_rejects_non_planar_points(tmp_path):
    X = [(0, 0, 0)]
    Y = [(1, 1, 1)]
    with pytest.raises(ValueError):
        plot_hausdorff_pair(X, Y, directed_hausdorff(X, Y), save_path=str(tmp_path / "x.png"))


def test_run_example(tmp_path, capsys):
    path = tmp_path / "example.png"
    exact, approx = run_example(random_state=0, save_path=str(path))
    assert exact.distance == pytest.approx(math.sqrt(8))
    assert approx.capacity == 1
    assert approx.value == 8
    assert path.exists()
    out = capsys.readouterr().out
    assert "[Example / pruned]" in out
    assert "[Example / percentile=0.95]" in out
