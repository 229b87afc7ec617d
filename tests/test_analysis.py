import numpy as np
import pandas as pd
import pytest
from pathlib import Path
import sys

# Add repo root to path
ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from mandelterm.analysis import bounded_fraction, escape_statistics
from mandelterm.geometry import Rectangle
from mandelterm.render import render_grid


def test_escape_statistics_small_grid():
    grid = np.array([[3, 0], [1, 1]], dtype=np.int32)
    df = escape_statistics(grid, limit=10)

    assert list(df.columns) == ["iteration", "count", "fraction"]
    assert df["iteration"].tolist() == [0, 1, 3]
    assert df["count"].tolist() == [1, 2, 1]
    np.testing.assert_allclose(df["fraction"], [0.25, 0.5, 0.25])


def test_escape_statistics_counts_every_cell():
    rect = Rectangle(complex(-2.0, 1.0), complex(0.5, -1.0))
    grid = render_grid(width=40, height=20, rect=rect, limit=64)
    df = escape_statistics(grid, limit=64)

    assert df["count"].sum() == 40 * 20
    assert df["fraction"].sum() == pytest.approx(1.0)
    assert df["iteration"].is_monotonic_increasing
    assert df["iteration"].max() <= 64


def test_escape_statistics_rejects_out_of_range():
    with pytest.raises(ValueError):
        escape_statistics(np.array([[5]]), limit=4)


def test_bounded_fraction():
    grid = np.array([[0, 0, 2, 9]])
    assert bounded_fraction(grid) == 0.5
    assert bounded_fraction(np.zeros((0, 0))) == 0.0


def test_empty_grid_statistics():
    df = escape_statistics(np.zeros((0, 0), dtype=np.int32), limit=4)
    assert isinstance(df, pd.DataFrame)
    assert df.empty
