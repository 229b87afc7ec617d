"""
Summary statistics over escape-result grids.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from mandelterm.iterators import BOUNDED


def escape_statistics(grid: np.ndarray, limit: int) -> pd.DataFrame:
    """
    Histogram of escape results.

    One row per distinct result, sorted by iteration; bounded cells are
    reported as iteration 0. Columns: iteration, count, fraction.
    """
    values, counts = np.unique(np.asarray(grid).ravel(), return_counts=True)
    if values.size and (values.min() < BOUNDED or values.max() > limit):
        raise ValueError(f"grid holds results outside [0, {limit}]")

    df = pd.DataFrame({"iteration": values.astype(int), "count": counts.astype(int)})
    df["fraction"] = df["count"] / max(int(df["count"].sum()), 1)
    return df.sort_values("iteration").reset_index(drop=True)


def bounded_fraction(grid: np.ndarray) -> float:
    grid = np.asarray(grid)
    if grid.size == 0:
        return 0.0
    return float(np.mean(grid == BOUNDED))
