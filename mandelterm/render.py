from functools import partial
from multiprocessing import Pool

import numpy as np

from mandelterm.geometry import Rectangle, complex_plane, validate_dimensions
from mandelterm.iterators import escape_row, pick_engine, validate_limit
from mandelterm.utils import log_message


def _row_task(j, real, imag, limit):
    # module level so the pool can pickle it
    return escape_row(real, float(imag[j]), limit)


def validate_workers(workers) -> None:
    if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
        raise ValueError(f"workers must be a positive integer, got {workers!r}")


def render_grid(
    *,
    width=80,
    height=40,
    rect=None,
    limit=255,
    engine="numpy",
    workers=1,
):
    """
    Compute the escape-result grid for a rectangle of the complex plane.

    Returns an int32 array of shape (height, width), row-major, where each
    cell is BOUNDED (0) or the iteration at which that pixel escaped.

    engine:
      "numpy"   -> vectorised pass over the whole plane (default)
      "python"  -> per-pixel loop; with workers > 1 the rows are spread
                   over a multiprocessing pool

    Every parameter is validated before any pixel is computed.
    """
    if rect is None:
        rect = Rectangle()
    validate_dimensions(width, height)
    validate_limit(limit)
    validate_workers(workers)

    step = pick_engine(engine)
    engine = engine.lower()
    real, imag = complex_plane(width, height, rect)

    log_message(
        "DEBUG",
        f"render {width}x{height} ul={rect.upper_left} lr={rect.lower_right} "
        f"limit={limit} engine={engine} workers={workers}",
    )

    if engine == "python" and workers > 1:
        grid = np.zeros((height, width), dtype=np.int32)
        task = partial(_row_task, real=real, imag=imag, limit=limit)
        with Pool(processes=min(workers, height)) as pool:
            # each row lands in its own slot; rows never read each other
            for j, row in enumerate(pool.map(task, range(height))):
                grid[j] = row
        return grid

    if workers > 1:
        log_message("WARNING", f"workers={workers} ignored by the {engine} engine")
    return step(real, imag, limit)
