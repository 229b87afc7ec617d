from numbers import Integral

import numpy as np

from mandelterm.errors import InvalidIterationCap

# Escape results are ints: BOUNDED, or the iteration (1..limit) at which |z|^2 > 4.
BOUNDED = 0
ESCAPE_RADIUS_SQ = 4.0


def validate_limit(limit) -> None:
    if isinstance(limit, bool) or not isinstance(limit, Integral):
        raise InvalidIterationCap(f"limit must be an integer, got {limit!r}")
    if limit < 1:
        raise InvalidIterationCap(f"limit must be >= 1, got {limit}")


def escape_time(c: complex, limit: int) -> int:
    """
    Iterate z_{n+1} = z_n^2 + c from z_0 = 0.

    Returns the first n in 1..limit with |z_n|^2 > 4, or BOUNDED if the
    orbit stays within radius 2 for all limit steps. |z|^2 == 4 is not an
    escape, so c = -2 (orbit 0, -2, 2, 2, ...) is bounded.
    """
    validate_limit(limit)
    cr = c.real
    ci = c.imag
    zr = 0.0
    zi = 0.0
    for n in range(1, limit + 1):
        zr, zi = zr * zr - zi * zi + cr, 2.0 * zr * zi + ci
        if zr * zr + zi * zi > ESCAPE_RADIUS_SQ:
            return n
    return BOUNDED


def escape_row(real: np.ndarray, imag: float, limit: int) -> np.ndarray:
    """Scalar engine over one row of the plane."""
    row = np.zeros(len(real), dtype=np.int32)
    for col, x in enumerate(real):
        row[col] = escape_time(complex(float(x), imag), limit)
    return row


def escape_time_grid(real: np.ndarray, imag: np.ndarray, limit: int) -> np.ndarray:
    """
    Vectorised escape time over the plane spanned by real (columns) and imag (rows).

    Uses separate float64 arrays for the real and imaginary parts and the
    same operation order as escape_time, so both engines agree bit for bit.
    Escaped points are dropped from the working set immediately, which also
    keeps their orbits from overflowing.
    """
    validate_limit(limit)
    real = np.asarray(real, dtype=np.float64)
    imag = np.asarray(imag, dtype=np.float64)
    shape = (len(imag), len(real))

    cr = np.broadcast_to(real[None, :], shape).ravel()
    ci = np.broadcast_to(imag[:, None], shape).ravel()

    counts = np.full(cr.size, BOUNDED, dtype=np.int32)
    alive = np.arange(cr.size)
    zr = np.zeros(cr.size, dtype=np.float64)
    zi = np.zeros(cr.size, dtype=np.float64)

    for n in range(1, limit + 1):
        if alive.size == 0:
            break
        r = zr[alive]
        i = zi[alive]
        nr = r * r - i * i + cr[alive]
        ni = 2.0 * r * i + ci[alive]

        escaped = nr * nr + ni * ni > ESCAPE_RADIUS_SQ
        counts[alive[escaped]] = n

        keep = ~escaped
        alive = alive[keep]
        zr[alive] = nr[keep]
        zi[alive] = ni[keep]

    return counts.reshape(shape)


def pick_engine(name: str):
    """Return a plane engine with signature engine(real, imag, limit) -> grid."""
    name = name.lower()

    if name == "numpy":
        return escape_time_grid

    if name == "python":
        def engine(real, imag, limit):
            grid = np.zeros((len(imag), len(real)), dtype=np.int32)
            for j, y in enumerate(imag):
                grid[j] = escape_row(real, float(y), limit)
            return grid
        return engine

    raise ValueError(f"Unknown engine: {name}")
