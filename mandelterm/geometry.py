"""
Coordinate mapping for mandelterm.

A render covers a rectangle of the complex plane given by its upper-left and
lower-right corners. Pixels are mapped by linear interpolation on each axis:

    real = ul.real + (col / width)  * (lr.real - ul.real)
    imag = ul.imag + (row / height) * (lr.imag - ul.imag)

so pixel (0, 0) lands exactly on the upper-left corner and the last pixel
lands strictly inside the rectangle. The imaginary axis decreases downwards.

Main entrypoints:
    pixel_to_complex(row, col, width, height, rect) -> complex
    complex_plane(width, height, rect) -> (real, imag) coordinate vectors
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Tuple

import numpy as np

from mandelterm.errors import InvalidDimension, InvalidRectangle


@dataclass(frozen=True)
class Rectangle:
    upper_left: complex = complex(-2.0, 1.0)
    lower_right: complex = complex(1.0, -1.0)

    def __post_init__(self):
        ul = complex(self.upper_left)
        lr = complex(self.lower_right)
        if ul.real > lr.real or ul.imag < lr.imag:
            raise InvalidRectangle(
                f"upper_left {ul} must be above and left of lower_right {lr}"
            )
        # normalise ints/floats passed as corners
        object.__setattr__(self, "upper_left", ul)
        object.__setattr__(self, "lower_right", lr)

    @property
    def real_span(self) -> float:
        return self.lower_right.real - self.upper_left.real

    @property
    def imag_span(self) -> float:
        # negative for a well-formed rectangle
        return self.lower_right.imag - self.upper_left.imag


def validate_dimensions(width, height) -> None:
    """Reject grids that are empty or not sized by plain integers."""
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise InvalidDimension(f"{name} must be an integer, got {value!r}")
        if value <= 0:
            raise InvalidDimension(f"{name} must be positive, got {value}")


def pixel_to_complex(row: int, col: int, width: int, height: int, rect: Rectangle) -> complex:
    """Map pixel (row, col) of a width x height grid into the rectangle."""
    real = rect.upper_left.real + (col / width) * rect.real_span
    imag = rect.upper_left.imag + (row / height) * rect.imag_span
    return complex(real, imag)


def complex_plane(width: int, height: int, rect: Rectangle) -> Tuple[np.ndarray, np.ndarray]:
    """
    Coordinates of every column and every row.

    Returns:
        real: float64 array of length width (one value per column)
        imag: float64 array of length height (one value per row)

    Element-wise numpy arithmetic rounds exactly like the scalar mapper, so
    real[col] + imag[row]*1j == pixel_to_complex(row, col, ...).
    """
    validate_dimensions(width, height)
    cols = np.arange(width, dtype=np.float64)
    rows = np.arange(height, dtype=np.float64)
    real = rect.upper_left.real + (cols / width) * rect.real_span
    imag = rect.upper_left.imag + (rows / height) * rect.imag_span
    return real, imag
