# mandelterm/errors.py
"""Exceptions raised when a render request is rejected before any pixel is computed."""


class MandelbrotError(ValueError):
    pass


class InvalidDimension(MandelbrotError):
    """Grid width or height is not a positive integer."""


class InvalidIterationCap(MandelbrotError):
    """Iteration cap is not an integer >= 1."""


class InvalidRectangle(MandelbrotError):
    """Upper-left corner is not above and to the left of lower-right."""
