# mandelterm/coloring.py
import math

import numpy as np

from mandelterm.iterators import BOUNDED
from mandelterm.utils import clamp

# Fast escapes (far outside the set) get the lightest marks, slow escapes
# near the boundary the heaviest.
GLYPH_RAMP = " ¸.•›-˛˙‘¨"
INSIDE_GLYPH = "█"

ASCII_RAMP = " .:-=+*%"
ASCII_INSIDE = "#"

ANSI_RESET = "\033[0m"

PALETTES = ("glyph", "ascii", "ansi")


def ramp_index(result: int, limit: int, size: int) -> int:
    """
    Position of an escape iteration on a ramp of `size` symbols.

    Log-scaled so that the few slow escapes near the boundary still get
    their own symbols; non-decreasing in result.
    """
    if limit <= 1:
        return 0
    frac = math.log(result) / math.log(limit)
    return clamp(int(frac * size), 0, size - 1)


def glyph(result: int, limit: int, ramp: str = GLYPH_RAMP, inside: str = INSIDE_GLYPH) -> str:
    if result == BOUNDED:
        return inside
    return ramp[ramp_index(result, limit, len(ramp))]


def ansi_color(result: int, limit: int) -> str:
    """256-colour background code: black for the set, blue to red outside."""
    if result == BOUNDED:
        return "\033[48;5;0m"
    color_code = 17 + int((result / limit) * 214)
    return f"\033[48;5;{color_code}m"


def gray_level(result: int, limit: int) -> int:
    if result == BOUNDED:
        return 0
    # escaped points span 1..255, fast escapes bright; 0 is kept for the set
    return 1 + int(np.clip(254 * (1.0 - result / limit), 0, 254))


def grid_to_lines(grid, limit, palette="glyph"):
    """Turn an escape-result grid into printable lines, one per row."""
    if palette == "glyph":
        return ["".join(glyph(int(v), limit) for v in row) for row in grid]

    if palette == "ascii":
        return [
            "".join(glyph(int(v), limit, ASCII_RAMP, ASCII_INSIDE) for v in row)
            for row in grid
        ]

    if palette == "ansi":
        # two spaces per cell keep the aspect ratio of terminal cells square-ish
        return [
            "".join(f"{ansi_color(int(v), limit)}  " for v in row) + ANSI_RESET
            for row in grid
        ]

    raise ValueError(f"Unknown palette: {palette}")


def grid_to_gray(grid, limit):
    """Map a grid to an RGB uint8 image, interior black."""
    iters = np.asarray(grid, dtype=np.float64)
    norm = 1.0 - iters / limit
    gray = 1 + (254 * norm).clip(0, 254).astype(np.uint8)
    gray[np.asarray(grid) == BOUNDED] = 0
    return np.stack([gray, gray, gray], axis=-1)
