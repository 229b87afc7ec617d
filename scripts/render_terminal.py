"""
Render the Mandelbrot set to the terminal.

Run:
    python scripts/render_terminal.py
    python scripts/render_terminal.py --fit --palette ansi
    python scripts/render_terminal.py --config configs/default.yaml --outfile figures/mandel.png

Command-line flags override values from --config.
"""

import argparse
import os
import shutil
import sys
from pathlib import Path

# Ensure repository root is on sys.path so `from mandelterm...` works when running
# this script directly (e.g. `python scripts/render_terminal.py`).
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from mandelterm.coloring import PALETTES, grid_to_gray, grid_to_lines
from mandelterm.config import RenderConfig, load_config
from mandelterm.render import render_grid
from mandelterm.utils import LEVELS, log_message, parse_complex, set_log_level


def build_parser():
    parser = argparse.ArgumentParser(description="Render the Mandelbrot set as text")
    parser.add_argument("--config", type=str, default=None, help="YAML render config")
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--fit", action="store_true",
                        help="size the grid to the current terminal")
    parser.add_argument("--upper-left", type=str, default=None, help="e.g. -2+1j")
    parser.add_argument("--lower-right", type=str, default=None, help="e.g. 1-1j")
    parser.add_argument("--limit", type=int, default=None, help="iteration cap")
    parser.add_argument("--palette", choices=PALETTES, default=None)
    parser.add_argument("--engine", choices=["numpy", "python"], default=None)
    parser.add_argument("--workers", type=int, default=None)
    parser.add_argument("--outfile", type=str, default=None,
                        help="also save a greyscale PNG")
    parser.add_argument("--log-level", choices=LEVELS, default=None)
    return parser


def resolve_config(args, parser) -> RenderConfig:
    cfg = load_config(args.config) if args.config else RenderConfig()

    width, height = args.width, args.height
    if args.fit:
        size = shutil.get_terminal_size()
        cells = size.columns // 2 if (args.palette or cfg.palette) == "ansi" else size.columns
        width = width if width is not None else cells
        # keep a line free for the prompt
        height = height if height is not None else max(size.lines - 1, 1)

    try:
        upper_left = parse_complex(args.upper_left) if args.upper_left else None
        lower_right = parse_complex(args.lower_right) if args.lower_right else None
    except ValueError as e:
        parser.error(f"bad corner: {e}")

    return cfg.override(
        width=width,
        height=height,
        upper_left=upper_left,
        lower_right=lower_right,
        limit=args.limit,
        palette=args.palette,
        engine=args.engine,
        workers=args.workers,
        log_level=args.log_level,
    )


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = resolve_config(args, parser)
        set_log_level(cfg.log_level)
        log_message("INFO", f"[run] {cfg.width}x{cfg.height} limit={cfg.limit} "
                            f"ul={cfg.upper_left} lr={cfg.lower_right}")
        grid = render_grid(
            width=cfg.width,
            height=cfg.height,
            rect=cfg.rect,
            limit=cfg.limit,
            engine=cfg.engine,
            workers=cfg.workers,
        )
        lines = grid_to_lines(grid, cfg.limit, cfg.palette)
    except ValueError as e:
        parser.error(str(e))

    print("\n".join(lines))

    if args.outfile:
        from PIL import Image
        out_path = Path(args.outfile)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        Image.fromarray(grid_to_gray(grid, cfg.limit)).save(out_path)
        log_message("INFO", f"[run] saved {out_path}")

    log_message("INFO", "[run] done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
