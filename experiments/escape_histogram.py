"""
Experiment: escape-time histogram

Renders the region described by a YAML config and records how many pixels
escaped at each iteration (bounded pixels as iteration 0).

Output:
- escape_histogram.csv
- escape_histogram.png
- config_used.yaml

Run:
    python -m experiments.escape_histogram --config configs/default.yaml --outdir results/histogram
"""

import argparse
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import yaml

from mandelterm.analysis import bounded_fraction, escape_statistics
from mandelterm.config import RenderConfig, load_config
from mandelterm.render import render_grid


def run_escape_histogram(config_path, outdir: str):
    cfg = load_config(config_path) if config_path else RenderConfig()

    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    grid = render_grid(
        width=cfg.width,
        height=cfg.height,
        rect=cfg.rect,
        limit=cfg.limit,
        engine=cfg.engine,
        workers=cfg.workers,
    )
    df = escape_statistics(grid, cfg.limit)

    df.to_csv(outdir / "escape_histogram.csv", index=False)
    with open(outdir / "config_used.yaml", "w") as f:
        yaml.safe_dump(cfg.to_dict(), f, sort_keys=False)

    escaped = df[df["iteration"] > 0]
    plt.figure(figsize=(8, 4))
    plt.bar(escaped["iteration"], escaped["count"], width=1.0)
    plt.yscale("log")
    plt.xlabel("escape iteration")
    plt.ylabel("pixels")
    plt.title(f"Escape times ({cfg.width}x{cfg.height}, limit={cfg.limit}, "
              f"bounded={bounded_fraction(grid):.1%})")
    plt.tight_layout()
    plt.savefig(outdir / "escape_histogram.png")
    plt.close()

    print(f"Saved histogram to {outdir}")
    return df


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", default=None)
    parser.add_argument("--outdir", required=True)
    args = parser.parse_args()

    run_escape_histogram(args.config, args.outdir)
