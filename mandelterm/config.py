"""Render parameters, loadable from YAML (see configs/default.yaml)."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path

import yaml

from mandelterm.coloring import PALETTES
from mandelterm.geometry import Rectangle, validate_dimensions
from mandelterm.iterators import validate_limit
from mandelterm.render import validate_workers
from mandelterm.utils import parse_complex


@dataclass
class RenderConfig:
    width: int = 80
    height: int = 40
    upper_left: complex = complex(-2.0, 1.0)
    lower_right: complex = complex(1.0, -1.0)
    limit: int = 1000
    palette: str = "glyph"  # "glyph" | "ascii" | "ansi"
    engine: str = "numpy"   # "numpy" | "python"
    workers: int = 1
    log_level: str = "INFO"

    @property
    def rect(self) -> Rectangle:
        return Rectangle(self.upper_left, self.lower_right)

    def override(self, **kwargs) -> "RenderConfig":
        """Copy with every non-None keyword applied (CLI flags default to None)."""
        return replace(self, **{k: v for k, v in kwargs.items() if v is not None})

    def to_dict(self) -> dict:
        d = asdict(self)
        d["upper_left"] = [self.upper_left.real, self.upper_left.imag]
        d["lower_right"] = [self.lower_right.real, self.lower_right.imag]
        return d


def config_from_dict(cfg: dict | None) -> RenderConfig:
    cfg = cfg or {}
    known = {f.name for f in fields(RenderConfig)}
    unknown = set(cfg) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")

    defaults = RenderConfig()
    palette = cfg.get("palette", defaults.palette)
    if palette not in PALETTES:
        raise ValueError(f"Unknown palette: {palette}")

    # validated as given, never coerced
    width = cfg.get("width", defaults.width)
    height = cfg.get("height", defaults.height)
    limit = cfg.get("limit", defaults.limit)
    workers = cfg.get("workers", defaults.workers)
    validate_dimensions(width, height)
    validate_limit(limit)
    validate_workers(workers)

    return RenderConfig(
        width=width,
        height=height,
        upper_left=parse_complex(cfg.get("upper_left", defaults.upper_left)),
        lower_right=parse_complex(cfg.get("lower_right", defaults.lower_right)),
        limit=limit,
        palette=palette,
        engine=str(cfg.get("engine", defaults.engine)),
        workers=workers,
        log_level=str(cfg.get("log_level", defaults.log_level)),
    )


def load_config(config_path: str | Path) -> RenderConfig:
    with open(config_path, "r") as f:
        cfg = yaml.safe_load(f)
    return config_from_dict(cfg)
