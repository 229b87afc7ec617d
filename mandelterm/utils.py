# mandelterm/utils.py
import sys

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
_log_level = "INFO"


def set_log_level(level: str) -> None:
    global _log_level
    level = level.upper()
    if level not in LEVELS:
        raise ValueError(f"Unknown log level: {level}")
    _log_level = level


def log_message(level, msg):
    """Print-based logging to stderr that respects the configured level."""
    if LEVELS.index(level) >= LEVELS.index(_log_level):
        print(f"[{level}] {msg}", file=sys.stderr)


def parse_complex(s) -> complex:
    """
    Parse strings like '0.3+0.5j', '-0.4-0.6j' or '1j' into a complex number.

    Pairs such as [re, im] (e.g. from YAML) and plain numbers are accepted too.
    """
    if isinstance(s, (list, tuple)):
        if len(s) != 2:
            raise ValueError(f"Expected [real, imag], got {s!r}")
        return complex(float(s[0]), float(s[1]))
    if isinstance(s, (int, float, complex)):
        return complex(s)
    s = s.strip().lower().replace(" ", "")
    if s.endswith("i"):
        s = s[:-1] + "j"
    if s.endswith("j"):
        return complex(s)
    # allow plain real numbers too
    return complex(float(s), 0.0)


def clamp(v, vmin, vmax):
    return max(vmin, min(v, vmax))
