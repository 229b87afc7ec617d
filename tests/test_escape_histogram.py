import pandas as pd
import yaml
from pathlib import Path
import sys

# Add repo root to path
ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from experiments.escape_histogram import run_escape_histogram


def test_histogram_outputs(tmp_path):
    cfg = tmp_path / "small.yaml"
    cfg.write_text("width: 40\nheight: 20\nlimit: 100\n")
    outdir = tmp_path / "out"

    df = run_escape_histogram(str(cfg), str(outdir))

    csv = outdir / "escape_histogram.csv"
    assert csv.exists()
    assert (outdir / "escape_histogram.png").exists()

    on_disk = pd.read_csv(csv)
    expected_cols = ["iteration", "count", "fraction"]
    for col in expected_cols:
        assert col in on_disk.columns, f"Missing column {col} in escape_histogram.csv"
    assert on_disk["count"].sum() == 40 * 20
    assert on_disk["iteration"].tolist() == df["iteration"].tolist()

    with open(outdir / "config_used.yaml") as f:
        used = yaml.safe_load(f)
    assert used["width"] == 40
    assert used["limit"] == 100
    assert used["upper_left"] == [-2.0, 1.0]
