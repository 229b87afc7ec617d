import pytest
from pathlib import Path
import sys

# Add repo root to path
ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from mandelterm.coloring import ANSI_RESET, ASCII_INSIDE
from scripts.render_terminal import main


def test_renders_requested_size(capsys):
    rc = main(["--width", "20", "--height", "10", "--limit", "50", "--palette", "ascii"])
    out = capsys.readouterr().out.splitlines()

    assert rc == 0
    assert len(out) == 10
    assert all(len(line) == 20 for line in out)
    # the middle of the default view is inside the set
    assert ASCII_INSIDE in "".join(out)


def test_logs_go_to_stderr(capsys):
    main(["--width", "8", "--height", "4", "--limit", "10"])
    captured = capsys.readouterr()
    assert "[run]" not in captured.out
    assert "[INFO] [run] done." in captured.err


def test_quiet_log_level(capsys):
    main(["--width", "8", "--height", "4", "--limit", "10", "--log-level", "ERROR"])
    assert capsys.readouterr().err == ""


def test_ansi_palette_resets_each_line(capsys):
    main(["--width", "6", "--height", "3", "--limit", "20", "--palette", "ansi"])
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 3
    assert all(line.endswith(ANSI_RESET) for line in out)


def test_config_file_and_override(tmp_path, capsys):
    cfg = tmp_path / "render.yaml"
    cfg.write_text("width: 30\nheight: 6\nlimit: 40\npalette: ascii\n")

    main(["--config", str(cfg), "--height", "4"])
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 4
    assert all(len(line) == 30 for line in out)


def test_outfile_written(tmp_path, capsys):
    png = tmp_path / "figures" / "mandel.png"
    main(["--width", "16", "--height", "8", "--limit", "30", "--outfile", str(png)])
    assert png.exists()

    from PIL import Image
    with Image.open(png) as im:
        assert im.size == (16, 8)


@pytest.mark.parametrize(
    "argv",
    [
        ["--width", "0"],
        ["--limit", "0"],
        ["--upper-left", "1+1j", "--lower-right", "-2-1j"],
        ["--upper-left", "nonsense"],
        ["--workers", "0", "--engine", "python"],
        ["--fit", "--width", "0"],
    ],
)
def test_bad_arguments_exit_with_usage_error(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        main(argv + ["--height", "4"])
    assert exc.value.code == 2
    assert capsys.readouterr().out == ""
