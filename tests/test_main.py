"""Command-line entry point."""

import json

from plate_loader.main import main


def test_preset_run(capsys):
    assert main(["--target", "100", "--bar", "20"]) == 0
    out = capsys.readouterr().out
    assert "[INFO] Bar: 20kg" in out
    assert "  2x20kg" in out


def test_lb_preset_default_bar(capsys):
    assert main(["--target", "135", "--unit", "lb"]) == 0
    out = capsys.readouterr().out
    assert "135lb - 35lb (barbell) = 100lb of weights" in out
    assert "  1x45lb" in out and "  1x5lb" in out


def test_loader_error_exit_code(capsys):
    assert main(["--target", "10"]) == 1
    assert "Target weight cannot be less than barbell weight." in capsys.readouterr().out


def test_unreadable_plates(tmp_path, capsys):
    assert main(["--target", "100", "--plates", str(tmp_path / "missing.csv")]) == 2
    assert "Cannot read plates" in capsys.readouterr().err


def test_outputs_and_exact_flag(tmp_path):
    plates = tmp_path / "plates.csv"
    plates.write_text("weight,count\n5,2\n3,4\n")
    out_dir = tmp_path / "out"
    args = ["--target", "32", "--bar", "20", "--plates", str(plates), "--out-dir", str(out_dir)]

    assert main(args) == 1
    assert json.loads((out_dir / "report.json").read_text())["error"] == "inexact_load"
    assert not (out_dir / "plan.csv").exists()

    assert main(args + ["--exact", "--plot"]) == 0
    rep = json.loads((out_dir / "report.json").read_text())
    assert rep["strategy"] == "exact"
    assert (out_dir / "plan.csv").exists() and (out_dir / "bar.png").exists()


def test_infinite_target_is_invalid(capsys):
    assert main(["--target", "inf"]) == 1
    assert "Please enter valid positive numbers" in capsys.readouterr().out


def test_infinite_count_in_csv(tmp_path, capsys):
    plates = tmp_path / "plates.csv"
    plates.write_text("weight,count\n20,inf\n")
    assert main(["--target", "100", "--plates", str(plates)]) == 2
    assert "finite" in capsys.readouterr().err
