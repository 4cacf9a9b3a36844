import argparse
import json

import pytest

from pathgrid.cli import EXIT_BAD_INPUT, EXIT_NO_PATH, EXIT_OK, build_parser, main, parse_cell
from pathgrid.core.config import resolve_config


def test_solves_bundled_map(capsys):
    assert main(["01_reference"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "(1,1) ->" in out
    assert out.splitlines()[0].endswith("(5,7)")
    assert "cost:" in out


def test_no_path_exit_code(capsys):
    assert main(["04_enclosed_goal"]) == EXIT_NO_PATH
    assert "no path" in capsys.readouterr().out


def test_budget_exit_code(capsys):
    assert main(["02_open_field", "--max-expansions", "2"]) == EXIT_NO_PATH


def test_overrides(tmp_path, capsys):
    path = tmp_path / "line.json"
    path.write_text(json.dumps({"rows": ["00000"], "start": [0, 0], "goal": [0, 4]}))
    assert main([str(path), "--goal", "0,2", "--direct-cost", "3", "--relax"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "(0,0) -> (0,1) -> (0,2)" in out
    assert "cost: 6" in out


def test_bad_inputs(tmp_path, capsys):
    assert main([str(tmp_path / "missing.json")]) == EXIT_BAD_INPUT
    assert main(["01_reference", "--start", "9,9"]) == EXIT_BAD_INPUT
    assert main(["01_reference", "--diagonal-cost", "0"]) == EXIT_BAD_INPUT
    assert "error:" in capsys.readouterr().err


def test_export(tmp_path, capsys):
    out = tmp_path / "ref.png"
    assert main(["01_reference", "--export", str(out), "--scale", "5"]) == EXIT_OK
    assert out.exists()
    assert f"wrote {out}" in capsys.readouterr().out


def test_export_unsolved_map_draws_plain_grid(tmp_path):
    out = tmp_path / "enclosed.png"
    assert main(["04_enclosed_goal", "--export", str(out)]) == EXIT_NO_PATH
    assert out.exists()


def test_parse_cell():
    assert parse_cell("3,4") == (3, 4)
    with pytest.raises(argparse.ArgumentTypeError):
        parse_cell("3")


def test_no_relax_beats_env(monkeypatch, capsys):
    monkeypatch.setenv("PATHGRID_RELAX", "1")
    parser = build_parser()
    assert parser.parse_args(["01_reference"]).relax is None
    assert parser.parse_args(["01_reference", "--relax"]).relax is True
    args = parser.parse_args(["01_reference", "--no-relax"])
    assert args.relax is False
    assert resolve_config(overrides={"relax": args.relax}).relax is False
    assert resolve_config(overrides={"relax": None}).relax is True
    assert main(["01_reference", "--no-relax"]) == EXIT_OK


def test_bad_scale_rejected_before_search(tmp_path, capsys):
    out = tmp_path / "enclosed.png"
    assert main(["04_enclosed_goal", "--export", str(out), "--scale", "0"]) == EXIT_BAD_INPUT
    captured = capsys.readouterr()
    assert "no path" not in captured.out
    assert "--scale" in captured.err
    assert not out.exists()
