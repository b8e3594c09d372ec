"""Tests for the iconshade command line."""

from __future__ import annotations

import logging

import pytest

from iconshade.cli import ICON_PRESETS, main
from iconshade.svg.background import BACKGROUND_MARKER
from tests.conftest import FILLED_SVG, LINE_SVG


@pytest.fixture
def icon_file(tmp_path):
    path = tmp_path / "icon.svg"
    path.write_text(FILLED_SVG, encoding="utf-8")
    return path


def test_writes_both_variants(tmp_path, icon_file, capsys):
    out = tmp_path / "out" / "toolbar.svg"
    assert main(["-i", str(icon_file), "-f", "#ff0000", "-o", str(out)]) == 0

    active = tmp_path / "out" / "toolbar-active.svg"
    inactive = tmp_path / "out" / "toolbar-inactive.svg"
    assert 'fill="#ff0000"' in active.read_text(encoding="utf-8")
    assert BACKGROUND_MARKER in inactive.read_text(encoding="utf-8")
    assert capsys.readouterr().out.count("Created ") == 2


def test_logs_input_and_output_plan(tmp_path, icon_file, caplog):
    out = tmp_path / "out" / "toolbar.svg"
    with caplog.at_level(logging.DEBUG, logger="iconshade.cli"):
        assert main(["-i", str(icon_file), "-f", "#ff0000", "-o", str(out), "--no-inactive"]) == 0

    messages = [r.getMessage() for r in caplog.records if r.name == "iconshade.cli"]
    assert any(m.startswith("Read ") and "icon.svg" in m for m in messages)
    assert any("toolbar-<variant>.svg" in m for m in messages)


def test_refuses_overwrite(tmp_path, icon_file, capsys):
    out = tmp_path / "icon-out.svg"
    args = ["-i", str(icon_file), "-f", "#ff0000", "-o", str(out)]
    assert main(args) == 0
    capsys.readouterr()

    assert main(args) == 1
    assert "already exists" in capsys.readouterr().err
    assert main(args + ["--overwrite"]) == 0


def test_default_output_name(tmp_path, icon_file, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["-i", "icon.svg", "-s", "#00FFCC", "-f", "none", "--no-inactive"]) == 0
    written = sorted(p.name for p in (tmp_path / "output").iterdir())
    assert written == ["icon-fill-none-stroke-00FFCC-active.svg"]


def test_preset_icon(tmp_path):
    out = tmp_path / "line.svg"
    assert main(["--icon", "line", "-s", "#3366ff", "-o", str(out)]) == 0
    assert 'stroke="#3366ff"' in (tmp_path / "line-active.svg").read_text(encoding="utf-8")
    assert set(ICON_PRESETS) == {"black", "line"}


def test_preserve_flags(tmp_path):
    src = tmp_path / "line.svg"
    src.write_text(LINE_SVG, encoding="utf-8")
    out = tmp_path / "x.svg"
    assert main(["-i", str(src), "-f", "#ff0000", "--no-preserve-fill-none", "--no-inactive", "-o", str(out)]) == 0
    assert 'fill="#ff0000"' in (tmp_path / "x-active.svg").read_text(encoding="utf-8")


def test_missing_input_file(tmp_path, capsys):
    assert main(["-i", str(tmp_path / "nope.svg"), "-f", "#fff"]) == 1
    assert "File not found" in capsys.readouterr().err


def test_not_an_svg(tmp_path, capsys):
    src = tmp_path / "bad.svg"
    src.write_text("<not-svg/>", encoding="utf-8")
    assert main(["-i", str(src), "-f", "#fff", "-o", str(tmp_path / "o.svg")]) == 1
    assert "not a valid SVG" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv",
    [
        ["-f", "#fff"],
        ["--icon", "black"],
        ["--icon", "black", "-f", "#12"],
        ["--icon", "black", "-f", "#fff", "--inactive-mix", "1.5"],
        ["--icon", "black", "-f", "#fff", "--inactive-mix", "abc"],
    ],
)
def test_usage_errors_exit_2(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
