# File: tests/test_cli.py

"""Tests for the command line entry point."""

import json
import logging

import pytest

from src.floorplan_drafter.main import main, parse_arguments


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() reconfigures the root logger; put pytest's handlers back."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_defaults():
    args = parse_arguments(["--layout", "plan.json"])
    assert args.level == 0
    assert args.scale is None
    assert not args.no_hatching


def test_writes_svg_next_to_layout(tmp_path, single_room_data, capsys):
    layout_path = tmp_path / "house.json"
    layout_path.write_text(json.dumps(single_room_data), encoding="utf-8")

    assert main(["--layout", str(layout_path)]) == 0

    svg_path = tmp_path / "house.svg"
    assert svg_path.exists()
    assert "layer-walls" in svg_path.read_text(encoding="utf-8")
    assert "0 error(s)" in capsys.readouterr().out


def test_explicit_output_and_log_dir(tmp_path, single_room_data):
    layout_path = tmp_path / "house.json"
    layout_path.write_text(json.dumps(single_room_data), encoding="utf-8")
    output = tmp_path / "out" / "plan.svg"
    output.parent.mkdir()

    code = main([
        "--layout", str(layout_path), "--output", str(output),
        "--no-dimensions", "--log-dir", str(tmp_path / "logs"),
    ])

    assert code == 0
    assert 'id="layer-dimensions"' not in output.read_text(encoding="utf-8")
    assert any((tmp_path / "logs").iterdir())


def test_missing_file_fails(tmp_path):
    assert main(["--layout", str(tmp_path / "missing.json")]) == 1


def test_layout_without_floors_fails(tmp_path):
    layout_path = tmp_path / "empty.json"
    layout_path.write_text(json.dumps({"building": {"total_width_ft": 20, "total_depth_ft": 15}}))
    assert main(["--layout", str(layout_path)]) == 1
