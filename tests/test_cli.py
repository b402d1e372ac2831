"""Tests for the rastar-plan command line driver."""

import json

import numpy as np
import pytest

from rastar.cli import main
from rastar.io_utils import save_json


@pytest.fixture
def wall_map(tmp_path):
    values = np.zeros((5, 5), dtype=np.int8)
    values[0:4, 2] = 100
    path = tmp_path / "wall.npy"
    np.save(path, values)
    save_json({'resolution': 1.0, 'origin': [0.0, 0.0]}, tmp_path / "wall.json")
    return path


def test_successful_plan_is_exported(wall_map, tmp_path, capsys):
    output = tmp_path / "plan.json"
    code = main(["--map", str(wall_map), "--start", "0.5", "0.5",
                 "--goal", "4.5", "4.5", "-o", str(output)])

    assert code == 0
    assert "Found path" in capsys.readouterr().out
    with open(output) as f:
        data = json.load(f)
    assert data['success'] is True
    assert data['cells'][0] == 0
    assert data['cells'][-1] == 24
    assert 22 in data['cells']


def test_failed_plan_returns_error_code(wall_map, tmp_path):
    output = tmp_path / "plan.json"
    code = main(["--map", str(wall_map), "--start", "0.5", "0.5",
                 "--goal", "2.5", "1.5", "-o", str(output)])

    assert code == 1
    with open(output) as f:
        data = json.load(f)
    assert data['success'] is False
    assert data['error'] == 'invalid_request'
    assert data['path'] == []


def test_inflation_option_closes_gap(wall_map):
    assert main(["--map", str(wall_map), "--start", "0.5", "0.5",
                 "--goal", "4.5", "0.5", "--inflate", "1.0"]) == 1


def test_missing_map(tmp_path, capsys):
    code = main(["--map", str(tmp_path / "nope.png"), "--start", "0", "0", "--goal", "1", "1"])
    assert code == 1
    assert "does not exist" in capsys.readouterr().out


@pytest.mark.parametrize("option", [["--max-expansions", "-1"], ["--inflate", "-0.5"]])
def test_invalid_planner_options_rejected(wall_map, capsys, option):
    code = main(["--map", str(wall_map), "--start", "0.5", "0.5",
                 "--goal", "4.5", "4.5"] + option)
    assert code == 1
    out = capsys.readouterr().out
    assert "Error:" in out
    assert "Expansion limit" not in out
