import json

import pytest

from pathgrid.app.maps import MAP_FILES, MapFormatError, load_map, parse_map
from pathgrid.core.errors import InvalidShape, OutOfBounds
from tests.conftest import REFERENCE_ROWS


def test_bundled_maps_load():
    for key, path in MAP_FILES.items():
        scenario = load_map(path)
        assert scenario.grid.contains(scenario.start), key
        assert scenario.grid.contains(scenario.goal), key


def test_reference_map_matches_scenario():
    scenario = load_map(MAP_FILES["01_reference"])
    assert scenario.name == "reference"
    assert scenario.start == (1, 1)
    assert scenario.goal == (5, 7)
    assert scenario.grid.rows == 6 and scenario.grid.cols == 8
    assert scenario.cost_model().diagonal_cost == 14


def test_cells_format_and_default_name(tmp_path):
    path = tmp_path / "tiny.json"
    path.write_text(json.dumps({"cells": [[0, 1], [0, 0]], "start": [0, 0], "goal": [1, 1]}))
    scenario = load_map(path)
    assert scenario.name == "tiny"
    assert not scenario.grid.is_passable((0, 1))
    assert scenario.costs == {}
    assert scenario.cost_model().direct_cost == 10


def test_parse_rows_format():
    scenario = parse_map({"rows": REFERENCE_ROWS, "start": [1, 1], "goal": [5, 7],
                          "costs": {"direct_cost": 1, "diagonal_cost": 2}})
    assert scenario.grid.cols == 8
    assert scenario.costs == {"direct_cost": 1, "diagonal_cost": 2}


@pytest.mark.parametrize("data", [
    [],
    {"start": [0, 0], "goal": [0, 0]},
    {"rows": "0000", "start": [0, 0], "goal": [0, 0]},
    {"cells": [1, 0], "start": [0, 0], "goal": [0, 0]},
    {"rows": ["00"], "goal": [0, 0]},
    {"rows": ["00"], "start": [0], "goal": [0, 0]},
    {"rows": ["000", "000"], "start": [0.9, 0], "goal": [1, 2]},
    {"rows": ["000"], "start": [0, 0], "goal": ["0", "2"]},
    {"cells": [["0", "1"], ["0", "0"]], "start": [0, 0], "goal": [1, 1]},
    {"cells": [[0, 2], [0, 0]], "start": [0, 0], "goal": [1, 1]},
    {"rows": ["00"], "start": [0, 0], "goal": [0, 1], "costs": [10, 14]},
])
def test_malformed_maps(data):
    with pytest.raises(MapFormatError):
        parse_map(data)


def test_bad_shape_and_bounds_propagate():
    with pytest.raises(InvalidShape):
        parse_map({"rows": ["000", "00"], "start": [0, 0], "goal": [0, 1]})
    with pytest.raises(OutOfBounds):
        parse_map({"rows": ["000"], "start": [0, 3], "goal": [0, 1]})


def test_unknown_cost_option_rejected():
    with pytest.raises(ValueError):
        parse_map({"rows": ["00"], "start": [0, 0], "goal": [0, 1], "costs": {"jump_cost": 3}})


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(MapFormatError):
        load_map(path)


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_map(tmp_path / "nope.json")
