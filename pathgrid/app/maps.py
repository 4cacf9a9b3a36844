# pathgrid/app/maps.py
#!/usr/bin/env python3
"""
JSON map files.

{
  "name":  "reference",                      (optional, defaults to file stem)
  "rows":  ["1111", "1001", ...],            text rows, '1' = wall
  "cells": [[1,1,1,1], [1,0,0,1], ...],      ...or a 0/1 matrix instead of rows
  "start": [row, col],
  "goal":  [row, col],
  "costs": {"direct_cost": 10, "diagonal_cost": 14}   (optional)
}
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from pathgrid.core.errors import OutOfBounds
from pathgrid.core.types import Cell, Grid, as_cell
from pathgrid.core.costs import CostModel

MAP_DIR = Path(__file__).resolve().parents[1] / "maps"
MAP_FILES = {
    "01_reference":      MAP_DIR / "01_reference.json",
    "02_open_field":     MAP_DIR / "02_open_field.json",
    "03_walled_corridor": MAP_DIR / "03_walled_corridor.json",
    "04_enclosed_goal":  MAP_DIR / "04_enclosed_goal.json",
}


class MapFormatError(ValueError):
    """Map file is not shaped the way load_map expects."""


@dataclass
class Scenario:
    name: str
    grid: Grid
    start: Cell
    goal: Cell
    costs: Dict[str, Any] = field(default_factory=dict)  # raw cost options, validated by CostModel

    def cost_model(self) -> CostModel:
        return CostModel.from_options(self.costs)


def parse_map(data: Mapping[str, Any], name: str = "custom") -> Scenario:
    if not isinstance(data, Mapping):
        raise MapFormatError("map must be a JSON object")

    if "rows" in data:
        rows = data["rows"]
        if not isinstance(rows, list) or not all(isinstance(r, str) for r in rows):
            raise MapFormatError("'rows' must be a list of strings")
        grid = Grid.from_strings(rows)
    elif "cells" in data:
        cells = data["cells"]
        if not isinstance(cells, list) or not all(isinstance(r, list) for r in cells):
            raise MapFormatError("'cells' must be a list of lists")
        if not all(isinstance(v, int) and v in (0, 1) for row in cells for v in row):
            raise MapFormatError("'cells' values must be 0 or 1")
        grid = Grid(cells)
    else:
        raise MapFormatError("map needs either 'rows' or 'cells'")

    try:
        start = as_cell(data["start"])
        goal = as_cell(data["goal"])
    except KeyError as ex:
        raise MapFormatError(f"missing {ex.args[0]!r}") from None
    except (TypeError, ValueError):
        raise MapFormatError("'start' and 'goal' must be [row, col] integer pairs") from None

    if not grid.contains(start):
        raise OutOfBounds(f"start {start} out of bounds")
    if not grid.contains(goal):
        raise OutOfBounds(f"goal {goal} out of bounds")

    costs = data.get("costs", {})
    if not isinstance(costs, Mapping):
        raise MapFormatError("'costs' must be an object")
    CostModel.from_options(costs)

    return Scenario(str(data.get("name", name)), grid, start, goal, dict(costs))


def load_map(path: Union[str, Path]) -> Scenario:
    path = Path(path)
    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as ex:
            raise MapFormatError(f"{path.name}: {ex}") from None
    return parse_map(data, name=path.stem)

