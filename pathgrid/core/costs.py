# pathgrid/core/costs.py
#!/usr/bin/env python3
"""
Movement costs for 8-connected grids.

Orthogonal steps cost ``direct_cost``, diagonal steps ``diagonal_cost``.
Integer arithmetic keeps results deterministic (14 ~ 10 * sqrt(2)).

Heuristic:
- Octile distance: as many diagonal steps as the shorter axis allows,
  straight steps for the rest. Admissible and consistent for this move set
  as long as direct <= diagonal <= 2 * direct.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from pathgrid.core.types import Cell

DIRECT_COST = 10
DIAGONAL_COST = 14

COST_OPTIONS = ("direct_cost", "diagonal_cost")


@dataclass(frozen=True)
class CostModel:
    direct_cost: int = DIRECT_COST
    diagonal_cost: int = DIAGONAL_COST

    def __post_init__(self):
        for key in COST_OPTIONS:
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{key} must be an integer, got {value!r}")
            if value <= 0:
                raise ValueError(f"{key} must be positive, got {value}")

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "CostModel":
        unknown = sorted(set(options) - set(COST_OPTIONS))
        if unknown:
            raise ValueError(f"unknown cost option(s): {', '.join(unknown)}")
        return cls(**dict(options))

    def to_options(self) -> dict:
        return {"direct_cost": self.direct_cost, "diagonal_cost": self.diagonal_cost}

    def step_cost(self, a: Cell, b: Cell) -> int:
        """Cost of a single move between adjacent cells a and b."""
        if a[0] != b[0] and a[1] != b[1]:
            return self.diagonal_cost
        return self.direct_cost

    def h_cost(self, c: Cell, goal: Cell) -> int:
        """Octile distance from c to goal, ignoring obstacles."""
        dr = abs(c[0] - goal[0])
        dc = abs(c[1] - goal[1])
        diag = min(dr, dc)
        straight = max(dr, dc) - diag
        return diag * self.diagonal_cost + straight * self.direct_cost

    def g_cost(self, parent_g: int, parent: Cell, c: Cell) -> int:
        """Accumulated cost of reaching c through a specific parent."""
        return parent_g + self.step_cost(parent, c)


def path_cost(path: Sequence[Cell], costs: CostModel) -> int:
    """Sum of per-step costs along an ordered path."""
    return sum(costs.step_cost(a, b) for a, b in zip(path, path[1:]))
