# pathgrid/core/__init__.py
"""Search core: grid, costs, nodes, frontier and the A* engine."""

from pathgrid.core.errors import (
    PathgridError,
    InvalidShape,
    OutOfBounds,
    NoPathFound,
    SearchBudgetExceeded,
)
from pathgrid.core.types import Cell, Grid, StepResult
from pathgrid.core.costs import CostModel, path_cost
from pathgrid.core.nodes import SearchNode, NodeArena
from pathgrid.core.frontier import Frontier, neighbors
from pathgrid.core.astar import AStarEngine
from pathgrid.core.config import SearchConfig, resolve_config

__all__ = [
    "PathgridError",
    "InvalidShape",
    "OutOfBounds",
    "NoPathFound",
    "SearchBudgetExceeded",
    "Cell",
    "Grid",
    "StepResult",
    "CostModel",
    "path_cost",
    "SearchNode",
    "NodeArena",
    "Frontier",
    "neighbors",
    "AStarEngine",
    "SearchConfig",
    "resolve_config",
]
