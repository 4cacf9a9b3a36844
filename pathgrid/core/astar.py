# pathgrid/core/astar.py
#!/usr/bin/env python3
"""
A* on an 8-connected grid, one expansion per step() so callers can animate.

API:
- reset() - step() -> StepResult - run() - find_path()

States (StepResult.status):
- "idle"     start node seeded, nothing expanded yet
- "running"  expanding
- "done"     goal expanded; path and cost are attached
- "no_path"  open set ran dry before the goal came up
- "aborted"  max_expansions spent

Costs:
- G: parent G + direct/diagonal step cost, always relative to that parent.
- H: octile distance to the goal (see costs.py).

Tie-breaking in the PQ: (f, h, seq) - lower f, then lower h, then
discovery order.
"""

from dataclasses import dataclass, field
from typing import List, Optional
import logging

from pathgrid.core.types import Cell, Grid, StepResult, as_cell
from pathgrid.core.costs import CostModel
from pathgrid.core.nodes import SearchNode, NodeArena
from pathgrid.core.frontier import Frontier
from pathgrid.core.errors import OutOfBounds, NoPathFound, SearchBudgetExceeded

logger = logging.getLogger(__name__)


@dataclass
class AStarEngine:
    grid: Grid
    start: Cell
    goal: Cell
    costs: CostModel = field(default_factory=CostModel)
    relax: bool = False
    max_expansions: Optional[int] = None
    name: str = "A*"

    # Internal state
    arena: NodeArena = field(default_factory=NodeArena, init=False, repr=False)
    frontier: Frontier = field(init=False, repr=False)
    status: str = field(default="idle", init=False)
    popped_count: int = field(default=0, init=False)
    terminal_index: Optional[int] = field(default=None, init=False)

    def __post_init__(self):
        self.start = as_cell(self.start)
        self.goal = as_cell(self.goal)
        if not self.grid.contains(self.start):
            raise OutOfBounds(f"start {self.start} is outside the {self.grid.rows}x{self.grid.cols} grid")
        if not self.grid.contains(self.goal):
            raise OutOfBounds(f"goal {self.goal} is outside the {self.grid.rows}x{self.grid.cols} grid")
        if self.max_expansions is not None and self.max_expansions < 1:
            raise ValueError("max_expansions must be at least 1")
        self.frontier = Frontier(relax=self.relax)
        self.reset()

    # -------------------- lifecycle --------------------

    def reset(self) -> None:
        """Clear all state and seed with the start node."""
        self.arena.clear()
        self.frontier.clear()
        self.status = "idle"
        self.popped_count = 0
        self.terminal_index = None

        root = SearchNode(self.start, 0, self.costs.h_cost(self.start, self.goal))
        self.frontier.push(self.arena.add(root), root)
        logger.info("%s reset: start=%s goal=%s h0=%d", self.name, self.start, self.goal, root.h_cost)

    @property
    def finished(self) -> bool:
        return self.status in ("done", "no_path", "aborted")

    @property
    def terminal(self) -> Optional[SearchNode]:
        if self.terminal_index is None:
            return None
        return self.arena[self.terminal_index]

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Run ONE expansion:
          - Pop the open node with lowest (f, h, seq) and close its cell.
          - If it is the goal, finish.
          - Else push its successors.
        """
        if self.status == "done":
            path = self.reconstruct_path(self.terminal_index)
            return StepResult(status="done", path=path, cost=self.terminal.g_cost,
                              metrics=self._metrics(path_len=len(path)))

        if self.status in ("no_path", "aborted"):
            return StepResult(status=self.status, metrics=self._metrics())

        if self.max_expansions is not None and self.popped_count >= self.max_expansions:
            self.status = "aborted"
            logger.warning("%s aborted after %d expansions", self.name, self.popped_count)
            return StepResult(status="aborted", metrics=self._metrics())

        index = self.frontier.pop()
        if index is None:
            self.status = "no_path"
            logger.info("%s exhausted the open set after %d expansions; no path to %s",
                        self.name, self.popped_count, self.goal)
            return StepResult(status="no_path", metrics=self._metrics())

        node = self.arena[index]
        u = node.position
        self.popped_count += 1
        self.status = "running"
        logger.debug("expand %s g=%d h=%d f=%d", u, node.g_cost, node.h_cost, node.f_cost)

        if u == self.goal:
            self.status = "done"
            self.terminal_index = index
            path = self.reconstruct_path(index)
            logger.info("%s reached %s: cost=%d steps=%d expansions=%d",
                        self.name, u, node.g_cost, len(path) - 1, self.popped_count)
            return StepResult(status="done", closed=[u], current=u, path=path,
                              cost=node.g_cost, metrics=self._metrics(path_len=len(path)))

        opened_now = self.frontier.expand(index, self.arena, self.grid, self.goal, self.costs)

        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self._metrics())

    def run(self) -> StepResult:
        """Step until the search finishes and return the final result."""
        res = self.step()
        while not res.finished:
            res = self.step()
        return res

    def find_path(self) -> List[Cell]:
        res = self.run()
        if res.status == "no_path":
            raise NoPathFound(f"no path from {self.start} to {self.goal}")
        if res.status == "aborted":
            raise SearchBudgetExceeded(
                f"gave up after {self.popped_count} expansions (max_expansions={self.max_expansions})"
            )
        return res.path

    def reconstruct_path(self, end: Optional[int] = None) -> List[Cell]:
        """Positions start -> end, following parent indices through the arena."""
        if end is None:
            end = self.terminal_index
        if end is None:
            return []
        return self.arena.reconstruct_path(end)

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.frontier),
            "closed_count": len(self.frontier.closed_set),
            "nodes": len(self.arena),
            "path_len": path_len,
            "total_cost": self.terminal.g_cost if self.terminal else None,
        }
