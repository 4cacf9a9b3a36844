# pathgrid/core/frontier.py
#!/usr/bin/env python3
"""
Open/closed bookkeeping for the A* engine.

Open set is a heap of (f, h, seq, node index, cell): lower f, then lower h,
then FIFO by seq (discovery order). Several entries may exist for the same
cell, one per path that reached it. Closing a cell retires all of them;
retired entries are skipped lazily when they surface at the top of the heap.

With `relax` off (default) a closed cell is never generated again, even if a
cheaper path to it shows up later. With `relax` on, a strictly cheaper G
reopens the cell and retires every older entry for it.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set, Tuple, Container
import heapq
from math import inf

from pathgrid.core.types import Cell, Grid
from pathgrid.core.costs import CostModel
from pathgrid.core.nodes import SearchNode, NodeArena

# Row-major: up-left, up, up-right, left, right, down-left, down, down-right.
# Order decides tie-breaks between otherwise equal candidates.
OFFSETS: Tuple[Cell, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def neighbors(node: SearchNode, index: int, grid: Grid, closed: Container[Cell],
              goal: Cell, costs: CostModel) -> Iterator[SearchNode]:
    """
    Yield fresh successor nodes of `node` (stored at arena `index`).

    Walls are skipped except the goal itself, which is always enterable:
    a target may sit on an obstacle cell (a door, a pickup).
    """
    r, c = node.position
    for dr, dc in OFFSETS:
        n = (r + dr, c + dc)
        if not grid.contains(n):
            continue
        if not grid.is_passable(n) and n != goal:
            continue
        if n in closed:
            continue
        yield SearchNode(
            position=n,
            g_cost=costs.g_cost(node.g_cost, node.position, n),
            h_cost=costs.h_cost(n, goal),
            parent=index,
        )


@dataclass
class Frontier:
    relax: bool = False

    open_pq: List[Tuple[int, int, int, int, Cell]] = field(default_factory=list)  # (f, h, seq, index, cell)
    closed_set: Set[Cell] = field(default_factory=set)
    best_g: Dict[Cell, int] = field(default_factory=dict)   # only maintained with relax
    seq: int = 0  # monotonic counter for PQ stability
    _live: Set[int] = field(default_factory=set, init=False, repr=False)
    _by_cell: Dict[Cell, List[int]] = field(default_factory=dict, init=False, repr=False)

    def clear(self) -> None:
        self.open_pq.clear()
        self.closed_set.clear()
        self.best_g.clear()
        self._live.clear()
        self._by_cell.clear()
        self.seq = 0

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def __len__(self) -> int:
        """Number of live (not yet retired) open entries."""
        return len(self._live)

    @property
    def open_cells(self) -> Set[Cell]:
        return set(self._by_cell)

    def admits(self, node: SearchNode) -> bool:
        if self.relax:
            return node.g_cost < self.best_g.get(node.position, inf)
        return node.position not in self.closed_set

    def push(self, index: int, node: SearchNode) -> bool:
        """Add an arena node to the open set. Returns False if it was rejected."""
        if not self.admits(node):
            return False
        cell = node.position
        if self.relax:
            self.best_g[cell] = node.g_cost
            self.closed_set.discard(cell)
            self._retire(cell)
        heapq.heappush(self.open_pq, (node.f_cost, node.h_cost, self._bump(), index, cell))
        self._live.add(index)
        self._by_cell.setdefault(cell, []).append(index)
        return True

    def pop(self) -> Optional[int]:
        """
        Remove the best live entry, close its cell and return its arena index.
        None when the open set is exhausted.
        """
        while self.open_pq:
            _, _, _, index, cell = heapq.heappop(self.open_pq)
            if index not in self._live:
                continue
            self.close(cell)
            return index
        return None

    def close(self, cell: Cell) -> None:
        self.closed_set.add(cell)
        self._retire(cell)

    def _retire(self, cell: Cell) -> None:
        for i in self._by_cell.pop(cell, ()):
            self._live.discard(i)

    def expand(self, index: int, arena: NodeArena, grid: Grid, goal: Cell,
               costs: CostModel) -> List[Cell]:
        """Generate successors of arena[index] and merge them into open."""
        closed: Container[Cell] = () if self.relax else self.closed_set
        opened: List[Cell] = []
        for succ in neighbors(arena[index], index, grid, closed, goal, costs):
            if not self.admits(succ):
                continue
            self.push(arena.add(succ), succ)
            opened.append(succ.position)
        return opened
