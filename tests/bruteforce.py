# tests/bruteforce.py
"""Reference shortest-path costs by plain Dijkstra over the 8-connected grid."""

import heapq
import random
from typing import Dict, List

from pathgrid.core.costs import CostModel
from pathgrid.core.frontier import OFFSETS
from pathgrid.core.types import Cell, Grid


def distances_from(grid: Grid, source: Cell, costs: CostModel, enterable: Cell = None) -> Dict[Cell, int]:
    """Cost from `source` to every reachable cell. `enterable` is walkable even if walled."""
    dist = {source: 0}
    pq = [(0, source)]
    while pq:
        d, u = heapq.heappop(pq)
        if d > dist[u]:
            continue
        for dr, dc in OFFSETS:
            v = (u[0] + dr, u[1] + dc)
            if not grid.contains(v):
                continue
            if not grid.is_passable(v) and v != enterable:
                continue
            nd = d + costs.step_cost(u, v)
            if nd < dist.get(v, float("inf")):
                dist[v] = nd
                heapq.heappush(pq, (nd, v))
    return dist


def random_grid(seed: int, rows: int = 7, cols: int = 9, density: float = 0.3) -> List[str]:
    rng = random.Random(seed)
    lines = []
    for _ in range(rows):
        lines.append("".join("1" if rng.random() < density else "0" for _ in range(cols)))
    return lines
