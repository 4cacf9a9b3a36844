# pathgrid/core/nodes.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import List, Optional, Iterator

from pathgrid.core.types import Cell


@dataclass
class SearchNode:
    """One cell reached along one specific path from the start."""
    position: Cell
    g_cost: int
    h_cost: int
    parent: Optional[int] = None   # arena index, None for the start node
    next: Optional[int] = None     # set only by path reconstruction

    @property
    def f_cost(self) -> int:
        return self.g_cost + self.h_cost


@dataclass
class NodeArena:
    """
    Append-only store owning every node of one search.

    Nodes refer to each other by index into this arena, so a parent stays
    alive for as long as the search does.
    """
    nodes: List[SearchNode] = field(default_factory=list)

    def add(self, node: SearchNode) -> int:
        self.nodes.append(node)
        return len(self.nodes) - 1

    def __getitem__(self, index: int) -> SearchNode:
        return self.nodes[index]

    def __len__(self) -> int:
        return len(self.nodes)

    def clear(self) -> None:
        self.nodes.clear()

    def lineage(self, index: int) -> Iterator[int]:
        """Indices from `index` back to the root, following parent links."""
        cur: Optional[int] = index
        while cur is not None:
            yield cur
            cur = self.nodes[cur].parent

    def reconstruct_path(self, end: int) -> List[Cell]:
        """Positions root -> end. Also wires `next` links in forward order."""
        chain = list(self.lineage(end))
        chain.reverse()
        for a, b in zip(chain, chain[1:]):
            self.nodes[a].next = b
        return [self.nodes[i].position for i in chain]
