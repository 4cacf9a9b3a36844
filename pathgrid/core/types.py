# pathgrid/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Any, Iterable, Iterator, Sequence

from pathgrid.core.errors import InvalidShape

Cell = Tuple[int, int]  # (row, col)


@dataclass(frozen=True)
class Grid:
    """
    Immutable obstacle field. A 1 (or True) cell is a wall, a 0 (or False) cell is open.

    Shape is checked once here; a Grid that exists is always rectangular
    with at least one row and one column.
    """
    cells: Tuple[Tuple[bool, ...], ...]  # [row][col], True = wall

    def __post_init__(self):
        rows = tuple(tuple(_wall_flag(v) for v in row) for row in self.cells)
        if not rows:
            raise InvalidShape("grid must contain at least one row")
        width = len(rows[0])
        if width == 0:
            raise InvalidShape("grid must contain at least one column")
        for r, row in enumerate(rows):
            if len(row) != width:
                raise InvalidShape(
                    f"row {r} has {len(row)} columns, expected {width}"
                )
        object.__setattr__(self, "cells", rows)

    @classmethod
    def from_strings(cls, lines: Iterable[str], wall: str = "1") -> "Grid":
        """Build from text rows, e.g. ``["1111", "1001"]``."""
        return cls(tuple(tuple(ch == wall for ch in line) for line in lines))

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0])

    def contains(self, c: Cell) -> bool:
        r, col = c
        return 0 <= r < self.rows and 0 <= col < self.cols

    def is_passable(self, c: Cell) -> bool:
        r, col = c
        return not self.cells[r][col]

    def walls(self) -> Iterator[Cell]:
        for r, row in enumerate(self.cells):
            for col, blocked in enumerate(row):
                if blocked:
                    yield (r, col)


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path" | "aborted"
    opened: List[Cell] = field(default_factory=list)
    closed: List[Cell] = field(default_factory=list)
    current: Optional[Cell] = None
    path: Optional[List[Cell]] = None
    cost: Optional[int] = None
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def finished(self) -> bool:
        return self.status in ("done", "no_path", "aborted")


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _wall_flag(v: Any) -> bool:
    # bools, or the integers 0 and 1; "0" and "1" strings are both truthy
    if isinstance(v, bool):
        return v
    if _is_int(v) and v in (0, 1):
        return bool(v)
    raise InvalidShape(f"grid cells must be 0/1 or booleans, got {v!r}")


def as_cell(value: Sequence[int]) -> Cell:
    """Turn a two-item sequence (list from JSON, tuple, ...) into a Cell.

    Both coordinates must already be ints; floats and numeric strings are
    rejected with ValueError rather than rounded to a neighbouring cell.
    """
    r, c = value
    if not (_is_int(r) and _is_int(c)):
        raise ValueError(f"cell coordinates must be integers, got {tuple(value)!r}")
    return (r, c)
