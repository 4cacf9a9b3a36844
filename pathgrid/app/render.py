# pathgrid/app/render.py
#!/usr/bin/env python3
"""
Raster export of a grid, one scale x scale block per cell.

Colours: start red, goal green, path blue, open white, wall black.
Works on a bare pygame.Surface, so no window (or display driver) is needed.
"""

import os
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame

from pathgrid.core.types import Cell, Grid
from pathgrid.core.astar import AStarEngine

WHITE = (255, 255, 255)
BLACK = (  0,   0,   0)
RED   = (255,   0,   0)
GREEN = (  0, 128,   0)
BLUE  = (  0,   0, 255)

Color = Tuple[int, int, int]


def cell_color(grid: Grid, c: Cell, start: Cell, goal: Cell, on_path: bool) -> Color:
    if c == start:
        return RED
    if c == goal:
        return GREEN
    if not grid.is_passable(c):
        return BLACK
    return BLUE if on_path else WHITE


def render_grid(grid: Grid, start: Cell, goal: Cell,
                path: Optional[Iterable[Cell]] = None, scale: int = 1) -> pygame.Surface:
    if scale < 1:
        raise ValueError("scale must be greater or equal to one")
    on_path = set(path) if path is not None else set()
    surf = pygame.Surface((grid.cols * scale, grid.rows * scale))
    for row in range(grid.rows):
        for col in range(grid.cols):
            color = cell_color(grid, (row, col), start, goal, (row, col) in on_path)
            surf.fill(color, pygame.Rect(col * scale, row * scale, scale, scale))
    return surf


def render_engine(engine: AStarEngine, scale: int = 1, show_path: bool = False) -> pygame.Surface:
    """Render the engine's grid; with show_path, overlay the path it found."""
    path = None
    if show_path:
        if engine.terminal is None:
            raise RuntimeError("the path has not been solved yet; run the engine first")
        path = engine.reconstruct_path()
    return render_grid(engine.grid, engine.start, engine.goal, path=path, scale=scale)


def export_png(surface: pygame.Surface, filename: Union[str, Path]) -> Path:
    out = Path(filename)
    out.parent.mkdir(parents=True, exist_ok=True)
    pygame.image.save(surface, str(out))
    return out
