# pathgrid/app/viewer.py
#!/usr/bin/env python3
"""
Pathfinding Viewer: animates AStarEngine.step() on a bundled map.

- Keyboard:
    [1]..[4]     -> switch bundled map
    [X]          -> toggle relaxation (reopen closed cells)
    [SPACE]      -> run/pause
    [N]          -> single step
    [R]          -> reset
    [+]/[-]      -> steps/sec
    [Q]/[ESC]    -> quit
- Mouse: the same actions as buttons in the side panel.
"""

import os, sys, time
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame

from pathgrid.core.errors import PathgridError
from pathgrid.core.types import Cell, StepResult
from pathgrid.core.config import SearchConfig, resolve_config
from pathgrid.app.maps import MAP_FILES, Scenario, load_map

MAP_KEYS = list(MAP_FILES)  # [1]..[4] pick by position
MARGIN = 16
PANEL_W = 240
MIN_HEIGHT = 580
GRID_PX = 640   # longest grid side fits in this many pixels
LINE_H = 22
BUTTON_H = 28

BG          = ( 24,  26,  32)
TEXT        = (230, 235, 240)
WALL        = ( 40,  44,  52)
FLOOR       = (200, 200, 200)
OPEN_TINT   = (  0, 150, 255, 110)
CLOSED_TINT = (255,   0, 120,  90)
PATH_COLOR  = (  0, 255, 200)
START_COLOR = (220,  50,  47)
GOAL_COLOR  = ( 46, 139,  87)
BUTTON_BG   = ( 40,  44,  54)
BUTTON_LIT  = ( 58,  86, 160)

EMPTY_METRICS = {
    "popped": 0,
    "open_size": 0,
    "closed_count": 0,
    "nodes": 0,
    "path_len": 0,
    "total_cost": None,
}

TERMINAL_STATES = {"done": "Done", "no_path": "No path", "aborted": "Aborted"}


@dataclass
class Button:
    label: str
    rect: pygame.Rect
    action: Callable[[], None]
    lit: Callable[[], bool] = lambda: False


class Viewer:
    def __init__(self, scenario: Scenario, config: Optional[SearchConfig] = None,
                 map_key: str = "custom"):
        pygame.init()
        self.font = pygame.font.Font(None, 20)

        self.scenario = scenario
        self.config = config or resolve_config(scenario.costs)
        self.selected_map_key = map_key

        self.open_set: set[Cell] = set()
        self.closed_set: set[Cell] = set()
        self.path: List[Cell] = []
        self.running = False
        self.quit_requested = False
        self.state = "Idle"
        self.steps_per_sec = 8
        self.clock = pygame.time.Clock()
        self._last_step_t = 0.0
        self._last_metrics = dict(EMPTY_METRICS)

        self._open_window()
        self.engine = self.config.make_engine(scenario.grid, scenario.start, scenario.goal)

    def _open_window(self):
        """Size the window to the current map and lay out the side panel."""
        grid = self.scenario.grid
        self.cell_size = max(8, min(32, GRID_PX // max(grid.rows, grid.cols)))
        grid_w = grid.cols * self.cell_size
        grid_h = grid.rows * self.cell_size
        self.screen = pygame.display.set_mode(
            (grid_w + 2 * MARGIN + PANEL_W, max(grid_h + 2 * MARGIN, MIN_HEIGHT)))
        pygame.display.set_caption(f"Pathfinding: {self.scenario.name}")
        self._panel_x = grid_w + 2 * MARGIN
        self._buttons = self._build_buttons()

    def _build_buttons(self) -> List[Button]:
        actions: List[Tuple[str, Callable[[], None], Callable[[], bool]]] = [
            ("Run / Pause", self._toggle_run, lambda: self.running),
            ("Step", self._do_step, lambda: False),
            ("Reset", self._reset, lambda: False),
            ("Relax", self._toggle_relax, lambda: self.config.relax),
            ("Slower", lambda: self._bump_speed(-1), lambda: False),
            ("Faster", lambda: self._bump_speed(+1), lambda: False),
        ]
        for key in MAP_KEYS:
            actions.append((key, lambda k=key: self._switch_map(k),
                            lambda k=key: self.selected_map_key == k))

        # status text takes the first 9 lines of the panel
        y = MARGIN + 9 * LINE_H
        buttons = []
        for label, action, lit in actions:
            rect = pygame.Rect(self._panel_x, y, PANEL_W - MARGIN, BUTTON_H)
            buttons.append(Button(label, rect, action, lit))
            y += BUTTON_H + 6
        return buttons

    def cell_rect(self, c: Cell) -> pygame.Rect:
        row, col = c
        cs = self.cell_size
        return pygame.Rect(MARGIN + col * cs, MARGIN + row * cs, cs, cs)

    def run(self):
        while not self.quit_requested:
            self._handle_events()
            if self.running:
                self._tick_algorithm()
            self._draw()
            self.clock.tick(60)
        pygame.quit()

    def _tick_algorithm(self):
        now = time.time()
        if now - self._last_step_t >= 1.0 / self.steps_per_sec:
            self._last_step_t = now
            self._do_step()

    def _do_step(self) -> StepResult:
        res = self.engine.step()
        self.open_set.update(res.opened)
        self.closed_set.update(res.closed)
        self.open_set.difference_update(res.closed)
        if res.path is not None:
            self.path = res.path
        if res.status in TERMINAL_STATES:
            self.state = TERMINAL_STATES[res.status]
            self.running = False
        else:
            self.state = "Running" if self.running else "Paused"
        self._last_metrics = res.metrics
        return res

    def _handle_events(self):
        keys = {
            pygame.K_SPACE: self._toggle_run,
            pygame.K_n: self._do_step,
            pygame.K_r: self._reset,
            pygame.K_x: self._toggle_relax,
            pygame.K_PLUS: lambda: self._bump_speed(+1),
            pygame.K_EQUALS: lambda: self._bump_speed(+1),
            pygame.K_MINUS: lambda: self._bump_speed(-1),
        }
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self.quit_requested = True
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    self.quit_requested = True
                elif e.key in keys:
                    keys[e.key]()
                elif pygame.K_1 <= e.key < pygame.K_1 + len(MAP_KEYS):
                    self._switch_map(MAP_KEYS[e.key - pygame.K_1])
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                self._click(e.pos)

    def _click(self, pos: Tuple[int, int]) -> bool:
        for b in self._buttons:
            if b.rect.collidepoint(pos):
                b.action()
                return True
        return False

    def _switch_map(self, key: str):
        if key not in MAP_FILES:
            return
        try:
            scenario = load_map(MAP_FILES[key])
            config = resolve_config(scenario.costs, overrides={"relax": self.config.relax})
        except (PathgridError, OSError, ValueError) as ex:
            print(f"Failed to load map {key}: {ex}")
            return
        self.scenario = scenario
        self.config = config
        self.selected_map_key = key
        self._open_window()
        self._reset()

    def _toggle_relax(self):
        self.config = self.config.merged({"relax": not self.config.relax})
        self._reset()

    def _reset(self):
        self.running = False
        self.state = "Idle"
        self.engine = self.config.make_engine(self.scenario.grid, self.scenario.start, self.scenario.goal)
        self.open_set.clear()
        self.closed_set.clear()
        self.path = []
        self._last_metrics = dict(EMPTY_METRICS)

    def _toggle_run(self):
        if self.engine.finished:
            return
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"

    def _bump_speed(self, dv: int):
        self.steps_per_sec = max(1, min(60, self.steps_per_sec + dv))

    # ---------- drawing ----------
    def _draw(self):
        self.screen.fill(BG)
        self._draw_grid()
        self._draw_panel()
        pygame.display.flip()

    def _draw_grid(self):
        grid = self.scenario.grid
        for row in range(grid.rows):
            for col in range(grid.cols):
                color = FLOOR if grid.is_passable((row, col)) else WALL
                pygame.draw.rect(self.screen, color, self.cell_rect((row, col)))

        tint = pygame.Surface((self.cell_size, self.cell_size), pygame.SRCALPHA)
        for color, cells in ((CLOSED_TINT, self.closed_set), (OPEN_TINT, self.open_set)):
            tint.fill(color)
            for c in cells:
                self.screen.blit(tint, self.cell_rect(c).topleft)

        if len(self.path) >= 2:
            pts = [self.cell_rect(c).center for c in self.path]
            pygame.draw.lines(self.screen, PATH_COLOR, False, pts, 4)

        radius = max(4, self.cell_size // 2 - 2)
        pygame.draw.circle(self.screen, START_COLOR, self.cell_rect(self.scenario.start).center, radius)
        pygame.draw.circle(self.screen, GOAL_COLOR, self.cell_rect(self.scenario.goal).center, radius)

    def status_lines(self) -> List[str]:
        m = self._last_metrics
        cost = m.get("total_cost")
        return [
            f"{self.scenario.name} ({'relax' if self.config.relax else 'no relax'})",
            f"State: {self.state}",
            f"Speed: {self.steps_per_sec} steps/s",
            f"Popped: {m.get('popped', 0)}",
            f"Open: {m.get('open_size', 0)}  Closed: {m.get('closed_count', 0)}",
            f"Nodes: {m.get('nodes', 0)}",
            f"Path len: {m.get('path_len', 0)}",
            f"Cost: {'-' if cost is None else cost}",
        ]

    def _draw_panel(self):
        y = MARGIN
        for text in self.status_lines():
            self.screen.blit(self.font.render(text, True, TEXT), (self._panel_x, y))
            y += LINE_H
        for b in self._buttons:
            pygame.draw.rect(self.screen, BUTTON_LIT if b.lit() else BUTTON_BG, b.rect, border_radius=6)
            label = self.font.render(b.label, True, TEXT)
            self.screen.blit(label, label.get_rect(center=b.rect.center))


def main():
    key = MAP_KEYS[0]
    try:
        scenario = load_map(MAP_FILES[key])
    except (PathgridError, OSError, ValueError) as ex:
        print(f"Failed to load default map: {ex}")
        sys.exit(1)
    Viewer(scenario, map_key=key).run()


if __name__ == "__main__":
    main()
