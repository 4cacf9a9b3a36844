# pathgrid/cli.py
#!/usr/bin/env python3
"""
Command line entry point.

    python -m pathgrid 01_reference
    python -m pathgrid my_map.json --start 1,1 --goal 5,7 --export out.png --scale 20
    python -m pathgrid 03_walled_corridor --view

Exit status: 0 path found, 1 bad input, 2 no path (or budget spent).
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from pathgrid.core.errors import PathgridError, NoPathFound, SearchBudgetExceeded
from pathgrid.core.types import Cell
from pathgrid.core.config import resolve_config
from pathgrid.app.maps import MAP_FILES, Scenario, load_map

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_INPUT = 1
EXIT_NO_PATH = 2


def parse_cell(text: str) -> Cell:
    try:
        r, c = text.split(",")
        return (int(r), int(c))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ROW,COL, got {text!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pathgrid",
                                     description="Octile A* shortest path on an obstacle grid")
    parser.add_argument("map", help=f"map file (.json) or bundled map name: {', '.join(MAP_FILES)}")
    parser.add_argument("--start", type=parse_cell, help="override start cell as ROW,COL")
    parser.add_argument("--goal", type=parse_cell, help="override goal cell as ROW,COL")
    parser.add_argument("--direct-cost", type=int, help="cost of an orthogonal step (default 10)")
    parser.add_argument("--diagonal-cost", type=int, help="cost of a diagonal step (default 14)")
    parser.add_argument("--relax", action=argparse.BooleanOptionalAction, default=None,
                        help="reopen closed cells when a cheaper path reaches them "
                             "(--no-relax overrides $PATHGRID_RELAX)")
    parser.add_argument("--max-expansions", type=int, help="give up after this many expansions")
    parser.add_argument("--export", type=Path, help="write a PNG of the grid and path")
    parser.add_argument("--scale", type=int, default=1, help="pixels per cell for --export (default 1)")
    parser.add_argument("--view", action="store_true", help="open the interactive viewer")
    parser.add_argument("--log-level", default=os.getenv("PATHGRID_LOG_LEVEL", "WARNING"),
                        help="logging level (default WARNING, or $PATHGRID_LOG_LEVEL)")
    return parser


def resolve_map(name: str) -> Path:
    if name in MAP_FILES:
        return MAP_FILES[name]
    return Path(name)


def format_path(path: List[Cell]) -> str:
    return " -> ".join(f"({r},{c})" for r, c in path)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    try:
        if args.export is not None and args.scale < 1:
            raise ValueError(f"--scale must be at least 1, got {args.scale}")
        scenario = load_map(resolve_map(args.map))
        if args.start is not None or args.goal is not None:
            scenario = Scenario(scenario.name, scenario.grid,
                                args.start or scenario.start, args.goal or scenario.goal,
                                scenario.costs)
        config = resolve_config(scenario.costs, overrides={
            "direct_cost": args.direct_cost,
            "diagonal_cost": args.diagonal_cost,
            "relax": args.relax,
            "max_expansions": args.max_expansions,
        })
        engine = config.make_engine(scenario.grid, scenario.start, scenario.goal)
    except (PathgridError, OSError, ValueError) as ex:
        logger.error("Cannot set up search for %s: %s", args.map, ex)
        print(f"error: {ex}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if args.view:
        from pathgrid.app.viewer import Viewer
        key = args.map if args.map in MAP_FILES else "custom"
        Viewer(scenario, config=config, map_key=key).run()
        return EXIT_OK

    try:
        path = engine.find_path()
    except (NoPathFound, SearchBudgetExceeded) as ex:
        print(f"no path: {ex}")
        status = EXIT_NO_PATH
    else:
        print(f"path ({len(path)} cells): {format_path(path)}")
        print(f"cost: {engine.terminal.g_cost}")
        status = EXIT_OK

    if args.export is not None:
        from pathgrid.app.render import render_engine, export_png
        try:
            surface = render_engine(engine, scale=args.scale, show_path=status == EXIT_OK)
            out = export_png(surface, args.export)
        except (ValueError, OSError, RuntimeError) as ex:
            logger.error("Export to %s failed: %s", args.export, ex)
            print(f"error: {ex}", file=sys.stderr)
            return EXIT_BAD_INPUT
        print(f"wrote {out}")

    return status


if __name__ == "__main__":
    sys.exit(main())
