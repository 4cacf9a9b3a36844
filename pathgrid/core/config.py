# pathgrid/core/config.py
#!/usr/bin/env python3
"""
Search configuration.

Recognised options: direct_cost, diagonal_cost, relax, max_expansions.

Layering (later wins):
- costs from the map file
- ENV: PATHGRID_DIRECT_COST, PATHGRID_DIAGONAL_COST, PATHGRID_RELAX,
  PATHGRID_MAX_EXPANSIONS
- explicit overrides (CLI flags); None means "not given"
"""

import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional

from pathgrid.core.costs import CostModel, COST_OPTIONS
from pathgrid.core.types import Cell, Grid
from pathgrid.core.astar import AStarEngine

OPTIONS = COST_OPTIONS + ("relax", "max_expansions")

ENV_PREFIX = "PATHGRID_"

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off", "")


@dataclass(frozen=True)
class SearchConfig:
    costs: CostModel = field(default_factory=CostModel)
    relax: bool = False
    max_expansions: Optional[int] = None

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "SearchConfig":
        unknown = sorted(set(options) - set(OPTIONS))
        if unknown:
            raise ValueError(f"unknown option(s): {', '.join(unknown)}")
        costs = CostModel.from_options({k: options[k] for k in COST_OPTIONS if k in options})
        relax = options.get("relax", False)
        if not isinstance(relax, bool):
            raise ValueError(f"relax must be a boolean, got {relax!r}")
        budget = options.get("max_expansions")
        if budget is not None and (isinstance(budget, bool) or not isinstance(budget, int) or budget < 1):
            raise ValueError(f"max_expansions must be a positive integer, got {budget!r}")
        return cls(costs=costs, relax=relax, max_expansions=budget)

    def to_options(self) -> Dict[str, Any]:
        opts: Dict[str, Any] = self.costs.to_options()
        opts["relax"] = self.relax
        opts["max_expansions"] = self.max_expansions
        return opts

    def merged(self, options: Mapping[str, Any]) -> "SearchConfig":
        """New config with `options` laid over this one (None values ignored)."""
        opts = self.to_options()
        opts.update({k: v for k, v in options.items() if v is not None})
        return SearchConfig.from_options(opts)

    def make_engine(self, grid: Grid, start: Cell, goal: Cell, name: str = "A*") -> AStarEngine:
        return AStarEngine(grid, start, goal, costs=self.costs, relax=self.relax,
                           max_expansions=self.max_expansions, name=name)


def _parse_env_value(key: str, raw: str) -> Any:
    if key == "relax":
        low = raw.strip().lower()
        if low in _TRUE:
            return True
        if low in _FALSE:
            return False
        raise ValueError(f"{ENV_PREFIX}RELAX must be a boolean, got {raw!r}")
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{key.upper()} must be an integer, got {raw!r}") from None


def options_from_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    env = os.environ if environ is None else environ
    out: Dict[str, Any] = {}
    for key in OPTIONS:
        raw = env.get(ENV_PREFIX + key.upper())
        if raw is not None:
            out[key] = _parse_env_value(key, raw)
    return out


def resolve_config(map_costs: Optional[Mapping[str, Any]] = None,
                   environ: Optional[Mapping[str, str]] = None,
                   overrides: Optional[Mapping[str, Any]] = None) -> SearchConfig:
    cfg = SearchConfig()
    if map_costs:
        cfg = replace(cfg, costs=CostModel.from_options(map_costs))
    cfg = cfg.merged(options_from_env(environ))
    if overrides:
        cfg = cfg.merged(overrides)
    return cfg
