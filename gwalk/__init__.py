# gwalk/__init__.py
from .types import Coord, DIRECTIONS
from .grid import Grid
from .planner import plan, PlanResult
from .scenarios import Scenario, SCENARIOS, get_scenario, run_scenario
from .viz import draw_world_png
from .cli import format_path, format_stats

__all__ = [
    "Coord", "DIRECTIONS", "Grid",
    "plan", "PlanResult",
    "Scenario", "SCENARIOS", "get_scenario", "run_scenario",
    "draw_world_png", "format_path", "format_stats",
]
