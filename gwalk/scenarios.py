# gwalk/scenarios.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple
import random

from .types import Coord
from .grid import Grid
from .planner import plan, PlanResult

@dataclass(frozen=True)
class Scenario:
    name: str
    label: str
    rows: int
    cols: int
    blocked: Tuple[Coord, ...]
    movement_points: int
    random_blocks: int = 0

    def build(self, rng: random.Random) -> Grid:
        g = Grid.create(self.rows, self.cols, self.blocked)
        if self.random_blocks:
            g.add_random_blocked(self.random_blocks, rng)
        return g

SCENARIOS: List[Scenario] = [
    Scenario("tiny", "no blocks", 1, 1, (), 1),
    Scenario("all_blocked", "all blocked", 2, 2, ((0, 0), (0, 1), (1, 0), (1, 1)), 10),
    Scenario("one_path", "one path", 3, 3, ((1, 0), (1, 1), (1, 2)), 5),
    Scenario("open", "no blocks", 5, 5, (), 30),
    Scenario("random", "random blocks", 100, 10, (), 50, random_blocks=200),
]

def get_scenario(name: str) -> Scenario:
    for sc in SCENARIOS:
        if sc.name == name:
            return sc
    raise KeyError(f"unknown scenario {name!r}")

def run_scenario(sc: Scenario, rng: random.Random) -> Tuple[Grid, PlanResult]:
    grid = sc.build(rng)
    return grid, plan(grid, sc.movement_points)
