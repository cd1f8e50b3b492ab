# gwalk/planner.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Set
import time

from .types import Coord
from .grid import Grid

@dataclass
class PlanResult:
    path: List[Coord]
    unique_count: int
    repositions: int = 0
    stopped_early: bool = False
    elapsed_sec: float = 0.0
    visited: Set[Coord] = field(default_factory=set)

    @property
    def moves(self) -> int:
        return max(len(self.path) - 1, 0)

def _explore(grid: Grid, cur: Coord, visited: Set[Coord]) -> Optional[Coord]:
    for nb in grid.neighbors(cur):
        if not grid.is_blocked(nb) and nb not in visited:
            return nb
    return None

def _reposition(grid: Grid, cur: Coord, visited: Set[Coord]) -> Optional[Coord]:
    # one-step lookahead: a visited neighbour that borders an unvisited cell
    for nb in grid.neighbors(cur):
        if grid.is_blocked(nb) or nb not in visited:
            continue
        if _explore(grid, nb, visited) is not None:
            return nb
    return None

def plan(grid: Grid, movement_points: int) -> PlanResult:
    """
    Greedy coverage walk from the first free cell (row-major).

    Each step spends one movement point. The walker prefers an unvisited
    neighbour (up, right, down, left); failing that it steps onto a visited
    neighbour next to an unvisited cell. When neither exists the walk ends
    and the rest of the budget is dropped.
    """
    t0 = time.perf_counter()
    start = grid.first_free()
    if start is None:
        return PlanResult([], 0, elapsed_sec=time.perf_counter() - t0)

    cur = start
    visited: Set[Coord] = {cur}
    path: List[Coord] = [cur]
    unique_count = 1
    repositions = 0
    stopped_early = False

    for _ in range(max(movement_points, 0)):
        nxt = _explore(grid, cur, visited)
        if nxt is not None:
            visited.add(nxt)
            unique_count += 1
        else:
            nxt = _reposition(grid, cur, visited)
            if nxt is None:
                stopped_early = True
                break
            repositions += 1
        cur = nxt
        path.append(cur)

    return PlanResult(path, unique_count, repositions, stopped_early,
                      time.perf_counter() - t0, visited)
