# gwalk/grid.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional
import random, os
from .types import Coord, DIRECTIONS

@dataclass
class Grid:
    rows: int
    cols: int
    blocked: List[List[bool]]  # True=blocked

    @staticmethod
    def create(rows: int, cols: int, blocked_coords: Iterable[Coord] = ()) -> "Grid":
        """
        Fresh all-free grid with the given cells blocked.
        Coordinates outside the grid are ignored.
        """
        if rows <= 0 or cols <= 0:
            raise ValueError(f"grid dimensions must be positive, got {rows}x{cols}")
        g = Grid(rows, cols, [[False] * cols for _ in range(rows)])
        for s in blocked_coords:
            if g.in_bounds(s):
                g.mark_blocked(s)
        return g

    @staticmethod
    def random(rows: int, cols: int, n_blocked: int, seed: Optional[int] = None) -> "Grid":
        g = Grid.create(rows, cols)
        g.add_random_blocked(n_blocked, random.Random(seed))
        return g

    @staticmethod
    def load(path: str) -> "Grid":
        with open(path, "r") as f:
            lines = [line.strip() for line in f if line.strip()]
        if not lines:
            raise ValueError(f"{path}: empty grid file")

        header = lines[0].split()
        if header[0] == "GRID":
            if len(header) != 3:
                raise ValueError(f"{path}: bad header {lines[0]!r}")
            rows, cols = int(header[1]), int(header[2])
            body = lines[1:]
            if len(body) != rows:
                raise ValueError(f"{path}: expected {rows} rows, found {len(body)}")
        else:
            # bare rows of 0/1 or ./#, as printed by render()
            body = lines
            rows, cols = len(body), len(body[0])

        g = Grid.create(rows, cols)
        for r, line in enumerate(body):
            if len(line) != cols:
                raise ValueError(f"{path}: row {r} has {len(line)} cells, expected {cols}")
            for c, ch in enumerate(line):
                if ch in "1#":
                    g.blocked[r][c] = True
                elif ch not in "0.":
                    raise ValueError(f"{path}: unexpected cell {ch!r} at ({r},{c})")
        return g

    def save(self, path: str) -> None:
        d = os.path.dirname(path)
        if d:
            os.makedirs(d, exist_ok=True)
        with open(path, "w") as f:
            f.write(f"GRID {self.rows} {self.cols}\n")
            for r in range(self.rows):
                f.write("".join("1" if self.blocked[r][c] else "0" for c in range(self.cols)) + "\n")

    def in_bounds(self, s: Coord) -> bool:
        r, c = s
        return 0 <= r < self.rows and 0 <= c < self.cols

    def _check(self, s: Coord) -> None:
        # negative indices would silently wrap around the lists
        if not self.in_bounds(s):
            raise IndexError(f"cell {s} outside {self.rows}x{self.cols} grid")

    def is_blocked(self, s: Coord) -> bool:
        self._check(s)
        r, c = s
        return self.blocked[r][c]

    def mark_blocked(self, s: Coord) -> None:
        self._check(s)
        r, c = s
        self.blocked[r][c] = True

    def neighbors(self, s: Coord) -> List[Coord]:
        r, c = s
        cand = [(r + dr, c + dc) for dr, dc in DIRECTIONS]
        return [p for p in cand if self.in_bounds(p)]

    def blocked_count(self) -> int:
        return sum(sum(row) for row in self.blocked)

    def free_count(self) -> int:
        return self.rows * self.cols - self.blocked_count()

    def first_free(self) -> Optional[Coord]:
        for r in range(self.rows):
            for c in range(self.cols):
                if not self.blocked[r][c]:
                    return (r, c)
        return None

    def add_random_blocked(self, count: int, rng: random.Random) -> int:
        """
        Block `count` more cells picked uniformly at random and return how
        many were placed. The request is clamped to the number of free cells.

        Uses rejection sampling, so it slows down as the grid fills up;
        blocking almost every cell of a large grid is expensive.
        """
        available = self.free_count()
        count = min(count, available)
        placed = 0
        while placed < count:
            s = (rng.randrange(self.rows), rng.randrange(self.cols))
            if self.is_blocked(s):
                continue
            self.mark_blocked(s)
            placed += 1
        return placed

    def render(self) -> str:
        return "\n".join("".join("#" if b else "." for b in row) for row in self.blocked)
