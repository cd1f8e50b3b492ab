# gwalk/types.py
from typing import Tuple

Coord = Tuple[int, int]  # (row, col)

# up, right, down, left -- the scan order decides which cell wins a tie
DIRECTIONS: Tuple[Coord, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))
