# gwalk/viz.py
from __future__ import annotations
import os
from typing import List, Optional
from PIL import Image, ImageDraw

from .types import Coord
from .grid import Grid

def draw_world_png(grid: Grid,
                   path: Optional[List[Coord]],
                   out_png: str,
                   cell: int = 10) -> None:
    W, H = grid.cols * cell, grid.rows * cell
    img = Image.new("RGB", (W, H), (255, 255, 255))
    drw = ImageDraw.Draw(img)

    def fill(r: int, c: int, color) -> None:
        x0, y0 = c * cell, r * cell
        drw.rectangle((x0, y0, x0 + cell - 1, y0 + cell - 1), fill=color)

    # base grid
    for r in range(grid.rows):
        for c in range(grid.cols):
            fill(r, c, (0, 0, 0) if grid.blocked[r][c] else (240, 240, 240))

    if path:
        for (r, c) in path:
            fill(r, c, (160, 190, 255))
        # start / final position
        fill(*path[0], (100, 220, 120))
        if len(path) > 1:
            fill(*path[-1], (255, 170, 80))

    d = os.path.dirname(out_png)
    if d:
        os.makedirs(d, exist_ok=True)
    img.save(out_png)
