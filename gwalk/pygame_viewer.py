# gwalk/pygame_viewer.py (step-by-step replay of a greedy walk)
from __future__ import annotations
import argparse
from dataclasses import dataclass
from typing import List, Set
import os
import pygame

from .types import Coord
from .grid import Grid
from .planner import plan, PlanResult

@dataclass
class Colors:
    BG = (18, 18, 22)
    WALL = (35, 35, 44)
    FLOOR = (230, 230, 240)
    VISITED = (160, 190, 255)
    PLAYER = (220, 90, 90)
    START = (90, 200, 120)
    PATH = (70, 120, 200)
    GRID = (60, 60, 70)

def _is_cmd_ctrl_f(event):
    mods = event.mod
    KMOD_CMD = getattr(pygame, "KMOD_META", 0) | getattr(pygame, "KMOD_GUI", 0)
    return event.key == pygame.K_f and (mods & pygame.KMOD_CTRL) and (mods & KMOD_CMD)

class Viewer:
    def __init__(self, grid: Grid, movement_points: int, cell_size: int = 28, fps: int = 60,
                 fullscreen: bool = False, speed: float = 6.0, env_dir: str | None = None,
                 random_blocks: int = 0):
        self.grid = grid
        self.movement_points = movement_points
        self.cell = cell_size
        self.fps = fps
        self.speed_tiles_per_sec = speed
        self.random_blocks = random_blocks
        self.env_dir = env_dir
        self.env_files: List[str] = []
        self.env_index = -1

        self.autopilot = False
        self._step_timer = 0.0
        self.show_grid = False

        self.fullscreen = fullscreen
        self._recreate_display()
        self.clock = pygame.time.Clock()

        self._reset_state()

        if self.env_dir:
            self._find_env_files()

    # ----------------- display / fullscreen -----------------
    def _recreate_display(self) -> None:
        W, H = self.grid.cols * self.cell, self.grid.rows * self.cell
        flags = pygame.SCALED | (pygame.FULLSCREEN if self.fullscreen else 0)
        self.screen = pygame.display.set_mode((W, H), flags)

    def toggle_fullscreen(self) -> None:
        self.fullscreen = not self.fullscreen
        self._recreate_display()

    def _recalculate_step_interval(self) -> None:
        self._step_interval = 1.0 / self.speed_tiles_per_sec

    # ----------------- planning / replay -----------------
    def _reset_state(self) -> None:
        """Replans on the current grid and rewinds the replay."""
        self.result: PlanResult = plan(self.grid, self.movement_points)
        self.step_index = 0
        self.shown: Set[Coord] = set(self.result.path[:1])
        self._recalculate_step_interval()
        self._update_caption()

    def _set_grid(self, grid: Grid) -> None:
        resized = (grid.rows, grid.cols) != (self.grid.rows, self.grid.cols)
        self.grid = grid
        if resized:
            self._recreate_display()
        self._reset_state()

    def _find_env_files(self) -> None:
        if self.env_dir and os.path.isdir(self.env_dir):
            self.env_files = sorted([f for f in os.listdir(self.env_dir) if f.endswith(".txt")])

    def _load_env_by_index(self, index: int) -> None:
        if not self.env_files or not (0 <= index < len(self.env_files)):
            return
        self.env_index = index
        filepath = os.path.join(self.env_dir, self.env_files[self.env_index])
        print(f"Loading: {filepath}")
        self._set_grid(Grid.load(filepath))

    def _step(self) -> None:
        if self.step_index + 1 >= len(self.result.path):
            self.autopilot = False
            return
        self.step_index += 1
        self.shown.add(self.result.path[self.step_index])
        self._update_caption()

    def _update_caption(self) -> None:
        total = max(len(self.result.path) - 1, 0)
        pygame.display.set_caption(
            f"Greedy walk | budget {self.movement_points} | step {self.step_index}/{total} | "
            f"unique {len(self.shown)}/{self.result.unique_count}")

    # ----------------- draw -----------------
    def draw(self) -> None:
        cell = self.cell
        scr = self.screen
        scr.fill(Colors.BG)

        for r in range(self.grid.rows):
            for c in range(self.grid.cols):
                rect = pygame.Rect(c * cell, r * cell, cell, cell)
                if self.grid.blocked[r][c]:
                    color = Colors.WALL
                elif (r, c) in self.shown:
                    color = Colors.VISITED
                else:
                    color = Colors.FLOOR
                scr.fill(color, rect)

        path = self.result.path
        if path:
            sr, sc = path[0]
            pygame.draw.rect(scr, Colors.START, pygame.Rect(sc * cell + 4, sr * cell + 4, cell - 8, cell - 8),
                             border_radius=6)
            trail = [(c * cell + cell // 2, r * cell + cell // 2) for (r, c) in path[:self.step_index + 1]]
            if len(trail) > 1:
                pygame.draw.lines(scr, Colors.PATH, False, trail, 3)
            pr, pc = path[self.step_index]
            player_rect = pygame.Rect(pc * cell + 6, pr * cell + 6, cell - 12, cell - 12)
            pygame.draw.rect(scr, Colors.PLAYER, player_rect, border_radius=8)

        if self.show_grid:
            W, H = self.grid.cols * cell, self.grid.rows * cell
            for i in range(self.grid.cols + 1):
                pygame.draw.line(scr, Colors.GRID, (i * cell, 0), (i * cell, H))
            for i in range(self.grid.rows + 1):
                pygame.draw.line(scr, Colors.GRID, (0, i * cell), (W, i * cell))

        pygame.display.flip()

    # ----------------- loop -----------------
    def run(self) -> None:
        running = True
        while running:
            dt = self.clock.tick(self.fps) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        self.autopilot = not self.autopilot
                    elif event.key == pygame.K_n:
                        self._step()
                    elif event.key == pygame.K_r:
                        self._reset_state()
                    elif event.key == pygame.K_g:
                        self._set_grid(Grid.random(self.grid.rows, self.grid.cols, self.random_blocks))
                    elif event.key == pygame.K_LEFTBRACKET and self.env_files: # Previous grid '['
                        new_index = (self.env_index - 1 + len(self.env_files)) % len(self.env_files)
                        self._load_env_by_index(new_index)
                    elif event.key == pygame.K_RIGHTBRACKET and self.env_files: # Next grid ']'
                        new_index = (self.env_index + 1) % len(self.env_files)
                        self._load_env_by_index(new_index)
                    elif event.key == pygame.K_EQUALS or event.key == pygame.K_PLUS:
                        self.movement_points += 1
                        self._reset_state()
                    elif event.key == pygame.K_MINUS:
                        self.movement_points = max(self.movement_points - 1, 0)
                        self._reset_state()
                    elif event.key == pygame.K_PAGEUP:
                        self.speed_tiles_per_sec = min(self.speed_tiles_per_sec + 1, 60)
                        self._recalculate_step_interval()
                    elif event.key == pygame.K_PAGEDOWN:
                        self.speed_tiles_per_sec = max(self.speed_tiles_per_sec - 1, 1)
                        self._recalculate_step_interval()
                    elif event.key == pygame.K_h:
                        self.show_grid = not self.show_grid
                    elif (event.key == pygame.K_RETURN and (event.mod & pygame.KMOD_ALT)) or _is_cmd_ctrl_f(event):
                        self.toggle_fullscreen()
                    elif event.key == pygame.K_F11:
                        self.toggle_fullscreen()

            if self.autopilot:
                self._step_timer += dt
                while self.autopilot and self._step_timer >= self._step_interval:
                    self._step()
                    self._step_timer -= self._step_interval
            else:
                self._step_timer = 0.0

            self.draw()

def main():
    parser = argparse.ArgumentParser(description="Greedy walk viewer")
    parser.add_argument("--rows", type=int, default=20, help="Rows when generating random grids")
    parser.add_argument("--cols", type=int, default=20, help="Columns when generating random grids")
    parser.add_argument("--blocks", type=int, default=80, help="Random blocked cells for generated grids")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the first random grid")
    parser.add_argument("--moves", type=int, default=100, help="Movement points")
    parser.add_argument("--load", type=str, default=None, help="Load a saved grid (.txt)")
    parser.add_argument("--cell", type=int, default=28, help="Cell size in pixels")
    parser.add_argument("--envdir", type=str, default="envs", help="Directory of grids to cycle through with [ and ]")
    parser.add_argument("--fps", type=int, default=60, help="Frames per second")
    parser.add_argument("--speed", type=float, default=6.0, help="Autopilot speed in tiles/sec")
    parser.add_argument("--fullscreen", action="store_true", help="Start in fullscreen (toggle Option+Enter / F11)")
    args = parser.parse_args()

    # Determine initial grid
    if args.load:
        grid = Grid.load(args.load)
    elif os.path.isdir(args.envdir) and any(f.endswith(".txt") for f in os.listdir(args.envdir)):
        first_env = sorted([f for f in os.listdir(args.envdir) if f.endswith(".txt")])[0]
        grid = Grid.load(os.path.join(args.envdir, first_env))
    else:
        grid = Grid.random(args.rows, args.cols, args.blocks, seed=args.seed)

    pygame.init()
    try:
        Viewer(grid, args.moves, cell_size=args.cell, fps=args.fps, fullscreen=args.fullscreen,
               speed=args.speed, env_dir=args.envdir, random_blocks=args.blocks).run()
    finally:
        pygame.quit()

if __name__ == "__main__":
    main()
