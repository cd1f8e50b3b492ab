# gwalk/cli.py
from __future__ import annotations
import argparse, csv, os, os.path, random
from typing import List, Optional

from .grid import Grid
from .planner import plan, PlanResult
from .scenarios import SCENARIOS, run_scenario
from .types import Coord
from .viz import draw_world_png

def format_path(path: List[Coord]) -> str:
    return "Path:" + "".join(f" ({r},{c})" for r, c in path)

def format_stats(name: str, s: PlanResult) -> str:
    return (f"{name:20s} | unique={s.unique_count:5d} | moves={s.moves:5d} | "
            f"repositions={s.repositions:4d} | early={s.stopped_early!s:5s} | "
            f"time={s.elapsed_sec*1000:7.2f} ms")

def print_result(grid: Grid, res: PlanResult) -> None:
    if res.path:
        print(format_path(res.path))
    print(f"Unique squares visited: {res.unique_count}")
    print(grid.render())

# -------- subcommands --------

def cmd_demo(args: argparse.Namespace) -> None:
    rng = random.Random(args.seed)
    if args.out:
        os.makedirs(args.out, exist_ok=True)
    for i, sc in enumerate(SCENARIOS, start=1):
        grid, res = run_scenario(sc, rng)
        print(f"Test {i} ({sc.rows}x{sc.cols}, {sc.label}):")
        print_result(grid, res)
        if args.out:
            draw_world_png(grid, res.path, os.path.join(args.out, f"{i:02d}_{sc.name}.png"))
        print()

def cmd_gen(args: argparse.Namespace) -> None:
    os.makedirs(args.out, exist_ok=True)
    for i in range(args.count):
        g = Grid.random(args.rows, args.cols, args.blocks,
                        seed=(args.seed + i) if args.seed is not None else None)
        path = os.path.join(args.out, f"grid_{i:03d}.txt")
        g.save(path)
        print("wrote", path)

def cmd_run(args: argparse.Namespace) -> None:
    grid = Grid.load(args.env)
    res = plan(grid, args.moves)
    print_result(grid, res)
    if args.png:
        draw_world_png(grid, res.path, args.png)
        print("wrote", args.png)

def cmd_bench(args: argparse.Namespace) -> None:
    envs = sorted(p for p in os.listdir(args.envdir) if p.endswith(".txt"))
    rows = []
    for fname in envs:
        grid = Grid.load(os.path.join(args.envdir, fname))
        res = plan(grid, args.moves)
        print(format_stats(fname, res))
        if args.out:
            base = os.path.splitext(fname)[0]
            draw_world_png(grid, res.path, os.path.join(args.out, f"{base}.png"))
        rows.append({
            "env": fname,
            "rows": grid.rows,
            "cols": grid.cols,
            "free": grid.free_count(),
            "moves": res.moves,
            "unique": res.unique_count,
            "repositions": res.repositions,
            "stopped_early": res.stopped_early,
            "time_sec": round(res.elapsed_sec, 6),
        })
    if args.csv and rows:
        with open(args.csv, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            writer.writeheader()
            writer.writerows(rows)
        print("wrote CSV:", args.csv)

def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Greedy coverage walk on a blocked grid")
    sub = p.add_subparsers(dest="cmd", required=True)

    d = sub.add_parser("demo", help="run the built-in scenarios")
    d.add_argument("--seed", type=int, default=None, help="seed for the random-blocks scenario")
    d.add_argument("--out", type=str, default="", help="write a PNG per scenario here")
    d.set_defaults(func=cmd_demo)

    g = sub.add_parser("gen", help="generate random grids")
    g.add_argument("--count", type=int, default=10)
    g.add_argument("--rows", type=int, default=100)
    g.add_argument("--cols", type=int, default=10)
    g.add_argument("--blocks", type=int, default=200)
    g.add_argument("--out", type=str, default="envs")
    g.add_argument("--seed", type=int, default=None)
    g.set_defaults(func=cmd_gen)

    r = sub.add_parser("run", help="plan a walk on one grid file")
    r.add_argument("--env", type=str, required=True)
    r.add_argument("--moves", type=int, default=50)
    r.add_argument("--png", type=str, default="")
    r.set_defaults(func=cmd_run)

    b = sub.add_parser("bench", help="plan a walk on every .txt in a folder")
    b.add_argument("--envdir", type=str, required=True)
    b.add_argument("--moves", type=int, default=50)
    b.add_argument("--out", type=str, default="")
    b.add_argument("--csv", type=str, default="")
    b.set_defaults(func=cmd_bench)

    return p

def main(argv: Optional[List[str]] = None):
    ap = build_argparser()
    args = ap.parse_args(argv)
    args.func(args)
