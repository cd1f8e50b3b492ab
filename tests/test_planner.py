import random

from gwalk.grid import Grid
from gwalk.planner import plan


def test_all_blocked_grid_gives_empty_path():
    g = Grid.create(2, 2, [(0, 0), (0, 1), (1, 0), (1, 1)])
    res = plan(g, 10)
    assert res.path == []
    assert res.unique_count == 0


def test_single_cell_grid():
    g = Grid.create(1, 1)
    for n in (0, 1, 10):
        res = plan(g, n)
        assert res.path == [(0, 0)]
        assert res.unique_count == 1
    assert plan(g, 10).stopped_early


def test_zero_budget_stays_on_start():
    g = Grid.create(3, 3, [(0, 0)])
    res = plan(g, 0)
    assert res.path == [(0, 1)]
    assert res.unique_count == 1
    assert res.moves == 0
    assert not res.stopped_early


def test_negative_budget_behaves_like_zero():
    res = plan(Grid.create(2, 2), -3)
    assert res.path == [(0, 0)]


def test_start_is_first_free_cell():
    g = Grid.create(2, 3, [(0, 0), (0, 1)])
    assert plan(g, 3).path[0] == (0, 2)


def test_blocked_middle_row_keeps_walk_on_top_row():
    g = Grid.create(3, 3, [(1, 0), (1, 1), (1, 2)])
    res = plan(g, 5)
    assert res.path == [(0, 0), (0, 1), (0, 2)]
    assert res.unique_count == 3
    assert all(r != 1 for r, _ in res.path)
    assert res.stopped_early


def test_open_grid_is_fully_covered():
    g = Grid.create(5, 5)
    res = plan(g, 30)
    assert len(res.path) == 25
    assert res.unique_count == 25
    assert res.path == [
        (0, 0), (0, 1), (0, 2), (0, 3), (0, 4),
        (1, 4), (2, 4), (3, 4), (4, 4), (4, 3),
        (3, 3), (2, 3), (1, 3), (1, 2), (2, 2),
        (3, 2), (4, 2), (4, 1), (3, 1), (2, 1),
        (1, 1), (1, 0), (2, 0), (3, 0), (4, 0),
    ]
    assert res.repositions == 0
    assert res.stopped_early


def test_budget_cuts_walk_short():
    g = Grid.create(5, 5)
    res = plan(g, 3)
    assert res.path == [(0, 0), (0, 1), (0, 2), (0, 3)]
    assert res.unique_count == 4
    assert not res.stopped_early


def test_prefers_up_then_right_then_down_then_left():
    # up is blocked at the start cell, so right beats down
    g = Grid.create(3, 3, [(0, 0), (0, 1), (0, 2), (1, 0)])
    assert plan(g, 1).path == [(1, 1), (1, 2)]
    g = Grid.create(3, 3, [(0, 0), (0, 1), (0, 2), (1, 0), (1, 2)])
    assert plan(g, 1).path == [(1, 1), (2, 1)]


def test_reposition_steps_back_next_to_unvisited_cell():
    # ...   (0,2) is a dead end: step back to (0,1)
    # #.#   and carry on down into (1,1)
    g = Grid.create(2, 3, [(1, 0), (1, 2)])
    res = plan(g, 10)
    assert res.path == [(0, 0), (0, 1), (0, 2), (0, 1), (1, 1)]
    assert res.unique_count == 4
    assert res.repositions == 1
    assert res.stopped_early


def test_reposition_counts_against_budget():
    g = Grid.create(2, 3, [(1, 0), (1, 2)])
    res = plan(g, 3)
    assert res.path == [(0, 0), (0, 1), (0, 2), (0, 1)]
    assert res.unique_count == 3
    assert not res.stopped_early


def test_lookahead_is_only_one_step():
    # (1,0) is reachable but two hops from the dead end at (0,2)
    g = Grid.create(2, 3, [(1, 1), (1, 2)])
    res = plan(g, 10)
    assert res.path == [(0, 0), (0, 1), (0, 2)]
    assert res.unique_count == 3
    assert (1, 0) not in res.visited


def test_plan_does_not_mutate_grid():
    g = Grid.create(4, 4, [(1, 1)])
    before = [row[:] for row in g.blocked]
    plan(g, 20)
    assert g.blocked == before


def test_plan_is_deterministic():
    g = Grid.random(30, 30, 250, seed=5)
    a, b = plan(g, 200), plan(g, 200)
    assert a.path == b.path
    assert a.unique_count == b.unique_count


def test_invariants_on_random_grids():
    rng = random.Random(11)
    for _ in range(40):
        rows, cols = rng.randint(1, 12), rng.randint(1, 12)
        g = Grid.create(rows, cols)
        g.add_random_blocked(rng.randint(0, rows * cols), rng)
        budget = rng.randint(0, 60)
        res = plan(g, budget)

        assert len(res.path) <= budget + 1
        assert res.unique_count == len(set(res.path)) == len(res.visited)
        if g.first_free() is None:
            assert res.path == [] and res.unique_count == 0
            continue
        assert res.path[0] == g.first_free()
        for (r0, c0), (r1, c1) in zip(res.path, res.path[1:]):
            assert abs(r0 - r1) + abs(c0 - c1) == 1
            assert not g.is_blocked((r1, c1))


def test_reposition_prefers_down_over_left():
    # .#...   at (1,3) both (2,3) below and (1,2) to the left are visited
    # .....   and border an unvisited cell; down comes first in the scan
    # .....
    g = Grid.create(3, 5, [(0, 1)])
    res = plan(g, 60)
    assert res.path == [
        (0, 0), (1, 0), (1, 1), (1, 2), (0, 2),
        (0, 3), (0, 4), (1, 4), (2, 4), (2, 3),
        (1, 3), (2, 3), (2, 2), (2, 1), (2, 0),
    ]
    assert res.unique_count == 14
    assert res.repositions == 1
    assert res.stopped_early
