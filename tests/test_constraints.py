# tests/test_constraints.py
from sudoku_engine.constraints import (
    can_place,
    candidates,
    compute_candidates,
    conflicting_peers,
    find_conflicts,
    is_globally_legal,
    is_valid_solution,
)
from sudoku_engine.grid import empty_grid, peers


def test_can_place_row_col_box():
    grid = empty_grid()
    grid[0][0] = 5
    assert not can_place(grid, 0, 8, 5)  # same row
    assert not can_place(grid, 8, 0, 5)  # same column
    assert not can_place(grid, 2, 2, 5)  # same box
    assert can_place(grid, 4, 4, 5)
    assert can_place(grid, 0, 8, 4)


def test_can_place_ignores_own_value():
    grid = empty_grid()
    grid[3][3] = 7
    assert can_place(grid, 3, 3, 7)
    grid[3][8] = 7
    assert not can_place(grid, 3, 3, 7)


def test_candidates_of_row_with_three_holes():
    grid = empty_grid()
    grid[0] = [1, 2, 3, 4, 5, 6, 0, 0, 0]
    assert candidates(grid, 0, 6) == [7, 8, 9]
    assert candidates(grid, 0, 0) == []
    cand = compute_candidates(grid)
    assert (0, 0) not in cand
    assert cand[(1, 0)] == [4, 5, 6, 7, 8, 9]
    assert len(cand) == 81 - 6


def test_peers_count():
    ps = peers(4, 4)
    assert len(ps) == 20
    assert (4, 4) not in ps


def test_find_conflicts_marks_every_duplicate():
    grid = empty_grid()
    grid[0][0] = 3
    grid[0][5] = 3
    grid[7][5] = 3
    grid[8][8] = 1
    assert find_conflicts(grid) == {(0, 0), (0, 5), (7, 5)}
    assert conflicting_peers(grid, 0, 5) == {(0, 0), (7, 5)}
    assert not is_globally_legal(grid)


def test_valid_solution_checks(solved_grid):
    assert is_valid_solution(solved_grid)
    assert is_globally_legal(solved_grid)
    broken = [row[:] for row in solved_grid]
    broken[0][0], broken[0][1] = broken[0][1], broken[0][0]
    assert not is_valid_solution(broken)
    assert find_conflicts(broken)
