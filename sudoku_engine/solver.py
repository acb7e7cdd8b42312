"""Depth-first backtracking solver.

Cells are filled in row-major order and digits tried in ascending order,
so an empty grid always yields the same lexicographically-first complete
grid. The search keeps an explicit stack of "next digit to try" per empty
cell instead of recursing, which lets callers bound it with a step budget.
"""

from __future__ import annotations

import logging
from typing import Optional

from types_sudoku import Grid

from .constraints import can_place
from .errors import SolverBudgetExceeded
from .grid import SIZE, empty_cells

logger = logging.getLogger(__name__)


def solve(grid: Grid, max_steps: Optional[int] = None) -> bool:
    """Fill ``grid`` in place with a complete legal assignment.

    Args:
        grid: 9x9 grid, 0 = empty. Filled cells are treated as fixed.
        max_steps: Budget on digit trials. None means unbounded.

    Returns:
        True if the grid was completed. False if no completion exists, in
        which case the grid is left exactly as it was passed in.

    Raises:
        SolverBudgetExceeded: the budget ran out first (grid restored).
    """
    todo = empty_cells(grid)
    if not todo:
        return True

    next_digit = [1] * len(todo)
    i = 0
    steps = 0
    while 0 <= i < len(todo):
        r, c = todo[i]
        grid[r][c] = 0
        placed = False
        for d in range(next_digit[i], SIZE + 1):
            steps += 1
            if max_steps is not None and steps > max_steps:
                _restore(grid, todo)
                raise SolverBudgetExceeded(steps - 1)
            if can_place(grid, r, c, d):
                grid[r][c] = d
                next_digit[i] = d + 1
                placed = True
                break
        if placed:
            i += 1
            if i < len(todo):
                next_digit[i] = 1
        else:
            # exhausted this cell; backtrack
            next_digit[i] = 1
            i -= 1

    if i < 0:
        _restore(grid, todo)
        logger.debug("solve: no completion after %d steps", steps)
        return False
    logger.debug("solve: filled %d cells in %d steps", len(todo), steps)
    return True


def solved_copy(grid: Grid, max_steps: Optional[int] = None) -> Optional[Grid]:
    """Non-mutating variant: a completed copy, or None."""
    g2 = [row[:] for row in grid]
    return g2 if solve(g2, max_steps=max_steps) else None


def _restore(grid: Grid, cells) -> None:
    for r, c in cells:
        grid[r][c] = 0
