"""
Entry validation policies.

Two policies share one interface and branch only at the comparison step:

- LOCAL: an entry is fine when no peer holds the same digit; the puzzle is
  solved when the grid is full and globally legal (any legal completion).
- ANCHORED: an entry is fine when it equals the reference solution; the
  puzzle is solved when the grid is full and identical to the solution.
  Local legality is never consulted in this mode.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from types_sudoku import Coordinate, Grid

from .constraints import can_place, find_conflicts, is_globally_legal
from .grid import cell_label, is_full, iter_cells

CONFLICT = "conflict"
INCORRECT = "incorrect"


class ValidationMode(str, Enum):
    LOCAL = "local"
    ANCHORED = "anchored"

    @classmethod
    def parse(cls, value) -> "ValidationMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown validation mode {value!r}; expected one of {names}") from None

    @property
    def failure_signal(self) -> str:
        return CONFLICT if self is ValidationMode.LOCAL else INCORRECT


def entry_ok(mode: ValidationMode, grid: Grid, solution: Optional[Grid], r: int, c: int) -> bool:
    """Judge the digit currently written at (r, c)."""
    d = grid[r][c]
    if mode is ValidationMode.ANCHORED:
        return solution is not None and solution[r][c] == d
    return can_place(grid, r, c, d)


def is_solved(mode: ValidationMode, grid: Grid, solution: Optional[Grid]) -> bool:
    if not is_full(grid):
        return False
    if mode is ValidationMode.ANCHORED:
        return solution is not None and grid == solution
    return is_globally_legal(grid)


def scan_errors(
    mode: ValidationMode,
    grid: Grid,
    solution: Optional[Grid],
    given=None,
) -> set[Coordinate]:
    """Full-grid error set; only for generation, reset and restore.

    Given cells are never reported.
    """
    if mode is ValidationMode.ANCHORED:
        bad = {
            (r, c)
            for r, c in iter_cells()
            if grid[r][c] != 0 and (solution is None or solution[r][c] != grid[r][c])
        }
    else:
        bad = find_conflicts(grid)
    if given is not None:
        bad = {(r, c) for r, c in bad if not given[r][c]}
    return bad


def failure_message(mode: ValidationMode, r: int, c: int, d: int) -> str:
    label = cell_label(r, c)
    if mode is ValidationMode.ANCHORED:
        return f"Incorrect: {d} does not belong at {label}."
    return f"Conflict: {d} already appears in the row, column or box of {label}."
