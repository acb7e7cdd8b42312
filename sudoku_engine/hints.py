"""Hint oracle: deductive hints for local play, reference reveals for anchored play.

Hints are read-only queries; nothing here mutates the grid.
"""

from __future__ import annotations

from typing import Optional

from types_sudoku import Grid, HintResult

from .constraints import candidates
from .grid import cell_label, iter_cells
from .validation import ValidationMode

SCAN_TIP = (
    "Scan each row, column and box for a digit that fits in only one place, "
    "or a cell that allows only one digit."
)


def _hint(coordinate, digits, message, technique) -> HintResult:
    return {
        "coordinate": coordinate,
        "digits": list(digits),
        "message": message,
        "technique": technique,
    }


def disabled_hint() -> HintResult:
    return _hint(None, [], "The puzzle is solved; start a new game for more hints.", "disabled")


def find_naked_single(grid: Grid) -> Optional[HintResult]:
    """First empty cell (row-major) with exactly one legal candidate."""
    for r, c in iter_cells():
        if grid[r][c] != 0:
            continue
        opts = candidates(grid, r, c)
        if len(opts) == 1:
            return _hint((r, c), opts, f"Only one candidate fits {cell_label(r, c)}: {opts[0]}.", "naked_single")
    return None


def find_small_candidate_set(grid: Grid, low: int = 2, high: int = 3) -> Optional[HintResult]:
    """First empty cell whose candidate set has between ``low`` and ``high`` digits."""
    for r, c in iter_cells():
        if grid[r][c] != 0:
            continue
        opts = candidates(grid, r, c)
        if low <= len(opts) <= high:
            shown = ", ".join(str(d) for d in opts[:-1]) + f" or {opts[-1]}"
            return _hint((r, c), opts, f"{cell_label(r, c)} can only be {shown}.", "candidates")
    return None


def deductive_hint(grid: Grid) -> HintResult:
    found = find_naked_single(grid) or find_small_candidate_set(grid)
    if found is not None:
        return found
    return _hint(None, [], SCAN_TIP, "scan")


def oracle_hint(grid: Grid, solution: Grid) -> HintResult:
    """Reveal the reference value of the first empty cell."""
    for r, c in iter_cells():
        if grid[r][c] == 0:
            d = solution[r][c]
            return _hint((r, c), [d], f"Try {d} at {cell_label(r, c)}.", "reveal")
    return _hint(None, [], "No hints available: every cell is filled.", "none")


def next_hint(mode: ValidationMode, grid: Grid, solution: Optional[Grid]) -> HintResult:
    if mode is ValidationMode.ANCHORED and solution is not None:
        return oracle_hint(grid, solution)
    return deductive_hint(grid)
