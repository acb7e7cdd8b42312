"""Row/column/box legality, candidate computation, and full-grid conflict scans."""

from __future__ import annotations

from types_sudoku import Candidates, Coordinate, Grid

from .grid import BOX, DIGITS, SIZE, box_origin, box_values, col_values, iter_cells, row_values


def can_place(grid: Grid, r: int, c: int, d: int) -> bool:
    """True when no *other* cell in the row, column or box of (r, c) already holds d.

    The target cell's own value is ignored, so a cell already holding d is
    still placeable if nothing else conflicts.
    """
    for j in range(SIZE):
        if j != c and grid[r][j] == d:
            return False
    for i in range(SIZE):
        if i != r and grid[i][c] == d:
            return False
    r0, c0 = box_origin(r, c)
    for i in range(r0, r0 + BOX):
        for j in range(c0, c0 + BOX):
            if (i, j) != (r, c) and grid[i][j] == d:
                return False
    return True


def candidates(grid: Grid, r: int, c: int) -> list[int]:
    """Legal digits for an empty cell; [] for filled cells."""
    if grid[r][c] != 0:
        return []
    used = row_values(grid, r) | col_values(grid, c) | box_values(grid, r, c)
    return [d for d in DIGITS if d not in used]


def compute_candidates(grid: Grid) -> Candidates:
    cand = {}
    for r, c in iter_cells():
        if grid[r][c] == 0:
            cand[(r, c)] = candidates(grid, r, c)
    return cand


def conflicting_peers(grid: Grid, r: int, c: int) -> set[Coordinate]:
    """Peers of (r, c) holding the same digit as (r, c)."""
    d = grid[r][c]
    if d == 0:
        return set()
    out = set()
    for j in range(SIZE):
        if j != c and grid[r][j] == d:
            out.add((r, j))
    for i in range(SIZE):
        if i != r and grid[i][c] == d:
            out.add((i, c))
    r0, c0 = box_origin(r, c)
    for i in range(r0, r0 + BOX):
        for j in range(c0, c0 + BOX):
            if (i, j) != (r, c) and grid[i][j] == d:
                out.add((i, j))
    return out


def find_conflicts(grid: Grid) -> set[Coordinate]:
    """Every filled coordinate whose digit is duplicated in one of its houses."""
    def duplicates_in_unit(cells):
        seen = {}
        bad = set()
        for rc in cells:
            v = grid[rc[0]][rc[1]]
            if v == 0:
                continue
            if v in seen:
                bad.add(rc)
                bad.add(seen[v])
            else:
                seen[v] = rc
        return bad

    bad = set()
    for r in range(SIZE):
        bad |= duplicates_in_unit([(r, c) for c in range(SIZE)])
    for c in range(SIZE):
        bad |= duplicates_in_unit([(r, c) for r in range(SIZE)])
    for b in range(SIZE):
        r0, c0 = BOX * (b // BOX), BOX * (b % BOX)
        bad |= duplicates_in_unit([(r0 + i, c0 + j) for i in range(BOX) for j in range(BOX)])
    return bad


def is_globally_legal(grid: Grid) -> bool:
    """Every filled cell passes can_place against the rest of the grid."""
    return all(grid[r][c] == 0 or can_place(grid, r, c, grid[r][c]) for r, c in iter_cells())


def is_valid_solution(grid: Grid) -> bool:
    """Full grid where each row, column and box holds 1..9 exactly once."""
    target = set(DIGITS)
    for r in range(SIZE):
        if set(grid[r]) != target:
            return False
    for c in range(SIZE):
        if {grid[r][c] for r in range(SIZE)} != target:
            return False
    for b in range(SIZE):
        r0, c0 = BOX * (b // BOX), BOX * (b % BOX)
        if {grid[r0 + i][c0 + j] for i in range(BOX) for j in range(BOX)} != target:
            return False
    return True
