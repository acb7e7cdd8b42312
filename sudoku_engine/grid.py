"""Grid utilities: index math, peers, house values, and cloning. Coordinates are 0-based."""

from __future__ import annotations

from typing import Iterator

from types_sudoku import Coordinate, GivenMask, Grid

SIZE = 9
BOX = 3
DIGITS = range(1, SIZE + 1)


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r < SIZE and 0 <= c < SIZE


def is_index(i) -> bool:
    return isinstance(i, int) and not isinstance(i, bool)


def is_digit(d) -> bool:
    return isinstance(d, int) and not isinstance(d, bool) and 1 <= d <= SIZE


def cell_label(r: int, c: int) -> str:
    """Display label in the usual 1-based 'r1c1' notation."""
    return f"r{r + 1}c{c + 1}"


def empty_grid() -> Grid:
    return [[0] * SIZE for _ in range(SIZE)]


def clone_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def box_origin(r: int, c: int) -> Coordinate:
    return BOX * (r // BOX), BOX * (c // BOX)


def row_values(grid: Grid, r: int) -> set:
    return set(grid[r]) - {0}


def col_values(grid: Grid, c: int) -> set:
    return {grid[i][c] for i in range(SIZE)} - {0}


def box_values(grid: Grid, r: int, c: int) -> set:
    r0, c0 = box_origin(r, c)
    return {grid[r0 + i][c0 + j] for i in range(BOX) for j in range(BOX)} - {0}


def peers(r: int, c: int) -> set:
    """Return the set of peer coordinates for a given cell (same row, column, and 3x3 box)."""
    ps = set()
    for j in range(SIZE):
        if j != c:
            ps.add((r, j))
    for i in range(SIZE):
        if i != r:
            ps.add((i, c))
    r0, c0 = box_origin(r, c)
    for i in range(BOX):
        for j in range(BOX):
            if (r0 + i, c0 + j) != (r, c):
                ps.add((r0 + i, c0 + j))
    return ps


def iter_cells() -> Iterator[Coordinate]:
    """All coordinates in row-major order."""
    for r in range(SIZE):
        for c in range(SIZE):
            yield r, c


def empty_cells(grid: Grid) -> list[Coordinate]:
    return [(r, c) for r, c in iter_cells() if grid[r][c] == 0]


def count_empty(grid: Grid) -> int:
    return sum(1 for row in grid for v in row if v == 0)


def is_full(grid: Grid) -> bool:
    return all(v != 0 for row in grid for v in row)


def given_mask(grid: Grid) -> GivenMask:
    """Given-cell classification: non-empty at generation time."""
    return [[v != 0 for v in row] for row in grid]


def is_well_formed(grid) -> bool:
    """9x9 of ints in 0..9."""
    if not isinstance(grid, list) or len(grid) != SIZE:
        return False
    for row in grid:
        if not isinstance(row, list) or len(row) != SIZE:
            return False
        for v in row:
            if not isinstance(v, int) or isinstance(v, bool) or not 0 <= v <= SIZE:
                return False
    return True


def format_grid(grid: Grid, given: GivenMask | None = None, errors=()) -> str:
    """
    Format a 9x9 grid for terminal display.

    Empty cells show as '.', wrong cells are suffixed with '!' and given
    cells (when a mask is supplied) are wrapped in brackets.
    """
    errors = set(errors)
    header = []
    for c in range(SIZE):
        header.append(f" {c + 1} ")
        if c % BOX == BOX - 1 and c < SIZE - 1:
            header.append(" ")
    lines = ["    " + "".join(header)]
    for r in range(SIZE):
        cells = []
        for c in range(SIZE):
            v = grid[r][c]
            txt = str(v) if v else "."
            if given is not None and given[r][c]:
                txt = f"[{txt}]"
            elif (r, c) in errors:
                txt = f" {txt}!"
            else:
                txt = f" {txt} "
            cells.append(txt)
            if c % BOX == BOX - 1 and c < SIZE - 1:
                cells.append("|")
        lines.append(f"{r + 1:>2}  " + "".join(cells))
        if r % BOX == BOX - 1 and r < SIZE - 1:
            lines.append("    " + "-" * 33)
    return "\n".join(lines)
