# types_sudoku.py
from __future__ import annotations

from typing import Optional, TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

GivenMask = list[list[bool]]
"""Parallel 9x9 mask; True where the cell was filled at generation time."""

Coordinate = tuple[int, int]
"""(row, col), both 0-based in 0..8."""

Candidates = dict[Coordinate, list[int]]
"""Map from empty coordinate to its legal digits (ascending)."""


class HintResult(TypedDict):
    """Answer of the hint oracle for the current position."""

    coordinate: Optional[Coordinate]  # None for generic / unavailable hints
    digits: list[int]  # forced digit, candidate list, or reference value
    message: str  # human-friendly explanation
    technique: str  # 'naked_single', 'candidates', 'scan', 'reveal', 'none', 'disabled'


class PlaceResult(TypedDict, total=False):
    """Outcome of place()/clear(); rejected edits come back with accepted=False."""

    accepted: bool
    grid: Grid
    errors: list[Coordinate]
    state: str  # 'playing' or 'solved'
    signal: Optional[str]  # None, 'conflict' or 'incorrect'
    message: str
    message_ttl: float  # seconds before the UI should dismiss the message


class SessionView(TypedDict):
    """Read-only picture of a session handed to the UI layer."""

    grid: Grid
    given: GivenMask
    errors: list[Coordinate]
    selected: Optional[Coordinate]
    elapsed: int
    state: str
    difficulty: str
    mode: str
