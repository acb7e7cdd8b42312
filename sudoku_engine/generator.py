"""Puzzle generation: solve an empty grid, then carve random cells out of a copy."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional

from types_sudoku import GivenMask, Grid

from .errors import GenerationError
from .grid import SIZE, clone_grid, count_empty, empty_grid, given_mask
from .solver import solve

logger = logging.getLogger(__name__)


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

    @classmethod
    def parse(cls, value) -> "Difficulty":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty {value!r}; expected one of {names}") from None


# cells removed from the 81-cell solution
REMOVAL_TARGETS: dict[Difficulty, int] = {
    Difficulty.EASY: 35,
    Difficulty.MEDIUM: 45,
    Difficulty.HARD: 55,
    Difficulty.EXPERT: 60,
}


def removal_target(difficulty, overrides: Optional[Mapping] = None) -> int:
    d = Difficulty.parse(difficulty)
    if overrides:
        for key, value in overrides.items():
            if Difficulty.parse(key) is d:
                return int(value)
    return REMOVAL_TARGETS[d]


@dataclass
class Puzzle:
    """A carved puzzle together with the untouched full solution it came from."""

    puzzle: Grid
    solution: Grid
    difficulty: Difficulty
    given: GivenMask = field(init=False)

    def __post_init__(self):
        self.given = given_mask(self.puzzle)

    @property
    def empty_count(self) -> int:
        return count_empty(self.puzzle)


def full_solution(max_steps: Optional[int] = None) -> Grid:
    grid = empty_grid()
    if not solve(grid, max_steps=max_steps):
        # a complete 9x9 grid always exists
        raise GenerationError("Solver could not complete an empty grid")
    return grid


def carve(solution: Grid, removals: int, rng: Optional[random.Random] = None) -> Grid:
    """Copy ``solution`` and clear ``removals`` distinct random cells.

    Already-empty picks are skipped without consuming a removal. No check is
    made that the result still has a unique solution.
    """
    if not 0 <= removals <= SIZE * SIZE:
        raise ValueError(f"removals must be in 0..{SIZE * SIZE}, got {removals}")
    rng = rng or random.Random()
    puzzle = clone_grid(solution)
    remaining = removals - count_empty(puzzle)
    while remaining > 0:
        r = rng.randrange(SIZE)
        c = rng.randrange(SIZE)
        if puzzle[r][c] != 0:
            puzzle[r][c] = 0
            remaining -= 1
    return puzzle


def generate(
    difficulty,
    rng: Optional[random.Random] = None,
    max_steps: Optional[int] = None,
    removal_overrides: Optional[Mapping] = None,
) -> Puzzle:
    """Return a fresh (puzzle, solution) pair for ``difficulty``."""
    d = Difficulty.parse(difficulty)
    solution = full_solution(max_steps=max_steps)
    target = removal_target(d, removal_overrides)
    puzzle = carve(solution, target, rng=rng)
    logger.debug("generate: %s puzzle with %d empty cells", d.value, target)
    return Puzzle(puzzle=puzzle, solution=solution, difficulty=d)
