"""Opaque persisted snapshot of a session, validated with pydantic on the way back in."""

from __future__ import annotations

from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .constraints import is_valid_solution
from .errors import SnapshotError
from .generator import Difficulty
from .grid import SIZE, in_bounds, is_well_formed
from .validation import ValidationMode

SNAPSHOT_VERSION = 1


class SessionSnapshot(BaseModel):
    version: int = SNAPSHOT_VERSION
    grid: List[List[int]]
    given: List[List[bool]]
    solution: Optional[List[List[int]]] = None
    elapsed: int = Field(default=0, ge=0)
    difficulty: Difficulty = Difficulty.MEDIUM
    mode: ValidationMode = ValidationMode.LOCAL
    state: Literal["playing", "solved"] = "playing"
    selected: Optional[Tuple[int, int]] = None

    @field_validator("grid")
    @classmethod
    def _grid_shape(cls, v):
        if not is_well_formed(v):
            raise ValueError("grid must be 9x9 with values in 0..9")
        return v

    @field_validator("solution")
    @classmethod
    def _solution_complete(cls, v):
        if v is not None and not (is_well_formed(v) and is_valid_solution(v)):
            raise ValueError("solution must be a complete valid 9x9 grid")
        return v

    @field_validator("given")
    @classmethod
    def _given_shape(cls, v):
        if len(v) != SIZE or any(len(row) != SIZE for row in v):
            raise ValueError("given mask must be 9x9")
        return v

    @field_validator("version")
    @classmethod
    def _known_version(cls, v):
        if v != SNAPSHOT_VERSION:
            raise ValueError(f"unsupported snapshot version {v}")
        return v

    @model_validator(mode="after")
    def _consistent(self):
        for r in range(SIZE):
            for c in range(SIZE):
                if self.given[r][c] and self.grid[r][c] == 0:
                    raise ValueError(f"given cell ({r},{c}) is empty")
                if self.given[r][c] and self.solution is not None and self.solution[r][c] != self.grid[r][c]:
                    raise ValueError(f"given cell ({r},{c}) disagrees with the solution")
        if self.mode is ValidationMode.ANCHORED and self.solution is None:
            raise ValueError("anchored snapshots need a solution")
        if self.selected is not None and not in_bounds(*self.selected):
            raise ValueError("selected cell out of range")
        return self


def load_snapshot(data) -> SessionSnapshot:
    if isinstance(data, SessionSnapshot):
        return data
    try:
        if isinstance(data, (str, bytes)):
            return SessionSnapshot.model_validate_json(data)
        return SessionSnapshot.model_validate(data)
    except ValidationError as e:
        raise SnapshotError(f"Invalid session snapshot: {e}") from e
