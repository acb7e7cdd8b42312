"""
Game session: the playing -> solved state machine around one puzzle.

A GameSession exclusively owns its grid, given mask, reference solution,
error set, selection and elapsed time. Every call runs to completion
synchronously; callers wanting several games run several sessions.

Rejected operations (given cell, out of range, no selection, already
solved) never raise; they leave the session untouched and report
``accepted=False``.
"""

from __future__ import annotations

import json
import logging
import random
from enum import Enum
from typing import Optional

from types_sudoku import Coordinate, HintResult, PlaceResult, SessionView

from .config import EngineConfig
from .constraints import conflicting_peers
from .generator import Difficulty, Puzzle, generate
from .grid import clone_grid, in_bounds, is_digit, is_index
from .hints import disabled_hint, next_hint
from .snapshot import SessionSnapshot, load_snapshot
from .validation import ValidationMode, entry_ok, failure_message, is_solved, scan_errors

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    PLAYING = "playing"
    SOLVED = "solved"


class GameSession:
    def __init__(
        self,
        difficulty=None,
        mode=None,
        config: Optional[EngineConfig] = None,
        rng: Optional[random.Random] = None,
        puzzle: Optional[Puzzle] = None,
    ):
        self.config = config or EngineConfig()
        self.mode = ValidationMode.parse(mode if mode is not None else self.config.mode)
        self.rng = rng or random.Random(self.config.seed)
        difficulty = Difficulty.parse(difficulty if difficulty is not None else self.config.difficulty)
        self._install(puzzle or self._generate(difficulty))
        logger.info("new %s session (%s mode)", self.difficulty.value, self.mode.value)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def grid(self):
        return clone_grid(self._grid)

    @property
    def given(self):
        return [row[:] for row in self._given]

    @property
    def solution(self):
        return clone_grid(self._solution) if self._solution is not None else None

    @property
    def errors(self) -> frozenset:
        return frozenset(self._errors)

    @property
    def selected(self) -> Optional[Coordinate]:
        return self._selected

    @property
    def elapsed(self) -> int:
        return self._elapsed

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def playing(self) -> bool:
        return self._state is SessionState.PLAYING

    def is_given(self, r: int, c: int) -> bool:
        return self._given[r][c]

    def view(self) -> SessionView:
        return {
            "grid": clone_grid(self._grid),
            "given": self.given,
            "errors": sorted(self._errors),
            "selected": self._selected,
            "elapsed": self._elapsed,
            "state": self._state.value,
            "difficulty": self.difficulty.value,
            "mode": self.mode.value,
        }

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def select(self, r: int, c: int) -> bool:
        if not self.playing:
            logger.debug("select rejected: session solved")
            return False
        if not (is_index(r) and is_index(c) and in_bounds(r, c)):
            logger.debug("select rejected: (%r, %r) out of range", r, c)
            return False
        if self._given[r][c]:
            logger.debug("select rejected: (%d, %d) is a given cell", r, c)
            return False
        self._selected = (r, c)
        return True

    def place(self, digit: int) -> PlaceResult:
        target = self._editable_target()
        if target is None or not is_digit(digit):
            return self._result(accepted=False)
        r, c = target
        self._grid[r][c] = digit

        signal = None
        message = ""
        if entry_ok(self.mode, self._grid, self._solution, r, c):
            self._errors.discard((r, c))
        else:
            self._errors.add((r, c))
            if self.mode is ValidationMode.LOCAL:
                self._errors |= {p for p in conflicting_peers(self._grid, r, c) if not self._given[p[0]][p[1]]}
            signal = self.mode.failure_signal
            message = failure_message(self.mode, r, c, digit)
        logger.debug("place %d at (%d, %d): %s", digit, r, c, signal or "ok")

        if is_solved(self.mode, self._grid, self._solution):
            self._state = SessionState.SOLVED
            self._errors = set()
            logger.info("puzzle solved in %d s", self._elapsed)

        result = self._result(accepted=True, signal=signal, message=message)
        if signal is not None and self.mode is ValidationMode.ANCHORED:
            result["message_ttl"] = float(self.config.incorrect_message_seconds)
        return result

    def clear(self) -> PlaceResult:
        target = self._editable_target()
        if target is None:
            return self._result(accepted=False)
        r, c = target
        self._grid[r][c] = 0
        self._errors.discard((r, c))
        logger.debug("clear (%d, %d)", r, c)
        return self._result(accepted=True)

    def tick(self) -> dict:
        if self.playing:
            self._elapsed += 1
        return {"elapsed": self._elapsed}

    def hint(self) -> HintResult:
        if not self.playing:
            return disabled_hint()
        return next_hint(self.mode, self._grid, self._solution)

    def reset(self, difficulty=None) -> SessionView:
        """Start over with a fresh puzzle; the current difficulty is kept if none is given."""
        d = Difficulty.parse(difficulty) if difficulty is not None else self.difficulty
        self._install(self._generate(d))
        logger.info("reset to a new %s puzzle", d.value)
        return self.view()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def to_snapshot(self) -> dict:
        snap = SessionSnapshot(
            grid=clone_grid(self._grid),
            given=self.given,
            solution=self.solution if self.mode is ValidationMode.ANCHORED else None,
            elapsed=self._elapsed,
            difficulty=self.difficulty,
            mode=self.mode,
            state=self._state.value,
            selected=self._selected,
        )
        return snap.model_dump(mode="json")

    def to_json(self) -> str:
        return json.dumps(self.to_snapshot())

    @classmethod
    def from_snapshot(cls, data, config: Optional[EngineConfig] = None, rng=None) -> "GameSession":
        """Rebuild a session from ``to_snapshot()`` output (dict, model or JSON text)."""
        snap = load_snapshot(data)
        session = cls.__new__(cls)
        session.config = config or EngineConfig()
        session.mode = snap.mode
        session.rng = rng or random.Random(session.config.seed)
        session.difficulty = snap.difficulty
        grid = clone_grid(snap.grid)
        given = [row[:] for row in snap.given]
        solution = clone_grid(snap.solution) if snap.mode is ValidationMode.ANCHORED else None
        state = SessionState(snap.state)
        errors = set() if state is SessionState.SOLVED else scan_errors(snap.mode, grid, solution, given)
        selected = tuple(snap.selected) if snap.selected is not None else None
        if selected is not None and given[selected[0]][selected[1]]:
            selected = None
        session._grid, session._given, session._solution = grid, given, solution
        session._errors, session._selected = errors, selected
        session._elapsed, session._state = snap.elapsed, state
        logger.info("restored %s session (%s, %d s)", session.difficulty.value, state.value, snap.elapsed)
        return session

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _generate(self, difficulty: Difficulty) -> Puzzle:
        return generate(
            difficulty,
            rng=self.rng,
            max_steps=self.config.solver_max_steps,
            removal_overrides=self.config.removal_targets,
        )

    def _install(self, puzzle: Puzzle) -> None:
        # everything is built first, then swapped in together
        grid = clone_grid(puzzle.puzzle)
        given = [row[:] for row in puzzle.given]
        solution = clone_grid(puzzle.solution) if self.mode is ValidationMode.ANCHORED else None
        (self.difficulty, self._grid, self._given, self._solution,
         self._errors, self._selected, self._elapsed, self._state) = (
            puzzle.difficulty, grid, given, solution, set(), None, 0, SessionState.PLAYING)

    def _editable_target(self) -> Optional[Coordinate]:
        if not self.playing:
            logger.debug("edit rejected: session solved")
            return None
        if self._selected is None:
            logger.debug("edit rejected: no cell selected")
            return None
        r, c = self._selected
        if self._given[r][c]:
            return None
        return self._selected

    def _result(self, accepted: bool, signal: Optional[str] = None, message: str = "") -> PlaceResult:
        return {
            "accepted": accepted,
            "grid": clone_grid(self._grid),
            "errors": sorted(self._errors),
            "state": self._state.value,
            "signal": signal,
            "message": message,
        }


def new_session(difficulty=None, mode=None, config: Optional[EngineConfig] = None, rng=None) -> GameSession:
    return GameSession(difficulty=difficulty, mode=mode, config=config, rng=rng)
