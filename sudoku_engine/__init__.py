"""Sudoku puzzle engine: generation, solving, validation, hints and game sessions."""

from .config import EngineConfig, load_config
from .constraints import can_place, candidates, compute_candidates, find_conflicts, is_valid_solution
from .errors import ConfigError, GenerationError, SnapshotError, SolverBudgetExceeded, SudokuEngineError
from .generator import REMOVAL_TARGETS, Difficulty, Puzzle, generate, removal_target
from .hints import deductive_hint, oracle_hint
from .session import GameSession, SessionState, new_session
from .solver import solve
from .validation import ValidationMode

__all__ = [
    "EngineConfig", "load_config",
    "can_place", "candidates", "compute_candidates", "find_conflicts", "is_valid_solution",
    "ConfigError", "GenerationError", "SnapshotError", "SolverBudgetExceeded", "SudokuEngineError",
    "REMOVAL_TARGETS", "Difficulty", "Puzzle", "generate", "removal_target",
    "deductive_hint", "oracle_hint",
    "GameSession", "SessionState", "new_session",
    "solve",
    "ValidationMode",
]
