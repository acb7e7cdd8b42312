"""Exceptions for invariant violations. Rejected moves and wrong entries are not errors."""


class SudokuEngineError(Exception):
    pass


class SolverBudgetExceeded(SudokuEngineError, RuntimeError):
    """The search used up its step budget; the grid was restored to its input state."""

    def __init__(self, steps: int):
        super().__init__(f"Solver step budget exhausted after {steps} steps")
        self.steps = steps


class GenerationError(SudokuEngineError, RuntimeError):
    pass


class SnapshotError(SudokuEngineError, ValueError):
    pass


class ConfigError(SudokuEngineError, ValueError):
    pass
