from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError
from .generator import Difficulty
from .validation import ValidationMode


def load_yaml(path: str | Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    return data


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


@dataclass
class EngineConfig:
    """Defaults for new sessions."""

    difficulty: str = Difficulty.MEDIUM.value
    mode: str = ValidationMode.LOCAL.value

    # digit-trial budget for the solver; None = unbounded
    solver_max_steps: Optional[int] = 2_000_000

    # how long the UI keeps an "incorrect" message up (anchored mode)
    incorrect_message_seconds: float = 2.0

    # per-difficulty override of the number of cells carved out
    removal_targets: Optional[Dict[str, int]] = None

    seed: Optional[int] = None

    def __post_init__(self):
        try:
            self.difficulty = Difficulty.parse(self.difficulty).value
            self.mode = ValidationMode.parse(self.mode).value
        except ValueError as e:
            raise ConfigError(str(e)) from None
        if self.solver_max_steps is not None and int(self.solver_max_steps) <= 0:
            raise ConfigError("solver_max_steps must be positive or null")
        if float(self.incorrect_message_seconds) < 0:
            raise ConfigError("incorrect_message_seconds must be >= 0")
        if self.removal_targets:
            checked = {}
            for key, value in self.removal_targets.items():
                try:
                    name = Difficulty.parse(key).value
                except ValueError as e:
                    raise ConfigError(str(e)) from None
                if not isinstance(value, int) or not 0 <= value <= 81:
                    raise ConfigError(f"removal_targets[{key}] must be an int in 0..81, got {value!r}")
                checked[name] = value
            self.removal_targets = checked


def load_config(path: str | Path | None = None, **overrides) -> EngineConfig:
    """Read an EngineConfig from YAML (or defaults), then apply non-None overrides."""
    cfg: Dict[str, Any] = load_yaml(path) if path is not None else {}
    merge_overrides(cfg, **overrides)
    known = {f.name for f in fields(EngineConfig)}
    unknown = sorted(set(cfg) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
    return EngineConfig(**cfg)
