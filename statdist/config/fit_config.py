"""Fit configuration schema, validation and file loading."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from statdist.exceptions import ConfigValidationError


@dataclass(slots=True)
class FitConfig:
    initial_shape: float = 1.0
    max_iterations: int = 1000
    tolerance: float = 1e-16
    min_samples: int = 2

    def __post_init__(self) -> None:
        # YAML 1.1 reads exponent-only floats such as 1e-16 as strings
        try:
            self.initial_shape = float(self.initial_shape)
            self.tolerance = float(self.tolerance)
        except (TypeError, ValueError) as exc:
            raise ConfigValidationError(f"initial_shape and tolerance must be numeric: {exc}") from exc
        if not self.initial_shape > 0:
            raise ConfigValidationError("initial_shape must be > 0")
        if isinstance(self.max_iterations, bool) or not isinstance(self.max_iterations, int):
            raise ConfigValidationError("max_iterations must be an integer")
        if self.max_iterations < 1:
            raise ConfigValidationError("max_iterations must be >= 1")
        if not self.tolerance >= 0:
            raise ConfigValidationError("tolerance must be >= 0")
        if isinstance(self.min_samples, bool) or not isinstance(self.min_samples, int) or self.min_samples < 1:
            raise ConfigValidationError("min_samples must be a positive integer")

    @classmethod
    def from_dict(cls, data: dict) -> "FitConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigValidationError(f"Unknown fit config keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    def to_dict(self) -> dict:
        return {
            "initial_shape": self.initial_shape,
            "max_iterations": self.max_iterations,
            "tolerance": self.tolerance,
            "min_samples": self.min_samples,
        }


def load_fit_config(path: Path) -> FitConfig:
    """Load a FitConfig from a JSON or YAML file."""
    path = Path(path)
    if not path.exists():
        raise ConfigValidationError(f"Config file not found: {path}")
    suffix = path.suffix.lower()
    if suffix == ".json":
        try:
            content = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            raise ConfigValidationError(f"Invalid JSON in {path}: {exc}") from exc
    elif suffix in {".yml", ".yaml"}:
        try:
            content = yaml.safe_load(path.read_text())
        except yaml.YAMLError as exc:
            raise ConfigValidationError(f"Invalid YAML in {path}: {exc}") from exc
    else:
        raise ConfigValidationError("Config file must be JSON or YAML")
    if content is None:
        content = {}
    if not isinstance(content, dict):
        raise ConfigValidationError("Config file must contain a mapping")
    return FitConfig.from_dict(content)


__all__ = ["FitConfig", "load_fit_config"]
