"""Configuration management with pydantic and YAML support."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, model_validator

from .acceptance import Boltzmann, never_accept
from .constants import (
    DEFAULT_BOLTZMANN_CONSTANT,
    DEFAULT_COOLING_FACTOR,
    DEFAULT_INITIAL_TEMPERATURE,
    DEFAULT_LINEAR_DECREMENT,
    DEFAULT_STOPPING_TEMPERATURE,
)
from .contracts import AcceptanceFunction
from .cooling import Geometric, Linear, ScheduleConfigError
from .types import ExhaustionPolicy, MaxIterations, ScheduleDriven


class ScheduleConfig(BaseModel):
    """Cooling schedule settings.

    ``constant`` is the per-update decrement for ``linear`` and the
    multiplicative factor for ``geometric``. Left unset, it defaults to
    the kind's usual value.
    """

    kind: Literal["linear", "geometric"] = "geometric"
    temperature: float = Field(default=DEFAULT_INITIAL_TEMPERATURE, gt=0)
    constant: float | None = Field(default=None, gt=0)
    stopping: float = Field(default=DEFAULT_STOPPING_TEMPERATURE, ge=0)

    @model_validator(mode="after")
    def _check_schedule(self) -> ScheduleConfig:
        if self.constant is None:
            self.constant = (
                DEFAULT_LINEAR_DECREMENT if self.kind == "linear" else DEFAULT_COOLING_FACTOR
            )
        if self.kind == "geometric" and not self.constant < 1.0:
            raise ValueError(f"geometric factor must be < 1, got {self.constant}")
        return self


class AcceptanceConfig(BaseModel):
    """Acceptance function settings."""

    kind: Literal["boltzmann", "never"] = "boltzmann"
    constant: float = Field(default=DEFAULT_BOLTZMANN_CONSTANT, gt=0)


class RunConfig(BaseModel):
    """Engine loop settings."""

    termination: Literal["schedule", "max_iterations"] = "schedule"
    max_iterations: int | None = Field(default=None, ge=0)
    stop_at_fitness: float | None = None
    on_exhausted: ExhaustionPolicy = ExhaustionPolicy.TERMINATE
    return_best: bool = True
    scan_limit: int | None = Field(default=None, ge=1)
    seed: int | None = Field(default=None, ge=0)
    log_level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = "INFO"

    @model_validator(mode="after")
    def _check_budget(self) -> RunConfig:
        if self.termination == "max_iterations" and self.max_iterations is None:
            raise ValueError("termination 'max_iterations' requires max_iterations")
        return self


class AnnealConfig(BaseModel):
    """Root configuration object."""

    schedule: ScheduleConfig = Field(default_factory=ScheduleConfig)
    acceptance: AcceptanceConfig = Field(default_factory=AcceptanceConfig)
    run: RunConfig = Field(default_factory=RunConfig)


def load_config(path: str | Path) -> AnnealConfig:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML config file.

    Returns:
        Parsed AnnealConfig object.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return AnnealConfig.model_validate(data or {})


def save_config(config: AnnealConfig, path: str | Path) -> None:
    """Save configuration to YAML file.

    Args:
        config: Configuration to save.
        path: Output path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(mode="json"), f, default_flow_style=False)


def default_config() -> AnnealConfig:
    """Return default configuration."""
    return AnnealConfig()


def merge_config(base: AnnealConfig, overrides: dict[str, Any]) -> AnnealConfig:
    """Merge overrides into base configuration.

    Args:
        base: Base configuration.
        overrides: Nested dictionary of override values.

    Returns:
        New configuration with overrides applied.
    """
    base_dict = base.model_dump(mode="json")

    def deep_merge(d1: dict, d2: dict) -> dict:
        result = d1.copy()
        for k, v in d2.items():
            if k in result and isinstance(result[k], dict) and isinstance(v, dict):
                result[k] = deep_merge(result[k], v)
            else:
                result[k] = v
        return result

    merged = deep_merge(base_dict, overrides)
    return AnnealConfig.model_validate(merged)


def build_schedule(cfg: ScheduleConfig) -> Linear | Geometric:
    """Instantiate the cooling schedule described by ``cfg``."""
    if cfg.stopping >= cfg.temperature:
        raise ScheduleConfigError(
            f"stopping ({cfg.stopping}) must be below the initial temperature ({cfg.temperature})"
        )
    if cfg.kind == "linear":
        return Linear(cfg.temperature, cfg.constant, cfg.stopping)
    return Geometric(cfg.temperature, cfg.constant, cfg.stopping)


def build_acceptance(cfg: AcceptanceConfig) -> AcceptanceFunction:
    """Instantiate the acceptance function described by ``cfg``."""
    if cfg.kind == "never":
        return never_accept
    return Boltzmann(constant=cfg.constant)


def build_run_kwargs(cfg: RunConfig) -> dict[str, Any]:
    """Translate ``cfg`` into keyword arguments for ``anneal``."""
    if cfg.termination == "max_iterations":
        termination = MaxIterations(int(cfg.max_iterations or 0))
    else:
        termination = ScheduleDriven()
    return {
        "termination": termination,
        "on_exhausted": cfg.on_exhausted,
        "stop_at_fitness": cfg.stop_at_fitness,
        "return_best": cfg.return_best,
        "scan_limit": cfg.scan_limit,
        "rng": cfg.seed,
    }
