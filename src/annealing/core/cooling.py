"""Cooling schedules.

Schedules are immutable: ``update`` returns a new schedule and leaves the
receiver untouched. ``Linear`` and ``Geometric`` are the usual monotonic
schedules. ``IterationCap`` and ``StallLimit`` wrap any schedule and add a
stopping rule on top of it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any

from .contracts import Temperature


class ScheduleConfigError(ValueError):
    """Raised when a cooling schedule is constructed with unusable parameters."""


def _check_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise ScheduleConfigError(f"{name} must be finite, got {value}")


@dataclass(frozen=True)
class Linear:
    """Linear cooling: the temperature drops by ``constant`` on every update.

    Attributes:
        current: Current temperature.
        constant: Amount subtracted per update (> 0).
        stopping: The schedule stops once the temperature is at or below it.
    """

    current: float
    constant: float
    stopping: float

    def __post_init__(self) -> None:
        for name in ("current", "constant", "stopping"):
            object.__setattr__(self, name, float(getattr(self, name)))
        _check_finite("temperature", self.current)
        _check_finite("stopping", self.stopping)
        if not self.constant > 0 or not math.isfinite(self.constant):
            raise ScheduleConfigError(
                f"Linear decrement must be a positive finite number, got {self.constant}"
            )

    def update(self, solution: Any = None) -> Linear:
        return Linear(self.current - self.constant, self.constant, self.stopping)

    def temperature(self) -> float:
        return self.current

    def stop(self) -> bool:
        return self.current <= self.stopping


@dataclass(frozen=True)
class Geometric:
    """Geometric cooling: the temperature is multiplied by ``factor`` on every update.

    The most popular schedule; factors between 0.5 and 0.99 give good results.

    Attributes:
        current: Current temperature.
        factor: Multiplier strictly between 0 and 1.
        stopping: The schedule stops once the temperature is at or below it.
    """

    current: float
    factor: float
    stopping: float

    def __post_init__(self) -> None:
        for name in ("current", "factor", "stopping"):
            object.__setattr__(self, name, float(getattr(self, name)))
        _check_finite("temperature", self.current)
        _check_finite("stopping", self.stopping)
        if not 0.0 < self.factor < 1.0:
            raise ScheduleConfigError(
                f"Geometric factor must lie strictly between 0 and 1, got {self.factor}"
            )
        if self.stopping < 0.0:
            # Multiplying by factor only approaches 0, so a negative threshold is never reached.
            raise ScheduleConfigError(
                f"Geometric stopping temperature must be >= 0, got {self.stopping}"
            )

    def update(self, solution: Any = None) -> Geometric:
        return Geometric(self.current * self.factor, self.factor, self.stopping)

    def temperature(self) -> float:
        return self.current

    def stop(self) -> bool:
        return self.current <= self.stopping


@dataclass(frozen=True)
class IterationCap:
    """Stop ``inner`` after ``max_updates`` updates at the latest.

    Attributes:
        inner: Wrapped schedule providing the temperature.
        max_updates: Number of updates after which the schedule stops.
        updates: Updates applied so far.
    """

    inner: Temperature
    max_updates: int
    updates: int = 0

    def __post_init__(self) -> None:
        if self.max_updates < 0:
            raise ScheduleConfigError(f"max_updates must be >= 0, got {self.max_updates}")

    def update(self, solution: Any) -> IterationCap:
        return replace(self, inner=self.inner.update(solution), updates=self.updates + 1)

    def temperature(self) -> float:
        return self.inner.temperature()

    def stop(self) -> bool:
        return self.updates >= self.max_updates or self.inner.stop()


@dataclass(frozen=True)
class StallLimit:
    """Stop ``inner`` after ``patience`` updates without improvement.

    The solution handed to ``update`` is scored with ``solution.fitness()``;
    an update counts as progress only when that fitness is strictly below
    the best seen by this schedule.

    Attributes:
        inner: Wrapped schedule providing the temperature.
        patience: Consecutive non-improving updates tolerated.
        best: Best fitness observed through ``update``.
        stalled: Current run of non-improving updates.
    """

    inner: Temperature
    patience: int
    best: float | None = None
    stalled: int = 0

    def __post_init__(self) -> None:
        if self.patience < 1:
            raise ScheduleConfigError(f"patience must be >= 1, got {self.patience}")

    def update(self, solution: Any) -> StallLimit:
        fitness = float(solution.fitness())
        if self.best is None or fitness < self.best:
            best, stalled = fitness, 0
        else:
            best, stalled = self.best, self.stalled + 1
        return replace(self, inner=self.inner.update(solution), best=best, stalled=stalled)

    def temperature(self) -> float:
        return self.inner.temperature()

    def stop(self) -> bool:
        return self.stalled >= self.patience or self.inner.stop()
