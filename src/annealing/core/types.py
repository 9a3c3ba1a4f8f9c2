"""Core types for annealing runs.

This module defines the options and results that form the interface
between the engine and its callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar, Union

S = TypeVar("S")


@dataclass(frozen=True)
class ScheduleDriven:
    """Run until the cooling schedule reports ``stop()``.

    The iteration count is unbounded; termination relies on the schedule.
    """


@dataclass(frozen=True)
class MaxIterations:
    """Run at most ``n`` iterations.

    The schedule's ``stop()`` is still honoured, so whichever comes first
    ends the run.

    Attributes:
        n: Iteration budget (>= 0).
    """

    n: int

    def __post_init__(self) -> None:
        if self.n < 0:
            raise ValueError(f"MaxIterations.n must be >= 0, got {self.n}")


TerminationPolicy = Union[ScheduleDriven, MaxIterations]


class ExhaustionPolicy(str, Enum):
    """What to do when a full neighbour scan accepts nothing.

    TERMINATE: end the whole search and return.
    COOL: advance the schedule as if an iteration had passed and scan again.
    """

    TERMINATE = "terminate"
    COOL = "cool"


class StopReason(str, Enum):
    """Why a run ended."""

    SCHEDULE_STOPPED = "schedule_stopped"
    MAX_ITERATIONS = "max_iterations"
    NEIGHBOURS_EXHAUSTED = "neighbours_exhausted"
    TARGET_REACHED = "target_reached"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class IterationRecord:
    """Snapshot taken after each iteration.

    Attributes:
        iteration: 1-based iteration number.
        temperature: Temperature used for the acceptance test.
        accepted: Whether a neighbour was applied.
        improved: Whether the accepted neighbour lowered the current fitness.
        scanned: Neighbours examined during the scan.
        current_fitness: Working fitness after the iteration.
        best_fitness: Best fitness seen so far.
    """

    iteration: int
    temperature: float
    accepted: bool
    improved: bool
    scanned: int
    current_fitness: float
    best_fitness: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "iteration": self.iteration,
            "temperature": self.temperature,
            "accepted": self.accepted,
            "improved": self.improved,
            "scanned": self.scanned,
            "current_fitness": self.current_fitness,
            "best_fitness": self.best_fitness,
        }


@dataclass(frozen=True)
class AnnealResult(Generic[S]):
    """Result of an annealing run.

    Attributes:
        solution: Returned solution (best or working, see ``anneal``).
        fitness: Fitness of ``solution``.
        best_fitness: Lowest fitness observed during the run.
        current_fitness: Fitness of the working solution at the end.
        iterations: Iterations performed.
        evaluations: Calls to ``neighbour_fitness``.
        accepted_worse: Non-improving moves accepted by the acceptance function.
        reason: Why the run stopped.
        temperature: Schedule temperature when the run stopped.
        elapsed_s: Wall-clock duration.
        history: Per-iteration records when requested, else empty.
    """

    solution: S
    fitness: float
    best_fitness: float
    current_fitness: float
    iterations: int
    evaluations: int
    accepted_worse: int
    reason: StopReason
    temperature: float
    elapsed_s: float
    history: list[IterationRecord] = field(default_factory=list)

    def summary(self) -> dict[str, Any]:
        """Return a JSON-friendly summary without the solution itself."""
        return {
            "fitness": self.fitness,
            "best_fitness": self.best_fitness,
            "current_fitness": self.current_fitness,
            "iterations": self.iterations,
            "evaluations": self.evaluations,
            "accepted_worse": self.accepted_worse,
            "reason": self.reason.value,
            "temperature": self.temperature,
            "elapsed_s": self.elapsed_s,
        }
