"""Extension-point contracts for simulated annealing.

The engine never looks inside a solution, a neighbour or a schedule. It only
talks to them through the protocols below, so any class with the right
methods plugs in without inheriting from anything.

Solution objects must also survive ``copy.deepcopy``: the engine snapshots
the best solution seen so far and keeps mutating the working one.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, TypeVar, runtime_checkable

N = TypeVar("N")
S_contra = TypeVar("S_contra", contravariant=True)
TemperatureT = TypeVar("TemperatureT", bound="Temperature")


@runtime_checkable
class Fitness(Protocol):
    """Something with a fitness. The lower the number the better."""

    def fitness(self) -> float: ...


@runtime_checkable
class Neighbours(Protocol[N]):
    """A solution that can enumerate, score and apply neighbouring moves.

    ``neighbour_fitness`` may return a heuristic estimate instead of a full
    recomputation. The engine takes it as the fitness of the solution after
    ``apply_neighbour`` and does not call ``fitness()`` again.
    """

    def neighbours(self) -> Iterable[N]:
        """Return a fresh, possibly infinite, iterable of candidate moves."""
        ...

    def neighbour_fitness(self, neighbour: N) -> float:
        """Score ``neighbour`` without modifying the solution."""
        ...

    def apply_neighbour(self, neighbour: N) -> None:
        """Modify the solution in place."""
        ...


@runtime_checkable
class Solution(Fitness, Neighbours[N], Protocol[N]):
    """Everything the engine needs from a candidate solution."""


@runtime_checkable
class Temperature(Protocol[S_contra]):
    """A cooling schedule.

    ``update`` receives the solution after the latest accepted move, which
    lets a schedule raise the temperature when the search lacks diversity,
    count iterations, or stop after a period without improvement.
    """

    def update(self: TemperatureT, solution: S_contra) -> TemperatureT:
        """Return the next schedule state. The receiver is left unchanged."""
        ...

    def temperature(self) -> float: ...

    def stop(self) -> bool: ...


class AcceptanceFunction(Protocol):
    """Maps (energy difference, temperature) to an acceptance score.

    A non-improving move is accepted when a uniform draw in [0, 1) falls
    below the score: scores >= 1 always accept, scores <= 0 never do.
    """

    def __call__(self, energy_diff: float, temperature: float) -> float: ...
