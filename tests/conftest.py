"""Pytest configuration for annealing.

Toy solutions used across the suite. Each one is tiny and fully
deterministic so engine behaviour can be asserted exactly.
"""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np
import pytest

from annealing.core.logging import set_log_level


class StepSolution:
    """Integer fitness whose only neighbour is one lower, down to ``floor``."""

    def __init__(self, value: float, floor: float = float("-inf")) -> None:
        self.value = value
        self.floor = floor

    def fitness(self) -> float:
        return self.value

    def neighbours(self) -> Iterator[float]:
        if self.value - 1 >= self.floor:
            yield self.value - 1

    def neighbour_fitness(self, neighbour: float) -> float:
        return neighbour

    def apply_neighbour(self, neighbour: float) -> None:
        self.value = neighbour


class ScriptedSolution:
    """Neighbours are candidate fitness values listed up front.

    ``options`` is a fixed list offered on every scan, in order.
    """

    def __init__(self, value: float, options: list[float]) -> None:
        self.value = value
        self.options = list(options)
        self.applied: list[float] = []

    def fitness(self) -> float:
        return self.value

    def neighbours(self) -> Iterator[float]:
        return iter(self.options)

    def neighbour_fitness(self, neighbour: float) -> float:
        return neighbour

    def apply_neighbour(self, neighbour: float) -> None:
        self.applied.append(neighbour)
        self.value = neighbour


class WalkSolution:
    """Random walk on integers with fitness ``(x - target)^2``."""

    def __init__(self, x: int, rng: np.random.Generator, target: int = 0) -> None:
        self.x = x
        self.rng = rng
        self.target = target

    def fitness(self) -> float:
        return float((self.x - self.target) ** 2)

    def neighbours(self) -> Iterator[int]:
        for step in self.rng.permutation([-3, -2, -1, 1, 2, 3]):
            yield self.x + int(step)

    def neighbour_fitness(self, neighbour: int) -> float:
        return float((neighbour - self.target) ** 2)

    def apply_neighbour(self, neighbour: int) -> None:
        self.x = neighbour


@pytest.fixture(autouse=True)
def _quiet_logs():
    set_log_level("ERROR")
    yield
    set_log_level("INFO")


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(12345)


@pytest.fixture
def make_step():
    """Factory for ``StepSolution(value, floor=-inf)``."""
    return StepSolution


@pytest.fixture
def make_scripted():
    """Factory for ``ScriptedSolution(value, options)``; subclassable."""
    return ScriptedSolution


@pytest.fixture
def make_walk():
    """Factory for ``WalkSolution(x, rng, target=0)``."""
    return WalkSolution
