"""Reference problem: maximise ``f(x) = x^3 - 60x^2 + 900x + 100``.

``x`` is a 5-bit integer in [0, MAX_X]. The engine minimises, so the fitness
is ``-f(x)``. Neighbours are an endless stream of uniformly drawn ``x``
values, which makes a ``scan_limit`` or an equal-fitness draw necessary for
the scan to end.

The optimum is x = 10 with f(10) = 4100.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np

MAX_X = 16
OPTIMUM_X = 10


def formula(x: float) -> float:
    """Evaluate ``x^3 - 60x^2 + 900x + 100``."""
    return x**3 - 60.0 * x**2 + 900.0 * x + 100.0


@dataclass
class FormulaSolution:
    """Integer point of the cubic formula.

    Attributes:
        x: Current value in [0, MAX_X].
        rng: Generator used to draw neighbours.
    """

    x: int
    rng: np.random.Generator = field(default_factory=np.random.default_rng, repr=False)

    def __post_init__(self) -> None:
        if not 0 <= self.x <= MAX_X:
            raise ValueError(f"x must lie in [0, {MAX_X}], got {self.x}")

    @classmethod
    def random(cls, rng: np.random.Generator) -> FormulaSolution:
        return cls(x=int(rng.integers(0, MAX_X + 1)), rng=rng)

    def fitness(self) -> float:
        return -formula(float(self.x))

    def neighbours(self) -> Iterator[int]:
        while True:
            yield int(self.rng.integers(0, MAX_X + 1))

    def neighbour_fitness(self, neighbour: int) -> float:
        return -formula(float(neighbour))

    def apply_neighbour(self, neighbour: int) -> None:
        self.x = neighbour
