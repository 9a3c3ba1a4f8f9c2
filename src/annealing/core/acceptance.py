"""Acceptance functions for simulated annealing.

A non-improving move is accepted when a uniform draw in [0, 1) is below the
returned score. Any score of 1 or more always accepts, however bad the move;
any score of 0 or less never accepts.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .constants import DEFAULT_BOLTZMANN_CONSTANT, MAX_EXPONENT, NEVER_ACCEPT_SCORE


@dataclass(frozen=True)
class Boltzmann:
    """Metropolis/Boltzmann criterion ``exp(-energy_diff / (constant * temperature))``.

    Attributes:
        constant: Scales the temperature. Larger values accept worse moves
            more readily.
    """

    constant: float = DEFAULT_BOLTZMANN_CONSTANT

    def __post_init__(self) -> None:
        if not self.constant > 0:
            raise ValueError(f"Boltzmann constant must be positive, got {self.constant}")

    def __call__(self, energy_diff: float, temperature: float) -> float:
        scaled = self.constant * temperature
        if scaled <= 0:
            # Limit as temperature -> 0+
            return 0.0 if energy_diff > 0 else 1.0
        exponent = -energy_diff / scaled
        if exponent > MAX_EXPONENT:
            return math.inf
        return math.exp(exponent)


def boltzmann(constant: float = DEFAULT_BOLTZMANN_CONSTANT) -> Boltzmann:
    """Create a Boltzmann acceptance function.

    Args:
        constant: Boltzmann constant multiplying the temperature.

    Returns:
        Callable ``(energy_diff, temperature) -> score``.
    """
    return Boltzmann(constant=float(constant))


def never_accept(energy_diff: float, temperature: float) -> float:
    """Never let a non-improving move through.

    Turns the annealer into plain hill climbing without diversification.
    """
    return NEVER_ACCEPT_SCORE
