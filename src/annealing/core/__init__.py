"""Core module — contracts, acceptance, cooling, engine, configuration."""

from .acceptance import Boltzmann, boltzmann, never_accept
from .contracts import AcceptanceFunction, Fitness, Neighbours, Solution, Temperature
from .cooling import Geometric, IterationCap, Linear, ScheduleConfigError, StallLimit
from .engine import anneal, simulated_annealing
from .types import (
    AnnealResult,
    ExhaustionPolicy,
    IterationRecord,
    MaxIterations,
    ScheduleDriven,
    StopReason,
    TerminationPolicy,
)

__all__ = [
    "AcceptanceFunction",
    "AnnealResult",
    "Boltzmann",
    "ExhaustionPolicy",
    "Fitness",
    "Geometric",
    "IterationCap",
    "IterationRecord",
    "Linear",
    "MaxIterations",
    "Neighbours",
    "ScheduleConfigError",
    "ScheduleDriven",
    "Solution",
    "StallLimit",
    "StopReason",
    "Temperature",
    "TerminationPolicy",
    "anneal",
    "boltzmann",
    "never_accept",
    "simulated_annealing",
]
