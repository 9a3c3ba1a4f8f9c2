"""Simulated annealing engine.

Traditional simulated annealing (Algorithm 2.1 in Talbi, "Metaheuristics:
from design to implementation"). Neighbours are scanned in the order the
solution yields them and the first one accepted is applied.

Flow per iteration:
    1. Loop-head checks: cancellation, schedule stop, iteration budget, target
    2. Scan neighbours; improving moves are taken outright, others go through
       the acceptance function against a fresh uniform draw
    3. Apply the move, advance the schedule, update the best-so-far copy
    4. An empty scan ends the run or cools and retries (``ExhaustionPolicy``)
"""

from __future__ import annotations

import copy
import time
from collections.abc import Callable
from itertools import islice
from typing import Any, TypeVar

import numpy as np

from .contracts import AcceptanceFunction, Solution, Temperature
from .logging import get_logger
from .types import (
    AnnealResult,
    ExhaustionPolicy,
    IterationRecord,
    MaxIterations,
    ScheduleDriven,
    StopReason,
    TerminationPolicy,
)

S = TypeVar("S", bound=Solution)

logger = get_logger(__name__)


def _scan(
    solution: Solution,
    current_fitness: float,
    temperature: float,
    acceptance: AcceptanceFunction,
    rng: np.random.Generator,
    scan_limit: int | None,
) -> tuple[tuple[Any, float] | None, int]:
    """Find the first acceptable neighbour.

    Returns:
        ``((neighbour, predicted_fitness) | None, scanned)``.
    """
    candidates = iter(solution.neighbours())
    if scan_limit is not None:
        candidates = islice(candidates, scan_limit)

    scanned = 0
    for neighbour in candidates:
        scanned += 1
        new_fitness = float(solution.neighbour_fitness(neighbour))
        energy_diff = new_fitness - current_fitness
        # Always accept better neighbours, otherwise ask the acceptance function.
        if energy_diff < 0.0 or rng.random() < acceptance(energy_diff, temperature):
            return (neighbour, new_fitness), scanned
    return None, scanned


def anneal(
    initial_solution: S,
    schedule: Temperature,
    acceptance: AcceptanceFunction,
    *,
    termination: TerminationPolicy | None = None,
    on_exhausted: ExhaustionPolicy = ExhaustionPolicy.TERMINATE,
    stop_at_fitness: float | None = None,
    return_best: bool = True,
    scan_limit: int | None = None,
    rng: np.random.Generator | int | None = None,
    callback: Callable[[IterationRecord], None] | None = None,
    should_cancel: Callable[[], bool] | None = None,
    record_history: bool = False,
) -> AnnealResult[S]:
    """Run simulated annealing from ``initial_solution``.

    The initial solution is mutated in place as moves are applied; the best
    solution is kept as a ``copy.deepcopy`` snapshot.

    Args:
        initial_solution: Starting point, satisfying ``Fitness`` and ``Neighbours``.
        schedule: Cooling schedule satisfying ``Temperature``.
        acceptance: ``(energy_diff, temperature) -> score``; a worse move is
            accepted when a uniform draw in [0, 1) is below the score.
        termination: ``ScheduleDriven()`` (default) or ``MaxIterations(n)``.
        on_exhausted: Behaviour when a neighbour scan accepts nothing.
        stop_at_fitness: Stop as soon as the working fitness is at or below
            this value. ``0.0`` reproduces the exact-zero early exit of the
            fixed-budget variant for non-negative fitness functions.
        return_best: Return the best solution seen (True) or the working
            solution at termination (False).
        scan_limit: Maximum neighbours examined per iteration; reaching it
            counts as an exhausted scan. Needed to bound runs over infinite
            neighbour streams.
        rng: Random generator, seed, or None for fresh OS entropy.
        callback: Called with an ``IterationRecord`` after every iteration.
        should_cancel: Polled at the top of every iteration.
        record_history: Keep every ``IterationRecord`` on the result.

    Returns:
        AnnealResult holding the returned solution and run statistics.
    """
    if termination is None:
        termination = ScheduleDriven()
    if not isinstance(termination, (ScheduleDriven, MaxIterations)):
        raise TypeError(f"Unknown termination policy: {termination!r}")
    on_exhausted = ExhaustionPolicy(on_exhausted)
    if scan_limit is not None and scan_limit < 1:
        raise ValueError(f"scan_limit must be >= 1, got {scan_limit}")
    rng = np.random.default_rng(rng)

    t0 = time.perf_counter()
    solution = initial_solution
    current_fitness = float(solution.fitness())
    best_solution = copy.deepcopy(solution)
    best_fitness = current_fitness

    iterations = 0
    evaluations = 0
    accepted_worse = 0
    history: list[IterationRecord] = []

    if schedule.stop():
        logger.warn(
            "schedule already stopped before the first iteration",
            temperature=schedule.temperature(),
        )
    logger.info(
        "anneal started",
        initial_fitness=current_fitness,
        temperature=schedule.temperature(),
        termination=type(termination).__name__,
        on_exhausted=on_exhausted.value,
    )

    with logger.timer("anneal"):
        while True:
            if should_cancel is not None and should_cancel():
                reason = StopReason.CANCELLED
                break
            if schedule.stop():
                reason = StopReason.SCHEDULE_STOPPED
                break
            if isinstance(termination, MaxIterations) and iterations >= termination.n:
                reason = StopReason.MAX_ITERATIONS
                break
            if stop_at_fitness is not None and current_fitness <= stop_at_fitness:
                reason = StopReason.TARGET_REACHED
                break

            temperature = schedule.temperature()
            chosen, scanned = _scan(
                solution, current_fitness, temperature, acceptance, rng, scan_limit
            )
            evaluations += scanned

            if chosen is None:
                if on_exhausted is ExhaustionPolicy.TERMINATE:
                    reason = StopReason.NEIGHBOURS_EXHAUSTED
                    break
                schedule = schedule.update(solution)
                iterations += 1
                accepted = improved = False
            else:
                neighbour, new_fitness = chosen
                improved = new_fitness < current_fitness
                if not improved:
                    accepted_worse += 1
                solution.apply_neighbour(neighbour)
                schedule = schedule.update(solution)
                current_fitness = new_fitness
                iterations += 1
                accepted = True
                if current_fitness < best_fitness:
                    best_solution = copy.deepcopy(solution)
                    best_fitness = current_fitness

            record = IterationRecord(
                iteration=iterations,
                temperature=temperature,
                accepted=accepted,
                improved=improved,
                scanned=scanned,
                current_fitness=current_fitness,
                best_fitness=best_fitness,
            )
            if record_history:
                history.append(record)
            if callback is not None:
                callback(record)
            if logger.is_enabled("DEBUG"):
                logger.debug("iteration", **record.to_dict())

    elapsed = time.perf_counter() - t0
    result = AnnealResult(
        solution=best_solution if return_best else solution,
        fitness=best_fitness if return_best else current_fitness,
        best_fitness=best_fitness,
        current_fitness=current_fitness,
        iterations=iterations,
        evaluations=evaluations,
        accepted_worse=accepted_worse,
        reason=reason,
        temperature=schedule.temperature(),
        elapsed_s=elapsed,
        history=history,
    )
    logger.info("anneal finished", **result.summary())
    return result


def simulated_annealing(
    initial_solution: S,
    schedule: Temperature,
    acceptance: AcceptanceFunction,
    **kwargs: Any,
) -> S:
    """Run simulated annealing and return only the resulting solution.

    Accepts the same keyword options as ``anneal``. A solution is returned
    on every exit path.
    """
    return anneal(initial_solution, schedule, acceptance, **kwargs).solution
