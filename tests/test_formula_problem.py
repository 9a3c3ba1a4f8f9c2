"""Tests for the reference cubic-formula problem."""

from itertools import islice

import numpy as np
import pytest

from annealing.core.acceptance import boltzmann
from annealing.core.contracts import Solution
from annealing.core.cooling import Geometric
from annealing.core.engine import anneal
from annealing.problems.formula import MAX_X, OPTIMUM_X, FormulaSolution, formula


def test_formula_optimum():
    values = [formula(float(x)) for x in range(MAX_X + 1)]
    assert int(np.argmax(values)) == OPTIMUM_X
    assert formula(10.0) == 4100.0


def test_fitness_is_negated_formula():
    solution = FormulaSolution(x=3)
    assert solution.fitness() == -formula(3.0)
    assert solution.neighbour_fitness(10) == -4100.0


def test_satisfies_solution_protocol():
    assert isinstance(FormulaSolution(x=0), Solution)


def test_neighbours_stay_in_range(rng):
    solution = FormulaSolution.random(rng)
    draws = list(islice(solution.neighbours(), 500))
    assert min(draws) >= 0
    assert max(draws) <= MAX_X


def test_rejects_out_of_range():
    with pytest.raises(ValueError):
        FormulaSolution(x=MAX_X + 1)


def test_anneal_finds_maximum():
    """Geometric(800, 0.99, 0.001) with Boltzmann reaches x = 10."""
    rng = np.random.default_rng(2024)
    result = anneal(
        FormulaSolution.random(rng),
        Geometric(800.0, 0.99, 0.001),
        boltzmann(1.0),
        rng=rng,
    )
    assert result.solution.x == OPTIMUM_X
    assert result.fitness == -4100.0
