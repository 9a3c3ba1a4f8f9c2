"""Tests for acceptance functions."""

import math

import numpy as np
import pytest

from annealing.core.acceptance import Boltzmann, boltzmann, never_accept


def test_boltzmann_formula():
    """Score equals exp(-dE / (k T))."""
    accept = boltzmann(2.0)
    assert accept(3.0, 5.0) == pytest.approx(math.exp(-3.0 / 10.0))


def test_boltzmann_cold_limit():
    """For a fixed worse move the score vanishes as T -> 0+."""
    accept = boltzmann(1.0)
    scores = [accept(1.0, t) for t in (10.0, 1.0, 0.1, 0.01, 1e-4)]
    assert all(a > b for a, b in zip(scores, scores[1:]))
    assert scores[-1] < 1e-100
    assert accept(1.0, 0.0) == 0.0


def test_boltzmann_hot_limit():
    """As T grows the score approaches 1 (random walk)."""
    accept = boltzmann(1.0)
    assert accept(5.0, 1e9) == pytest.approx(1.0, abs=1e-8)
    assert accept(5.0, 1e3) < accept(5.0, 1e6) < 1.0


def test_boltzmann_non_positive_diff_is_at_least_one():
    accept = Boltzmann()
    assert accept(0.0, 1.0) == 1.0
    assert accept(-1.0, 1.0) > 1.0
    assert accept(0.0, 0.0) == 1.0


def test_boltzmann_overflow_is_infinite():
    """Hugely improving moves at tiny temperatures do not raise OverflowError."""
    assert Boltzmann()(-1e6, 1e-6) == math.inf


def test_boltzmann_rejects_bad_constant():
    with pytest.raises(ValueError):
        Boltzmann(constant=0.0)
    with pytest.raises(ValueError):
        boltzmann(-1.0)


def test_never_accept_below_every_draw():
    rng = np.random.default_rng(0)
    draws = rng.random(1000)
    score = never_accept(0.5, 100.0)
    assert score == -1.0
    assert not np.any(draws < score)
