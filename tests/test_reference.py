from __future__ import annotations

import numpy as np
import pytest

from number_pairing.pair import Pair
from number_pairing.reference import bounded_maximum, grid_maximum, objective


def test_objective_matches_pair_score():
    a = np.array([-1.5, 0.0, 1.0, 2.0, 4.0, 9.0])
    expected = [Pair(x, 8.0).score() for x in a]
    assert np.allclose(objective(a, 8.0), expected)
    assert float(objective(2.0, 8.0)) == 48.0


def test_grid_and_scipy_agree():
    a_star = 8.0 * (1.0 - 1.0 / np.sqrt(3.0)) / 2.0
    grid = grid_maximum(8.0)
    ref = bounded_maximum(8.0)

    assert abs(grid.first - a_star) < 1e-4
    assert abs(ref.first - a_star) < 1e-6
    assert ref.score == pytest.approx(8.0 ** 3 / (6.0 * np.sqrt(3.0)), rel=1e-12)
    assert grid.score <= ref.score + 1e-12


def test_zero_sum():
    assert bounded_maximum(0.0).score == 0.0
    assert grid_maximum(0.0).score == 0.0


def test_grid_needs_two_points():
    with pytest.raises(ValueError):
        grid_maximum(8.0, n_points=1)
