"""Independent numeric cross-checks for the zoom search.

These do not take part in the search; they give tests and demos a second
opinion on where the maximum of |a - b| * a * b lies:
- a dense numpy grid over [0, sum/2]
- scipy's bounded scalar minimizer on the negated objective
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from scipy.optimize import minimize_scalar


@dataclass(frozen=True)
class ReferenceMaximum:
    first: float
    score: float


def objective(first: float | NDArray[np.float64], total: float) -> NDArray[np.float64]:
    """Vectorized score, clamping ``first`` to [0, total] like Pair does."""
    a = np.minimum(np.abs(np.asarray(first, dtype=float)), total)
    b = total - a
    return np.abs(a - b) * (a * b)


def grid_maximum(total: float, n_points: int = 200_001) -> ReferenceMaximum:
    """Best point of an evenly spaced grid over [0, total/2]."""
    if n_points < 2:
        raise ValueError("n_points must be at least 2")
    grid = np.linspace(0.0, total / 2.0, n_points)
    scores = objective(grid, total)
    k = int(np.argmax(scores))
    return ReferenceMaximum(first=float(grid[k]), score=float(scores[k]))


def bounded_maximum(total: float, xatol: float = 1e-10) -> ReferenceMaximum:
    """Maximum on [0, total/2] via scipy.optimize.minimize_scalar (bounded Brent)."""
    if total <= 0:
        return ReferenceMaximum(first=0.0, score=0.0)
    res = minimize_scalar(
        lambda a: -float(objective(a, total)),
        bounds=(0.0, total / 2.0),
        method="bounded",
        options={"xatol": xatol},
    )
    first = float(res.x)
    return ReferenceMaximum(first=first, score=float(objective(first, total)))
