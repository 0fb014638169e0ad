"""Candidate split of a fixed sum into two non-negative numbers.

A Pair stores one number of the split (``first``); the other is always
derived as ``sum - first``. The objective of the search is

    score = |first - second| * (first * second)

Three comparison tiers are kept apart on purpose:
- ``==``: same sum and same split at 1e-8 resolution, either orientation (dedup/set use)
- ``<``, ``<=``, ...: total order by score (max selection)
- ``is_equivalent_to``: scores within MIN_PRECISION (convergence only)
"""

from __future__ import annotations

import math

from .utils import DEFAULT_SUM, MIN_PRECISION, format_float, split_float


def _clamp(requested: float, total: float) -> float:
    non_negative = abs(requested)
    if math.isnan(non_negative):
        return 0.0
    return total if non_negative > total else non_negative


class Pair:
    __slots__ = ("_first", "sum")

    def __init__(self, requested: float, total: float):
        self.sum = float(total)
        self._first = _clamp(float(requested), self.sum)

    @classmethod
    def with_default_sum(cls, requested: float) -> Pair:
        """Pair for the default problem (two numbers adding up to 8)."""
        return cls(requested, DEFAULT_SUM)

    def copy(self) -> Pair:
        return Pair(self._first, self.sum)

    # -------------------------------------------------------------------------
    # accessors
    # -------------------------------------------------------------------------
    def first(self) -> float:
        return self._first

    def set_first(self, requested: float) -> None:
        """Store ``requested`` clamped to [0, sum]; out-of-range input is corrected."""
        self._first = _clamp(requested, self.sum)

    def second(self) -> float:
        return self.sum - self._first

    def set_second(self, requested: float) -> None:
        self._first = self.sum - _clamp(requested, self.sum)

    # -------------------------------------------------------------------------
    # derived values
    # -------------------------------------------------------------------------
    def product(self) -> float:
        return self._first * self.second()

    def difference(self) -> float:
        return abs(self._first - self.second())

    def score(self) -> float:
        return self.product() * self.difference()

    def distance_to(self, other: Pair) -> float:
        return abs(self.score() - other.score())

    def is_equivalent_to(self, other: Pair) -> bool:
        """True if the scores are close enough to count as the same.

        Equivalent pairs may still be ``!=``.
        """
        return self.distance_to(other) < MIN_PRECISION

    # -------------------------------------------------------------------------
    # comparison
    # -------------------------------------------------------------------------
    def _key(self) -> tuple[int, int]:
        # The smaller number of the split is the same for both orientations;
        # the fixed-precision split absorbs the ulp lost in sum - (sum - x).
        return split_float(min(self._first, self.second()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        if self.sum != other.sum:
            return False
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((self._key(), split_float(self.sum)))

    def __lt__(self, other: Pair) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self.score() < other.score()

    def __le__(self, other: Pair) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self.score() <= other.score()

    def __gt__(self, other: Pair) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self.score() > other.score()

    def __ge__(self, other: Pair) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self.score() >= other.score()

    # -------------------------------------------------------------------------
    # display
    # -------------------------------------------------------------------------
    def __str__(self) -> str:
        return (
            f"{format_float(self._first)} and {format_float(self.second())} -> {format_float(self.sum)} "
            f"(difference: {format_float(self.difference())}, product: {format_float(self.product())} "
            f"-> result: {format_float(self.score())})"
        )

    def __repr__(self) -> str:
        return f"Pair(first={self._first!r}, sum={self.sum!r})"
