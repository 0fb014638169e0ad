"""Iterative-refinement ("zoom") search for the best split of a fixed sum.

Workflow:
  1) scan [0, sum/2] at a coarse step (the other half only holds mirrors)
  2) if the round found a better pair, re-scan a narrower interval around
     it at a finer step
  3) stop when a round no longer improves (exactly or within MIN_PRECISION),
     or after MAX_ROUNDS rounds

The objective is unimodal on [0, sum/2], so coarse-to-fine bracketing
converges in a handful of rounds. Nothing here raises for numeric input;
reaching the round cap simply returns the best result found so far.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .pair import Pair
from .utils import DEFAULT_SUM, MAX_ROUNDS, MAX_OTHER_DISPLAYED, OTHER_MIN_STEP, fixed_point_values


@dataclass(frozen=True)
class RoundSummary:
    index: int
    low: float
    high: float
    step: float
    candidates: int
    best: Pair
    improved: bool


@dataclass(frozen=True)
class SearchResult:
    sum: float
    best_score: float
    round_count: int
    best_pairs: tuple[Pair, ...]
    other_pairs: tuple[Pair, ...] | None  # None when secondary results were not collected
    rounds: tuple[RoundSummary, ...] = ()

    def top_other(self, limit: int = MAX_OTHER_DISPLAYED) -> tuple[Pair, ...]:
        if self.other_pairs is None:
            return ()
        return self.other_pairs[:limit]


@dataclass
class ScanRound:
    """Outcome of scanning one interval."""

    best: Pair
    best_pairs: list[Pair]
    other_pairs: list[Pair] | None
    candidates: int


@dataclass
class SearchState:
    """Accumulator threaded through the refinement loop."""

    total: float
    collect_other: bool
    zero: Pair
    overall_best: Pair
    best_pairs: list[Pair]
    other_pairs: list[Pair] | None
    max_rounds: int = MAX_ROUNDS
    round_count: int = 0
    rounds: list[RoundSummary] = field(default_factory=list)


def _eligible_for_other(pair: Pair, zero: Pair, step: float, collect_other: bool) -> bool:
    return collect_other and step >= OTHER_MIN_STEP and pair != zero


def scan_round(
    low: float,
    high: float,
    step: float,
    zero: Pair,
    collect_other: bool,
) -> ScanRound:
    """Scan every candidate of [low, high] at ``step`` and keep the best.

    Args:
        low, high: interval to scan (both ends included)
        step: spacing of the candidates
        zero: the degenerate pair (score 0) every round starts from
        collect_other: keep non-best candidates as secondary results

    Returns:
        ScanRound with the round best, the pairs tied with it, and the
        eligible secondary pairs (None when not collecting).
    """
    best = zero.copy()
    best_pairs: list[Pair] = []
    other_pairs: list[Pair] | None = [] if collect_other else None
    values = fixed_point_values(low, high, step)

    for value in values:
        pair = Pair(value, zero.sum)
        if pair > best:
            best = pair
            for previous in best_pairs:
                if _eligible_for_other(previous, zero, step, collect_other):
                    other_pairs.append(previous)
            best_pairs = [pair]
        elif pair == best:
            best_pairs.append(pair)
        elif _eligible_for_other(pair, zero, step, collect_other):
            other_pairs.append(pair)

    return ScanRound(best=best, best_pairs=best_pairs, other_pairs=other_pairs, candidates=len(values))


def _sorted_unique(pairs: list[Pair]) -> tuple[Pair, ...]:
    """Sort descending by score and drop pairs equal to one already kept.

    A grid point shared by two rounds can straddle a rounding boundary of the
    pair key; such copies score identically, so an exact score tie with the
    last kept pair is dropped as well.
    """
    kept: list[Pair] = []
    for pair in sorted(pairs, key=Pair.score, reverse=True):
        if kept and pair.score() == kept[-1].score():
            continue
        if any(pair == k for k in kept):
            continue
        kept.append(pair)
    return tuple(kept)


def solve(
    total: float = DEFAULT_SUM,
    collect_other: bool = True,
    *,
    max_rounds: int = MAX_ROUNDS,
) -> SearchResult:
    """Find the split of ``total`` maximizing |a - b| * a * b.

    Args:
        total: the fixed sum S
        collect_other: also return distinct near-best pairs met on the way
        max_rounds: hard cap on refinement rounds

    Returns:
        SearchResult
    """
    zero = Pair(0.0, total)
    state = SearchState(
        total=zero.sum,
        collect_other=collect_other,
        zero=zero,
        overall_best=zero.copy(),
        best_pairs=[zero.copy()],
        other_pairs=[] if collect_other else None,
        max_rounds=max_rounds,
    )

    low, high = 0.0, state.total / 2.0
    step = state.total / 4.0

    while state.round_count < state.max_rounds:
        state.round_count += 1
        scan = scan_round(low, high, step, state.zero, state.collect_other)

        converged = scan.best <= state.overall_best or scan.best.is_equivalent_to(state.overall_best)
        state.rounds.append(
            RoundSummary(
                index=state.round_count,
                low=low,
                high=high,
                step=step,
                candidates=scan.candidates,
                best=scan.best.copy(),
                improved=not converged,
            )
        )
        if converged:
            break

        # promote the round best; the previous best list becomes secondary
        for previous in state.best_pairs:
            if _eligible_for_other(previous, state.zero, step, state.collect_other):
                scan.other_pairs.append(previous.copy())
        state.overall_best = scan.best.copy()
        state.best_pairs = [p.copy() for p in scan.best_pairs]
        if state.other_pairs is not None:
            state.other_pairs.extend(scan.other_pairs)

        # narrower interval around the new best, at a finer step
        target = state.overall_best.first()
        margin = step / 2.0
        low, high = max(low, target - margin), min(high, target + margin)
        step = step / (state.round_count * 4)

    other = None if state.other_pairs is None else _sorted_unique(state.other_pairs)
    return SearchResult(
        sum=state.total,
        best_score=state.overall_best.score(),
        round_count=state.round_count,
        best_pairs=tuple(state.best_pairs),
        other_pairs=other,
        rounds=tuple(state.rounds),
    )


def solve_default() -> SearchResult:
    """The default problem: two numbers adding up to 8, with secondary results."""
    return solve(DEFAULT_SUM, True)
