"""Plain-text rendering of pairs and search results."""

from __future__ import annotations

from .pair import Pair
from .search import SearchResult
from .utils import MAX_OTHER_DISPLAYED, format_float


def format_pair(pair: Pair) -> str:
    return str(pair)


def format_result(result: SearchResult, max_other: int = MAX_OTHER_DISPLAYED) -> str:
    """Render the best score, the rounds used, the best pairs and the top other pairs."""
    runs = "run" if result.round_count == 1 else "runs"
    lines = [
        f"Best Result: {result.best_score} (Solved in {result.round_count} {runs})",
        "",
        "Best Number Combination:",
    ]
    lines.extend(format_pair(p) for p in result.best_pairs)

    if result.other_pairs is not None:
        lines.append("")
        lines.append("Other Top Results:")
        lines.extend(format_pair(p) for p in result.top_other(max_other))

    return "\n".join(lines) + "\n"


def format_rounds(result: SearchResult) -> str:
    lines = []
    for r in result.rounds:
        mark = "+" if r.improved else "="
        lines.append(
            f"round {r.index:2d} {mark} [{format_float(r.low, 8)}, {format_float(r.high, 8)}] "
            f"step {r.step:.3g} ({r.candidates} candidates) best {format_float(r.best.first(), 8)} "
            f"-> {r.best.score()}"
        )
    return "\n".join(lines) + "\n"
