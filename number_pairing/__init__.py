"""Number pairing: split a fixed sum S into (a, S - a) maximizing |a - b| * a * b.

Core contract:
- inputs: the sum S (default 8) and whether to collect secondary results
- workflow: coarse scan of [0, S/2] -> zoom around the best -> repeat until
  a round stops improving

The search is numeric on purpose; no closed-form solution is used.
"""

from .pair import Pair
from .search import SearchResult, RoundSummary, solve, solve_default
from .report import format_result
