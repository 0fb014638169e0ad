"""Shared utilities for the number pairing search.

This module provides common pieces used across the package:
- Tolerance and search constants
- Fixed-point conversion for the candidate scan
- Fixed-precision decomposition of floats (hashing)
- Number formatting for reports
"""

from __future__ import annotations

import math


# =============================================================================
# Constants
# =============================================================================
DEFAULT_SUM = 8.0

# Scores closer than this are considered the same for convergence.
MIN_PRECISION = 1e-10

# Sub-unit resolution of the integer scan.
FIXED_POINT_SCALE = 100_000_000

MAX_ROUNDS = 40

# Rounds finer than this do not contribute secondary results.
OTHER_MIN_STEP = 0.01

DISPLAY_PRECISION = 4
MAX_OTHER_DISPLAYED = 10


# =============================================================================
# Fixed-point conversion
# =============================================================================
def to_fixed_point(value: float, step: float, *, scale: int = FIXED_POINT_SCALE) -> int:
    """Map ``value`` to an integer index where one ``step`` spans ``scale`` units."""
    return int(round(value * (1.0 / step) * scale))


def from_fixed_point(index: int, step: float, *, scale: int = FIXED_POINT_SCALE) -> float:
    """Inverse of :func:`to_fixed_point`."""
    return index / ((1.0 / step) * scale)


def fixed_point_values(
    low: float,
    high: float,
    step: float,
    *,
    scale: int = FIXED_POINT_SCALE,
) -> list[float]:
    """Enumerate candidates from ``low`` to ``high`` (inclusive) at ``step`` spacing.

    The walk is done over integer indices so the spacing does not drift the
    way repeated float addition does.

    Args:
        low: First candidate
        high: Upper end of the interval (included when on the grid)
        step: Spacing between candidates
        scale: Integer units per step

    Returns:
        List of candidate values. A step that cannot be converted (zero,
        negative, non-finite) yields ``[low]``; ``low > high`` yields ``[]``.
    """
    if low > high:
        return []
    if not step > 0:
        return [low]

    conversion = (1.0 / step) * scale
    if not (math.isfinite(low * conversion) and math.isfinite(high * conversion)):
        return [low]

    lo_index = to_fixed_point(low, step, scale=scale)
    hi_index = to_fixed_point(high, step, scale=scale)
    return [from_fixed_point(i, step, scale=scale) for i in range(lo_index, hi_index + 1, scale)]


# =============================================================================
# Fixed-precision decomposition
# =============================================================================
def split_float(value: float, *, scale: int = FIXED_POINT_SCALE) -> tuple[int, int]:
    """Split ``|value|`` into (whole part, fractional part in 1/scale units).

    Floats that only differ below the resolution decompose identically,
    which makes the pair suitable for hashing.
    """
    pos = abs(value)
    whole = int(pos)
    rem = int(round((pos - whole) * scale))
    if rem == scale:
        whole, rem = whole + 1, 0
    return whole, rem


# =============================================================================
# Formatting
# =============================================================================
def format_float(value: float, precision: int = DISPLAY_PRECISION) -> str:
    """Fixed-precision string with trailing zeros trimmed (``2.5000`` -> ``2.5``)."""
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text
