"""Placing values on the grid of a stepsize.

Quotients and products of floats carry a few ulps of error. A value meant to
sit on a grid line can come out as 1650.9999999999998 steps, and flooring
that loses a whole step. The helpers here snap such quotients to the nearest
integer before rounding them.
"""

import math
import sys

from datarange.formatting import decimals

# Error, in ulps, a grid quotient may carry and still count as on the line
SNAP_ULPS = 8


def ensure_finite(value: float, what: str) -> float:
    """Return value, or raise if an intermediate result overflowed."""
    if not math.isfinite(value):
        raise ValueError(
            f"{what} overflows the float range.\n"
            f"Got {value!r}\n"
            f"Hint: scale the data down or pick a coarser stepsize"
        )
    return value


def snap(quotient: float, slack: float = 0.0) -> float:
    """Return the nearest integer if quotient is within float error of it."""
    nearest = round(quotient)
    if abs(quotient - nearest) <= SNAP_ULPS * math.ulp(quotient) + slack:
        return float(nearest)
    return quotient


def floor_index(value: float, stepsize: float) -> int:
    """Index of the grid line at or below value."""
    return math.floor(snap(ensure_finite(value / stepsize, "Grid index")))


def ceil_index(value: float, stepsize: float) -> int:
    """Index of the grid line at or above value."""
    return math.ceil(snap(ensure_finite(value / stepsize, "Grid index")))


def step_count(low: float, high: float, stepsize: float) -> int:
    """Whole steps between low and high, truncated.

    The subtraction loses up to one ulp of the larger bound, which the
    division by stepsize magnifies; that error is tolerated too.
    """
    quotient = ensure_finite(abs(high - low) / stepsize, "Step count")
    slack = SNAP_ULPS * math.ulp(max(abs(low), abs(high))) / stepsize
    return int(snap(quotient, slack))


def precision_ratio(stepsize: float) -> float:
    """Power of ten matching the decimals of stepsize."""
    digits = decimals(stepsize)
    if digits > sys.float_info.max_10_exp:
        raise ValueError(
            f"Stepsize has too many decimals to round on.\n"
            f"Got stepsize={stepsize!r} ({digits} decimals)\n"
            f"Hint: use a stepsize of at least 1e-{sys.float_info.max_10_exp}"
        )
    return 10.0**digits


def align(index: int, stepsize: float, ratio: float) -> float:
    """Value of grid line index, cleaned to the stepsize precision."""
    value = ensure_finite(index * stepsize, "Grid value")
    return round(ensure_finite(value * ratio, "Grid value")) / ratio
