"""Automatic stepsize selection.

Picks the smallest "nice" stepsize (1, 2.5 or 5 times a power of ten) whose
rounded boundaries are reachable within a maximum number of steps.
"""

import logging
import math

from datarange.grid import ceil_index, ensure_finite, floor_index
from datarange.util import NICE_STEPS

logger = logging.getLogger(__name__)


def decade_exponent(rawstep: float) -> int:
    """Decimal order of magnitude of rawstep, truncated toward zero.

    Steps between 0.01 and 1 all land on the -1 decade, so the ladder
    starts at 0.1 for them.
    """
    return int(math.log10(rawstep) + 1) - 1


def candidates(rawstep: float) -> list[float]:
    """Nice stepsizes to try for rawstep, in ascending order."""
    scale = 10.0 ** decade_exponent(rawstep)
    return [basic * scale for basic in NICE_STEPS]


def auto_stepsize(a: float, b: float, maxsteps: float) -> float:
    """Compute a stepsize so that at most maxsteps steps span the rounded bounds.

    Raises:
        ValueError: If maxsteps is lower than 1, or if the span between
            a and b overflows
    """
    if maxsteps < 1:
        raise ValueError(
            f"Automatic stepsize needs at least one step.\n"
            f"Got maxsteps={maxsteps!r}\n"
            f"Hint: pass a negative stepsize whose magnitude is the step budget,\n"
            f"  make(0, 100, -10)  # at most 10 steps"
        )

    low, high = min(a, b), max(a, b)
    span = ensure_finite(high - low, "Data span")
    # A zero-width span borrows its scale from the value itself
    rawstep = span / maxsteps or abs(low) / maxsteps or 1.0 / maxsteps

    ladder = candidates(rawstep)
    for stepsize in ladder:
        # Same grid indices as DataRange.reset_boundaries
        if ceil_index(high, stepsize) - floor_index(low, stepsize) <= maxsteps:
            break
    else:
        stepsize = ladder[-1]
        logger.warning(
            "No nice stepsize fits [%s, %s] in %s steps, falling back to %s",
            a,
            b,
            maxsteps,
            stepsize,
        )

    logger.debug(
        "Selected stepsize %s for [%s, %s] with maxsteps=%s", stepsize, a, b, maxsteps
    )
    return stepsize
