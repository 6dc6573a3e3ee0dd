import math
from collections.abc import Iterator
from dataclasses import dataclass, field, replace

from typing_extensions import override

from datarange.formatting import decimals, format_data, format_float
from datarange.grid import align, ceil_index, floor_index, precision_ratio, step_count
from datarange.stepsize import auto_stepsize
from datarange.util import INFINITE_STEPS


def _require_finite(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise ValueError(
                f"DataRange {name} must be a finite number.\n"
                f"Got {name}={value!r}\n"
                f"Hint: drop NaN and infinite samples before building a range"
            )


@dataclass(frozen=True, kw_only=True)
class DataRange:
    """A range bounded by low and high, rounded at stepsize level.

    A stepsize of 0 means the range is continuous and its boundaries are not
    rounded. The unit is descriptive only and takes no part in equality.

    Build ranges with :meth:`make`; derive new ones with
    :meth:`reset_boundaries` and :meth:`enlarge`, which keep the stepsize.
    """

    low: float
    high: float
    stepsize: float = 0.0
    unit: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        _require_finite(low=self.low, high=self.high, stepsize=self.stepsize)
        if self.stepsize < 0:
            raise ValueError(
                f"DataRange stepsize must be >= 0, got {self.stepsize!r}\n"
                f"Hint: use make(a, b, -maxsteps) to pick a stepsize automatically"
            )
        if self.low > self.high:
            raise ValueError(
                f"DataRange low ({self.low}) must be <= high ({self.high})"
            )

    @classmethod
    def make(
        cls, a: float, b: float, stepsize: float, unit: str = ""
    ) -> "DataRange":
        """Build a range around a and b, in any order.

        The stepsize argument selects how boundaries are rounded:

        - ``stepsize > 0``: boundaries are rounded to multiples of stepsize
        - ``stepsize == 0``: boundaries are kept as is
        - ``stepsize < 0``: its magnitude is the maximum number of steps and
          the stepsize is picked automatically among 1, 2.5 and 5 times a
          power of ten (e.g. 0.25, 100, 5000)

        The low boundary is rounded down, the high boundary is rounded up.

        Raises:
            ValueError: If an argument is NaN or infinite, or if the step
                budget of a negative stepsize is lower than 1
        """
        _require_finite(a=a, b=b, stepsize=stepsize)
        if stepsize < 0:
            stepsize = auto_stepsize(a, b, -stepsize)
        # -0.0 counts as no stepsize
        seed = cls(low=0.0, high=0.0, stepsize=stepsize or 0.0, unit=unit)
        return seed.reset_boundaries(a, b)

    def reset_boundaries(self, a: float, b: float) -> "DataRange":
        """Return a range over a and b with the same stepsize and unit."""
        _require_finite(a=a, b=b)
        low, high = min(a, b), max(a, b)

        if self.stepsize != 0:
            # Cleaned to the stepsize precision to drop float dust (9.999999999998)
            ratio = precision_ratio(self.stepsize)
            low = align(floor_index(low, self.stepsize), self.stepsize, ratio)
            high = align(ceil_index(high, self.stepsize), self.stepsize, ratio)

        return replace(self, low=float(low), high=float(high))

    def enlarge(self, coef: float) -> "DataRange":
        """Return a range with low divided and high multiplied by coef.

        A coef lower than 1 shrinks the range. A coef <= 0 resets both
        boundaries to 0.
        """
        _require_finite(coef=coef)
        if coef > 0:
            return self.reset_boundaries(self.low / coef, self.high * coef)
        return self.reset_boundaries(0.0, 0.0)

    @property
    def is_stepped(self) -> bool:
        return self.stepsize != 0

    def steps(self) -> int:
        """Number of whole steps between the boundaries.

        Returns INFINITE_STEPS when the range has no stepsize.
        """
        if not self.is_stepped:
            return INFINITE_STEPS
        return step_count(self.low, self.high, self.stepsize)

    def delta(self) -> float:
        return self.high - self.low

    def progress(self, value: float) -> float:
        """Rate of value within the range, from 0 at low to 1 at high.

        Values outside the range are clamped. On a single-value range the
        result is 0 below, 1 above and 0.5 on the value itself.
        """
        span = self.high - self.low
        if span > 0:
            return min(max((value - self.low) / span, 0.0), 1.0)
        if value < self.low:
            return 0.0
        if value > self.high:
            return 1.0
        return 0.5

    def equal(self, other: "DataRange") -> bool:
        """True if both ranges share boundaries and stepsize, whatever their unit."""
        return (
            self.low == other.low
            and self.high == other.high
            and self.stepsize == other.stepsize
        )

    def ticks(self) -> Iterator[float]:
        """Yield the scale values from low to high, one per step."""
        if not self.is_stepped:
            raise ValueError(
                f"Cannot step through a range without stepsize: {self}\n"
                f"Hint: build it with a non-zero stepsize, e.g. make(a, b, -10)"
            )
        digits = decimals(self.stepsize)
        for index in range(self.steps() + 1):
            yield round(self.low + index * self.stepsize, digits)

    def labels(self) -> list[str]:
        """Tick values formatted at the stepsize precision."""
        return [format_data(tick, self.stepsize) for tick in self.ticks()]

    @override
    def __str__(self) -> str:
        """Display as ``unit[ low :stepsize: high ]``."""
        low = format_data(self.low, self.stepsize)
        high = format_data(self.high, self.stepsize)
        return f"{self.unit}[ {low} :{format_float(self.stepsize)}: {high} ]"


make = DataRange.make
