"""Number formatting helpers driven by a stepsize."""

from decimal import Decimal


def format_float(value: float) -> str:
    """Shortest round-trip text for value, without a trailing ``.0``.

    >>> format_float(2500.0)
    '2500'
    >>> format_float(0.1)
    '0.1'
    """
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


def decimals(value: float) -> int:
    """Return the number of significant decimals of value.

    Counts the digits after the decimal point in the shortest positional
    representation that round-trips to value: ``decimals(0.25) == 2``,
    ``decimals(2500) == 0``, ``decimals(1e-7) == 7``.
    """
    exponent = Decimal(repr(float(value))).normalize().as_tuple().exponent
    if not isinstance(exponent, int):
        raise ValueError(f"Cannot count decimals of {value!r}")
    return max(0, -exponent)


def format_data(value: float, stepsize: float) -> str:
    """Format value according to a stepsize.

    With a zero stepsize, value is formatted without trailing zeros.
    Otherwise it gets exactly as many decimals as the stepsize has.

    >>> format_data(11.2, 0.1)
    '11.2'
    >>> format_data(11.2, 1)
    '11'
    >>> format_data(10, 0.25)
    '10.00'
    """
    if stepsize == 0:
        return format_float(value)
    return f"{value:.{decimals(stepsize)}f}"
