"""Rounding helpers shared by the nutrition calculations."""

from decimal import ROUND_HALF_UP, Decimal, localcontext

# Enough digits for any finite float at two decimal places.
_PRECISION = 400


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round half away from zero to the given number of decimal places.

    Python's built-in ``round`` uses banker's rounding, so ``round(2.5)`` is 2.
    Nutrition values are displayed the conventional way: 2.5 becomes 3 and
    -2.5 becomes -3. The value is quantized from its shortest repr so that
    ``1.05`` rounds to ``1.1`` as it reads, not as its binary form does.
    """
    quantum = Decimal(1).scaleb(-decimals)
    with localcontext() as context:
        context.prec = _PRECISION
        rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


def round_int(value: float) -> int:
    """Round half away from zero to an integer."""
    return int(round_half_up(value))
