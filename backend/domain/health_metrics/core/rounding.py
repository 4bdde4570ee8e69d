"""Rounding helpers shared by every health metrics calculation."""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Union


def round_half_up(value: float, ndigits: int = 0) -> Union[int, float]:
    """Round half away from zero.

    Python's built-in ``round`` uses banker's rounding (1642.5 -> 1642).
    Health figures are rounded half up everywhere (1642.5 -> 1643), using the
    shortest decimal representation of the float so that values such as
    891.0999999999999 round as displayed.

    Args:
        value: Value to round
        ndigits: Decimal places to keep (0 returns an int)

    Returns:
        int when ndigits is 0, float otherwise. Non-finite values (NaN, inf)
        are returned unchanged.

    Example:
        >>> round_half_up(1642.5)
        1643
        >>> round_half_up(24.2214, 1)
        24.2
    """
    if not math.isfinite(value):
        return value

    quantum = Decimal(1).scaleb(-ndigits)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)

    if ndigits == 0:
        return int(rounded)
    return float(rounded)
