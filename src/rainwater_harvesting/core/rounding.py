"""
Rounding helpers.

Design figures round halves upward (2.5 -> 3, 0.125 -> 0.13 at 2 dp) rather
than to the nearest even digit as the built-in round() does.
"""

import math
from typing import Union


def round_half_up(value: float, ndigits: int = 0) -> Union[int, float]:
    """
    Round to ndigits decimals, halves toward +infinity.

    Args:
        value: Number to round
        ndigits: Decimal places to keep

    Returns:
        int when ndigits is 0, otherwise float
    """
    if ndigits == 0:
        return int(math.floor(value + 0.5))

    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor
