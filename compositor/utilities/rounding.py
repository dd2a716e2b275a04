"""Numeric rounding used by template functions."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Python's round() rounds halves to even; announcements expect 2.5 -> 3.
    NaN and infinities round to 0.
    """
    if not math.isfinite(value):
        return 0
    return math.floor(value + 0.5)


def round_for_progress_percent(value: float) -> int:
    """Round a progress percentage without claiming 0% or 100% too early.

    Anything strictly between 0 and 1 reads as 1, anything strictly between
    99 and 100 reads as 99.

    Examples:
        >>> round_for_progress_percent(0.2)
        1
        >>> round_for_progress_percent(99.7)
        99
        >>> round_for_progress_percent(42.5)
        43
    """
    if 0 < value < 1:
        return 1
    if 99 < value < 100:
        return 99
    return round_half_up(value)
