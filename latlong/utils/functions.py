"""Module for miscellaneous multi-use functions"""

__all__ = ['normalize_bearing', 'round_half_up', 'to_precision']

import math


def normalize_bearing(rad: float) -> float:
    """
    Wraps an angle in radians into a compass bearing, i.e. the range [0, 2pi).

    Args:
        rad:
            The angle, in radians. May be negative or exceed a full turn.

    Returns:
        (float) the equivalent bearing, in radians
    """
    bearing = rad % (2 * math.pi)
    if bearing >= 2 * math.pi:
        # Tiny negative inputs round up to a full turn
        return 0.0

    return bearing


def round_half_up(value: float, precision: int) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def to_precision(value: float, figures: int) -> float:
    """
    Rounds a value to a number of significant figures, keeping it a plain float
    (never exponent notation when printed at that precision).

    Four significant figures is a reasonable indication of the accuracy of a
    spherical distance, e.g. to_precision(373.505325, 4) == 373.5

    Args:
        value:
            The value to be rounded

        figures:
            The number of significant figures to keep

    Returns:
        float
    """
    if figures < 1:
        raise ValueError(f'Significant figures must be at least 1, not {figures}')

    if value == 0 or not math.isfinite(value):
        return float(value)

    scale = math.ceil(math.log10(abs(value)))
    return float(round_half_up(value, figures - scale))
