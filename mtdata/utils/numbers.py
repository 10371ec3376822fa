"""
Numeric helpers matching the platform's rounding conventions.
"""

import math


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero.

    The terminal's MathRound rounds this way, unlike Python's round(), which
    rounds halves to even.
    """
    rounded = math.floor(abs(value) + 0.5)
    return int(rounded) if value >= 0 else -int(rounded)


def normalize_double(value: float, digits: int) -> float:
    """Round a price to a number of decimal digits, halves away from zero."""
    if digits < 0:
        raise ValueError("digits must be non-negative")
    factor = 10 ** digits
    scaled = value * factor
    # Absorb representation error such as 1.2345 * 1e4 == 12344.999999999998
    scaled = round(scaled, 8)
    return round_half_away(scaled) / factor
