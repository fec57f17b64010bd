"""Helpers for float arithmetic."""

import math


def safe_ratio(numerator: float, denominator: float) -> float:
    """Divide two floats, returning ``0.0`` instead of an undefined result.

    Args:
        numerator: Dividend.
        denominator: Divisor.

    Returns:
        float: The quotient, or ``0.0`` when the divisor is zero or the
        quotient is NaN.
    """
    if denominator == 0:
        return 0.0
    result = numerator / denominator
    if math.isnan(result):
        return 0.0
    return result


__all__ = ["safe_ratio"]
