"""Policy for grading a savings rate."""

from enum import Enum

from savings_rate.domain.constants import (
    AFFIRMATIVE_RATE_FLOOR,
    CAUTION_RATE_FLOOR,
)


class RateTier(Enum):
    """Display tier of a savings rate."""

    ALERT = "alert"
    CAUTION = "caution"
    AFFIRMATIVE = "affirmative"


def classify_rate(rate_percent: float) -> RateTier:
    """Return the tier of a savings rate expressed in percent.

    Args:
        rate_percent: Savings rate, e.g. ``25.0`` for 25%.

    Returns:
        RateTier: ALERT at or below 0, CAUTION up to 50, AFFIRMATIVE above.
    """
    if rate_percent <= CAUTION_RATE_FLOOR:
        return RateTier.ALERT
    if rate_percent <= AFFIRMATIVE_RATE_FLOOR:
        return RateTier.CAUTION
    return RateTier.AFFIRMATIVE


__all__ = ["RateTier", "classify_rate"]
