"""Tests for the savings-rate tier policy."""

import pytest

from savings_rate.domain.policies.rate_tiers import RateTier, classify_rate


@pytest.mark.parametrize(
    ("rate", "tier"),
    [
        (-12.5, RateTier.ALERT),
        (0.0, RateTier.ALERT),
        (0.01, RateTier.CAUTION),
        (50.0, RateTier.CAUTION),
        (50.01, RateTier.AFFIRMATIVE),
        (100.0, RateTier.AFFIRMATIVE),
    ],
)
def test_classify_rate_boundaries(rate: float, tier: RateTier) -> None:
    """Zero and fifty percent belong to the lower tier."""
    assert classify_rate(rate) is tier
