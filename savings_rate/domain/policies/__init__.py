"""Domain policies package."""

from .rate_tiers import RateTier, classify_rate

__all__ = ["RateTier", "classify_rate"]
