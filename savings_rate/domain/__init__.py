"""Domain package for business rules and core models."""

from .constants import DEFAULT_COMMODITY
from .errors import FetchError, ParseError, SavingsRateError, StructuralError
from .models import (
    Commodity,
    DateSpan,
    ExpenseBreakdown,
    ExpenseShare,
    NormalizedValue,
    PeriodReport,
    RatePoint,
    SavingsRateSeries,
    SavingsRateSummary,
    SinglePeriodListing,
    WealthProjections,
)
from .policies import RateTier, classify_rate
from .services import (
    compute_expense_breakdown,
    compute_savings_rate_series,
    compute_wealth_projections,
    parse_amount_text,
    parse_balance_listing,
    parse_period_report,
)

__all__ = [
    "DEFAULT_COMMODITY",
    "FetchError",
    "ParseError",
    "SavingsRateError",
    "StructuralError",
    "Commodity",
    "DateSpan",
    "ExpenseBreakdown",
    "ExpenseShare",
    "NormalizedValue",
    "PeriodReport",
    "RatePoint",
    "SavingsRateSeries",
    "SavingsRateSummary",
    "SinglePeriodListing",
    "WealthProjections",
    "RateTier",
    "classify_rate",
    "compute_expense_breakdown",
    "compute_savings_rate_series",
    "compute_wealth_projections",
    "parse_amount_text",
    "parse_balance_listing",
    "parse_period_report",
]
