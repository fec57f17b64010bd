"""Domain services package."""

from .legacy_csv import parse_balance_listing_csv, parse_period_report_csv
from .metrics import (
    compute_expense_breakdown,
    compute_savings_rate_series,
    compute_wealth_projections,
    period_savings_rate,
)
from .normalization import (
    normalize_commodity_code,
    parse_amount_text,
    parse_liabilities_text,
)
from .parsing import parse_balance_listing, parse_period_report
from .validation import validate_period_alignment, warn_on_mixed_commodities

__all__ = [
    "parse_balance_listing_csv",
    "parse_period_report_csv",
    "compute_expense_breakdown",
    "compute_savings_rate_series",
    "compute_wealth_projections",
    "period_savings_rate",
    "normalize_commodity_code",
    "parse_amount_text",
    "parse_liabilities_text",
    "parse_balance_listing",
    "parse_period_report",
    "validate_period_alignment",
    "warn_on_mixed_commodities",
]
