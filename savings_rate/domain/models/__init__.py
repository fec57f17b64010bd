"""Domain models package."""

from .commodity import (
    AmountStyle,
    Commodity,
    DigitGroups,
    PriceListing,
    Quantity,
    Side,
)
from .metrics import (
    ExpenseBreakdown,
    RatePoint,
    SavingsRateSeries,
    SavingsRateSummary,
    WealthProjections,
)
from .report import (
    AccountBalance,
    AggregateRow,
    BalanceEntry,
    DateSpan,
    ExpenseShare,
    NormalizedValue,
    PeriodicRow,
    PeriodReport,
    SinglePeriodListing,
    TotalBalance,
)

__all__ = [
    "AmountStyle",
    "Commodity",
    "DigitGroups",
    "PriceListing",
    "Quantity",
    "Side",
    "ExpenseBreakdown",
    "RatePoint",
    "SavingsRateSeries",
    "SavingsRateSummary",
    "WealthProjections",
    "AccountBalance",
    "AggregateRow",
    "BalanceEntry",
    "DateSpan",
    "ExpenseShare",
    "NormalizedValue",
    "PeriodicRow",
    "PeriodReport",
    "SinglePeriodListing",
    "TotalBalance",
]
