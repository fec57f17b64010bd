"""Domain models for savings-rate aggregates."""

from dataclasses import dataclass
from typing import NamedTuple

from savings_rate.domain.models.report import ExpenseShare


class RatePoint(NamedTuple):
    """Savings rate of one period, in percent."""

    period_index: float
    rate_percent: float


@dataclass(frozen=True)
class SavingsRateSeries:
    """Per-period savings rates and their running figures.

    Attributes:
        points: Rate per period, ordered chronologically.
        cumulative_rate: Mean of the per-period rates, in percent.
        avg_daily_expense: Mean daily expense over the periods.
        avg_daily_income: Mean daily income over the periods.
    """

    points: list[RatePoint]
    cumulative_rate: float
    avg_daily_expense: float
    avg_daily_income: float

    @property
    def period_count(self) -> int:
        """Return the number of periods in the series."""
        return len(self.points)


@dataclass(frozen=True)
class WealthProjections:
    """Long-horizon wealth figures.

    Attributes:
        fire: Annual expense times the 25x retirement multiple.
        aaw: Distance from the average-accumulator benchmark.
        paw: Distance from the prodigious-accumulator benchmark.
    """

    fire: float
    aaw: float
    paw: float


@dataclass(frozen=True)
class SavingsRateSummary:
    """Series and projections computed for one run."""

    series: SavingsRateSeries
    projections: WealthProjections
    liabilities: float
    currency_code: str


@dataclass(frozen=True)
class ExpenseBreakdown:
    """Expense shares of the current month."""

    shares: list[ExpenseShare]
    total: float
    currency_code: str


__all__ = [
    "RatePoint",
    "SavingsRateSeries",
    "WealthProjections",
    "SavingsRateSummary",
    "ExpenseBreakdown",
]
