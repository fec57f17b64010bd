"""Domain services for savings-rate metrics."""

from dataclasses import dataclass
from functools import partial, reduce
from logging import Logger

from savings_rate.domain.constants import (
    AAW_DIVISOR,
    DAYS_PER_MONTH,
    DAYS_PER_YEAR,
    FIRE_MULTIPLE,
    PAW_MULTIPLIER,
    WEALTH_FACTOR_DENOMINATOR,
    WEALTH_FACTOR_NUMERATOR,
)
from savings_rate.domain.models.metrics import (
    ExpenseBreakdown,
    RatePoint,
    SavingsRateSeries,
    WealthProjections,
)
from savings_rate.domain.models.report import PeriodReport, SinglePeriodListing
from savings_rate.domain.services.validation import validate_period_alignment
from savings_rate.utils.float_utils import safe_ratio


@dataclass(frozen=True)
class _SeriesTotals:
    points: tuple[RatePoint, ...] = ()
    daily_expense: float = 0.0
    daily_income: float = 0.0
    rate_sum: float = 0.0


def period_savings_rate(income: float, expenses: float) -> float:
    """Return ``(income - expenses) / income``, or 0 when income is zero.

    Args:
        income: Income of the period.
        expenses: Expenses of the period.

    Returns:
        float: Savings rate as a fraction.
    """
    return safe_ratio(income - expenses, income)


def _accumulate(
    totals: _SeriesTotals,
    index: int,
    expense_report: PeriodReport,
    income_report: PeriodReport,
) -> _SeriesTotals:
    expenses = expense_report.value_at_period(index).amount
    income = income_report.value_at_period(index).amount
    rate = period_savings_rate(income, expenses)
    return _SeriesTotals(
        points=(*totals.points, RatePoint(float(index), rate * 100)),
        daily_expense=totals.daily_expense + expenses / DAYS_PER_MONTH,
        daily_income=totals.daily_income + income / DAYS_PER_MONTH,
        rate_sum=totals.rate_sum + rate,
    )


def compute_savings_rate_series(
    expense_report: PeriodReport,
    income_report: PeriodReport,
) -> SavingsRateSeries:
    """Compute the per-period savings rate and its averages.

    Args:
        expense_report: Multi-period expenses report.
        income_report: Multi-period income report with matching periods.

    Returns:
        SavingsRateSeries: Rate points, cumulative rate in percent and
        average daily expense and income.

    Raises:
        StructuralError: If a report is empty or the period counts differ.
    """
    period_count = validate_period_alignment(expense_report, income_report)
    totals = reduce(
        partial(
            _accumulate,
            expense_report=expense_report,
            income_report=income_report,
        ),
        range(period_count),
        _SeriesTotals(),
    )
    return SavingsRateSeries(
        points=list(totals.points),
        cumulative_rate=totals.rate_sum / period_count * 100,
        avg_daily_expense=totals.daily_expense / period_count,
        avg_daily_income=totals.daily_income / period_count,
    )


def compute_wealth_projections(
    avg_daily_expense: float,
    avg_daily_income: float,
    liabilities: float,
) -> WealthProjections:
    """Project FIRE, AAW and PAW figures from daily averages.

    Args:
        avg_daily_expense: Mean daily expense.
        avg_daily_income: Mean daily income.
        liabilities: Current liabilities total.

    Returns:
        WealthProjections: Non-negative AAW and PAW distances and the
        FIRE target.
    """
    yearly_benchmark = (
        avg_daily_income * DAYS_PER_YEAR * WEALTH_FACTOR_NUMERATOR
    ) / WEALTH_FACTOR_DENOMINATOR
    return WealthProjections(
        fire=avg_daily_expense * DAYS_PER_YEAR * FIRE_MULTIPLE,
        aaw=abs(yearly_benchmark / AAW_DIVISOR - liabilities),
        paw=abs(yearly_benchmark * PAW_MULTIPLIER - liabilities),
    )


def compute_expense_breakdown(
    listing: SinglePeriodListing,
    logger: Logger | None = None,
) -> ExpenseBreakdown:
    """Compute each account's share of the listing total.

    Args:
        listing: Single-period expenses listing.
        logger: Optional logger warned when the total is zero.

    Returns:
        ExpenseBreakdown: Shares in listing order, with the total.

    Raises:
        StructuralError: If the listing does not end with a total.
    """
    total = listing.totals()[0]
    shares = listing.expense_shares()
    if total.amount == 0 and logger is not None:
        logger.warning("Expense total is zero; breakdown omitted")
    return ExpenseBreakdown(
        shares=shares,
        total=total.amount,
        currency_code=total.commodity,
    )


__all__ = [
    "period_savings_rate",
    "compute_savings_rate_series",
    "compute_wealth_projections",
    "compute_expense_breakdown",
]
