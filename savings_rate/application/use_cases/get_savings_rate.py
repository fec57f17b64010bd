"""Use case to compute the savings-rate series and wealth projections."""

from savings_rate.application.ports.ledger_report import LedgerReportPort
from savings_rate.domain.constants import (
    DEFAULT_EXPENSE_PREFIX,
    DEFAULT_INCOME_PREFIX,
)
from savings_rate.domain.models.metrics import SavingsRateSummary
from savings_rate.domain.services.metrics import (
    compute_savings_rate_series,
    compute_wealth_projections,
)
from savings_rate.infrastructure.logging.logger import get_app_logger


class GetSavingsRateUseCase:
    """Compute monthly savings rates and projections from ledger reports."""

    def __init__(
        self,
        ledger_repository: LedgerReportPort,
        logger=None,
        expense_prefix: str = DEFAULT_EXPENSE_PREFIX,
        income_prefix: str = DEFAULT_INCOME_PREFIX,
        invert_income: bool = True,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger balance reports.
            logger: Optional logger compatible with logging.Logger-like API.
            expense_prefix: Root account of expenses.
            income_prefix: Root account of income.
            invert_income: Whether income is reported with reversed sign.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._expense_prefix = expense_prefix
        self._income_prefix = income_prefix
        self._invert_income = invert_income

    def execute(self) -> SavingsRateSummary:
        """Return the savings-rate series and wealth projections.

        Returns:
            SavingsRateSummary: Series, projections and liabilities.

        Raises:
            FetchError: If a ledger query fails.
            ParseError: If a report cannot be read.
            StructuralError: If expenses or income are missing.
        """
        liabilities = self._ledger_repository.fetch_liabilities()
        expense_report = self._ledger_repository.fetch_period_report(
            self._expense_prefix
        )
        income_report = self._ledger_repository.fetch_period_report(
            self._income_prefix,
            invert=self._invert_income,
        )

        series = compute_savings_rate_series(expense_report, income_report)
        self._logger.info(
            f"Savings rate computed over {series.period_count} periods: "
            f"cumulative={series.cumulative_rate:.2f}%"
        )
        projections = compute_wealth_projections(
            series.avg_daily_expense,
            series.avg_daily_income,
            liabilities,
        )
        self._logger.info(
            f"Projections computed: fire={projections.fire:.2f}, "
            f"aaw={projections.aaw:.2f}, paw={projections.paw:.2f}"
        )
        return SavingsRateSummary(
            series=series,
            projections=projections,
            liabilities=liabilities,
            currency_code=self._ledger_repository.commodity,
        )


__all__ = ["GetSavingsRateUseCase", "SavingsRateSummary"]
