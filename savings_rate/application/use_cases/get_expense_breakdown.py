"""Use case to compute the current month's expense breakdown."""

from savings_rate.application.ports.ledger_report import LedgerReportPort
from savings_rate.domain.models.metrics import ExpenseBreakdown
from savings_rate.domain.services.metrics import compute_expense_breakdown
from savings_rate.infrastructure.logging.logger import get_app_logger


class GetExpenseBreakdownUseCase:
    """Compute each expense account's share of this month's total."""

    def __init__(
        self,
        ledger_repository: LedgerReportPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger balance reports.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self) -> ExpenseBreakdown:
        """Return the expense shares in listing order.

        Raises:
            FetchError: If the ledger query fails.
            StructuralError: If the listing does not end with a total.
        """
        listing = self._ledger_repository.fetch_expense_listing()
        breakdown = compute_expense_breakdown(listing, logger=self._logger)
        self._logger.info(
            f"Expense breakdown computed: {len(breakdown.shares)} accounts, "
            f"total={breakdown.total} {breakdown.currency_code}"
        )
        return breakdown


__all__ = ["GetExpenseBreakdownUseCase", "ExpenseBreakdown"]
