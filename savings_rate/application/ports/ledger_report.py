"""Application port for ledger report access."""

from typing import Protocol

from savings_rate.domain.models.report import PeriodReport, SinglePeriodListing


class LedgerReportPort(Protocol):
    """Port exposing the balance reports needed for savings metrics.

    Implementations raise ``FetchError`` when the external query fails,
    ``ParseError`` when its output is unreadable and ``StructuralError``
    when the parsed report violates an invariant.
    """

    def fetch_period_report(
        self,
        account_prefix: str,
        invert: bool = False,
    ) -> PeriodReport:
        """Return the monthly report of accounts under ``account_prefix``.

        Args:
            account_prefix: Root account, e.g. ``Income``.
            invert: Whether amounts are reported with reversed sign.
        """

    def fetch_expense_listing(self) -> SinglePeriodListing:
        """Return the current month's expenses per account."""

    def fetch_liabilities(self) -> float:
        """Return the current liabilities total."""

    @property
    def commodity(self) -> str:
        """Return the commodity every report is converted to."""


__all__ = ["LedgerReportPort"]
