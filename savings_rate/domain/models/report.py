"""Domain models for hledger balance reports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Union

from savings_rate.domain.constants import DEFAULT_COMMODITY
from savings_rate.domain.errors import StructuralError
from savings_rate.domain.models.commodity import Commodity


@dataclass(frozen=True)
class DateSpan:
    """Reporting period bounds as opaque date strings."""

    start: str
    end: str

    @classmethod
    def empty(cls) -> DateSpan:
        """Return the span used for single-period values."""
        return cls(start="", end="")


@dataclass(frozen=True)
class NormalizedValue:
    """Flat amount consumed by the metrics engine."""

    amount: float
    commodity: str
    span: DateSpan


class ExpenseShare(NamedTuple):
    """An account label with its fraction of the listing total."""

    label: str
    fraction: float


@dataclass(frozen=True)
class PeriodicRow:
    """Balance of one account across every period of a report.

    Attributes:
        name: Full account name.
        amounts: One commodity tuple per period (empty means zero).
        total: Row total across periods.
        average: Row average across periods.
        depth: Account nesting depth.
    """

    name: str
    amounts: tuple[tuple[Commodity, ...], ...]
    total: tuple[Commodity, ...] = ()
    average: tuple[Commodity, ...] = ()
    depth: int = 0


@dataclass(frozen=True)
class AggregateRow:
    """Report-wide totals row, labeled by the accounts it aggregates."""

    names: tuple[str, ...]
    amounts: tuple[tuple[Commodity, ...], ...]
    total: tuple[Commodity, ...] = ()
    average: tuple[Commodity, ...] = ()


@dataclass(frozen=True)
class PeriodReport:
    """Multi-period balance report.

    Attributes:
        dates: Chronological reporting spans.
        rows: One row per tracked account.
        totals: Aggregate row with one amount slot per span.
        default_commodity: Code used for zero values of empty slots.
    """

    dates: tuple[DateSpan, ...]
    rows: tuple[PeriodicRow, ...]
    totals: AggregateRow
    default_commodity: str = DEFAULT_COMMODITY

    def __post_init__(self) -> None:
        if len(self.dates) != len(self.totals.amounts):
            raise StructuralError(
                f"Report has {len(self.dates)} date spans but "
                f"{len(self.totals.amounts)} total amount slots"
            )

    def period_count(self) -> int:
        """Return the number of reporting periods."""
        return len(self.dates)

    def values_at_period(self, index: int) -> list[NormalizedValue]:
        """Return every aggregate value recorded for a period.

        Args:
            index: Zero-based period index.

        Returns:
            list[NormalizedValue]: One value per commodity, or a single
            zero value when the slot is empty.

        Raises:
            IndexError: If ``index`` is outside ``[0, period_count)``.
        """
        if not 0 <= index < self.period_count():
            raise IndexError(
                f"Period index {index} out of range for "
                f"{self.period_count()} periods"
            )
        span = self.dates[index]
        slot = self.totals.amounts[index]
        if not slot:
            return [
                NormalizedValue(
                    amount=0.0,
                    commodity=self.default_commodity,
                    span=span,
                )
            ]
        return [
            NormalizedValue(
                amount=commodity.amount,
                commodity=commodity.code,
                span=span,
            )
            for commodity in slot
        ]

    def value_at_period(self, index: int) -> NormalizedValue:
        """Return the aggregate value for a period."""
        return self.values_at_period(index)[0]


@dataclass(frozen=True)
class AccountBalance:
    """Account variant of a single-period listing entry."""

    name: str
    full_name: str
    depth: int
    commodities: tuple[Commodity, ...]

    @property
    def amount(self) -> float:
        """Return the first commodity amount, ``0.0`` when there is none."""
        if not self.commodities:
            return 0.0
        return self.commodities[0].amount


@dataclass(frozen=True)
class TotalBalance:
    """Total variant of a single-period listing entry."""

    commodity: Commodity


BalanceEntry = Union[AccountBalance, TotalBalance]


@dataclass(frozen=True)
class SinglePeriodListing:
    """Balance listing for one period, accounts first and totals last."""

    entries: tuple[BalanceEntry, ...]

    def accounts(self) -> list[AccountBalance]:
        """Return the account entries in listing order."""
        return [
            entry for entry in self.entries
            if isinstance(entry, AccountBalance)
        ]

    def totals(self) -> list[NormalizedValue]:
        """Return values from the trailing run of total entries.

        Raises:
            StructuralError: If the listing is empty or does not end with a
                total entry.
        """
        if not self.entries or not isinstance(self.entries[-1], TotalBalance):
            raise StructuralError("Last row must be a total")
        trailing: list[TotalBalance] = []
        for entry in reversed(self.entries):
            if not isinstance(entry, TotalBalance):
                break
            trailing.append(entry)
        trailing.reverse()
        return [
            NormalizedValue(
                amount=entry.commodity.amount,
                commodity=entry.commodity.code,
                span=DateSpan.empty(),
            )
            for entry in trailing
        ]

    def expense_shares(self) -> list[ExpenseShare]:
        """Return each account's fraction of the listing total.

        A zero total yields no shares.

        Raises:
            StructuralError: If there is no total to divide by.
        """
        totals = self.totals()
        if not totals:
            raise StructuralError(
                "No expenses this month to calculate a total from"
            )
        total_amount = totals[0].amount
        if total_amount == 0:
            return []
        return [
            ExpenseShare(
                label=account.full_name,
                fraction=account.amount / total_amount,
            )
            for account in self.accounts()
        ]


__all__ = [
    "DateSpan",
    "NormalizedValue",
    "ExpenseShare",
    "PeriodicRow",
    "AggregateRow",
    "PeriodReport",
    "AccountBalance",
    "TotalBalance",
    "BalanceEntry",
    "SinglePeriodListing",
]
