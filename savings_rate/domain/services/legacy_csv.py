"""Parsers for legacy hledger CSV balance reports.

Older versions of the tool read ``hledger bal -O csv`` output, where amount
cells are display strings such as ``"1,234.56 USD"``::

    "account","2021-11","2021-12","total"
    "Expenses:Food","0","16.50 USD","16.50 USD"
    "total","0","16.50 USD","16.50 USD"
"""

import csv
import io
from logging import Logger

from savings_rate.domain.constants import DEFAULT_COMMODITY
from savings_rate.domain.errors import ParseError, StructuralError
from savings_rate.domain.models.commodity import (
    AmountStyle,
    Commodity,
    DigitGroups,
    Quantity,
    Side,
)
from savings_rate.domain.models.report import (
    AccountBalance,
    AggregateRow,
    BalanceEntry,
    DateSpan,
    PeriodicRow,
    PeriodReport,
    SinglePeriodListing,
    TotalBalance,
)
from savings_rate.domain.services.normalization import parse_amount_decimal

TOTAL_LABEL = "total"
AVERAGE_LABEL = "average"


def _read_rows(raw: str) -> list[list[str]]:
    try:
        rows = list(csv.reader(io.StringIO(raw)))
    except csv.Error as exc:
        raise ParseError(f"Report is not valid CSV: {exc}") from exc
    rows = [row for row in rows if any(cell.strip() for cell in row)]
    if not rows or rows[0][0].strip().lower() != "account":
        raise ParseError("CSV report must start with an 'account' header")
    return rows


def commodity_from_text(
    text: str,
    commodity: str = DEFAULT_COMMODITY,
) -> Commodity:
    """Build a Commodity from a display amount cell.

    Args:
        text: Amount cell, e.g. ``"1,234.56 USD"``.
        commodity: Commodity code of the report.

    Returns:
        Commodity: Amount with a style inferred from the cell.
    """
    value = parse_amount_decimal(text, commodity)
    places = max(-int(value.as_tuple().exponent), 0)
    cleaned = text.strip()
    style = AmountStyle(
        side=Side.LEFT if cleaned.startswith(commodity) else Side.RIGHT,
        spaced=" " in cleaned,
        decimal_point=".",
        digit_groups=DigitGroups(",", (3,)) if "," in cleaned else None,
        precision=places,
    )
    return Commodity(
        code=commodity,
        quantity=Quantity(
            decimal_mantissa=int(value.scaleb(places)),
            decimal_places=places,
            floating_point=float(value),
        ),
        style=style,
    )


def _cell_slot(text: str, commodity: str) -> tuple[Commodity, ...]:
    amount = commodity_from_text(text, commodity)
    if amount.quantity.floating_point == 0:
        return ()
    return (amount,)


def parse_period_report_csv(
    raw: str,
    commodity: str = DEFAULT_COMMODITY,
) -> PeriodReport:
    """Parse a multi-period hledger CSV report.

    Args:
        raw: Raw CSV text.
        commodity: Commodity code of the report.

    Returns:
        PeriodReport: Report with one span per period column.

    Raises:
        ParseError: If the header or a cell is malformed.
        StructuralError: If the report has no total row.
    """
    header, *body = _read_rows(raw)
    labels = [label.strip() for label in header[1:]]
    summary = {
        label.lower(): index + 1
        for index, label in enumerate(labels)
        if label.lower() in (TOTAL_LABEL, AVERAGE_LABEL)
    }
    period_columns = [
        (index + 1, label)
        for index, label in enumerate(labels)
        if label.lower() not in summary
    ]

    rows: list[PeriodicRow] = []
    totals: AggregateRow | None = None
    for row in body:
        if len(row) != len(header):
            raise ParseError(
                f"Row {row[0]!r} has {len(row)} cells, expected {len(header)}"
            )
        amounts = tuple(
            _cell_slot(row[column], commodity)
            for column, _ in period_columns
        )
        total = (
            _cell_slot(row[summary[TOTAL_LABEL]], commodity)
            if TOTAL_LABEL in summary
            else ()
        )
        average = (
            _cell_slot(row[summary[AVERAGE_LABEL]], commodity)
            if AVERAGE_LABEL in summary
            else ()
        )
        name = row[0].strip()
        if name.lower() == TOTAL_LABEL:
            totals = AggregateRow(
                names=(),
                amounts=amounts,
                total=total,
                average=average,
            )
            continue
        rows.append(
            PeriodicRow(
                name=name,
                amounts=amounts,
                total=total,
                average=average,
                depth=len(name.split(":")),
            )
        )
    if totals is None:
        raise StructuralError("CSV report has no total row")
    return PeriodReport(
        dates=tuple(DateSpan(label, label) for _, label in period_columns),
        rows=tuple(rows),
        totals=AggregateRow(
            names=tuple(row.name for row in rows),
            amounts=totals.amounts,
            total=totals.total,
            average=totals.average,
        ),
        default_commodity=commodity,
    )


def parse_balance_listing_csv(
    raw: str,
    commodity: str = DEFAULT_COMMODITY,
    logger: Logger | None = None,
) -> SinglePeriodListing:
    """Parse a single-period hledger CSV balance listing.

    Rows whose amount cannot be parsed are dropped.

    Args:
        raw: Raw CSV text with ``account`` and ``balance`` columns.
        commodity: Commodity code of the report.
        logger: Optional logger notified of dropped rows.

    Returns:
        SinglePeriodListing: Account entries followed by the total entry.
    """
    _, *body = _read_rows(raw)
    entries: list[BalanceEntry] = []
    for row in body:
        if len(row) < 2:
            if logger is not None:
                logger.debug(f"Dropping short listing row {row!r}")
            continue
        name = row[0].strip()
        try:
            amount = commodity_from_text(row[-1], commodity)
        except ParseError as exc:
            if logger is not None:
                logger.debug(f"Dropping listing row {name!r}: {exc}")
            continue
        if name.lower() == TOTAL_LABEL:
            entries.append(TotalBalance(commodity=amount))
        else:
            entries.append(
                AccountBalance(
                    name=name,
                    full_name=name,
                    depth=len(name.split(":")),
                    commodities=(amount,),
                )
            )
    return SinglePeriodListing(entries=tuple(entries))


__all__ = [
    "commodity_from_text",
    "parse_period_report_csv",
    "parse_balance_listing_csv",
]
