"""Parsers for hledger JSON balance reports.

Two encodings are supported:

* the multi-period report emitted by ``hledger bal -M -O json``, parsed into
  a ``PeriodReport``;
* the single-period listing emitted by ``hledger bal -O json``, parsed into a
  ``SinglePeriodListing``.

Payloads are validated with the pydantic models of ``hledger_schema`` and
then converted into the frozen domain records.
"""

from __future__ import annotations

import json
from logging import Logger
from typing import Any

from pydantic import ValidationError

from savings_rate.domain.constants import DEFAULT_COMMODITY
from savings_rate.domain.errors import ParseError
from savings_rate.domain.models.commodity import (
    AmountStyle,
    Commodity,
    DigitGroups,
    PriceListing,
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
from savings_rate.domain.services.hledger_schema import (
    ACCOUNT_ROW_ADAPTER,
    HledgerAmount,
    HledgerPeriodReport,
    HledgerPeriodRow,
    HledgerStyle,
)


def _to_style(style: HledgerStyle) -> AmountStyle:
    digit_groups = None
    if style.digit_groups is not None:
        separator, sizes = style.digit_groups
        digit_groups = DigitGroups(separator=separator, sizes=tuple(sizes))
    return AmountStyle(
        side=Side(style.side),
        spaced=style.spaced,
        decimal_point=style.decimal_point or ".",
        digit_groups=digit_groups,
        precision=style.precision,
    )


def _to_commodity(amount: HledgerAmount) -> Commodity:
    price = None
    if amount.price is not None:
        price = PriceListing(
            tag=amount.price.tag,
            contents=_to_commodity(amount.price.contents),
        )
    return Commodity(
        code=amount.commodity,
        quantity=Quantity(
            decimal_mantissa=amount.quantity.decimal_mantissa,
            decimal_places=amount.quantity.decimal_places,
            floating_point=float(amount.quantity.floating_point),
        ),
        style=_to_style(amount.style),
        price=price,
    )


def _to_commodities(amounts: list[HledgerAmount]) -> tuple[Commodity, ...]:
    return tuple(_to_commodity(amount) for amount in amounts)


def _to_slots(
    slots: list[list[HledgerAmount]],
) -> tuple[tuple[Commodity, ...], ...]:
    return tuple(_to_commodities(slot) for slot in slots)


def _to_row(row: HledgerPeriodRow) -> PeriodicRow:
    return PeriodicRow(
        name=row.name,
        amounts=_to_slots(row.amounts),
        total=_to_commodities(row.total),
        average=_to_commodities(row.average),
        depth=len(row.name.split(":")),
    )


def parse_commodity(raw: Any) -> Commodity:
    """Build a Commodity from a decoded hledger amount object.

    Args:
        raw: Decoded JSON object.

    Returns:
        Commodity: Parsed amount.

    Raises:
        ParseError: If a field is missing or has the wrong type.
    """
    try:
        amount = HledgerAmount.model_validate(raw)
    except ValidationError as exc:
        raise ParseError(f"Invalid hledger amount: {exc}") from exc
    return _to_commodity(amount)


def parse_period_report(
    raw: str,
    default_commodity: str = DEFAULT_COMMODITY,
) -> PeriodReport:
    """Parse a multi-period hledger JSON report.

    Args:
        raw: Raw JSON text.
        default_commodity: Commodity code for zero values of empty slots.

    Returns:
        PeriodReport: Parsed report.

    Raises:
        ParseError: If the text is not a period report.
        StructuralError: If date spans and total slots are misaligned.
    """
    try:
        report = HledgerPeriodReport.model_validate_json(raw)
    except ValidationError as exc:
        raise ParseError(f"Invalid hledger period report: {exc}") from exc
    return PeriodReport(
        dates=tuple(DateSpan(start=start, end=end) for start, end in report.dates),
        rows=tuple(_to_row(row) for row in report.rows),
        totals=AggregateRow(
            names=tuple(report.totals.names),
            amounts=_to_slots(report.totals.amounts),
            total=_to_commodities(report.totals.total),
            average=_to_commodities(report.totals.average),
        ),
        default_commodity=default_commodity,
    )


def _try_account(raw: Any) -> AccountBalance | None:
    try:
        name, full_name, depth, amounts = ACCOUNT_ROW_ADAPTER.validate_python(raw)
    except ValidationError:
        return None
    return AccountBalance(
        name=name,
        full_name=full_name,
        depth=depth,
        commodities=_to_commodities(amounts),
    )


def _try_total(raw: Any) -> TotalBalance | None:
    try:
        amount = HledgerAmount.model_validate(raw)
    except ValidationError:
        return None
    return TotalBalance(commodity=_to_commodity(amount))


def parse_balance_entry(raw: Any) -> BalanceEntry | None:
    """Decide whether an element is an account row or a total.

    Args:
        raw: Decoded listing element.

    Returns:
        BalanceEntry | None: The matching variant, or None when neither
        shape matches.

    Raises:
        ParseError: If the element matches both shapes.
    """
    account = _try_account(raw)
    total = _try_total(raw)
    if account is not None and total is not None:
        raise ParseError("Listing element matches both account and total")
    return account if account is not None else total


def _is_group(element: Any) -> bool:
    """Detect one group of hledger's ``[[accounts...], [totals...]]`` form."""
    return isinstance(element, list) and all(
        isinstance(item, (list, dict)) for item in element
    )


def _flatten(elements: list) -> list:
    candidates: list = []
    for element in elements:
        if _is_group(element):
            candidates.extend(element)
        else:
            candidates.append(element)
    return candidates


def parse_balance_listing(
    raw: str,
    logger: Logger | None = None,
) -> SinglePeriodListing:
    """Parse a single-period hledger JSON balance listing.

    Both hledger's grouped ``[[accounts], [totals]]`` form and a flat array
    are accepted. Elements matching neither the account nor the total shape
    are dropped.

    Args:
        raw: Raw JSON text.
        logger: Optional logger notified of dropped elements.

    Returns:
        SinglePeriodListing: Parsed listing.

    Raises:
        ParseError: If the text is not a JSON array or an element is
            ambiguous.
    """
    try:
        data = json.loads(raw)
    except (TypeError, json.JSONDecodeError) as exc:
        raise ParseError(f"Listing is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise ParseError("Listing must be a JSON array")

    entries: list[BalanceEntry] = []
    for position, element in enumerate(_flatten(data)):
        entry = parse_balance_entry(element)
        if entry is None:
            if logger is not None:
                logger.debug(f"Dropping unrecognized listing row {position}")
            continue
        entries.append(entry)
    return SinglePeriodListing(entries=tuple(entries))


__all__ = [
    "parse_commodity",
    "parse_period_report",
    "parse_balance_entry",
    "parse_balance_listing",
]
