"""Builders for hledger report payloads and domain report objects."""

import json

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
    DateSpan,
    PeriodReport,
    SinglePeriodListing,
    TotalBalance,
)

MONTHS = [
    ("2024-01-01", "2024-02-01"),
    ("2024-02-01", "2024-03-01"),
    ("2024-03-01", "2024-04-01"),
    ("2024-04-01", "2024-05-01"),
    ("2024-05-01", "2024-06-01"),
    ("2024-06-01", "2024-07-01"),
]


def amount_json(quantity: float, commodity: str = "USD", places: int = 2) -> dict:
    return {
        "acommodity": commodity,
        "aprice": None,
        "aquantity": {
            "decimalMantissa": round(quantity * 10**places),
            "decimalPlaces": places,
            "floatingPoint": quantity,
        },
        "astyle": {
            "ascommodityside": "R",
            "ascommodityspaced": True,
            "asdecimalpoint": ".",
            "asdigitgroups": [",", [3]],
            "asprecision": places,
        },
    }


def _slot(quantity: float) -> list[dict]:
    return [] if quantity == 0 else [amount_json(quantity)]


def period_report_payload(totals: list[float], account: str = "Expenses:Food") -> dict:
    return {
        "prDates": [list(span) for span in MONTHS[: len(totals)]],
        "prRows": [
            {
                "prrName": account,
                "prrAmounts": [_slot(value) for value in totals],
                "prrTotal": [amount_json(sum(totals))],
                "prrAverage": [amount_json(sum(totals) / max(len(totals), 1))],
            }
        ],
        "prTotals": {
            "prrName": [],
            "prrAmounts": [_slot(value) for value in totals],
            "prrTotal": [amount_json(sum(totals))],
            "prrAverage": [amount_json(sum(totals) / max(len(totals), 1))],
        },
    }


def period_report_json(totals: list[float], account: str = "Expenses:Food") -> str:
    return json.dumps(period_report_payload(totals, account))


def listing_json(
    accounts: list[tuple[str, float]],
    total: float,
    grouped: bool = True,
) -> str:
    rows = [
        [name, name, len(name.split(":")), [amount_json(amount)]]
        for name, amount in accounts
    ]
    totals = [amount_json(total)]
    if grouped:
        return json.dumps([rows, totals])
    return json.dumps(rows + totals)


def commodity(amount: float, code: str = "USD") -> Commodity:
    return Commodity(
        code=code,
        quantity=Quantity(
            decimal_mantissa=round(amount * 100),
            decimal_places=2,
            floating_point=amount,
        ),
        style=AmountStyle(
            side=Side.RIGHT,
            spaced=True,
            decimal_point=".",
            digit_groups=DigitGroups(",", (3,)),
            precision=2,
        ),
    )


def period_report(totals: list[float]) -> PeriodReport:
    return PeriodReport(
        dates=tuple(DateSpan(*span) for span in MONTHS[: len(totals)]),
        rows=(),
        totals=AggregateRow(
            names=(),
            amounts=tuple(
                () if value == 0 else (commodity(value),) for value in totals
            ),
        ),
    )


def listing(accounts: list[tuple[str, float]], total: float) -> SinglePeriodListing:
    entries = [
        AccountBalance(
            name=name,
            full_name=name,
            depth=len(name.split(":")),
            commodities=(commodity(amount),),
        )
        for name, amount in accounts
    ]
    return SinglePeriodListing(
        entries=(*entries, TotalBalance(commodity=commodity(total)))
    )
