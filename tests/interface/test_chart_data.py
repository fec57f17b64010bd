"""Tests for chart presentation helpers."""

from savings_rate.adapters.interface.chart_data import (
    PIE_FILLS,
    build_pie_chart_data,
    build_pie_slices,
    build_rate_chart_data,
    format_currency,
    format_rate,
    rate_color,
)
from savings_rate.domain.models.metrics import RatePoint, SavingsRateSeries
from savings_rate.domain.models.report import ExpenseShare


def test_build_pie_slices_cycles_fills_and_colors() -> None:
    """Fills and colors should repeat every five slices."""
    shares = [ExpenseShare(f"Expenses:{index}", 1 / 7) for index in range(7)]

    slices = build_pie_slices(shares)

    assert [pie_slice.fill for pie_slice in slices[:5]] == list(PIE_FILLS)
    assert slices[5].fill == PIE_FILLS[0]
    assert slices[5].color == "blue"
    assert slices[6].color == "red"
    assert slices[4].color == "purple"


def test_build_pie_chart_data_keeps_order() -> None:
    """Chart records should keep the listing order."""
    slices = build_pie_slices(
        [ExpenseShare("Expenses:Rent", 0.8), ExpenseShare("Expenses:Food", 0.2)]
    )

    records = build_pie_chart_data(slices)

    assert [record["label"] for record in records] == [
        "Expenses:Rent",
        "Expenses:Food",
    ]
    assert records[0]["order"] == 0
    assert records[0]["share_label"] == "80.0%"


def test_build_rate_chart_data_labels_points() -> None:
    """Rate records should carry period, rate and label."""
    series = SavingsRateSeries(
        points=[RatePoint(0.0, 12.345)],
        cumulative_rate=12.345,
        avg_daily_expense=1.0,
        avg_daily_income=2.0,
    )

    assert build_rate_chart_data(series) == [
        {"period": 0.0, "rate": 12.345, "rate_label": "12.35%"}
    ]


def test_rate_color_follows_tiers() -> None:
    """Rates are red at or below zero, yellow to fifty, green above."""
    assert rate_color(-3.0) == "red"
    assert rate_color(0.0) == "red"
    assert rate_color(50.0) == "yellow"
    assert rate_color(72.0) == "green"


def test_format_helpers() -> None:
    """Rates and amounts should use two decimals."""
    assert format_rate(25.0) == "25.00%"
    assert format_currency(1234.5, "USD") == "$1,234.50"
    assert format_currency(1234.5, "EUR") == "1,234.50 EUR"
