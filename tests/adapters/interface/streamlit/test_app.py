"""Tests for the Streamlit dashboard."""

from unittest.mock import MagicMock

import pytest

from savings_rate.adapters.interface.streamlit import app
from savings_rate.domain.errors import StructuralError
from savings_rate.domain.models.metrics import (
    ExpenseBreakdown,
    RatePoint,
    SavingsRateSeries,
    SavingsRateSummary,
    WealthProjections,
)
from savings_rate.domain.models.report import ExpenseShare


def _fake_streamlit(monkeypatch) -> MagicMock:
    fake_st = MagicMock()
    fake_st.columns.side_effect = lambda count: [
        MagicMock() for _ in range(count)
    ]
    monkeypatch.setattr(app, "st", fake_st)
    return fake_st


def _summary() -> SavingsRateSummary:
    return SavingsRateSummary(
        series=SavingsRateSeries(
            points=[RatePoint(0.0, 60.0), RatePoint(1.0, 70.0)],
            cumulative_rate=65.0,
            avg_daily_expense=2.0,
            avg_daily_income=6.0,
        ),
        projections=WealthProjections(fire=18250.0, aaw=100.0, paw=200.0),
        liabilities=0.0,
        currency_code="USD",
    )


@pytest.mark.parametrize(
    ("rate", "color"),
    [(-1.0, "red"), (30.0, "orange"), (65.0, "green")],
)
def test_rate_markdown_uses_tier_color(rate: float, color: str) -> None:
    """The headline rate should be colored by tier."""
    assert app._rate_markdown(rate).startswith(f"### :{color}[")


def test_main_renders_charts_and_projections(monkeypatch) -> None:
    """The dashboard should draw both charts and three metrics."""
    fake_st = _fake_streamlit(monkeypatch)
    monkeypatch.setattr(
        app,
        "_load_savings_rate_summary",
        lambda schema_version=1: _summary(),
    )
    monkeypatch.setattr(
        app,
        "_load_expense_breakdown",
        lambda schema_version=1: ExpenseBreakdown(
            shares=[ExpenseShare("Expenses:Food", 1.0)],
            total=60.0,
            currency_code="USD",
        ),
    )

    app.main()

    fake_st.markdown.assert_called_once_with("### :green[65.00%]")
    assert fake_st.altair_chart.call_count == 2
    fake_st.error.assert_not_called()
    subheaders = [entry.args[0] for entry in fake_st.subheader.call_args_list]
    assert subheaders == [
        "Savings rate: last 2 months",
        "Expenses this month ($60.00)",
    ]


def test_main_shows_info_without_expenses(monkeypatch) -> None:
    """An empty breakdown should show a notice instead of a pie."""
    fake_st = _fake_streamlit(monkeypatch)
    monkeypatch.setattr(
        app,
        "_load_savings_rate_summary",
        lambda schema_version=1: _summary(),
    )
    monkeypatch.setattr(
        app,
        "_load_expense_breakdown",
        lambda schema_version=1: ExpenseBreakdown(
            shares=[],
            total=0.0,
            currency_code="USD",
        ),
    )

    app.main()

    fake_st.info.assert_called_once()
    assert fake_st.altair_chart.call_count == 1


def test_main_reports_errors(monkeypatch) -> None:
    """Domain errors should be shown instead of the charts."""
    fake_st = _fake_streamlit(monkeypatch)

    def _fail(schema_version=1):
        raise StructuralError("No income recorded.")

    monkeypatch.setattr(app, "_load_savings_rate_summary", _fail)

    app.main()

    fake_st.error.assert_called_once_with("No income recorded.")
    fake_st.altair_chart.assert_not_called()
