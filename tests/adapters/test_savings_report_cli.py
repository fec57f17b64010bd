"""Tests for the savings_report_cli adapter."""

from unittest.mock import MagicMock

import pytest

from savings_rate.adapters import savings_report_cli
from savings_rate.domain.errors import FetchError
from savings_rate.domain.models.metrics import (
    ExpenseBreakdown,
    RatePoint,
    SavingsRateSeries,
    SavingsRateSummary,
    WealthProjections,
)
from savings_rate.domain.models.report import ExpenseShare


def _summary() -> SavingsRateSummary:
    return SavingsRateSummary(
        series=SavingsRateSeries(
            points=[RatePoint(0.0, 50.0), RatePoint(1.0, 0.0)],
            cumulative_rate=25.0,
            avg_daily_expense=5.0,
            avg_daily_income=6.0,
        ),
        projections=WealthProjections(fire=45625.0, aaw=1200.5, paw=9000.0),
        liabilities=-250.0,
        currency_code="USD",
    )


def _breakdown() -> ExpenseBreakdown:
    return ExpenseBreakdown(
        shares=[
            ExpenseShare("Expenses:Rent", 0.75),
            ExpenseShare("Expenses:Food", 0.25),
        ],
        total=400.0,
        currency_code="USD",
    )


def _patch_wiring(monkeypatch, summary_use_case, breakdown_use_case):
    fake_logger = MagicMock()
    settings = object()
    repository = object()
    monkeypatch.setattr(savings_report_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(savings_report_cli, "get_usage_logger", MagicMock)
    monkeypatch.setattr(savings_report_cli, "build_settings", lambda: settings)
    monkeypatch.setattr(
        savings_report_cli,
        "build_ledger_repository",
        lambda value: repository,
    )

    def _fake_savings_rate(value, ledger_repository):
        assert value is settings
        assert ledger_repository is repository
        return summary_use_case

    def _fake_breakdown(value, ledger_repository):
        assert ledger_repository is repository
        return breakdown_use_case

    monkeypatch.setattr(
        savings_report_cli,
        "build_savings_rate_use_case",
        _fake_savings_rate,
    )
    monkeypatch.setattr(
        savings_report_cli,
        "build_expense_breakdown_use_case",
        _fake_breakdown,
    )
    return fake_logger


def test_main_prints_report(monkeypatch, capsys) -> None:
    """The CLI should print the series, breakdown and projections."""
    summary_use_case = MagicMock()
    summary_use_case.execute.return_value = _summary()
    breakdown_use_case = MagicMock()
    breakdown_use_case.execute.return_value = _breakdown()
    _patch_wiring(monkeypatch, summary_use_case, breakdown_use_case)

    savings_report_cli.main()

    output = capsys.readouterr().out
    assert "savings rate: last 2 months" in output
    assert "Average Savings Rate: 25.00%" in output
    assert "Expenses this month: $400.00" in output
    assert "Expenses:Rent 75.0%" in output
    assert "Financial Independence, Retire Early: $45,625.00" in output
    assert "Average-Accumulator of Wealth: $1,200.50" in output
    assert "Prodigious-Accumulator of Wealth: $9,000.00" in output


def test_main_exits_with_error_on_failure(monkeypatch, capsys) -> None:
    """Domain errors should be reported on stderr with exit status 1."""
    summary_use_case = MagicMock()
    summary_use_case.execute.side_effect = FetchError(
        "hledger executable not found: hledger"
    )
    breakdown_use_case = MagicMock()
    fake_logger = _patch_wiring(
        monkeypatch,
        summary_use_case,
        breakdown_use_case,
    )

    with pytest.raises(SystemExit) as exc_info:
        savings_report_cli.main()

    assert exc_info.value.code == 1
    assert "Error: hledger executable not found" in capsys.readouterr().err
    fake_logger.error.assert_called_once()
    breakdown_use_case.execute.assert_not_called()
