"""Tests for report validation helpers."""

from unittest.mock import MagicMock

import pytest

from savings_rate.domain.errors import StructuralError
from savings_rate.domain.models.report import (
    AggregateRow,
    DateSpan,
    PeriodReport,
)
from savings_rate.domain.services.validation import (
    validate_period_alignment,
    warn_on_mixed_commodities,
)
from tests.helpers.report_factories import commodity, period_report


def test_validate_period_alignment_returns_shared_count() -> None:
    """Aligned reports return their period count."""
    assert validate_period_alignment(
        period_report([1.0, 2.0, 3.0]),
        period_report([4.0, 5.0, 6.0]),
    ) == 3


def test_validate_period_alignment_requires_income() -> None:
    """An empty income report is rejected."""
    with pytest.raises(StructuralError, match="No income recorded"):
        validate_period_alignment(period_report([1.0]), period_report([]))


def test_warn_on_mixed_commodities_flags_slot() -> None:
    """Slots holding several commodities are reported."""
    report = PeriodReport(
        dates=(DateSpan("2024-01-01", "2024-02-01"),),
        rows=(),
        totals=AggregateRow(
            names=(),
            amounts=((commodity(5.0), commodity(3.0, "EUR")),),
        ),
    )
    logger = MagicMock()

    warn_on_mixed_commodities(report, "Expenses", logger)

    logger.warning.assert_called_once()
    assert "EUR" in logger.warning.call_args.args[0]


def test_warn_on_mixed_commodities_is_quiet_for_single_commodity() -> None:
    """Single-commodity reports produce no warnings."""
    logger = MagicMock()

    warn_on_mixed_commodities(period_report([1.0, 2.0]), "Income", logger)

    logger.warning.assert_not_called()
