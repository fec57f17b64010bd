"""Domain validation helpers."""

from logging import Logger

from savings_rate.domain.errors import StructuralError
from savings_rate.domain.models.report import PeriodReport


def validate_period_alignment(
    expense_report: PeriodReport,
    income_report: PeriodReport,
) -> int:
    """Check that both reports cover the same non-empty set of periods.

    Args:
        expense_report: Multi-period expenses report.
        income_report: Multi-period income report.

    Returns:
        int: Shared period count.

    Raises:
        StructuralError: If either report is empty or the counts differ.
    """
    if expense_report.period_count() == 0:
        raise StructuralError(
            "No expenses recorded. Calculating savings rate relies on "
            "comparisons between income and expenses."
        )
    if income_report.period_count() == 0:
        raise StructuralError(
            "No income recorded. Calculating savings rate relies on "
            "comparisons between income and expenses."
        )
    if expense_report.period_count() != income_report.period_count():
        raise StructuralError(
            f"Expense report has {expense_report.period_count()} periods "
            f"but income report has {income_report.period_count()}"
        )
    return expense_report.period_count()


def warn_on_mixed_commodities(
    report: PeriodReport,
    label: str,
    logger: Logger,
) -> None:
    """Warn when a period slot carries more than one commodity.

    Args:
        report: Report to inspect.
        label: Report name used in the message.
        logger: Logger used for warnings.
    """
    for index, slot in enumerate(report.totals.amounts):
        codes = sorted({commodity.code for commodity in slot})
        if len(codes) > 1:
            logger.warning(
                f"{label} period {index} mixes commodities {codes}; "
                f"only {slot[0].code} is used"
            )


__all__ = ["validate_period_alignment", "warn_on_mixed_commodities"]
