"""CLI adapter printing the savings-rate report to the terminal.

This module wires the savings-rate and expense breakdown use cases to the
hledger repository and renders their results with rich markup.
"""

from rich.console import Console
from rich.markup import escape

from savings_rate.adapters.interface.chart_data import (
    build_pie_slices,
    format_currency,
    format_rate,
    rate_color,
)
from savings_rate.domain.errors import SavingsRateError
from savings_rate.domain.models.metrics import (
    ExpenseBreakdown,
    SavingsRateSummary,
)
from savings_rate.infrastructure.container import (
    build_expense_breakdown_use_case,
    build_ledger_repository,
    build_savings_rate_use_case,
    build_settings,
)
from savings_rate.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)

BAR_WIDTH = 40


def _render_summary(console: Console, summary: SavingsRateSummary) -> None:
    series = summary.series
    console.print(f"savings rate: last {series.period_count} months")
    for point in series.points:
        clamped = min(max(point.rate_percent, 0.0), 100.0)
        bar = "█" * round(clamped / 100 * BAR_WIDTH)
        console.print(
            f"{int(point.period_index):>3} │{bar:<{BAR_WIDTH}} "
            f"{format_rate(point.rate_percent)}"
        )
    color = rate_color(series.cumulative_rate)
    console.print(
        "Average Savings Rate: "
        f"[{color}]{format_rate(series.cumulative_rate)}[/{color}]"
    )


def _render_breakdown(console: Console, breakdown: ExpenseBreakdown) -> None:
    console.print(
        "\nExpenses this month: "
        f"{format_currency(breakdown.total, breakdown.currency_code)}"
    )
    for pie_slice in build_pie_slices(breakdown.shares):
        console.print(
            f"[{pie_slice.color}]{pie_slice.fill * 3}[/{pie_slice.color}] "
            f"{escape(pie_slice.label)} {pie_slice.fraction * 100:.1f}%"
        )


def _render_projections(console: Console, summary: SavingsRateSummary) -> None:
    projections = summary.projections
    currency = summary.currency_code
    console.print(
        "\nFinancial Independence, Retire Early: "
        f"{format_currency(projections.fire, currency)}"
    )
    console.print(
        "Average-Accumulator of Wealth: "
        f"{format_currency(projections.aaw, currency)}"
    )
    console.print(
        "Prodigious-Accumulator of Wealth: "
        f"{format_currency(projections.paw, currency)}"
    )


def main() -> None:
    """Run the savings-rate report and print it."""
    logger = get_app_logger()
    get_usage_logger().info("savings_report_cli invoked")
    console = Console(highlight=False)

    try:
        settings = build_settings()
        repository = build_ledger_repository(settings)
        summary = build_savings_rate_use_case(
            settings,
            ledger_repository=repository,
        ).execute()
        breakdown = build_expense_breakdown_use_case(
            settings,
            ledger_repository=repository,
        ).execute()
    except SavingsRateError as exc:
        logger.error(f"Savings report failed: {exc}")
        Console(stderr=True, highlight=False).print(
            f"[red]Error:[/red] {escape(str(exc))}"
        )
        raise SystemExit(1) from exc

    _render_summary(console, summary)
    _render_breakdown(console, breakdown)
    _render_projections(console, summary)


if __name__ == "__main__":  # pragma: no cover
    main()
