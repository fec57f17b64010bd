"""Streamlit dashboard entry point."""

from collections.abc import Sequence

import altair as alt
import streamlit as st

from savings_rate.adapters.interface.chart_data import (
    PIE_HEX_COLORS,
    PieSlice,
    build_pie_chart_data,
    build_pie_slices,
    build_rate_chart_data,
    format_currency,
    format_rate,
)
from savings_rate.application.use_cases.get_expense_breakdown import (
    ExpenseBreakdown,
)
from savings_rate.application.use_cases.get_savings_rate import (
    SavingsRateSummary,
)
from savings_rate.domain.errors import SavingsRateError
from savings_rate.domain.models.metrics import SavingsRateSeries
from savings_rate.domain.policies.rate_tiers import RateTier, classify_rate
from savings_rate.infrastructure.container import (
    build_expense_breakdown_use_case,
    build_savings_rate_use_case,
)

TIER_MARKDOWN_COLORS = {
    RateTier.ALERT: "red",
    RateTier.CAUTION: "orange",
    RateTier.AFFIRMATIVE: "green",
}


def _fetch_savings_rate_summary() -> SavingsRateSummary:
    """Fetch the savings-rate summary from hledger."""
    use_case = build_savings_rate_use_case()
    return use_case.execute()


@st.cache_data(show_spinner=False)
def _load_savings_rate_summary(schema_version: int = 1) -> SavingsRateSummary:
    """Cached wrapper around _fetch_savings_rate_summary."""
    _ = schema_version
    return _fetch_savings_rate_summary()


def _fetch_expense_breakdown() -> ExpenseBreakdown:
    """Fetch this month's expense breakdown from hledger."""
    use_case = build_expense_breakdown_use_case()
    return use_case.execute()


@st.cache_data(show_spinner=False)
def _load_expense_breakdown(schema_version: int = 1) -> ExpenseBreakdown:
    """Cached wrapper around _fetch_expense_breakdown."""
    _ = schema_version
    return _fetch_expense_breakdown()


def _rate_markdown(rate_percent: float) -> str:
    """Return the cumulative rate as colored Streamlit markdown."""
    color = TIER_MARKDOWN_COLORS[classify_rate(rate_percent)]
    return f"### :{color}[{format_rate(rate_percent)}]"


def _render_rate_chart(series: SavingsRateSeries, chart_height: int = 320) -> None:
    """Render the savings-rate series as a step line."""
    st.subheader(f"Savings rate: last {series.period_count} months")
    chart = alt.Chart(alt.Data(values=build_rate_chart_data(series))).mark_line(
        interpolate="step-after",
        point=True,
        strokeWidth=2,
    ).encode(
        x=alt.X("period:Q", title="Month", axis=alt.Axis(tickMinStep=1)),
        y=alt.Y("rate:Q", title="Savings rate (%)"),
        tooltip=[
            alt.Tooltip("period:Q"),
            alt.Tooltip("rate_label:N"),
        ],
    ).properties(
        height=chart_height,
    )
    st.altair_chart(chart, width="stretch")


def _render_expense_pie(
    breakdown: ExpenseBreakdown,
    chart_size: int = 320,
) -> None:
    """Render this month's expense shares as a pie chart.

    Args:
        breakdown: Expense shares in listing order.
        chart_size: Width/height for the chart canvas.
    """
    st.subheader(
        "Expenses this month "
        f"({format_currency(breakdown.total, breakdown.currency_code)})"
    )
    slices: Sequence[PieSlice] = build_pie_slices(breakdown.shares)
    if not slices:
        st.info("No expense amounts available for the chart.")
        return
    chart = alt.Chart(alt.Data(values=build_pie_chart_data(slices))).mark_arc(
        stroke="#0f1115",
        strokeWidth=1,
    ).encode(
        theta=alt.Theta("fraction:Q"),
        color=alt.Color(
            "label:N",
            sort=[pie_slice.label for pie_slice in slices],
            scale=alt.Scale(
                domain=[pie_slice.label for pie_slice in slices],
                range=[pie_slice.hex_color for pie_slice in slices],
            ),
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        order=alt.Order("order:Q"),
        tooltip=[
            alt.Tooltip("label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(
        width=chart_size,
        height=chart_size,
    )
    st.altair_chart(chart, width="content")


def _render_projections(summary: SavingsRateSummary) -> None:
    """Render FIRE, AAW and PAW figures."""
    projections = summary.projections
    currency = summary.currency_code
    fire_col, aaw_col, paw_col = st.columns(3)
    fire_col.metric(
        "Financial Independence, Retire Early",
        format_currency(projections.fire, currency),
    )
    aaw_col.metric(
        "Average-Accumulator of Wealth",
        format_currency(projections.aaw, currency),
    )
    paw_col.metric(
        "Prodigious-Accumulator of Wealth",
        format_currency(projections.paw, currency),
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Savings Rate", layout="wide")
    st.title("Savings Rate")

    try:
        summary = _load_savings_rate_summary(schema_version=1)
        breakdown = _load_expense_breakdown(schema_version=1)
    except SavingsRateError as exc:
        st.error(str(exc))
        return

    st.caption("Average Savings Rate")
    st.markdown(_rate_markdown(summary.series.cumulative_rate))
    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_rate_chart(summary.series)
    with chart_right:
        _render_expense_pie(breakdown)
    _render_projections(summary)


if __name__ == "__main__":  # pragma: no cover
    main()
