"""Chart presentation logic shared by the CLI and Streamlit adapters.

Pure transformations from domain results to chart-ready records. Fill glyphs
and colors are assigned round-robin by position, so callers must keep the
listing order of the shares.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from savings_rate.domain.models.metrics import SavingsRateSeries
from savings_rate.domain.models.report import ExpenseShare
from savings_rate.domain.policies.rate_tiers import RateTier, classify_rate

PIE_FILLS = ("•", "▪", "▴", "░", "▀")
PIE_COLORS = ("blue", "red", "green", "yellow", "purple")
PIE_HEX_COLORS = ("#457b9d", "#e76f51", "#2e7d32", "#f6c453", "#8e6cbb")

TIER_COLORS = {
    RateTier.ALERT: "red",
    RateTier.CAUTION: "yellow",
    RateTier.AFFIRMATIVE: "green",
}


@dataclass(frozen=True)
class PieSlice:
    """One slice of the expense pie chart."""

    label: str
    fraction: float
    fill: str
    color_index: int

    @property
    def color(self) -> str:
        return PIE_COLORS[self.color_index]

    @property
    def hex_color(self) -> str:
        return PIE_HEX_COLORS[self.color_index]


def build_pie_slices(shares: Sequence[ExpenseShare]) -> list[PieSlice]:
    """Assign fill glyphs and colors to expense shares.

    Args:
        shares: Expense shares in listing order.

    Returns:
        list[PieSlice]: Slices with ``index % 5`` fill and color.
    """
    return [
        PieSlice(
            label=share.label,
            fraction=share.fraction,
            fill=PIE_FILLS[index % len(PIE_FILLS)],
            color_index=index % len(PIE_COLORS),
        )
        for index, share in enumerate(shares)
    ]


def build_rate_chart_data(
    series: SavingsRateSeries,
) -> list[dict[str, str | float]]:
    """Prepare step-chart records for the savings-rate series."""
    return [
        {
            "period": point.period_index,
            "rate": point.rate_percent,
            "rate_label": format_rate(point.rate_percent),
        }
        for point in series.points
    ]


def build_pie_chart_data(
    slices: Sequence[PieSlice],
) -> list[dict[str, str | float | int]]:
    """Prepare arc-chart records that keep the listing order."""
    return [
        {
            "order": index,
            "label": pie_slice.label,
            "fraction": pie_slice.fraction,
            "share_label": f"{pie_slice.fraction * 100:.1f}%",
        }
        for index, pie_slice in enumerate(slices)
    ]


def format_rate(rate_percent: float) -> str:
    """Format a savings rate for display."""
    return f"{rate_percent:.2f}%"


def rate_color(rate_percent: float) -> str:
    """Return the display color of a savings rate."""
    return TIER_COLORS[classify_rate(rate_percent)]


def format_currency(value: float, currency_code: str) -> str:
    """Format currency values for display."""
    if currency_code == "USD":
        return f"${value:,.2f}"
    return f"{value:,.2f} {currency_code}"


__all__ = [
    "PIE_FILLS",
    "PIE_COLORS",
    "PIE_HEX_COLORS",
    "TIER_COLORS",
    "PieSlice",
    "build_pie_slices",
    "build_rate_chart_data",
    "build_pie_chart_data",
    "format_rate",
    "rate_color",
    "format_currency",
]
