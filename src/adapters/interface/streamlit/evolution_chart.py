"""Income/expense evolution chart for the project detail page.

Pure transformations from the ``TimeSeriesPoint`` tuple of a
``ProjectAggregate`` to chart rows and a Plotly figure. The series is
already in chronological order; labels are formatted for display only and
never used for ordering.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import TYPE_CHECKING

from src.domain.models.finance import TimeSeriesPoint

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


DISPLAY_DATE_FORMAT = "%d/%m/%Y"
EXPENSE_LABEL = "Expenses"
INCOME_LABEL = "Income"
EXPENSE_COLOR = "#e76f51"
INCOME_COLOR = "#2e7d32"


def build_evolution_rows(
    series: Sequence[TimeSeriesPoint],
    date_format: str = DISPLAY_DATE_FORMAT,
) -> list[dict[str, str | float]]:
    """Return one chart row per series point.

    Args:
        series: Time series of a project aggregate.
        date_format: ``strftime`` format of the display label.

    Returns:
        Rows with ISO date, display label, expense and income values.
    """
    return [
        {
            "date": point.point_date.isoformat(),
            "label": point.point_date.strftime(date_format),
            "expenses": float(point.expense_sum),
            "income": float(point.income_sum),
        }
        for point in series
    ]


def cumulative_net(series: Sequence[TimeSeriesPoint]) -> list[Decimal]:
    """Return the running income minus expenses after each point."""
    running = Decimal("0")
    values: list[Decimal] = []
    for point in series:
        running += point.income_sum - point.expense_sum
        values.append(running)
    return values


def build_evolution_figure(
    series: Sequence[TimeSeriesPoint],
    date_format: str = DISPLAY_DATE_FORMAT,
) -> "go.Figure":
    """Build a Plotly line chart of expenses and income per day.

    Args:
        series: Time series of a project aggregate.
        date_format: ``strftime`` format of the hover labels.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    rows = build_evolution_rows(series, date_format=date_format)
    dates = [row["date"] for row in rows]
    labels = [row["label"] for row in rows]

    import plotly.graph_objects as go

    fig = go.Figure(
        data=[
            go.Scatter(
                x=dates,
                y=[row["expenses"] for row in rows],
                name=EXPENSE_LABEL,
                mode="lines+markers",
                line=dict(color=EXPENSE_COLOR, width=2),
                customdata=labels,
                hovertemplate="%{customdata}: %{y:,.2f}<extra></extra>",
            ),
            go.Scatter(
                x=dates,
                y=[row["income"] for row in rows],
                name=INCOME_LABEL,
                mode="lines+markers",
                line=dict(color=INCOME_COLOR, width=2),
                customdata=labels,
                hovertemplate="%{customdata}: %{y:,.2f}<extra></extra>",
            ),
        ]
    )
    fig.update_layout(
        margin=dict(l=8, r=8, t=8, b=8),
        height=360,
        legend=dict(orientation="h"),
        xaxis=dict(type="date"),
    )
    return fig


__all__ = [
    "DISPLAY_DATE_FORMAT",
    "build_evolution_rows",
    "cumulative_net",
    "build_evolution_figure",
]
