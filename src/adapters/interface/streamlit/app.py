"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal
import json

import streamlit as st
import altair as alt

from src.adapters.interface.streamlit.evolution_chart import (
    build_evolution_figure,
    cumulative_net,
)
from src.application.use_cases.get_portfolio_summary import (
    PortfolioView,
    ProjectSummary,
)
from src.domain.models.finance import GroupedTotals
from src.domain.services.normalization import (
    category_display_label,
    status_display_label,
)
from src.domain.services.reporting import JSON_EXTENSION, build_report
from src.infrastructure.container import build_portfolio_use_case
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import LedgerSettings


CURRENCY_SYMBOLS = {"BRL": "R$", "EUR": "€", "USD": "$"}


def _fetch_portfolio(owner_id: str | None) -> PortfolioView:
    """Fetch and consolidate every project of the owner."""
    use_case = build_portfolio_use_case()
    return use_case.execute(owner_id=owner_id)


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = CURRENCY_SYMBOLS.get(currency_code, currency_code)
    return f"{symbol} {value:,.2f}"


def _utilization_color(percent: int) -> str:
    """Return the color flagging how much of the budget is spent."""
    if percent < 70:
        return "#2e7d32"
    if percent < 90:
        return "#f4a261"
    return "#e76f51"


def _prepare_donut_chart_data(
    category_totals: GroupedTotals,
    currency_code: str,
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        category_totals: Expense totals per category.
        currency_code: Currency used for labels.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    sorted_items = sorted(
        category_totals.items(),
        key=lambda pair: pair[1],
        reverse=True,
    )
    top_items = [
        (category_display_label(category), amount)
        for category, amount in sorted_items[:max_categories]
    ]
    other_amount = sum(
        (amount for _, amount in sorted_items[max_categories:]),
        start=Decimal("0"),
    )
    if other_amount != 0:
        top_items.append(("Other (grouped)", other_amount))
    total_amount = category_totals.total
    data: list[dict[str, str | float]] = []
    for label, amount in top_items:
        share = (
            (amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": label,
                "amount": float(amount),
                "amount_label": _format_currency(amount, currency_code),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def _render_category_chart(
    category_totals: GroupedTotals,
    currency_code: str,
    title: str,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of expenses by category."""
    st.subheader(title)
    if not category_totals:
        st.info("No expenses recorded yet.")
        return
    data, _ = _prepare_donut_chart_data(category_totals, currency_code)
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.35,
        cornerRadius=6,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            legend=alt.Legend(orient="bottom", title=None, columns=3),
        ),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(width=chart_size, height=chart_size)
    st.altair_chart(chart, width="stretch")


def _render_balance_chart(
    summaries: Sequence[ProjectSummary],
    currency_code: str,
) -> None:
    """Render a bar chart of the balance of each project."""
    st.subheader("Balance by Project")
    data = [
        {
            "project": summary.project.name,
            "balance": float(summary.aggregate.balance),
            "balance_label": _format_currency(
                summary.aggregate.balance,
                currency_code,
            ),
        }
        for summary in summaries
    ]
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=6,
        cornerRadiusTopRight=6,
    ).encode(
        x=alt.X("project:N", sort=None, title=None),
        y=alt.Y("balance:Q", title=None),
        color=alt.condition(
            alt.datum.balance >= 0,
            alt.value("#2e7d32"),
            alt.value("#e76f51"),
        ),
        tooltip=[
            alt.Tooltip("project:N"),
            alt.Tooltip("balance_label:N"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def _render_portfolio(view: PortfolioView, currency_code: str) -> None:
    """Render consolidated metrics, charts and the projects table."""
    consolidated = view.consolidated
    projects_col, budget_col, expenses_col, balance_col = st.columns(4)
    projects_col.metric("Projects", consolidated.total_projects)
    budget_col.metric(
        "Total Budget",
        _format_currency(consolidated.total_budget, currency_code),
    )
    expenses_col.metric(
        "Total Expenses",
        _format_currency(consolidated.total_expenses, currency_code),
    )
    balance_col.metric(
        "Overall Balance",
        _format_currency(consolidated.total_balance, currency_code),
    )

    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_category_chart(
            consolidated.category_totals,
            currency_code,
            "Expenses by Category",
        )
    with chart_right:
        _render_balance_chart(view.projects, currency_code)

    data = [
        {
            "Project": summary.project.name,
            "Status": status_display_label(summary.project.status),
            "Budget": _format_currency(
                summary.aggregate.budget_amount,
                currency_code,
            ),
            "Balance": _format_currency(
                summary.aggregate.balance,
                currency_code,
            ),
            "Spent": f"{summary.aggregate.utilization_percent}%",
        }
        for summary in view.projects
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _render_project(summary: ProjectSummary, settings: LedgerSettings) -> None:
    """Render the detail page of one project.

    The downloadable report is built from the aggregate shown on the page.
    """
    currency_code = settings.currency_code
    project = summary.project
    aggregate = summary.aggregate
    st.subheader(project.name)
    st.caption(
        f"{status_display_label(project.status)} · "
        f"Started {project.start_date.strftime('%d/%m/%Y')}"
    )

    budget_col, paid_col, balance_col, spent_col = st.columns(4)
    budget_col.metric(
        "Budget",
        _format_currency(aggregate.budget_amount, currency_code),
    )
    paid_col.metric(
        "Paid",
        _format_currency(aggregate.paid_amount, currency_code),
    )
    balance_col.metric(
        "Balance",
        _format_currency(aggregate.balance, currency_code),
    )
    spent_col.metric("Budget Spent", f"{aggregate.utilization_percent}%")
    color = _utilization_color(aggregate.utilization_percent)
    width = min(aggregate.utilization_percent, 100)
    st.markdown(
        f'<div style="background:#2b2f36;border-radius:4px;height:8px">'
        f'<div style="width:{width}%;background:{color};height:8px;'
        f'border-radius:4px"></div></div>',
        unsafe_allow_html=True,
    )

    st.subheader("Income and Expenses over Time")
    if aggregate.time_series:
        st.plotly_chart(
            build_evolution_figure(aggregate.time_series),
            width="stretch",
        )
        net = cumulative_net(aggregate.time_series)[-1]
        st.caption(
            f"Net flow over the period: {_format_currency(net, currency_code)}"
        )
    else:
        st.info("No dated entries recorded yet.")

    _render_category_chart(
        aggregate.category_totals,
        currency_code,
        "Expenses by Category",
    )

    report = build_report(
        project,
        aggregate,
        aggregate.category_totals,
        currency_code=currency_code,
        title=settings.report_title,
        extension=JSON_EXTENSION,
    )
    st.download_button(
        "Download report",
        data=json.dumps(report.to_dict(), indent=2),
        file_name=report.filename,
        mime="application/json",
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Construction Ledger", layout="wide")
    st.title("Construction Ledger")

    settings = LedgerSettings.from_env()
    raw_owner = st.sidebar.text_input("Client id", placeholder="All clients")
    owner_id = raw_owner.strip() or None
    page = st.sidebar.selectbox("Page", ["Portfolio", "Project"])
    get_usage_logger().info(f"page={page} owner_id={owner_id}")

    view = _fetch_portfolio(owner_id)
    if not view.projects:
        st.warning("No projects found for this client.")
        return

    if page == "Portfolio":
        _render_portfolio(view, settings.currency_code)
        return

    names = [summary.project.name for summary in view.projects]
    selected = st.sidebar.selectbox("Project", names)
    summary = view.projects[names.index(selected)]
    _render_project(summary, settings)


if __name__ == "__main__":  # pragma: no cover
    main()
