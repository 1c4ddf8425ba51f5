"""Portfolio consolidation of project aggregates."""

from collections.abc import Iterable

from src.domain.models.finance import ConsolidatedAggregate, ProjectAggregate
from src.domain.services.grouping import merge_grouped_totals


def consolidate_aggregates(
    aggregates: Iterable[ProjectAggregate],
) -> ConsolidatedAggregate:
    """Sum project aggregates field by field.

    Args:
        aggregates: Aggregates of every project in the portfolio.

    Returns:
        ConsolidatedAggregate: Portfolio totals; all zeros for no input.
    """
    consolidated = ConsolidatedAggregate()
    for aggregate in aggregates:
        consolidated = merge_consolidated(
            consolidated,
            ConsolidatedAggregate(
                total_projects=1,
                total_budget=aggregate.budget_amount,
                total_paid=aggregate.paid_amount,
                total_expenses=aggregate.total_expenses,
                total_income=aggregate.total_income,
                total_balance=aggregate.balance,
                category_totals=aggregate.category_totals,
            ),
        )
    return consolidated


def merge_consolidated(
    left: ConsolidatedAggregate,
    right: ConsolidatedAggregate,
) -> ConsolidatedAggregate:
    """Combine two consolidated results into one."""
    return ConsolidatedAggregate(
        total_projects=left.total_projects + right.total_projects,
        total_budget=left.total_budget + right.total_budget,
        total_paid=left.total_paid + right.total_paid,
        total_expenses=left.total_expenses + right.total_expenses,
        total_income=left.total_income + right.total_income,
        total_balance=left.total_balance + right.total_balance,
        category_totals=merge_grouped_totals(
            left.category_totals,
            right.category_totals,
        ),
    )


__all__ = ["consolidate_aggregates", "merge_consolidated"]
