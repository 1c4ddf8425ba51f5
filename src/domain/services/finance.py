"""Domain services for per-project ledger aggregates."""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal
import logging

from src.domain.constants import ZERO_BUDGET_UTILIZATION
from src.domain.models.finance import ProjectAggregate
from src.domain.models.projects import ExpenseEntry, IncomeEntry, Project
from src.domain.services.grouping import group_expenses_by_category
from src.domain.services.timeseries import bin_time_series
from src.domain.services.validation import (
    validate_entry_amount,
    validate_project_status,
)
from src.utils.decimal_utils import coerce_decimal


def compute_utilization_percent(
    total_expenses: Decimal,
    budget_amount: Decimal,
) -> int:
    """Return expenses as a percentage of budget, rounded half-up.

    Args:
        total_expenses: Sum of expense amounts.
        budget_amount: Project budget.

    Returns:
        int: Rounded percentage, or ``ZERO_BUDGET_UTILIZATION`` when the
        budget is zero.
    """
    budget = coerce_decimal(budget_amount)
    if budget <= 0:
        return ZERO_BUDGET_UTILIZATION
    percent = coerce_decimal(total_expenses) / budget * Decimal("100")
    return int(percent.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def sum_amounts(
    entries: Iterable[ExpenseEntry | IncomeEntry],
    logger: logging.Logger,
) -> Decimal:
    """Sum entry amounts, warning on non-positive values."""
    total = Decimal("0")
    for entry in entries:
        amount = coerce_decimal(entry.amount)
        validate_entry_amount(entry.entry_id, amount, logger)
        total += amount
    return total


def compute_project_aggregate(
    project: Project,
    expenses: Iterable[ExpenseEntry] | None,
    income: Iterable[IncomeEntry] | None,
    logger: logging.Logger | None = None,
) -> ProjectAggregate:
    """Compute the financial rollup of one project.

    Args:
        project: Project whose budget and paid amount anchor the rollup.
        expenses: Expense entries of the project; None counts as empty.
        income: Income entries of the project; None counts as empty.
        logger: Logger used for warnings.

    Returns:
        ProjectAggregate: Totals, balance, utilization, category totals and
        time series.
    """
    resolved_logger = logger or logging.getLogger(__name__)
    validate_project_status(project.project_id, project.status, resolved_logger)
    expense_list = list(expenses or ())
    income_list = list(income or ())

    total_expenses = sum_amounts(expense_list, resolved_logger)
    total_income = sum_amounts(income_list, resolved_logger)
    paid_amount = coerce_decimal(project.paid_amount)
    budget_amount = coerce_decimal(project.budget_amount)

    return ProjectAggregate(
        project_id=project.project_id,
        budget_amount=budget_amount,
        paid_amount=paid_amount,
        total_expenses=total_expenses,
        total_income=total_income,
        balance=paid_amount + total_income - total_expenses,
        utilization_percent=compute_utilization_percent(
            total_expenses,
            budget_amount,
        ),
        category_totals=group_expenses_by_category(expense_list),
        time_series=bin_time_series(
            expense_list,
            income_list,
            logger=resolved_logger,
        ),
    )


__all__ = [
    "compute_utilization_percent",
    "compute_project_aggregate",
    "sum_amounts",
]
