"""Chronological binning of expense and income entries."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
import logging

from src.domain.models.finance import TimeSeriesPoint
from src.domain.models.projects import ExpenseEntry, IncomeEntry
from src.domain.services.normalization import (
    InvalidEntryDateError,
    parse_entry_date,
)
from src.utils.decimal_utils import coerce_decimal


def bin_time_series(
    expenses: Iterable[ExpenseEntry] | None,
    income: Iterable[IncomeEntry] | None,
    logger: logging.Logger | None = None,
) -> tuple[TimeSeriesPoint, ...]:
    """Build per-day expense and income sums.

    Entries whose date cannot be parsed are left out of the series with a
    warning; they still count towards every other total.

    Args:
        expenses: Expense entries of one project.
        income: Income entries of one project.
        logger: Logger used for warnings.

    Returns:
        tuple[TimeSeriesPoint, ...]: One point per distinct day, ascending.
    """
    resolved_logger = logger or logging.getLogger(__name__)
    expense_sums: dict[date, Decimal] = {}
    income_sums: dict[date, Decimal] = {}

    for side, entries, sums in (
        ("expense", expenses or (), expense_sums),
        ("income", income or (), income_sums),
    ):
        for entry in entries:
            try:
                day = parse_entry_date(entry.entry_date)
            except InvalidEntryDateError as exc:
                resolved_logger.warning(
                    f"Skipping {side} entry_id={entry.entry_id} "
                    f"from time series: {exc}"
                )
                continue
            sums[day] = sums.get(day, Decimal("0")) + coerce_decimal(
                entry.amount
            )

    days = sorted(expense_sums.keys() | income_sums.keys())
    return tuple(
        TimeSeriesPoint(
            point_date=day,
            expense_sum=expense_sums.get(day, Decimal("0")),
            income_sum=income_sums.get(day, Decimal("0")),
        )
        for day in days
    )


__all__ = ["bin_time_series"]
