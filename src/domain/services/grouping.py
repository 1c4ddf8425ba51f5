"""Category grouping of ledger entries."""

from collections.abc import Callable, Iterable
from decimal import Decimal
from typing import TypeVar

from src.domain.models.finance import GroupedTotals
from src.domain.models.projects import ExpenseEntry
from src.domain.services.normalization import normalize_category
from src.utils.decimal_utils import coerce_decimal


T = TypeVar("T")


def group_totals(
    items: Iterable[T],
    key: Callable[[T], str],
    value: Callable[[T], Decimal],
) -> GroupedTotals:
    """Fold items into per-key sums.

    Args:
        items: Items to group.
        key: Extracts the grouping label from an item.
        value: Extracts the amount to sum from an item.

    Returns:
        GroupedTotals: Sums per label in first-seen order.
    """
    order: list[str] = []
    totals: dict[str, Decimal] = {}
    for item in items:
        label = key(item)
        amount = coerce_decimal(value(item))
        if label not in totals:
            order.append(label)
            totals[label] = amount
        else:
            totals[label] += amount
    return GroupedTotals(entries=tuple((label, totals[label]) for label in order))


def group_expenses_by_category(
    expenses: Iterable[ExpenseEntry] | None,
) -> GroupedTotals:
    """Sum expense amounts per normalized category label."""
    return group_totals(
        expenses or (),
        key=lambda entry: normalize_category(entry.category),
        value=lambda entry: entry.amount,
    )


def merge_grouped_totals(*groups: GroupedTotals) -> GroupedTotals:
    """Merge groupings, keeping first-seen label order across inputs."""
    return group_totals(
        (pair for group in groups for pair in group.items()),
        key=lambda pair: pair[0],
        value=lambda pair: pair[1],
    )


__all__ = [
    "group_totals",
    "group_expenses_by_category",
    "merge_grouped_totals",
]
