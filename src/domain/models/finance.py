"""Domain models for ledger aggregates."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class GroupedTotals:
    """Sums per label, kept in first-seen order.

    Attributes:
        entries: ``(label, total)`` pairs in first-seen order.
    """

    entries: tuple[tuple[str, Decimal], ...] = ()

    @property
    def keys(self) -> tuple[str, ...]:
        """Return labels in first-seen order."""
        return tuple(label for label, _ in self.entries)

    @property
    def totals(self) -> Mapping[str, Decimal]:
        """Return a read-only mapping of label to total."""
        return MappingProxyType(dict(self.entries))

    @property
    def total(self) -> Decimal:
        """Return the sum of every label total."""
        return sum((amount for _, amount in self.entries), Decimal("0"))

    def items(self) -> tuple[tuple[str, Decimal], ...]:
        return self.entries

    def values(self) -> tuple[Decimal, ...]:
        return tuple(amount for _, amount in self.entries)

    def get(self, label: str, default: Decimal | None = None) -> Decimal | None:
        return self.totals.get(label, default)

    def as_dict(self) -> dict[str, Decimal]:
        return dict(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)


@dataclass(frozen=True)
class TimeSeriesPoint:
    """Expense and income sums for a single calendar day."""

    point_date: date
    expense_sum: Decimal
    income_sum: Decimal


@dataclass(frozen=True)
class ProjectAggregate:
    """Financial rollup of one project.

    Attributes:
        project_id: Identifier of the aggregated project.
        budget_amount: Budget snapshot used for utilization.
        paid_amount: Paid amount snapshot used for the balance.
        total_expenses: Sum of expense amounts.
        total_income: Sum of income amounts.
        balance: Paid amount plus income minus expenses.
        utilization_percent: Expenses as a rounded percentage of budget.
        category_totals: Expense sums per category.
        time_series: Per-day sums, strictly ascending by date.
    """

    project_id: str
    budget_amount: Decimal
    paid_amount: Decimal
    total_expenses: Decimal
    total_income: Decimal
    balance: Decimal
    utilization_percent: int
    category_totals: GroupedTotals = field(default_factory=GroupedTotals)
    time_series: tuple[TimeSeriesPoint, ...] = ()


@dataclass(frozen=True)
class ConsolidatedAggregate:
    """Portfolio totals summed over project aggregates."""

    total_projects: int = 0
    total_budget: Decimal = Decimal("0")
    total_paid: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")
    total_income: Decimal = Decimal("0")
    total_balance: Decimal = Decimal("0")
    category_totals: GroupedTotals = field(default_factory=GroupedTotals)


__all__ = [
    "GroupedTotals",
    "TimeSeriesPoint",
    "ProjectAggregate",
    "ConsolidatedAggregate",
]
