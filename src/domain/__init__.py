"""Domain package for business rules and core models."""

from .constants import (
    DEFAULT_CATEGORY,
    PROJECT_STATUSES,
    ZERO_BUDGET_UTILIZATION,
)
from .models import (
    ConsolidatedAggregate,
    ExpenseEntry,
    GroupedTotals,
    IncomeEntry,
    Project,
    ProjectAggregate,
    Report,
    TimeSeriesPoint,
)
from .services import (
    bin_time_series,
    build_report,
    compute_project_aggregate,
    consolidate_aggregates,
    group_expenses_by_category,
)

__all__ = [
    "ConsolidatedAggregate",
    "ExpenseEntry",
    "GroupedTotals",
    "IncomeEntry",
    "Project",
    "ProjectAggregate",
    "Report",
    "TimeSeriesPoint",
    "DEFAULT_CATEGORY",
    "PROJECT_STATUSES",
    "ZERO_BUDGET_UTILIZATION",
    "bin_time_series",
    "build_report",
    "compute_project_aggregate",
    "consolidate_aggregates",
    "group_expenses_by_category",
]
