"""Domain models package."""

from .finance import (
    ConsolidatedAggregate,
    GroupedTotals,
    ProjectAggregate,
    TimeSeriesPoint,
)
from .projects import EntryDate, ExpenseEntry, IncomeEntry, Project
from .reports import Report, ReportCategoryRow, ReportHeader, ReportSummary

__all__ = [
    "EntryDate",
    "Project",
    "ExpenseEntry",
    "IncomeEntry",
    "GroupedTotals",
    "TimeSeriesPoint",
    "ProjectAggregate",
    "ConsolidatedAggregate",
    "Report",
    "ReportCategoryRow",
    "ReportHeader",
    "ReportSummary",
]
