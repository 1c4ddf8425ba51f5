"""Domain services package."""

from .consolidation import consolidate_aggregates, merge_consolidated
from .finance import compute_project_aggregate, compute_utilization_percent
from .grouping import (
    group_expenses_by_category,
    group_totals,
    merge_grouped_totals,
)
from .normalization import (
    InvalidEntryDateError,
    normalize_category,
    parse_entry_date,
)
from .reporting import build_report, report_filename
from .timeseries import bin_time_series
from .validation import validate_entry_amount, validate_project_status

__all__ = [
    "bin_time_series",
    "build_report",
    "compute_project_aggregate",
    "compute_utilization_percent",
    "consolidate_aggregates",
    "group_expenses_by_category",
    "group_totals",
    "merge_consolidated",
    "merge_grouped_totals",
    "normalize_category",
    "parse_entry_date",
    "report_filename",
    "validate_entry_amount",
    "validate_project_status",
    "InvalidEntryDateError",
]
