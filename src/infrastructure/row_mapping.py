"""Conversion of raw storage rows into domain entries.

Category normalization and decimal coercion happen here, once, when rows
enter the application. Entry dates are kept as stored so the time series
binner can report malformed values.
"""

from collections.abc import Mapping
from typing import Any

from src.domain.models.projects import ExpenseEntry, IncomeEntry, Project
from src.domain.services.normalization import (
    normalize_category,
    parse_entry_date,
)
from src.utils.decimal_utils import coerce_decimal


def project_from_row(row: Mapping[str, Any]) -> Project:
    """Build a project from a ``projects`` row."""
    return Project(
        project_id=str(row["id"]),
        name=row["name"],
        budget_amount=coerce_decimal(row.get("budget_amount")),
        paid_amount=coerce_decimal(row.get("paid_amount")),
        start_date=parse_entry_date(row["start_date"]),
        status=row["status"],
        owner_client_id=_optional_str(row.get("owner_client_id")),
        description=row.get("description"),
    )


def expense_from_row(row: Mapping[str, Any]) -> ExpenseEntry:
    """Build an expense entry from an ``expenses`` row."""
    return ExpenseEntry(
        entry_id=str(row["id"]),
        project_id=str(row["project_id"]),
        entry_date=row["entry_date"],
        category=normalize_category(row.get("category")),
        description=row.get("description") or "",
        amount=coerce_decimal(row["amount"]),
    )


def income_from_row(row: Mapping[str, Any]) -> IncomeEntry:
    """Build an income entry from an ``income`` row."""
    return IncomeEntry(
        entry_id=str(row["id"]),
        project_id=str(row["project_id"]),
        entry_date=row["entry_date"],
        description=row.get("description") or "",
        amount=coerce_decimal(row["amount"]),
    )


def _optional_str(value) -> str | None:
    return None if value is None else str(value)


__all__ = ["project_from_row", "expense_from_row", "income_from_row"]
