"""Domain models for construction projects and their ledger entries."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


EntryDate = date | datetime | str


@dataclass(frozen=True)
class Project:
    """Construction project with its budget and payment history.

    Attributes:
        project_id: Immutable project identifier.
        name: Display name.
        budget_amount: Budgeted amount (non-negative).
        paid_amount: Amount already paid by the client (non-negative).
        start_date: Date the works started.
        status: One of ``PROJECT_STATUSES``.
        owner_client_id: Client owning the project, when assigned.
        description: Optional free-text description.
    """

    project_id: str
    name: str
    budget_amount: Decimal
    paid_amount: Decimal
    start_date: date
    status: str
    owner_client_id: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class ExpenseEntry:
    """Dated, categorized outflow against a project."""

    entry_id: str
    project_id: str
    entry_date: EntryDate
    category: str | None
    description: str
    amount: Decimal


@dataclass(frozen=True)
class IncomeEntry:
    """Dated inflow against a project."""

    entry_id: str
    project_id: str
    entry_date: EntryDate
    description: str
    amount: Decimal


__all__ = ["EntryDate", "Project", "ExpenseEntry", "IncomeEntry"]
