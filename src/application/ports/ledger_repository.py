"""Port for reading projects and their ledger entries."""

from typing import Protocol

from src.domain.models.projects import ExpenseEntry, IncomeEntry, Project


class LedgerRepositoryPort(Protocol):
    """Port exposing read access to projects, expenses and income."""

    def list_projects(self, owner_id: str | None) -> list[Project]:
        """Return the projects of an owner, or every project for None."""

    def list_expenses(self, project_id: str) -> list[ExpenseEntry]:
        """Return the expense entries of a project."""

    def list_income(self, project_id: str) -> list[IncomeEntry]:
        """Return the income entries of a project."""


__all__ = ["LedgerRepositoryPort"]
