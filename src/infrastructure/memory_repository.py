"""In-memory repository for fixtures, demos and tests."""

import json
from pathlib import Path

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models.projects import ExpenseEntry, IncomeEntry, Project
from src.infrastructure.row_mapping import (
    expense_from_row,
    income_from_row,
    project_from_row,
)


class InMemoryLedgerRepository(LedgerRepositoryPort):
    """Repository serving projects and entries held in memory."""

    def __init__(
        self,
        projects: list[Project] | None = None,
        expenses: list[ExpenseEntry] | None = None,
        income: list[IncomeEntry] | None = None,
    ) -> None:
        self._projects = tuple(projects or ())
        self._expenses = tuple(expenses or ())
        self._income = tuple(income or ())

    def list_projects(self, owner_id: str | None) -> list[Project]:
        return [
            project
            for project in self._projects
            if owner_id is None or project.owner_client_id == owner_id
        ]

    def list_expenses(self, project_id: str) -> list[ExpenseEntry]:
        return [
            entry for entry in self._expenses if entry.project_id == project_id
        ]

    def list_income(self, project_id: str) -> list[IncomeEntry]:
        return [
            entry for entry in self._income if entry.project_id == project_id
        ]


def load_fixture_repository(path: Path | str) -> InMemoryLedgerRepository:
    """Load a repository from a JSON fixture file.

    The file holds ``projects``, ``expenses`` and ``income`` arrays whose
    objects use the same column names as the ledger tables.

    Args:
        path: Path to the JSON fixture.

    Returns:
        InMemoryLedgerRepository: Repository serving the fixture rows.

    Raises:
        RuntimeError: If the fixture file does not exist.
    """
    fixture_path = Path(path)
    if not fixture_path.exists():
        raise RuntimeError(f"Ledger fixture file not found: {fixture_path}")
    payload = json.loads(fixture_path.read_text(encoding="utf-8"))
    return InMemoryLedgerRepository(
        projects=[project_from_row(row) for row in payload.get("projects", [])],
        expenses=[expense_from_row(row) for row in payload.get("expenses", [])],
        income=[income_from_row(row) for row in payload.get("income", [])],
    )


__all__ = ["InMemoryLedgerRepository", "load_fixture_repository"]
