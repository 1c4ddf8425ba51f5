"""SQLAlchemy-backed repository for projects and ledger entries."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models.projects import ExpenseEntry, IncomeEntry, Project
from src.infrastructure.row_mapping import (
    expense_from_row,
    income_from_row,
    project_from_row,
)


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for the ledger tables."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def list_projects(self, owner_id: str | None) -> list[Project]:
        base_sql = """
        SELECT id, name, budget_amount, paid_amount, start_date, status,
               owner_client_id, description
        FROM projects
        """
        params: dict[str, str] = {}
        if owner_id is not None:
            base_sql += " WHERE owner_client_id = :owner_id"
            params["owner_id"] = owner_id
        base_sql += " ORDER BY name, id"
        rows = self._fetch(text(base_sql), params)
        return [project_from_row(row) for row in rows]

    def list_expenses(self, project_id: str) -> list[ExpenseEntry]:
        query = text(
            """
            SELECT id, project_id, entry_date, category, description, amount
            FROM expenses
            WHERE project_id = :project_id
            ORDER BY entry_date, id
            """
        )
        rows = self._fetch(query, {"project_id": project_id})
        return [expense_from_row(row) for row in rows]

    def list_income(self, project_id: str) -> list[IncomeEntry]:
        query = text(
            """
            SELECT id, project_id, entry_date, description, amount
            FROM income
            WHERE project_id = :project_id
            ORDER BY entry_date, id
            """
        )
        rows = self._fetch(query, {"project_id": project_id})
        return [income_from_row(row) for row in rows]

    def _fetch(self, query, params: dict[str, str]):
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            return conn.execute(query, params).mappings().all()


__all__ = ["SqlAlchemyLedgerRepository"]
