"""Tests for the SQLAlchemy ledger repository against SQLite."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository


SCHEMA = (
    """
    CREATE TABLE projects (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        budget_amount NUMERIC NOT NULL,
        paid_amount NUMERIC NOT NULL,
        start_date TEXT NOT NULL,
        status TEXT NOT NULL,
        owner_client_id TEXT,
        description TEXT
    )
    """,
    """
    CREATE TABLE expenses (
        id TEXT PRIMARY KEY,
        project_id TEXT NOT NULL,
        entry_date TEXT NOT NULL,
        category TEXT,
        description TEXT,
        amount NUMERIC NOT NULL
    )
    """,
    """
    CREATE TABLE income (
        id TEXT PRIMARY KEY,
        project_id TEXT NOT NULL,
        entry_date TEXT NOT NULL,
        description TEXT,
        amount NUMERIC NOT NULL
    )
    """,
)


@pytest.fixture
def repository():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    with engine.begin() as conn:
        for statement in SCHEMA:
            conn.exec_driver_sql(statement)
        conn.exec_driver_sql(
            "INSERT INTO projects VALUES "
            "('p-2', 'Beta Tower', 5000, 0, '2025-02-01', 'paused', "
            "'client-1', NULL), "
            "('p-1', 'Alpha House', 10000, 2000, '2025-01-10', 'active', "
            "'client-1', 'Family house'), "
            "('p-3', 'Gamma Shed', 100, 0, '2025-03-01', 'active', "
            "'client-2', NULL)"
        )
        conn.exec_driver_sql(
            "INSERT INTO expenses VALUES "
            "('e-1', 'p-1', '2025-03-01', 'materials', 'Cement', 3000), "
            "('e-2', 'p-1', '2025-01-15', '  ', 'Crew', 1000.5), "
            "('e-3', 'p-2', '2025-02-02', 'labor', 'Crew', 10)"
        )
        conn.exec_driver_sql(
            "INSERT INTO income VALUES "
            "('i-1', 'p-1', '2025-02-10', 'Installment', 500)"
        )
    yield SqlAlchemyLedgerRepository(
        SimpleNamespace(get_ledger_engine=lambda: engine)
    )
    engine.dispose()


def test_list_projects_filters_by_owner(repository) -> None:
    projects = repository.list_projects("client-1")

    assert [project.project_id for project in projects] == ["p-1", "p-2"]
    alpha = projects[0]
    assert alpha.budget_amount == Decimal("10000")
    assert alpha.paid_amount == Decimal("2000")
    assert alpha.start_date == date(2025, 1, 10)
    assert alpha.owner_client_id == "client-1"
    assert alpha.description == "Family house"


def test_list_projects_without_owner_returns_all(repository) -> None:
    assert len(repository.list_projects(None)) == 3


def test_list_expenses_normalizes_categories(repository) -> None:
    expenses = repository.list_expenses("p-1")

    assert [entry.entry_id for entry in expenses] == ["e-2", "e-1"]
    assert expenses[0].category == "other"
    assert expenses[0].amount == Decimal("1000.5")
    assert expenses[1].category == "materials"
    assert expenses[1].entry_date == "2025-03-01"


def test_list_income_returns_project_entries(repository) -> None:
    income = repository.list_income("p-1")

    assert len(income) == 1
    assert income[0].amount == Decimal("500")
    assert repository.list_income("p-2") == []
