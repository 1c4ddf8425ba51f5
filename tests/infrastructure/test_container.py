"""Tests for the composition root."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.infrastructure import container
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.memory_repository import InMemoryLedgerRepository
from src.infrastructure.settings import LedgerSettings


def test_sqlalchemy_backend_uses_given_db_port() -> None:
    db_port = MagicMock()

    repository = container.build_ledger_repository(
        db_port=db_port,
        settings=LedgerSettings(backend="sqlalchemy"),
    )

    assert isinstance(repository, SqlAlchemyLedgerRepository)


def test_memory_backend_loads_fixture(tmp_path: Path) -> None:
    fixture = tmp_path / "ledger.json"
    fixture.write_text(json.dumps({"projects": []}), encoding="utf-8")

    repository = container.build_ledger_repository(
        settings=LedgerSettings(backend="memory", fixture_file=fixture),
    )

    assert isinstance(repository, InMemoryLedgerRepository)


def test_memory_backend_requires_fixture() -> None:
    with pytest.raises(RuntimeError):
        container.build_ledger_repository(
            settings=LedgerSettings(backend="memory"),
        )


def test_unknown_backend_is_rejected() -> None:
    with pytest.raises(ValueError):
        container.build_ledger_repository(
            settings=LedgerSettings(backend="spreadsheet"),
        )


def test_portfolio_use_case_uses_settings_workers(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", MagicMock)
    repository = MagicMock()
    repository.list_projects.return_value = []

    use_case = container.build_portfolio_use_case(
        repository=repository,
        settings=LedgerSettings(fetch_workers=7),
    )

    assert use_case._max_workers == 7
    assert use_case.execute().consolidated.total_projects == 0


def test_report_use_case_names_file_with_extension(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", MagicMock)

    use_case = container.build_report_use_case(
        repository=MagicMock(),
        settings=LedgerSettings(currency_code="USD", report_title="Ledger"),
        extension="json",
    )

    assert use_case._extension == "json"
    assert use_case._currency_code == "USD"
    assert use_case._title == "Ledger"
