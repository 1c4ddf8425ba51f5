"""Tests for the database connectivity CLI."""

from unittest.mock import MagicMock

from src.adapters import test_db_connection as cli


def test_main_checks_ledger_engine(monkeypatch):
    connection = MagicMock()
    engine = MagicMock()
    engine.url = "sqlite://"
    engine.connect.return_value.__enter__.return_value = connection
    adapter = MagicMock()
    adapter.get_ledger_engine.return_value = engine
    fake_logger = MagicMock()

    monkeypatch.setattr(cli, "SqlAlchemyDatabaseEngineAdapter", lambda: adapter)
    monkeypatch.setattr(cli, "get_app_logger", lambda: fake_logger)

    cli.main()

    connection.exec_driver_sql.assert_called_once_with("SELECT 1")
    fake_logger.info.assert_any_call("Ledger DB: sqlite://")
    fake_logger.info.assert_any_call("Ledger connection is working.")
