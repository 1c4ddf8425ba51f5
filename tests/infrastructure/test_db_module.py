"""Tests for the ledger engine helpers."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import text

from src.infrastructure import db as db_module


@pytest.fixture(autouse=True)
def isolated_engines(monkeypatch):
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(db_module, "_engines", {})


def test_get_env_var_raises_when_missing(monkeypatch):
    monkeypatch.delenv("LEDGER_DB_URL", raising=False)

    with pytest.raises(RuntimeError, match="LEDGER_DB_URL"):
        db_module._get_env_var("LEDGER_DB_URL")


def test_server_urls_get_bounded_queue_pool():
    options = db_module._engine_options("postgresql://ledger@db/ledger")

    assert options == {
        "poolclass": db_module.QueuePool,
        "pool_size": 5,
        "max_overflow": 5,
        "pool_pre_ping": True,
    }


@pytest.mark.parametrize("url", ["sqlite://", "sqlite:///:memory:"])
def test_in_memory_sqlite_shares_one_connection(url):
    options = db_module._engine_options(url)

    assert options["poolclass"] is db_module.StaticPool
    assert options["connect_args"] == {"check_same_thread": False}


def test_file_sqlite_keeps_default_pool(tmp_path):
    options = db_module._engine_options(f"sqlite:///{tmp_path / 'ledger.db'}")

    assert "poolclass" not in options
    assert "pool_size" not in options


def test_get_ledger_engine_reuses_engine_per_url(monkeypatch):
    created = []

    def _fake_create(url):
        created.append(url)
        return MagicMock(name=url)

    monkeypatch.setattr(db_module, "_create_engine", _fake_create)
    monkeypatch.setenv("LEDGER_DB_URL", "postgresql://one")
    first = db_module.get_ledger_engine()
    again = db_module.get_ledger_engine()
    monkeypatch.setenv("LEDGER_DB_URL", "postgresql://two")
    second = db_module.get_ledger_engine()

    assert first is again
    assert second is not first
    assert created == ["postgresql://one", "postgresql://two"]


def test_in_memory_engine_connects_and_disposes(monkeypatch):
    monkeypatch.setenv("LEDGER_DB_URL", "sqlite://")

    engine = db_module.SqlAlchemyDatabaseEngineAdapter().get_ledger_engine()
    with engine.connect() as conn:
        assert conn.execute(text("SELECT 1")).scalar() == 1

    db_module.dispose_engines()

    assert db_module._engines == {}
