"""SQLAlchemy engine management for the ledger store.

Engines are created lazily from ``LEDGER_DB_URL`` and kept per URL, so a
changed URL in the environment yields a fresh engine while repeated calls
share one pool. SQLite URLs get pool settings SQLite accepts; every other
backend uses a small ``QueuePool`` with health checks.
"""

import os

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool, StaticPool

from src.application.ports.database import DatabaseEnginePort


LEDGER_DB_URL_VAR = "LEDGER_DB_URL"
POOL_SIZE = 5
MAX_OVERFLOW = 5

_engines: dict[str, Engine] = {}


def _get_env_var(name: str) -> str:
    """Return a required environment variable, loading ``.env`` first.

    Raises:
        RuntimeError: If the variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _engine_options(db_url: str) -> dict[str, object]:
    """Return pool options suited to the database behind ``db_url``.

    In-memory SQLite lives inside a single connection, so it is shared
    through ``StaticPool``. File-based SQLite keeps SQLAlchemy's default
    pool. Server databases get a bounded ``QueuePool``.
    """
    url = make_url(db_url)
    if url.get_backend_name() == "sqlite":
        if url.database in (None, "", ":memory:"):
            return {
                "poolclass": StaticPool,
                "connect_args": {"check_same_thread": False},
            }
        return {"connect_args": {"check_same_thread": False}}
    return {
        "poolclass": QueuePool,
        "pool_size": POOL_SIZE,
        "max_overflow": MAX_OVERFLOW,
        "pool_pre_ping": True,
    }


def _create_engine(db_url: str) -> Engine:
    return create_engine(db_url, future=True, **_engine_options(db_url))


def get_ledger_engine() -> Engine:
    """Return the shared engine for the configured ledger database."""
    db_url = _get_env_var(LEDGER_DB_URL_VAR)
    engine = _engines.get(db_url)
    if engine is None:
        engine = _create_engine(db_url)
        _engines[db_url] = engine
    return engine


def dispose_engines() -> None:
    """Close every pooled connection and forget the cached engines."""
    for engine in _engines.values():
        engine.dispose()
    _engines.clear()


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Expose the ledger engine through ``DatabaseEnginePort``."""

    def get_ledger_engine(self) -> Engine:
        return get_ledger_engine()


__all__ = [
    "get_ledger_engine",
    "dispose_engines",
    "SqlAlchemyDatabaseEngineAdapter",
]
