"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.build_project_report import (
    BuildProjectReportUseCase,
)
from src.application.use_cases.get_portfolio_summary import (
    GetPortfolioSummaryUseCase,
)
from src.application.use_cases.get_project_aggregate import (
    GetProjectAggregateUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.memory_repository import load_fixture_repository
from src.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> LedgerRepositoryPort:
    """Return the configured ledger repository."""
    resolved_settings = settings or LedgerSettings.from_env()
    if resolved_settings.backend == "sqlalchemy":
        resolved_db = db_port or build_database_adapter()
        return SqlAlchemyLedgerRepository(resolved_db)
    if resolved_settings.backend == "memory":
        if resolved_settings.fixture_file is None:
            raise RuntimeError(
                "Memory backend requires a LEDGER_FIXTURE_FILE value."
            )
        return load_fixture_repository(resolved_settings.fixture_file)
    raise ValueError(
        "Unsupported ledger backend: "
        f"{resolved_settings.backend}. Expected sqlalchemy or memory."
    )


def build_portfolio_use_case(
    repository: LedgerRepositoryPort | None = None,
    settings: LedgerSettings | None = None,
) -> GetPortfolioSummaryUseCase:
    """Return the portfolio use case wired to the configured repository."""
    resolved_settings = settings or LedgerSettings.from_env()
    return GetPortfolioSummaryUseCase(
        repository or build_ledger_repository(settings=resolved_settings),
        logger=get_app_logger(),
        max_workers=resolved_settings.fetch_workers,
    )


def build_project_aggregate_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> GetProjectAggregateUseCase:
    """Return the single-project aggregate use case."""
    return GetProjectAggregateUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


def build_report_use_case(
    repository: LedgerRepositoryPort | None = None,
    settings: LedgerSettings | None = None,
    extension: str = "pdf",
) -> BuildProjectReportUseCase:
    """Return the report use case wired to the configured repository."""
    resolved_settings = settings or LedgerSettings.from_env()
    return BuildProjectReportUseCase(
        repository or build_ledger_repository(settings=resolved_settings),
        logger=get_app_logger(),
        currency_code=resolved_settings.currency_code,
        title=resolved_settings.report_title,
        extension=extension,
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_portfolio_use_case",
    "build_project_aggregate_use_case",
    "build_report_use_case",
]
