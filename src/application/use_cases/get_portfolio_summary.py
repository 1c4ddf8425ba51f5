"""Use case to consolidate every project of an owner."""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models.finance import ConsolidatedAggregate, ProjectAggregate
from src.domain.models.projects import ExpenseEntry, IncomeEntry, Project
from src.domain.services.consolidation import consolidate_aggregates
from src.domain.services.finance import compute_project_aggregate
from src.infrastructure.logging.logger import get_app_logger


DEFAULT_FETCH_WORKERS = 4


@dataclass(frozen=True)
class ProjectSummary:
    """A project paired with its computed aggregate."""

    project: Project
    aggregate: ProjectAggregate


@dataclass(frozen=True)
class PortfolioView:
    """Portfolio totals and per-project details for UI rendering."""

    consolidated: ConsolidatedAggregate
    projects: list[ProjectSummary]


class GetPortfolioSummaryUseCase:
    """Aggregate every project of an owner and consolidate the results."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        max_workers: int = DEFAULT_FETCH_WORKERS,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing projects and entries.
            logger: Optional logger compatible with logging.Logger-like API.
            max_workers: Upper bound of concurrent entry fetches.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._max_workers = max(1, max_workers)

    def execute(self, owner_id: str | None = None) -> PortfolioView:
        """Return the consolidated portfolio of an owner.

        Entries of every project are fetched concurrently; aggregation only
        starts once all fetches completed. A failed fetch propagates and no
        partial portfolio is returned.

        Args:
            owner_id: Owner whose projects are consolidated; None for all.

        Returns:
            PortfolioView: Consolidated totals and per-project aggregates.
        """
        projects = self._ledger_repository.list_projects(owner_id)
        self._logger.info(
            f"Fetched {len(projects)} projects for owner_id={owner_id}"
        )
        entries = self._fetch_all_entries(projects)

        summaries = [
            ProjectSummary(
                project=project,
                aggregate=compute_project_aggregate(
                    project,
                    expenses,
                    income,
                    logger=self._logger,
                ),
            )
            for project, (expenses, income) in zip(projects, entries)
        ]
        consolidated = consolidate_aggregates(
            summary.aggregate for summary in summaries
        )
        self._logger.info(
            f"Portfolio consolidated: projects={consolidated.total_projects}, "
            f"budget={consolidated.total_budget}, "
            f"expenses={consolidated.total_expenses}, "
            f"balance={consolidated.total_balance}"
        )
        return PortfolioView(consolidated=consolidated, projects=summaries)

    def _fetch_all_entries(
        self,
        projects: list[Project],
    ) -> list[tuple[list[ExpenseEntry], list[IncomeEntry]]]:
        if not projects:
            return []
        workers = min(self._max_workers, len(projects))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(self._fetch_entries, projects))

    def _fetch_entries(
        self,
        project: Project,
    ) -> tuple[list[ExpenseEntry], list[IncomeEntry]]:
        expenses = self._ledger_repository.list_expenses(project.project_id)
        income = self._ledger_repository.list_income(project.project_id)
        return expenses, income


__all__ = [
    "GetPortfolioSummaryUseCase",
    "PortfolioView",
    "ProjectSummary",
    "DEFAULT_FETCH_WORKERS",
]
