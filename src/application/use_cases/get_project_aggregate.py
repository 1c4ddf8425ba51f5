"""Use case to compute the financial rollup of one project."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models.finance import ProjectAggregate
from src.domain.models.projects import Project
from src.domain.services.finance import compute_project_aggregate
from src.infrastructure.logging.logger import get_app_logger


class GetProjectAggregateUseCase:
    """Fetch a project's entries and compute its aggregate."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing projects and entries.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, project: Project) -> ProjectAggregate:
        """Return the aggregate of the given project.

        Args:
            project: Project to aggregate.

        Returns:
            ProjectAggregate: Totals, balance, utilization and series.
        """
        expenses = self._ledger_repository.list_expenses(project.project_id)
        income = self._ledger_repository.list_income(project.project_id)
        self._logger.info(
            f"Fetched {len(expenses)} expenses and {len(income)} income "
            f"entries for project_id={project.project_id}"
        )
        aggregate = compute_project_aggregate(
            project,
            expenses,
            income,
            logger=self._logger,
        )
        self._logger.info(
            f"Aggregate computed for project_id={project.project_id}: "
            f"balance={aggregate.balance}, "
            f"utilization={aggregate.utilization_percent}%"
        )
        return aggregate


__all__ = ["GetProjectAggregateUseCase", "ProjectAggregate"]
