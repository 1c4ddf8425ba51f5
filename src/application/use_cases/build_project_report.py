"""Use case to build the exportable report of a project."""

from datetime import datetime

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.get_project_aggregate import (
    GetProjectAggregateUseCase,
)
from src.domain.constants import DEFAULT_CURRENCY, DEFAULT_REPORT_TITLE
from src.domain.models.projects import Project
from src.domain.models.reports import Report
from src.domain.services.reporting import build_report
from src.infrastructure.logging.logger import get_app_logger


class BuildProjectReportUseCase:
    """Compute a project's aggregate and project it into a report."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        currency_code: str = DEFAULT_CURRENCY,
        title: str = DEFAULT_REPORT_TITLE,
        extension: str = "pdf",
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing projects and entries.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_code: Currency printed in the summary.
            title: Report title.
            extension: Extension of the exported file.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code
        self._title = title
        self._extension = extension

    def execute(
        self,
        project_id: str,
        owner_id: str | None = None,
        generated_at: datetime | None = None,
    ) -> Report:
        """Return the report of a project visible to the owner.

        Args:
            project_id: Identifier of the reported project.
            owner_id: Owner whose projects are searched; None for all.
            generated_at: Optional fixed generation timestamp.

        Returns:
            Report: Document structure ready for export.

        Raises:
            LookupError: If the owner has no project with this identifier.
        """
        project = self._find_project(project_id, owner_id)
        aggregate = GetProjectAggregateUseCase(
            self._ledger_repository,
            logger=self._logger,
        ).execute(project)
        report = build_report(
            project,
            aggregate,
            aggregate.category_totals,
            generated_at=generated_at,
            currency_code=self._currency_code,
            title=self._title,
            extension=self._extension,
        )
        self._logger.info(
            f"Report built for project_id={project_id}: {report.filename}"
        )
        return report

    def _find_project(
        self,
        project_id: str,
        owner_id: str | None,
    ) -> Project:
        for project in self._ledger_repository.list_projects(owner_id):
            if project.project_id == project_id:
                return project
        raise LookupError(
            f"Project not found: project_id={project_id}, owner_id={owner_id}"
        )


__all__ = ["BuildProjectReportUseCase", "Report"]
