"""Application use cases package."""

from .build_project_report import BuildProjectReportUseCase, Report
from .get_portfolio_summary import (
    GetPortfolioSummaryUseCase,
    PortfolioView,
    ProjectSummary,
)
from .get_project_aggregate import (
    GetProjectAggregateUseCase,
    ProjectAggregate,
)

__all__ = [
    "BuildProjectReportUseCase",
    "Report",
    "GetPortfolioSummaryUseCase",
    "PortfolioView",
    "ProjectSummary",
    "GetProjectAggregateUseCase",
    "ProjectAggregate",
]
