"""Report generation for a single project."""

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

from src.domain.constants import DEFAULT_CURRENCY, DEFAULT_REPORT_TITLE
from src.domain.models.finance import GroupedTotals, ProjectAggregate
from src.domain.models.projects import Project
from src.domain.models.reports import (
    Report,
    ReportCategoryRow,
    ReportHeader,
    ReportSummary,
)
from src.domain.services.grouping import group_totals
from src.domain.services.normalization import (
    format_report_category_label,
    slugify_filename,
    status_display_label,
)
from src.utils.decimal_utils import coerce_decimal


REPORT_FILE_PREFIX = "report"
JSON_EXTENSION = "json"
CENTS = Decimal("0.01")


def report_filename(project_name: str, extension: str = "pdf") -> str:
    """Return the export file name for a project report.

    Args:
        project_name: Project display name.
        extension: File extension without the dot.

    Returns:
        str: Name such as ``report-riverside-house.pdf``.
    """
    return f"{REPORT_FILE_PREFIX}-{slugify_filename(project_name)}.{extension}"


def build_category_rows(
    category_totals: GroupedTotals,
) -> tuple[ReportCategoryRow, ...] | None:
    """Return category rows by descending amount, or None when empty.

    Categories sharing a printed label are folded into one row.
    """
    if not category_totals:
        return None
    by_label = group_totals(
        category_totals.items(),
        key=lambda pair: format_report_category_label(pair[0]),
        value=lambda pair: pair[1],
    )
    ordered = sorted(
        by_label.items(),
        key=lambda pair: (-pair[1], pair[0]),
    )
    return tuple(
        ReportCategoryRow(label=label, amount=_round_amount(amount))
        for label, amount in ordered
    )


def build_report(
    project: Project,
    aggregate: ProjectAggregate,
    category_totals: GroupedTotals,
    *,
    generated_at: datetime | None = None,
    currency_code: str = DEFAULT_CURRENCY,
    title: str = DEFAULT_REPORT_TITLE,
    extension: str = "pdf",
) -> Report:
    """Assemble the exportable report of a project.

    Identical inputs, including ``generated_at``, always produce an equal
    report.

    Args:
        project: Project being reported.
        aggregate: Aggregate computed for the project.
        category_totals: Expense totals per category.
        generated_at: Generation timestamp; defaults to now in UTC.
        currency_code: Currency of every amount.
        title: Document title.
        extension: Extension of the exported file named in the report.

    Returns:
        Report: Header, summary, optional category table and file name.
    """
    header = ReportHeader(
        title=title,
        project_name=project.name,
        status=status_display_label(project.status),
        start_date=project.start_date,
    )
    summary = ReportSummary(
        currency_code=currency_code,
        budget_amount=_round_amount(project.budget_amount),
        paid_amount=_round_amount(project.paid_amount),
        balance=_round_amount(aggregate.balance),
        utilization_percent=aggregate.utilization_percent,
    )
    return Report(
        header=header,
        summary=summary,
        category_rows=build_category_rows(category_totals),
        generated_at=generated_at or datetime.now(timezone.utc),
        filename=report_filename(project.name, extension=extension),
    )


def _round_amount(value) -> Decimal:
    return coerce_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


__all__ = [
    "REPORT_FILE_PREFIX",
    "JSON_EXTENSION",
    "report_filename",
    "build_category_rows",
    "build_report",
]
