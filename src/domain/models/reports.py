"""Domain models for exportable project reports."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class ReportHeader:
    """Identification block printed at the top of a report."""

    title: str
    project_name: str
    status: str
    start_date: date


@dataclass(frozen=True)
class ReportSummary:
    """Financial summary block of a report."""

    currency_code: str
    budget_amount: Decimal
    paid_amount: Decimal
    balance: Decimal
    utilization_percent: int


@dataclass(frozen=True)
class ReportCategoryRow:
    """Single row of the expenses-by-category table."""

    label: str
    amount: Decimal


@dataclass(frozen=True)
class Report:
    """Ordered document structure handed to export collaborators.

    ``category_rows`` is ``None`` when the project has no expenses, in which
    case the category section is left out of the document entirely.
    """

    header: ReportHeader
    summary: ReportSummary
    category_rows: tuple[ReportCategoryRow, ...] | None
    generated_at: datetime
    filename: str

    @property
    def has_category_table(self) -> bool:
        return self.category_rows is not None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly dict keeping the section order."""
        document: dict[str, object] = {
            "header": {
                "title": self.header.title,
                "project_name": self.header.project_name,
                "status": self.header.status,
                "start_date": self.header.start_date.isoformat(),
            },
            "summary": {
                "currency_code": self.summary.currency_code,
                "budget_amount": str(self.summary.budget_amount),
                "paid_amount": str(self.summary.paid_amount),
                "balance": str(self.summary.balance),
                "utilization_percent": self.summary.utilization_percent,
            },
        }
        if self.category_rows is not None:
            document["categories"] = [
                {"label": row.label, "amount": str(row.amount)}
                for row in self.category_rows
            ]
        document["generated_at"] = self.generated_at.isoformat()
        document["filename"] = self.filename
        return document


__all__ = [
    "ReportHeader",
    "ReportSummary",
    "ReportCategoryRow",
    "Report",
]
