"""Tests for the project report generator."""

from datetime import date, datetime, timezone
from decimal import Decimal

from src.domain.models.finance import GroupedTotals
from src.domain.models.projects import ExpenseEntry, Project
from src.domain.services.finance import compute_project_aggregate
from src.domain.services.reporting import (
    build_report,
    report_filename,
)

GENERATED_AT = datetime(2025, 4, 1, 12, 0, tzinfo=timezone.utc)


def _project(name: str = "Riverside House") -> Project:
    return Project(
        project_id="p-1",
        name=name,
        budget_amount=Decimal("10000"),
        paid_amount=Decimal("2000"),
        start_date=date(2025, 1, 10),
        status="active",
    )


def _expense(entry_id: str, amount: str, category: str) -> ExpenseEntry:
    return ExpenseEntry(
        entry_id=entry_id,
        project_id="p-1",
        entry_date=date(2025, 1, 15),
        category=category,
        description="",
        amount=Decimal(amount),
    )


def _report(expenses: list[ExpenseEntry]):
    project = _project()
    aggregate = compute_project_aggregate(project, expenses, [])
    return build_report(
        project,
        aggregate,
        aggregate.category_totals,
        generated_at=GENERATED_AT,
    )


def test_report_sections_follow_project_and_aggregate() -> None:
    report = _report(
        [_expense("e-1", "1000", "labor"), _expense("e-2", "3000", "materials")]
    )

    assert report.header.project_name == "Riverside House"
    assert report.header.status == "Active"
    assert report.header.start_date == date(2025, 1, 10)
    assert report.summary.budget_amount == Decimal("10000.00")
    assert report.summary.paid_amount == Decimal("2000.00")
    assert report.summary.balance == Decimal("-2000.00")
    assert report.summary.utilization_percent == 40
    assert report.generated_at == GENERATED_AT


def test_category_rows_sorted_by_descending_amount() -> None:
    report = _report(
        [
            _expense("e-1", "10", "mao_de_obra"),
            _expense("e-2", "30.333", "materials"),
            _expense("e-3", "10", "equipment"),
        ]
    )

    assert [(row.label, row.amount) for row in report.category_rows] == [
        ("MATERIALS", Decimal("30.33")),
        ("EQUIPMENT", Decimal("10.00")),
        ("MAO DE OBRA", Decimal("10.00")),
    ]


def test_category_table_omitted_without_expenses() -> None:
    report = _report([])

    assert report.category_rows is None
    assert not report.has_category_table
    assert "categories" not in report.to_dict()


def test_report_generation_is_idempotent() -> None:
    expenses = [
        _expense("e-1", "5", "labor"),
        _expense("e-2", "5", "freight"),
        _expense("e-3", "7", "materials"),
    ]

    first = _report(expenses)
    second = _report(expenses)

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_to_dict_keeps_section_order() -> None:
    report = _report([_expense("e-1", "1", "labor")])

    assert list(report.to_dict()) == [
        "header",
        "summary",
        "categories",
        "generated_at",
        "filename",
    ]


def test_default_timestamp_is_timezone_aware() -> None:
    project = _project()
    aggregate = compute_project_aggregate(project, [], [])

    report = build_report(project, aggregate, GroupedTotals())

    assert report.generated_at.tzinfo is not None


def test_report_filename_is_deterministic() -> None:
    assert report_filename("Riverside House") == "report-riverside-house.pdf"
    assert (
        report_filename("Casa  Nova", extension="json")
        == "report-casa--nova.json"
    )
    assert _report([]).filename == "report-riverside-house.pdf"


def test_categories_with_same_printed_label_share_one_row() -> None:
    report = _report(
        [
            _expense("e-1", "100", "labor_extra"),
            _expense("e-2", "50", "materials"),
            _expense("e-3", "25", "labor extra"),
        ]
    )

    assert [(row.label, row.amount) for row in report.category_rows] == [
        ("LABOR EXTRA", Decimal("125.00")),
        ("MATERIALS", Decimal("50.00")),
    ]
