"""Tests for domain normalization helpers."""

from datetime import date, datetime

import pytest

from src.domain.services.normalization import (
    InvalidEntryDateError,
    category_display_label,
    format_report_category_label,
    normalize_category,
    parse_entry_date,
    status_display_label,
)


def test_normalize_category_strips_and_falls_back() -> None:
    assert normalize_category("  labor ") == "labor"
    assert normalize_category(None) == "other"
    assert normalize_category("\t") == "other"


def test_parse_entry_date_truncates_to_day() -> None:
    assert parse_entry_date(date(2025, 1, 2)) == date(2025, 1, 2)
    assert parse_entry_date(datetime(2025, 1, 2, 23, 59)) == date(2025, 1, 2)
    assert parse_entry_date("2025-01-02") == date(2025, 1, 2)
    assert parse_entry_date("2025-01-02T10:00:00+00:00") == date(2025, 1, 2)


@pytest.mark.parametrize(
    "value",
    [
        "",
        "02/01/2025",
        "2025-13-01",
        "2025-01-15garbage",
        "2025-01-15T99:99",
        None,
        20250102,
    ],
)
def test_parse_entry_date_rejects_malformed_values(value) -> None:
    with pytest.raises(InvalidEntryDateError):
        parse_entry_date(value)


def test_labels_for_display() -> None:
    assert category_display_label("labor") == "Labor"
    assert category_display_label("site_security") == "Site security"
    assert format_report_category_label("site_security") == "SITE SECURITY"
    assert status_display_label("paused") == "Paused"
    assert status_display_label("archived") == "archived"


def test_parse_entry_date_accepts_database_timestamps() -> None:
    assert parse_entry_date("2025-01-15 08:30:00") == date(2025, 1, 15)
    assert parse_entry_date(" 2025-01-15 ") == date(2025, 1, 15)
