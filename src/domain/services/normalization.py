"""Domain normalization helpers."""

from datetime import date, datetime
import re

from src.domain.constants import (
    DEFAULT_CATEGORY,
    EXPENSE_CATEGORY_LABELS,
    PROJECT_STATUS_LABELS,
)


class InvalidEntryDateError(ValueError):
    """Raised when an entry date cannot be read as a calendar day."""


def normalize_category(category: str | None) -> str:
    """Normalize expense category labels.

    Args:
        category: Raw category label from a repository.

    Returns:
        str: Stripped label, or ``DEFAULT_CATEGORY`` when missing or blank.
    """
    if not category:
        return DEFAULT_CATEGORY
    cleaned = category.strip()
    return cleaned if cleaned else DEFAULT_CATEGORY


def category_display_label(category: str) -> str:
    """Return the dashboard label for a category key."""
    if category in EXPENSE_CATEGORY_LABELS:
        return EXPENSE_CATEGORY_LABELS[category]
    return category.replace("_", " ").strip().capitalize()


def format_report_category_label(category: str) -> str:
    """Return the report table label for a category key.

    Args:
        category: Normalized category key, e.g. ``labor_extra``.

    Returns:
        str: Upper-cased label with underscores as spaces.
    """
    return category.replace("_", " ").upper()


def status_display_label(status: str) -> str:
    """Return the display label for a project status."""
    return PROJECT_STATUS_LABELS.get(status, status)


def parse_entry_date(value) -> date:
    """Truncate an entry date to its calendar day.

    Args:
        value: ``date``, ``datetime`` or ISO 8601 string.

    Returns:
        date: Calendar day of the entry.

    Raises:
        InvalidEntryDateError: If the value is not a readable date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        cleaned = value.strip()
        try:
            return date.fromisoformat(cleaned)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(cleaned).date()
        except ValueError as exc:
            raise InvalidEntryDateError(
                f"Invalid entry date '{value}'. Expected an ISO 8601 date."
            ) from exc
    raise InvalidEntryDateError(f"Unsupported entry date value: {value!r}")


def slugify_filename(name: str, separator: str = "-") -> str:
    """Lower-case a name and replace each whitespace character."""
    return re.sub(r"\s", separator, name.lower())


__all__ = [
    "InvalidEntryDateError",
    "normalize_category",
    "category_display_label",
    "format_report_category_label",
    "status_display_label",
    "parse_entry_date",
    "slugify_filename",
]
