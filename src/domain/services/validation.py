"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger

from src.domain.constants import PROJECT_STATUSES


def validate_entry_amount(
    entry_id: str,
    amount: Decimal,
    logger: Logger,
) -> None:
    """Warn when an entry amount is not strictly positive.

    Producers reject such amounts; the aggregate still includes them.

    Args:
        entry_id: Identifier of the expense or income entry.
        amount: Entry amount.
        logger: Logger used for warnings.
    """
    if amount <= 0:
        logger.warning(
            f"Entry amount is not positive for entry_id={entry_id}: {amount}"
        )


def validate_project_status(
    project_id: str,
    status: str,
    logger: Logger,
) -> None:
    """Warn when a project status is outside the known statuses."""
    if status not in PROJECT_STATUSES:
        logger.warning(
            f"Unknown status for project_id={project_id}: {status}"
        )


__all__ = ["validate_entry_amount", "validate_project_status"]
