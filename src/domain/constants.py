"""Domain constants for construction ledger analytics."""

PROJECT_STATUSES = (
    "active",
    "paused",
    "completed",
    "cancelled",
)

PROJECT_STATUS_LABELS = {
    "active": "Active",
    "paused": "Paused",
    "completed": "Completed",
    "cancelled": "Cancelled",
}

DEFAULT_CATEGORY = "other"

EXPENSE_CATEGORY_LABELS = {
    "materials": "Materials",
    "freight": "Freight",
    "meals": "Meals",
    "labor": "Labor",
    "equipment": "Equipment",
    "other": "Other",
}

# Utilization reported for projects without a budget. Pending product
# clarification; "not applicable" (None) is the alternative policy.
ZERO_BUDGET_UTILIZATION = 0

DEFAULT_CURRENCY = "BRL"

DEFAULT_REPORT_TITLE = "Project Financial Report"


__all__ = [
    "PROJECT_STATUSES",
    "PROJECT_STATUS_LABELS",
    "DEFAULT_CATEGORY",
    "EXPENSE_CATEGORY_LABELS",
    "ZERO_BUDGET_UTILIZATION",
    "DEFAULT_CURRENCY",
    "DEFAULT_REPORT_TITLE",
]
