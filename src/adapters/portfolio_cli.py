"""CLI adapter printing the consolidated portfolio of a client."""

import os

from src.infrastructure.container import build_portfolio_use_case


def main() -> None:
    """Consolidate the projects of ``LEDGER_OWNER_ID`` (all when unset)."""
    owner_id = os.getenv("LEDGER_OWNER_ID") or None
    view = build_portfolio_use_case().execute(owner_id=owner_id)
    consolidated = view.consolidated

    print(f"Portfolio (owner={owner_id or 'all'})")
    print(
        f"projects={consolidated.total_projects}, "
        f"budget={consolidated.total_budget}, "
        f"paid={consolidated.total_paid}, "
        f"income={consolidated.total_income}, "
        f"expenses={consolidated.total_expenses}, "
        f"balance={consolidated.total_balance}"
    )
    for summary in view.projects:
        aggregate = summary.aggregate
        print(
            f"  {summary.project.name}: balance={aggregate.balance}, "
            f"spent={aggregate.utilization_percent}%"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
