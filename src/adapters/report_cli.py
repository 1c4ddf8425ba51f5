"""CLI adapter to build a project report.

Prints the report summary and optionally writes the report document as JSON
under the file name recorded in the report.
"""

import argparse
import json
from pathlib import Path

from src.domain.services.reporting import JSON_EXTENSION
from src.infrastructure.container import build_report_use_case
from src.infrastructure.logging.logger import get_app_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build the financial report of a project.",
    )
    parser.add_argument("project_id", help="Identifier of the project.")
    parser.add_argument(
        "--owner-id",
        default=None,
        help="Client owning the project (default: search every project).",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory where the JSON report is written.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Build a report and print its summary.

    Returns:
        int: Process exit code.
    """
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    use_case = build_report_use_case(extension=JSON_EXTENSION)
    try:
        report = use_case.execute(
            project_id=args.project_id,
            owner_id=args.owner_id,
        )
    except LookupError as exc:
        logger.error(str(exc))
        return 1

    summary = report.summary
    print(f"{report.header.title}: {report.header.project_name}")
    print(
        f"status={report.header.status}, "
        f"start={report.header.start_date.isoformat()}"
    )
    print(
        f"budget={summary.budget_amount} {summary.currency_code}, "
        f"paid={summary.paid_amount}, balance={summary.balance}, "
        f"spent={summary.utilization_percent}%"
    )
    for row in report.category_rows or ():
        print(f"  {row.label}: {row.amount}")

    if args.output_dir is not None:
        args.output_dir.mkdir(parents=True, exist_ok=True)
        target = args.output_dir / report.filename
        target.write_text(
            json.dumps(report.to_dict(), indent=2),
            encoding="utf-8",
        )
        print(f"Report written to {target}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
