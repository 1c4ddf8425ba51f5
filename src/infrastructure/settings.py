"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

import dotenv

from src.domain.constants import DEFAULT_CURRENCY, DEFAULT_REPORT_TITLE
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


DEFAULT_FETCH_WORKERS = 4


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the ledger backend and reports.

    Attributes:
        backend: Backend identifier (sqlalchemy or memory).
        fixture_file: Optional JSON fixture for the memory backend.
        currency_code: Currency printed on dashboards and reports.
        fetch_workers: Concurrent entry fetches for portfolio views.
        report_title: Title of exported reports.
    """

    backend: str = "sqlalchemy"
    fixture_file: Optional[Path] = None
    currency_code: str = DEFAULT_CURRENCY
    fetch_workers: int = DEFAULT_FETCH_WORKERS
    report_title: str = DEFAULT_REPORT_TITLE

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        backend = os.getenv("LEDGER_BACKEND", "sqlalchemy").strip().lower()
        raw_fixture = os.getenv("LEDGER_FIXTURE_FILE")
        if raw_fixture:
            fixture_file = cls._normalize_path(raw_fixture, logger=logger)
        else:
            fixture_file = cls._default_fixture_file(logger=logger)
        currency_code = (
            os.getenv("LEDGER_CURRENCY", DEFAULT_CURRENCY).strip().upper()
            or DEFAULT_CURRENCY
        )
        return cls(
            backend=backend,
            fixture_file=fixture_file,
            currency_code=currency_code,
            fetch_workers=cls._parse_workers(
                os.getenv("LEDGER_FETCH_WORKERS"),
                logger=logger,
            ),
            report_title=os.getenv("LEDGER_REPORT_TITLE")
            or DEFAULT_REPORT_TITLE,
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the fixture file path.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Resolved filesystem path.
        """
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Ledger fixture file does not exist at {path}")
        return path

    @staticmethod
    def _default_fixture_file(logger) -> Path | None:
        """Return a default fixture path when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single fixture is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json fixtures found in data/. "
                "Set LEDGER_FIXTURE_FILE to choose one."
            )
        return None

    @staticmethod
    def _parse_workers(raw_value: str | None, logger) -> int:
        if not raw_value:
            return DEFAULT_FETCH_WORKERS
        try:
            workers = int(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid LEDGER_FETCH_WORKERS '{raw_value}'. "
                f"Using {DEFAULT_FETCH_WORKERS}."
            )
            return DEFAULT_FETCH_WORKERS
        return max(1, workers)


__all__ = ["LedgerSettings", "DEFAULT_FETCH_WORKERS"]
