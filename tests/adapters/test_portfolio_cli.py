"""Tests for the portfolio_cli adapter."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.adapters import portfolio_cli
from src.application.use_cases.get_portfolio_summary import PortfolioView
from src.domain.models.finance import ConsolidatedAggregate


def test_main_prints_consolidated_totals(monkeypatch, capsys):
    fake_use_case = MagicMock()
    fake_use_case.execute.return_value = PortfolioView(
        consolidated=ConsolidatedAggregate(
            total_projects=2,
            total_balance=Decimal("300"),
        ),
        projects=[],
    )
    monkeypatch.setenv("LEDGER_OWNER_ID", "client-1")
    monkeypatch.setattr(
        portfolio_cli,
        "build_portfolio_use_case",
        lambda: fake_use_case,
    )

    portfolio_cli.main()

    fake_use_case.execute.assert_called_once_with(owner_id="client-1")
    captured = capsys.readouterr()
    assert "projects=2" in captured.out
    assert "balance=300" in captured.out
