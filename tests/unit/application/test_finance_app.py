"""Tests for recordkeeper/application/finance.py."""

from datetime import datetime
from decimal import Decimal

from recordkeeper.application.finance import FinanceApp, run_finance_demo


NOW = datetime(2025, 3, 14, 12, 0, 0)


def test_run_final_balance_skips_oversized_transaction():
    account = FinanceApp(echo=lambda line: None, now=NOW).run()
    assert account.balance == Decimal("714.50")


def test_run_records_three_transactions():
    app = FinanceApp(echo=lambda line: None, now=NOW)
    app.run()
    assert [t.id for t in app.transactions.snapshot()] == [1, 2, 3]


def test_run_narration():
    lines = []
    FinanceApp(echo=lines.append, now=NOW).run()
    assert "[MOBILE MONEY] Processing $150.75 transaction for Groceries" in lines
    assert "Total transaction amount: $285.50" in lines
    assert "Final account balance: $714.50" in lines
    assert lines[-1] == (
        "Insufficient funds in Savings Account SAV-001. Required: $2000.00, Available: $714.50"
    )


def test_run_dates_are_relative_to_now():
    lines = []
    FinanceApp(echo=lines.append, now=NOW).run()
    assert "ID: 1, Date: 2025-03-12, Amount: $150.75, Category: Groceries" in lines


def test_run_finance_demo_returns_account():
    assert run_finance_demo(echo=lambda line: None).account_number == "SAV-001"
