"""Tests for recordkeeper/domain/models/finance.py."""

from datetime import datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError

from recordkeeper.domain.models.enums import AccountKind
from recordkeeper.domain.models.finance import Account, Transaction


def test_create_savings_sets_kind():
    account = Account.create_savings("SAV-001", Decimal("1000.00"))
    assert account.kind is AccountKind.SAVINGS
    assert account.balance == Decimal("1000.00")


def test_account_defaults_to_standard():
    account = Account(account_number="CHK-1", balance=Decimal("10"))
    assert account.kind is AccountKind.STANDARD


def test_account_key_is_account_number():
    assert Account(account_number="CHK-1", balance=Decimal("0")).key == "CHK-1"


def test_transaction_is_frozen():
    txn = Transaction(id=1, date=datetime(2025, 1, 1), amount=Decimal("1.00"), category="X")
    with pytest.raises(ValidationError):
        txn.amount = Decimal("2.00")  # type: ignore[misc]


def test_transaction_amount_parsed_as_decimal():
    txn = Transaction(id=1, date=datetime(2025, 1, 1), amount="150.75", category="Groceries")
    assert txn.amount == Decimal("150.75")
