"""Finance domain models.

Amounts and balances are Decimal so currency arithmetic stays exact.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from .enums import AccountKind


class Transaction(BaseModel):
    """An immutable payment record."""

    model_config = ConfigDict(frozen=True)

    id: int
    date: datetime
    amount: Decimal
    category: str

    @property
    def key(self) -> int:
        return self.id


class Account(BaseModel):
    """A bank account.  Only balance changes after construction."""

    model_config = ConfigDict(validate_assignment=True)

    account_number: str
    kind: AccountKind = AccountKind.STANDARD
    balance: Decimal

    @property
    def key(self) -> str:
        return self.account_number

    @classmethod
    def create_savings(cls, account_number: str, initial_balance: Decimal) -> Account:
        return cls(account_number=account_number, kind=AccountKind.SAVINGS, balance=initial_balance)


class TransactionOutcome(BaseModel):
    """Result of applying a transaction to an account.

    applied is False when the account refused the transaction; balance is the
    account balance after the call either way.
    """

    model_config = ConfigDict(frozen=True)

    applied: bool
    balance: Decimal
    message: str
