"""Finance transaction demo.

Three transactions are narrated through different payment channels, applied
to a savings account, and recorded in a transaction log.  A final oversized
transaction shows the savings account refusing it.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal

import click

from recordkeeper.domain.models.enums import PaymentChannel
from recordkeeper.domain.models.finance import Account, Transaction
from recordkeeper.domain.services.finance import TransactionService
from recordkeeper.infrastructure.persistence.memory import InMemoryLog

from .output import OutputSink


class FinanceApp:
    def __init__(self, echo: OutputSink = click.echo, now: datetime | None = None) -> None:
        self.transactions: InMemoryLog[Transaction] = InMemoryLog()
        self._service = TransactionService()
        self._echo = echo
        self._now = now or datetime.now()

    def run(self) -> Account:
        echo = self._echo
        echo("=== Finance Management System ===\n")

        account = Account.create_savings("SAV-001", Decimal("1000.00"))
        echo(
            f"Created Savings Account: {account.account_number} "
            f"with initial balance: ${account.balance:.2f}\n"
        )

        scripted = [
            (
                Transaction(id=1, date=self._now - timedelta(days=2), amount=Decimal("150.75"), category="Groceries"),
                PaymentChannel.MOBILE_MONEY,
            ),
            (
                Transaction(id=2, date=self._now - timedelta(days=1), amount=Decimal("89.50"), category="Utilities"),
                PaymentChannel.BANK_TRANSFER,
            ),
            (
                Transaction(id=3, date=self._now, amount=Decimal("45.25"), category="Entertainment"),
                PaymentChannel.CRYPTO_WALLET,
            ),
        ]

        for transaction, channel in scripted:
            echo(f"--- Processing Transaction {transaction.id} ---")
            for line in self._service.process(transaction, channel):
                echo(line)
            echo("")

        echo("--- Applying Transactions to Savings Account ---")
        for transaction, _ in scripted:
            echo(self._service.apply(account, transaction).message)
        echo("")

        for transaction, _ in scripted:
            self.transactions.append(transaction)

        recorded = self.transactions.snapshot()
        echo("--- Transaction Summary ---")
        echo(f"Total transactions processed: {len(recorded)}")
        total = Decimal("0")
        for txn in recorded:
            echo(
                f"ID: {txn.id}, Date: {txn.date:%Y-%m-%d}, Amount: ${txn.amount:.2f}, "
                f"Category: {txn.category}"
            )
            total += txn.amount
        echo(f"Total transaction amount: ${total:.2f}")
        echo(f"Final account balance: ${account.balance:.2f}")

        echo("\n--- Testing Insufficient Funds Scenario ---")
        large = Transaction(id=4, date=self._now, amount=Decimal("2000.00"), category="Large Purchase")
        echo(self._service.apply(account, large).message)
        return account


def run_finance_demo(echo: OutputSink = click.echo) -> Account:
    return FinanceApp(echo=echo).run()
