"""Transaction service: payment-channel narration and account application.

Payment channels and account kinds are closed enumerations.  Behaviour is
looked up in dispatch tables keyed by the enum rather than spread across
subclasses.

Insufficient funds on a SAVINGS account skips the transaction entirely: the
balance is left as it was and the outcome reports applied=False.  There is
no partial application.
"""

from __future__ import annotations

from collections.abc import Callable

from recordkeeper.domain.models.enums import AccountKind, PaymentChannel
from recordkeeper.domain.models.finance import Account, Transaction, TransactionOutcome

_CHANNEL_LABELS: dict[PaymentChannel, tuple[str, str]] = {
    PaymentChannel.BANK_TRANSFER: (
        "BANK TRANSFER",
        "Transfer completed via traditional banking system on {date}",
    ),
    PaymentChannel.MOBILE_MONEY: (
        "MOBILE MONEY",
        "Mobile payment completed instantly on {date}",
    ),
    PaymentChannel.CRYPTO_WALLET: (
        "CRYPTO WALLET",
        "Blockchain transaction recorded on {date}",
    ),
}


def _apply_standard(account: Account, transaction: Transaction) -> TransactionOutcome:
    account.balance -= transaction.amount
    return TransactionOutcome(
        applied=True,
        balance=account.balance,
        message=(
            f"Transaction applied to Account {account.account_number}. "
            f"New balance: ${account.balance:.2f}"
        ),
    )


def _apply_savings(account: Account, transaction: Transaction) -> TransactionOutcome:
    if transaction.amount > account.balance:
        return TransactionOutcome(
            applied=False,
            balance=account.balance,
            message=(
                f"Insufficient funds in Savings Account {account.account_number}. "
                f"Required: ${transaction.amount:.2f}, Available: ${account.balance:.2f}"
            ),
        )
    account.balance -= transaction.amount
    return TransactionOutcome(
        applied=True,
        balance=account.balance,
        message=(
            f"Savings Account {account.account_number} - Transaction processed successfully. "
            f"Updated balance: ${account.balance:.2f}"
        ),
    )


_APPLY_BY_KIND: dict[AccountKind, Callable[[Account, Transaction], TransactionOutcome]] = {
    AccountKind.STANDARD: _apply_standard,
    AccountKind.SAVINGS: _apply_savings,
}


class TransactionService:
    """Stateless dispatch over payment channels and account kinds."""

    def process(self, transaction: Transaction, channel: PaymentChannel) -> list[str]:
        """Return the narration lines for sending transaction through channel."""
        label, completion = _CHANNEL_LABELS[channel]
        return [
            f"[{label}] Processing ${transaction.amount:.2f} transaction for {transaction.category}",
            completion.format(date=f"{transaction.date:%Y-%m-%d}"),
        ]

    def apply(self, account: Account, transaction: Transaction) -> TransactionOutcome:
        """Deduct transaction.amount from account according to its kind."""
        return _APPLY_BY_KIND[account.kind](account, transaction)
