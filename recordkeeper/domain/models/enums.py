"""Domain enumerations for the record keeping demos.

All string-valued enums use str mixin so they serialize cleanly to JSON
and remain comparable to plain strings (Pydantic default behaviour).
"""

from __future__ import annotations

from enum import Enum


class Grade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    @property
    def score_range(self) -> tuple[int, int]:
        """Inclusive score bounds for this letter grade."""
        return {
            Grade.A: (80, 100),
            Grade.B: (70, 79),
            Grade.C: (60, 69),
            Grade.D: (50, 59),
            Grade.F: (0, 49),
        }[self]

    @classmethod
    def for_score(cls, score: int) -> Grade:
        for grade in cls:
            low, high = grade.score_range
            if low <= score <= high:
                return grade
        return cls.F


class PaymentChannel(str, Enum):
    BANK_TRANSFER = "bank_transfer"
    MOBILE_MONEY = "mobile_money"
    CRYPTO_WALLET = "crypto_wallet"


class AccountKind(str, Enum):
    """Account behaviour when a transaction is applied.

    STANDARD always deducts (the balance may go negative).
    SAVINGS refuses a transaction larger than the available balance.
    """

    STANDARD = "standard"
    SAVINGS = "savings"
