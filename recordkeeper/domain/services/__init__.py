"""Domain services package."""

from .finance import TransactionService
from .grading import GradingService
from .healthcare import PrescriptionService

__all__ = ["GradingService", "PrescriptionService", "TransactionService"]
