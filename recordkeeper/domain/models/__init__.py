"""Domain model package.

All domain objects are Pydantic models with no I/O concerns.  Import from
this package to avoid coupling application code to individual module paths.
"""

from .enums import AccountKind, Grade, PaymentChannel
from .finance import Account, Transaction, TransactionOutcome
from .grading import GradeDistribution, Student
from .healthcare import Patient, Prescription
from .inventory import ElectronicItem, GroceryItem, InventoryItem, StockItem

__all__ = [
    # enums
    "AccountKind",
    "Grade",
    "PaymentChannel",
    # inventory
    "InventoryItem",
    "StockItem",
    "ElectronicItem",
    "GroceryItem",
    # healthcare
    "Patient",
    "Prescription",
    # grading
    "Student",
    "GradeDistribution",
    # finance
    "Account",
    "Transaction",
    "TransactionOutcome",
]
