"""Domain collection interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in recordkeeper/infrastructure/persistence/.

Import from this package rather than individual modules to avoid coupling
callers to specific repository module paths.
"""

from .base import Keyed, KeyedRepository, PersistentLog, RestoreStatus, SequenceLog
from .inventory import InventoryRepository

__all__ = [
    "Keyed",
    "KeyedRepository",
    "InventoryRepository",
    "SequenceLog",
    "PersistentLog",
    "RestoreStatus",
]
