"""Persistence package.

Exports the in-memory collection implementations and the JSON file logger.
"""

from .json_log import JsonFileLogger
from .memory import InMemoryInventoryRepository, InMemoryLog, InMemoryRepository

__all__ = [
    "InMemoryRepository",
    "InMemoryInventoryRepository",
    "InMemoryLog",
    "JsonFileLogger",
]
