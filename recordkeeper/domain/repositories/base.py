"""Generic collection base interfaces.

KeyedRepository[K, V] is the root abstraction for keyed collections and
SequenceLog[V] for ordered, append-only ones.  Concrete implementations live
in recordkeeper/infrastructure/persistence/ and are wired by the demo
applications.

Design notes:
  - V must satisfy the Keyed protocol: a read-only ``key`` property that is
    unique within a repository.
  - Keyed operations raise the named errors from recordkeeper.domain.exceptions
    and never retry; a failed call leaves the collection unchanged.
  - list_all() and snapshot() return new lists; mutating them does not touch
    the stored collection.
  - Everything is synchronous.  Nothing here is safe for concurrent use.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable
from enum import Enum
from pathlib import Path
from typing import Any, Generic, Protocol, TypeVar


class Keyed(Protocol):
    """The capability a repository requires from what it stores."""

    @property
    def key(self) -> Hashable: ...


K = TypeVar("K", bound=Hashable)
V = TypeVar("V", bound=Keyed)
T = TypeVar("T")


class KeyedRepository(ABC, Generic[K, V]):
    """Abstract keyed CRUD interface enforcing uniqueness and existence."""

    @abstractmethod
    def add(self, item: V) -> None:
        """Store a new item.  Raises DuplicateKeyError if item.key is already stored."""

    @abstractmethod
    def get(self, key: K) -> V:
        """Return the stored item.  Raises NotFoundError if absent."""

    @abstractmethod
    def remove(self, key: K) -> None:
        """Delete the stored item.  Raises NotFoundError if absent."""

    @abstractmethod
    def update_field(self, key: K, field: str, value: Any) -> V:
        """Set one field of a stored item and return the updated item.

        Raises InvalidValueError when value violates the field's constraint
        (checked before existence), NotFoundError when the key is absent.
        """

    @abstractmethod
    def list_all(self) -> list[V]:
        """Return every stored item in insertion order."""

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def __contains__(self, key: object) -> bool: ...

    def find(self, predicate: Callable[[V], bool]) -> V | None:
        """Return the first item matching predicate, or None."""
        return next((item for item in self.list_all() if predicate(item)), None)

    def filter(self, predicate: Callable[[V], bool]) -> list[V]:
        """Return every item matching predicate, in insertion order."""
        return [item for item in self.list_all() if predicate(item)]


class RestoreStatus(str, Enum):
    LOADED = "loaded"
    MISSING = "missing"
    FAILED = "failed"


class SequenceLog(ABC, Generic[T]):
    """Ordered, append-only record sequence with no uniqueness constraint."""

    @abstractmethod
    def append(self, item: T) -> None:
        """Add item to the end of the sequence."""

    @abstractmethod
    def snapshot(self) -> list[T]:
        """Return a copy of the full sequence."""

    @abstractmethod
    def __len__(self) -> int: ...


class PersistentLog(SequenceLog[T]):
    """A SequenceLog that can write itself to and replace itself from a file.

    Failures are reported through logging and the return value rather than
    raised: a failed persist leaves the previous file in place, a failed or
    skipped restore leaves the in-memory sequence unchanged.
    """

    @abstractmethod
    def persist_all(self, path: str | Path | None = None) -> bool:
        """Write the whole sequence to path.  Returns False on failure."""

    @abstractmethod
    def restore_all(self, path: str | Path | None = None) -> RestoreStatus:
        """Replace the sequence with the contents of path."""
