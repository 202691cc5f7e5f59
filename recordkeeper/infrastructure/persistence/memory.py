"""In-memory implementations of KeyedRepository and SequenceLog."""

from __future__ import annotations

import logging
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from recordkeeper.domain.exceptions import DuplicateKeyError, InvalidValueError, NotFoundError
from recordkeeper.domain.models.inventory import StockItem
from recordkeeper.domain.repositories.base import KeyedRepository, SequenceLog
from recordkeeper.domain.repositories.inventory import InventoryRepository

logger = logging.getLogger(__name__)

K = TypeVar("K")
M = TypeVar("M", bound=BaseModel)
S = TypeVar("S", bound=StockItem)
T = TypeVar("T")


class InMemoryRepository(KeyedRepository[K, M]):
    """Dict-backed repository for Pydantic models exposing a ``key`` property.

    The model class is needed up front so update_field can validate a new
    value against the field's declared constraints before looking up the key.
    ``container`` names the collection in error messages.
    """

    def __init__(self, model: type[M], container: str = "inventory") -> None:
        self._model = model
        self._container = container
        self._items: dict[Any, M] = {}

    def add(self, item: M) -> None:
        key = item.key
        if key in self._items:
            raise DuplicateKeyError(key, self._container)
        self._items[key] = item
        logger.debug("Stored %s %s", self._model.__name__, key)

    def get(self, key: K) -> M:
        try:
            return self._items[key]
        except KeyError:
            raise NotFoundError(key, self._container) from None

    def remove(self, key: K) -> None:
        if key not in self._items:
            raise NotFoundError(key, self._container)
        del self._items[key]
        logger.debug("Removed %s %s", self._model.__name__, key)

    def update_field(self, key: K, field: str, value: Any) -> M:
        validated = self._validate_field(field, value)
        item = self.get(key)
        updated = item.model_copy(update={field: validated})
        # Items stay filed under their key, so the key itself is immutable.
        if updated.key != key:
            raise InvalidValueError(
                field, value, f"Cannot change the key of {self._model.__name__} {key}. Provided: {value}"
            )
        if self._model.model_config.get("frozen"):
            item = updated
            self._items[key] = item
        else:
            setattr(item, field, validated)
        logger.debug("Updated %s %s: %s=%r", self._model.__name__, key, field, validated)
        return item

    def list_all(self) -> list[M]:
        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def _validate_field(self, field: str, value: Any) -> Any:
        info = self._model.model_fields.get(field)
        if info is None:
            raise InvalidValueError(field, value, f"{self._model.__name__} has no field '{field}'.")
        field_type = Annotated[(info.annotation, *info.metadata)] if info.metadata else info.annotation
        try:
            return TypeAdapter(field_type).validate_python(value)
        except ValidationError as exc:
            reason = exc.errors()[0]["msg"]
            raise InvalidValueError(
                field, value, f"Invalid {field}: {reason}. Provided: {value}"
            ) from exc


class InMemoryInventoryRepository(InMemoryRepository[int, S], InventoryRepository[S]):
    """Stock repository keyed by item ID."""


class InMemoryLog(SequenceLog[T]):
    """List-backed append-only sequence."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def append(self, item: T) -> None:
        self._items.append(item)

    def snapshot(self) -> list[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)
