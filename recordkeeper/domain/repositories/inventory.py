"""Inventory repository interface."""

from __future__ import annotations

from typing import TypeVar

from recordkeeper.domain.exceptions import InvalidValueError
from recordkeeper.domain.models.inventory import StockItem

from .base import KeyedRepository

S = TypeVar("S", bound=StockItem)


class InventoryRepository(KeyedRepository[int, S]):
    """Keyed store of warehouse stock items, keyed by item ID.

    update_quantity is the only supported mutation; every other field is
    fixed once the item is stored.
    """

    def update_quantity(self, item_id: int, quantity: int) -> S:
        """Set the stored quantity.

        Raises InvalidValueError for a negative quantity (even when the item
        does not exist), NotFoundError when item_id is absent.
        """
        if quantity < 0:
            raise InvalidValueError(
                "quantity",
                quantity,
                f"Quantity cannot be negative. Provided: {quantity}",
            )
        return self.update_field(item_id, "quantity", quantity)
