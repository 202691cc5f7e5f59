"""Inventory domain models.

InventoryItem is the immutable record kept by the inventory logger.
ElectronicItem and GroceryItem are warehouse stock items: every field is
fixed at construction except quantity, which is updated in place.
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class InventoryItem(BaseModel):
    """A logged inventory entry.  Immutable once constructed."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    quantity: int = Field(ge=0)
    date_added: datetime

    @property
    def key(self) -> int:
        return self.id

    def describe(self) -> str:
        return f"{self.id} - {self.name}, Qty: {self.quantity}, Added: {self.date_added:%Y-%m-%d %H:%M:%S}"


class StockItem(BaseModel):
    """Shared shape of warehouse stock.

    validate_assignment keeps the non-negative quantity constraint enforced
    after construction, when the repository updates quantity in place.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int
    name: str
    quantity: int = Field(ge=0)

    @property
    def key(self) -> int:
        return self.id


class ElectronicItem(StockItem):
    brand: str
    warranty_months: int = Field(ge=0)

    def __str__(self) -> str:
        return (
            f"Electronic: {self.name} (ID: {self.id}, Brand: {self.brand}, "
            f"Quantity: {self.quantity}, Warranty: {self.warranty_months} months)"
        )


class GroceryItem(StockItem):
    expiry_date: date

    def __str__(self) -> str:
        return (
            f"Grocery: {self.name} (ID: {self.id}, Quantity: {self.quantity}, "
            f"Expires: {self.expiry_date:%Y-%m-%d})"
        )
