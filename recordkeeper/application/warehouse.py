"""Warehouse manager demo.

Two stock repositories (electronics and groceries) are seeded, printed, and
then driven through scripted failures (duplicate add, missing remove,
negative quantity) and successful updates.  Each failure is reported and the
script carries on with the next step.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import TypeVar

import click

from recordkeeper.domain.exceptions import (
    DuplicateKeyError,
    InvalidValueError,
    NotFoundError,
    RecordKeeperError,
)
from recordkeeper.domain.models.inventory import ElectronicItem, GroceryItem, StockItem
from recordkeeper.domain.repositories.inventory import InventoryRepository
from recordkeeper.infrastructure.persistence.memory import InMemoryInventoryRepository

from .output import OutputSink

S = TypeVar("S", bound=StockItem)


class WarehouseManager:
    def __init__(self, echo: OutputSink = click.echo, today: date | None = None) -> None:
        self.electronics: InMemoryInventoryRepository[ElectronicItem] = InMemoryInventoryRepository(
            ElectronicItem
        )
        self.groceries: InMemoryInventoryRepository[GroceryItem] = InMemoryInventoryRepository(
            GroceryItem
        )
        self._echo = echo
        self._today = today or date.today()

    def seed_data(self) -> None:
        try:
            self.electronics.add(
                ElectronicItem(id=1001, name="Laptop", quantity=15, brand="Dell", warranty_months=24)
            )
            self.electronics.add(
                ElectronicItem(id=1002, name="Smartphone", quantity=50, brand="Samsung", warranty_months=12)
            )
            self.electronics.add(
                ElectronicItem(id=1003, name="Tablet", quantity=25, brand="Apple", warranty_months=12)
            )

            self.groceries.add(
                GroceryItem(id=2001, name="Milk", quantity=100, expiry_date=self._today + timedelta(days=7))
            )
            self.groceries.add(
                GroceryItem(id=2002, name="Bread", quantity=75, expiry_date=self._today + timedelta(days=3))
            )
            self.groceries.add(
                GroceryItem(id=2003, name="Apples", quantity=200, expiry_date=self._today + timedelta(days=10))
            )
        except DuplicateKeyError as exc:
            self._echo(f"Error seeding data: {exc.message}")
            return
        self._echo("✓ Sample data seeded successfully!")

    def print_all_items(self, repo: InventoryRepository[S]) -> None:
        items = repo.list_all()
        if not items:
            self._echo("No items found in inventory.")
            return
        for item in items:
            self._echo(f"  {item}")

    def increase_stock(self, repo: InventoryRepository[S], item_id: int, quantity: int) -> bool:
        try:
            item = repo.get(item_id)
            new_quantity = item.quantity + quantity
            repo.update_quantity(item_id, new_quantity)
        except (NotFoundError, InvalidValueError) as exc:
            self._echo(f"✗ Error increasing stock: {exc.message}")
            return False
        self._echo(f"✓ Stock increased for {item.name}. New quantity: {new_quantity}")
        return True

    def remove_item_by_id(self, repo: InventoryRepository[S], item_id: int) -> bool:
        try:
            item = repo.get(item_id)
            repo.remove(item_id)
        except NotFoundError as exc:
            self._echo(f"✗ Error removing item: {exc.message}")
            return False
        self._echo(f"✓ Item removed: {item.name} (ID: {item_id})")
        return True


def run_warehouse_demo(echo: OutputSink = click.echo, today: date | None = None) -> WarehouseManager:
    echo("=== Warehouse Inventory Management System ===\n")
    warehouse = WarehouseManager(echo=echo, today=today)

    echo("1. Seeding Initial Data:")
    warehouse.seed_data()
    echo("")

    echo("2. All Grocery Items:")
    warehouse.print_all_items(warehouse.groceries)
    echo("")

    echo("3. All Electronic Items:")
    warehouse.print_all_items(warehouse.electronics)
    echo("")

    echo("4. Exception Handling Demonstrations:\n")

    echo("a) Attempting to add duplicate item:")
    try:
        warehouse.electronics.add(
            ElectronicItem(id=1001, name="Duplicate Laptop", quantity=10, brand="HP", warranty_months=12)
        )
        echo("✓ Item added successfully")
    except DuplicateKeyError as exc:
        echo(f"✗ {exc.message}")
    echo("")

    echo("b) Attempting to remove non-existent item:")
    warehouse.remove_item_by_id(warehouse.groceries, 9999)
    echo("")

    echo("c) Attempting to update with invalid quantity:")
    try:
        warehouse.groceries.update_quantity(2001, -50)
        echo("✓ Quantity updated successfully")
    except (InvalidValueError, NotFoundError) as exc:
        echo(f"✗ {exc.message}")
    echo("")

    echo("5. Successful Operations:")
    warehouse.increase_stock(warehouse.electronics, 1002, 25)
    warehouse.remove_item_by_id(warehouse.groceries, 2003)
    try:
        warehouse.electronics.update_quantity(1001, 20)
        echo("✓ Laptop quantity updated to 20")
    except RecordKeeperError as exc:
        echo(f"✗ Error: {exc.message}")

    echo("\n=== Final Inventory Status ===")
    echo("\nElectronics:")
    warehouse.print_all_items(warehouse.electronics)
    echo("\nGroceries:")
    warehouse.print_all_items(warehouse.groceries)
    return warehouse
