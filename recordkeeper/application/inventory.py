"""Inventory logger demo.

Seeds five items, saves them to a JSON snapshot, then simulates a fresh
session that restores the snapshot and prints it.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import click

from recordkeeper.domain.models.inventory import InventoryItem
from recordkeeper.domain.repositories.base import RestoreStatus
from recordkeeper.infrastructure.persistence.json_log import JsonFileLogger

from .output import OutputSink

SAMPLE_ITEMS: list[tuple[int, str, int]] = [
    (1, "Laptop", 5),
    (2, "Mouse", 20),
    (3, "Keyboard", 10),
    (4, "Monitor", 7),
    (5, "Printer", 3),
]


class InventoryApp:
    def __init__(
        self,
        file_path: str | Path,
        echo: OutputSink = click.echo,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._log = JsonFileLogger(InventoryItem, file_path)
        self._echo = echo
        self._now = now

    @property
    def items(self) -> list[InventoryItem]:
        return self._log.snapshot()

    def seed_sample_data(self) -> None:
        for item_id, name, quantity in SAMPLE_ITEMS:
            self._log.append(
                InventoryItem(id=item_id, name=name, quantity=quantity, date_added=self._now())
            )

    def save_data(self) -> bool:
        saved = self._log.persist_all()
        if saved:
            self._echo(f"Data saved successfully to {self._log.file_path}")
        else:
            self._echo(f"[ERROR] Could not save data to {self._log.file_path}")
        return saved

    def load_data(self) -> RestoreStatus:
        status = self._log.restore_all()
        if status is RestoreStatus.LOADED:
            self._echo("Data loaded successfully.")
        elif status is RestoreStatus.MISSING:
            self._echo("[WARNING] No file found to load.")
        else:
            self._echo(f"[ERROR] Could not load data from {self._log.file_path}")
        return status

    def print_all_items(self) -> None:
        items = self._log.snapshot()
        if not items:
            self._echo("No items found in inventory.")
            return
        for item in items:
            self._echo(item.describe())


def run_inventory_demo(file_path: str | Path, echo: OutputSink = click.echo) -> None:
    app = InventoryApp(file_path, echo=echo)
    app.seed_sample_data()
    app.save_data()

    echo("\n--- Simulating new session ---\n")
    new_app = InventoryApp(file_path, echo=echo)
    new_app.load_data()
    new_app.print_all_items()
