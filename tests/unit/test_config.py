"""Unit tests for recordkeeper/config.py and recordkeeper/logging_config.py."""

import logging
from pathlib import Path

from recordkeeper.config import Settings
from recordkeeper.logging_config import configure_logging


def test_settings_default_inventory_file():
    assert Settings().inventory_file == Path("inventory.json")


def test_settings_default_grading_files():
    settings = Settings()
    assert settings.students_file == Path("students.txt")
    assert settings.grade_report_file == Path("grade_report.txt")


def test_settings_reads_prefixed_env(monkeypatch):
    monkeypatch.setenv("RECORDKEEPER_INVENTORY_FILE", "/tmp/stock.json")
    assert Settings().inventory_file == Path("/tmp/stock.json")


def test_settings_ignores_unprefixed_env(monkeypatch):
    monkeypatch.setenv("INVENTORY_FILE", "/tmp/other.json")
    assert Settings().inventory_file == Path("inventory.json")


def test_configure_logging_sets_root_level():
    configure_logging("debug")
    assert logging.getLogger().level == logging.DEBUG
    configure_logging("INFO")


def test_configure_logging_unknown_level_falls_back_to_info():
    configure_logging("chatty")
    assert logging.getLogger().level == logging.INFO


def test_configure_logging_ignores_non_level_attribute_names():
    configure_logging("BASIC_FORMAT")
    assert logging.getLogger().level == logging.INFO
