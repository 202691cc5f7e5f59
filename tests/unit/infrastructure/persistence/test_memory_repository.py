"""Tests for InMemoryRepository and InMemoryInventoryRepository."""

from datetime import date, datetime

import pytest

from recordkeeper.domain.exceptions import DuplicateKeyError, InvalidValueError, NotFoundError
from recordkeeper.domain.models.healthcare import Patient
from recordkeeper.domain.models.inventory import ElectronicItem, GroceryItem, InventoryItem
from recordkeeper.infrastructure.persistence.memory import (
    InMemoryInventoryRepository,
    InMemoryRepository,
)


def _laptop(**overrides):
    defaults = {"id": 1001, "name": "Laptop", "quantity": 15, "brand": "Dell", "warranty_months": 24}
    defaults.update(overrides)
    return ElectronicItem(**defaults)


def _electronics(*items):
    repo = InMemoryInventoryRepository(ElectronicItem)
    for item in items:
        repo.add(item)
    return repo


# --- add / get ---

def test_add_then_get_returns_same_item():
    item = _laptop()
    repo = _electronics(item)
    assert repo.get(1001) is item


def test_add_duplicate_raises_and_leaves_repo_unchanged():
    original = _laptop()
    repo = _electronics(original)
    with pytest.raises(DuplicateKeyError) as exc_info:
        repo.add(_laptop(name="Duplicate Laptop", brand="HP"))
    assert exc_info.value.key == 1001
    assert len(repo) == 1
    assert repo.get(1001) is original


def test_get_missing_raises_not_found():
    with pytest.raises(NotFoundError, match="Item with ID 42 not found"):
        _electronics().get(42)


def test_contains():
    repo = _electronics(_laptop())
    assert 1001 in repo
    assert 9999 not in repo


# --- remove ---

def test_remove_deletes_item():
    repo = _electronics(_laptop(), _laptop(id=1002, name="Phone"))
    repo.remove(1001)
    assert 1001 not in repo
    assert len(repo) == 1


def test_remove_missing_raises_and_leaves_contents():
    repo = _electronics(_laptop(), _laptop(id=1002, name="Phone"))
    before = repo.list_all()
    with pytest.raises(NotFoundError):
        repo.remove(9999)
    assert len(repo) == 2
    assert repo.list_all() == before


# --- list_all ---

def test_list_all_preserves_insertion_order():
    repo = _electronics(_laptop(id=3), _laptop(id=1), _laptop(id=2))
    assert [item.id for item in repo.list_all()] == [3, 1, 2]


def test_list_all_returns_a_copy():
    repo = _electronics(_laptop())
    repo.list_all().clear()
    assert len(repo) == 1


def test_list_all_empty():
    assert _electronics().list_all() == []


# --- update_quantity / update_field on mutable items ---

def test_update_quantity_mutates_in_place():
    item = _laptop()
    repo = _electronics(item)
    returned = repo.update_quantity(1001, 20)
    assert item.quantity == 20
    assert returned is item


def test_update_quantity_negative_raises_and_leaves_value():
    repo = InMemoryInventoryRepository(GroceryItem)
    repo.add(GroceryItem(id=2001, name="Milk", quantity=100, expiry_date=date(2025, 6, 8)))
    with pytest.raises(InvalidValueError, match="Quantity cannot be negative. Provided: -50"):
        repo.update_quantity(2001, -50)
    assert repo.get(2001).quantity == 100


def test_update_quantity_missing_raises_not_found():
    with pytest.raises(NotFoundError):
        _electronics().update_quantity(1, 5)


def test_update_quantity_negative_on_missing_reports_invalid_value_first():
    with pytest.raises(InvalidValueError):
        _electronics().update_quantity(1, -5)


def test_update_field_validates_against_field_constraint():
    repo = _electronics(_laptop())
    with pytest.raises(InvalidValueError) as exc_info:
        repo.update_field(1001, "warranty_months", -1)
    assert exc_info.value.field == "warranty_months"
    assert repo.get(1001).warranty_months == 24


def test_update_field_unknown_field_raises():
    repo = _electronics(_laptop())
    with pytest.raises(InvalidValueError, match="has no field 'colour'"):
        repo.update_field(1001, "colour", "red")


def test_update_field_coerces_valid_value():
    repo = _electronics(_laptop())
    repo.update_field(1001, "name", "Notebook")
    assert repo.get(1001).name == "Notebook"


# --- update_field on frozen items ---

def test_update_field_replaces_frozen_item():
    repo = InMemoryRepository(InventoryItem)
    original = InventoryItem(id=1, name="Laptop", quantity=5, date_added=datetime(2025, 1, 1))
    repo.add(original)
    updated = repo.update_field(1, "quantity", 9)
    assert updated.quantity == 9
    assert repo.get(1).quantity == 9
    assert original.quantity == 5


def test_update_field_frozen_keeps_position():
    repo = InMemoryRepository(Patient)
    repo.add(Patient(id=1, name="A", age=1, gender="F"))
    repo.add(Patient(id=2, name="B", age=2, gender="M"))
    repo.update_field(1, "age", 30)
    assert [p.id for p in repo.list_all()] == [1, 2]


# --- update_field never changes the key ---

def test_update_field_rejects_key_change_on_mutable_item():
    repo = _electronics(_laptop())
    with pytest.raises(InvalidValueError, match="Cannot change the key"):
        repo.update_field(1001, "id", 5)
    assert repo.get(1001).id == 1001
    assert 5 not in repo
    repo.add(_laptop(id=5, name="Phone"))
    assert sorted(item.key for item in repo.list_all()) == [5, 1001]


def test_update_field_rejects_key_change_on_frozen_item():
    repo = InMemoryRepository(Patient)
    repo.add(Patient(id=1, name="A", age=1, gender="F"))
    with pytest.raises(InvalidValueError, match="Cannot change the key"):
        repo.update_field(1, "id", 5)
    assert repo.get(1).id == 1
    assert 5 not in repo


def test_update_field_same_key_value_is_allowed():
    repo = _electronics(_laptop())
    repo.update_field(1001, "id", 1001)
    assert repo.get(1001).id == 1001


def test_errors_use_container_name():
    repo = InMemoryRepository(Patient, "patient records")
    with pytest.raises(NotFoundError, match="not found in patient records"):
        repo.remove(3)


# --- find / filter over the in-memory store ---

def test_find_by_predicate():
    repo = InMemoryRepository(Patient)
    repo.add(Patient(id=1, name="John Smith", age=45, gender="Male"))
    repo.add(Patient(id=2, name="Sarah Johnson", age=32, gender="Female"))
    assert repo.find(lambda p: p.name.startswith("Sarah")).id == 2


def test_filter_by_predicate():
    repo = InMemoryRepository(Patient)
    repo.add(Patient(id=1, name="John Smith", age=45, gender="Male"))
    repo.add(Patient(id=2, name="Sarah Johnson", age=32, gender="Female"))
    repo.add(Patient(id=3, name="Michael Brown", age=67, gender="Male"))
    assert [p.id for p in repo.filter(lambda p: p.gender == "Male")] == [1, 3]
