"""Tests for recordkeeper/domain/repositories/inventory.py."""

import pytest

from recordkeeper.domain.exceptions import InvalidValueError
from recordkeeper.domain.repositories.inventory import InventoryRepository


def _concrete(calls):
    class _Impl(InventoryRepository):
        def add(self, item): return None
        def get(self, key): return None
        def remove(self, key): return None
        def update_field(self, key, field, value):
            calls.append((key, field, value))
            return "updated"
        def list_all(self): return []
        def __len__(self): return 0
        def __contains__(self, key): return False

    return _Impl()


def test_inventory_repository_is_abstract():
    with pytest.raises(TypeError):
        InventoryRepository()  # type: ignore[abstract]


def test_update_quantity_delegates_to_update_field():
    calls = []
    result = _concrete(calls).update_quantity(7, 12)
    assert result == "updated"
    assert calls == [(7, "quantity", 12)]


def test_update_quantity_zero_is_allowed():
    calls = []
    _concrete(calls).update_quantity(7, 0)
    assert calls == [(7, "quantity", 0)]


def test_update_quantity_negative_raises_before_delegating():
    calls = []
    with pytest.raises(InvalidValueError, match="Quantity cannot be negative. Provided: -50"):
        _concrete(calls).update_quantity(7, -50)
    assert calls == []
