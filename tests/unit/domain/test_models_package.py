"""Tests for recordkeeper/domain/models/__init__.py: package exports."""

from recordkeeper.domain.models import __all__ as domain_all
from recordkeeper.domain.models import Grade, InventoryItem, Patient, Student, Transaction


def test_domain_models_exports_14_names():
    assert len(domain_all) == 14


def test_grade_importable_from_package():
    assert Grade.A == "A"


def test_entities_importable_from_package():
    for cls in (InventoryItem, Patient, Student, Transaction):
        assert cls.__name__ in domain_all
