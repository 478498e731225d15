from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from recordkeeper.domain.models import Identified, InventoryItem, Patient, Student


def test_records_are_immutable() -> None:
    item = InventoryItem(id=1, name="Laptop", quantity=5, date_added=datetime(2024, 1, 1))

    with pytest.raises(ValidationError):
        item.quantity = 6  # type: ignore[misc]


def test_records_are_hashable_and_compare_by_value() -> None:
    a = Patient(id=1, name="Alice Smith", age=30, gender="Female")
    b = Patient(id=1, name="Alice Smith", age=30, gender="Female")

    assert a == b
    assert len({a, b}) == 1


def test_records_satisfy_identified() -> None:
    assert isinstance(Student(id=3, full_name="Esi Adu", score=70), Identified)
