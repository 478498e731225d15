from __future__ import annotations

import pytest

from recordkeeper.domain.models import Patient
from recordkeeper.store import RecordStore


def _patient(pid: int, name: str = "Someone") -> Patient:
    return Patient(id=pid, name=name, age=30, gender="Female")


@pytest.fixture
def store() -> RecordStore[Patient]:
    s: RecordStore[Patient] = RecordStore()
    s.add(_patient(1, "Alice Smith"))
    s.add(_patient(2, "Kwame Mensah"))
    s.add(_patient(3, "Esi Adu"))
    return s


def test_get_all_preserves_add_order(store: RecordStore[Patient]) -> None:
    assert [p.id for p in store.get_all()] == [1, 2, 3]
    assert len(store) == 3


def test_get_all_returns_independent_copy(store: RecordStore[Patient]) -> None:
    snapshot = store.get_all()
    snapshot.clear()
    snapshot.append(_patient(99))

    assert [p.id for p in store.get_all()] == [1, 2, 3]


def test_find_first_on_empty_store_is_none() -> None:
    assert RecordStore().find_first(lambda _: True) is None


def test_find_first_returns_earliest_match() -> None:
    s: RecordStore[Patient] = RecordStore()
    s.add(_patient(7, "first"))
    s.add(_patient(7, "second"))

    found = s.find_first(lambda p: p.id == 7)

    assert found is not None
    assert found.name == "first"


def test_get_by_id(store: RecordStore[Patient]) -> None:
    patient = store.get_by_id(2)
    assert patient is not None
    assert patient.name == "Kwame Mensah"
    assert store.get_by_id(42) is None


def test_remove_first_removes_only_earliest_match() -> None:
    s: RecordStore[Patient] = RecordStore()
    s.add(_patient(1, "a"))
    s.add(_patient(2, "dup-1"))
    s.add(_patient(3, "b"))
    s.add(_patient(2, "dup-2"))

    assert s.remove_first(lambda p: p.id == 2) is True
    assert [p.name for p in s.get_all()] == ["a", "b", "dup-2"]


def test_remove_first_without_match_leaves_store_unchanged(store: RecordStore[Patient]) -> None:
    before = store.get_all()

    assert store.remove_first(lambda p: p.id == 100) is False
    assert store.get_all() == before


def test_remove_first_on_empty_store() -> None:
    s: RecordStore[Patient] = RecordStore()
    assert s.remove_first(lambda _: True) is False
    assert len(s) == 0


def test_add_after_remove_appends_to_end(store: RecordStore[Patient]) -> None:
    store.remove_first(lambda p: p.id == 1)
    store.add(_patient(4))

    assert [p.id for p in store.get_all()] == [2, 3, 4]


def test_replace_all_discards_previous_contents(store: RecordStore[Patient]) -> None:
    store.replace_all([_patient(10), _patient(11)])

    assert [p.id for p in store.get_all()] == [10, 11]
