"""
Generic in-memory record store.

An insertion-ordered container for records of one shape. Appends go to the
end and no operation reorders existing entries. Duplicate ids are allowed;
every lookup returns the earliest match.

Usage:
    from recordkeeper.store import RecordStore

    patients: RecordStore[Patient] = RecordStore()
    patients.add(Patient(id=1, name="Alice Smith", age=30, gender="Female"))
    patients.get_by_id(1)
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, List, Optional, TypeVar

from recordkeeper.domain.models import Identified

T = TypeVar("T", bound=Identified)

Predicate = Callable[[T], bool]


class RecordStore(Generic[T]):
    """Ordered collection of records supporting predicate lookup and removal."""

    def __init__(self, records: Optional[Iterable[T]] = None) -> None:
        self._items: List[T] = list(records) if records is not None else []

    def __len__(self) -> int:
        return len(self._items)

    def add(self, record: T) -> None:
        self._items.append(record)

    def get_all(self) -> List[T]:
        """Return a copy of every record in insertion order."""
        return list(self._items)

    def find_first(self, predicate: Predicate[T]) -> Optional[T]:
        """Return the earliest record satisfying `predicate`, or None."""
        return next((item for item in self._items if predicate(item)), None)

    def get_by_id(self, record_id: int) -> Optional[T]:
        return self.find_first(lambda item: item.id == record_id)

    def remove_first(self, predicate: Predicate[T]) -> bool:
        """
        Remove the earliest record satisfying `predicate`.

        Returns True if a record was removed. Later matches are left alone.
        """
        for index, item in enumerate(self._items):
            if predicate(item):
                del self._items[index]
                return True
        return False

    def replace_all(self, records: Iterable[T]) -> None:
        """Discard the current contents and take `records` in their given order."""
        self._items = list(records)


__all__ = ["RecordStore", "Predicate"]
