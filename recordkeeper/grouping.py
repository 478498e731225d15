"""
Grouping index over a snapshot of records.

`GroupingIndex.build` partitions records by a key function once. The index is
a view of the records it was built from: it goes stale when the source store
changes and is only refreshed by building a new one.
"""

from __future__ import annotations

from typing import Callable, Dict, Generic, Hashable, Iterable, List, TypeVar

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


class GroupingIndex(Generic[K, T]):
    """Mapping of key -> records sharing that key, in input order."""

    def __init__(self) -> None:
        self._groups: Dict[K, List[T]] = {}

    @classmethod
    def build(cls, records: Iterable[T], key_fn: Callable[[T], K]) -> "GroupingIndex[K, T]":
        """
        Partition `records` by `key_fn`.

        Keys keep the order in which they are first seen; records keep their
        relative order within each group.
        """
        index: GroupingIndex[K, T] = cls()
        for record in records:
            index._groups.setdefault(key_fn(record), []).append(record)
        return index

    def lookup(self, key: K) -> List[T]:
        """Return a copy of the group for `key`; an absent key yields an empty list."""
        return list(self._groups.get(key, ()))

    def keys(self) -> List[K]:
        return list(self._groups)

    def __contains__(self, key: object) -> bool:
        return key in self._groups

    def __len__(self) -> int:
        return len(self._groups)


__all__ = ["GroupingIndex"]
