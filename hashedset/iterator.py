"""
Fail-fast enumeration over a BucketTable.
"""
from __future__ import annotations

from collections.abc import Iterator
from typing import TypeVar

from .errors import ConcurrentModificationError
from .table import BucketTable, Buckets, Entry

A = TypeVar("A")


class SetIterator[A](Iterator[A]):
    """
    Cursor over every element of a table: buckets in storage order, each
    chain from head to tail.

    The table's version is captured on creation and compared on every
    step; any structural mutation in between makes the next step raise
    ConcurrentModificationError. Once exhausted the iterator stays
    exhausted; iterate the set again for a fresh pass.
    """

    def __init__(self, table: BucketTable[A]):
        self._table = table
        self._buckets: Buckets[A] = table.buckets
        self._version = table.version
        self._bucket = -1
        self._entry: Entry[A] | None = None
        self._done = False

    def __iter__(self) -> SetIterator[A]:
        return self

    def __next__(self) -> A:
        if self._done:
            raise StopIteration
        if self._table.version != self._version:
            raise ConcurrentModificationError()
        entry = self._entry.next if self._entry is not None else None
        while entry is None:
            self._bucket += 1
            if self._bucket >= len(self._buckets):
                self._done = True
                self._entry = None
                raise StopIteration
            entry = self._buckets[self._bucket]
        self._entry = entry
        return entry.value
