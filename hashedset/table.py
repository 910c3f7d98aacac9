"""
Separate-chaining bucket table backing HashedSet.

Each bucket holds the head of a singly-linked chain of Entry nodes. A
bucket slot owns its head entry and each entry owns its successor, so
removal is a splice that hands the removed entry's successor to its
predecessor.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TypeVar

from .equality import Equality
from .maybe import Just, Maybe, Nothing
from .primes import next_prime

A = TypeVar("A")

logger = logging.getLogger(__name__)


class Entry[A]:
    """One chain node: a stored value and the entry after it."""
    __slots__ = ("value", "next")

    def __init__(self, value: A, next_entry: Entry[A] | None = None):
        self.value = value
        self.next = next_entry

    def __repr__(self) -> str:
        return f"Entry({self.value!r})"


type Buckets[A] = list[Entry[A] | None]


def bucket_index(equality: Equality[A], value: A, capacity: int) -> int:
    """Maps a value to its bucket; None always lands in bucket 0."""
    code = 0 if value is None else equality.hash(value)
    return abs(code) % capacity


def _link(equality: Equality[A], buckets: Buckets[A], value: A) -> tuple[bool, bool]:
    """
    Appends value to the tail of its chain unless an equal entry exists.
    Returns (inserted, filled_new_bucket).
    """
    index = bucket_index(equality, value, len(buckets))
    current = buckets[index]
    if current is None:
        buckets[index] = Entry(value)
        return True, True
    while True:
        if equality.equals(current.value, value):
            return False, False
        if current.next is None:
            current.next = Entry(value)
            return True, False
        current = current.next


def iter_chain(head: Entry[A] | None) -> Iterator[Entry[A]]:
    """Walks one chain from head to tail."""
    current = head
    while current is not None:
        yield current
        current = current.next


def rehash(buckets: Buckets[A], capacity: int,
           equality: Equality[A]) -> tuple[Buckets[A], int]:
    """
    Builds a new bucket list of the given capacity holding every value of
    the old one, re-linked against the new capacity in storage order.
    Returns the new buckets and their filled-bucket count. The old list
    is left untouched.
    """
    new_buckets: Buckets[A] = [None] * capacity
    filled = 0
    for head in buckets:
        for entry in iter_chain(head):
            _, new_bucket = _link(equality, new_buckets, entry.value)
            if new_bucket:
                filled += 1
    return new_buckets, filled


def growth_target(count: int) -> int:
    """
    Capacity to grow to once every bucket is filled: the smallest 6k±1
    prime >= count. This can equal the current capacity when every chain
    holds exactly one entry, in which case the table is rebuilt at the
    same size.
    """
    return next_prime(count)


class BucketTable[A]:
    """
    The hash table engine: membership, insertion, deletion and clearing
    over chained buckets, plus the bookkeeping that drives growth
    (filled) and fail-fast enumeration (version).
    """

    def __init__(self, equality: Equality[A], capacity: int):
        self.equality = equality
        self.buckets: Buckets[A] = [None] * capacity
        self.count = 0
        self.filled = 0
        self.version = 0

    @property
    def capacity(self) -> int:
        """Current number of buckets."""
        return len(self.buckets)

    def _index(self, value: A) -> int:
        return bucket_index(self.equality, value, len(self.buckets))

    def contains(self, value: A) -> bool:
        """Returns True if an entry equal to value is stored."""
        for entry in iter_chain(self.buckets[self._index(value)]):
            if self.equality.equals(entry.value, value):
                return True
        return False

    def find(self, value: A) -> Maybe[A]:
        """Returns Just the stored element equal to value, or Nothing."""
        for entry in iter_chain(self.buckets[self._index(value)]):
            if self.equality.equals(entry.value, value):
                return Just(entry.value)
        return Nothing

    def insert(self, value: A) -> bool:
        """
        Stores value unless an equal entry is already present.
        Returns True if the table changed.
        """
        inserted, new_bucket = _link(self.equality, self.buckets, value)
        if not inserted:
            return False
        self.count += 1
        self.version += 1
        if new_bucket:
            self.filled += 1
            if self.filled == len(self.buckets):
                self._grow()
        return True

    def delete(self, value: A) -> bool:
        """
        Splices out the entry equal to value. Returns True if one was found.
        """
        index = self._index(value)
        head = self.buckets[index]
        if head is None:
            return False
        if self.equality.equals(head.value, value):
            self.buckets[index] = head.next
            if head.next is None:
                self.filled -= 1
        else:
            previous, current = head, head.next
            while current is not None:
                if self.equality.equals(current.value, value):
                    break
                previous, current = current, current.next
            else:
                return False
            previous.next = current.next
        self.count -= 1
        self.version += 1
        return True

    def clear(self) -> None:
        """Empties every bucket. A table that is already empty is untouched."""
        if self.count == 0:
            return
        self.buckets = [None] * len(self.buckets)
        self.count = 0
        self.filled = 0
        self.version += 1

    def values(self) -> Iterator[A]:
        """
        Unchecked walk over every stored value in storage order.
        Callers must not mutate the table while consuming it.
        """
        for head in self.buckets:
            for entry in iter_chain(head):
                yield entry.value

    def _grow(self) -> None:
        old_capacity = len(self.buckets)
        capacity = growth_target(self.count)
        logger.debug("Growing bucket table from %d to %d buckets (%d elements)",
                     old_capacity, capacity, self.count)
        self.buckets, self.filled = rehash(self.buckets, capacity, self.equality)
