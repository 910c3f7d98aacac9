"""Implements a mutable, chained HashedSet with the full set algebra."""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, MutableSequence, Set as AbstractSet, Sized
from typing import Any, Self, TypeVar

from .equality import DEFAULT_EQUALITY, Equality, require_equality
from .errors import ArgumentNullError, ArgumentOutOfRangeError
from .functor import Functor, map  # pylint: disable=redefined-builtin
from .iterator import SetIterator
from .maybe import Maybe
from .monoid import Monoid, mconcat
from .options import set_options
from .primes import next_prime
from .table import BucketTable

A = TypeVar("A")
B = TypeVar("B")

logger = logging.getLogger(__name__)


def _require[T](value: T | None, argument: str) -> T:
    if value is None:
        raise ArgumentNullError(argument)
    return value


class HashedSet[A](Functor[A], Monoid):
    """
    A mutable set of distinct elements stored in a chained hash table.

    Element identity comes from an equality capability ({equals, hash});
    Python's == and hash are used when none is given. Iteration order is
    bucket storage order, which depends on capacity and insertion history.
    Mutating the set while iterating it makes the iterator raise
    ConcurrentModificationError on its next step.

    Not thread safe: callers sharing a set across threads must lock
    around every operation, iteration included.
    """

    def __init__(self,
                 source: Iterable[A] | None = None,
                 equality: Equality[A] | None = None,
                 capacity: int | None = None):
        """
        source: elements to start with (duplicates collapse).
        equality: identity capability; defaults to == and hash.
        capacity: initial bucket count. Without it, a sized source gets the
            smallest growth-policy prime >= its length, anything else the
            default from SetOptions.
        """
        eq = DEFAULT_EQUALITY if equality is None else require_equality(equality)
        if capacity is None and isinstance(source, Sized):
            capacity = next_prime(len(source))
        self._table: BucketTable[A] = BucketTable(eq, set_options(capacity).capacity)
        if source is not None:
            for item in source:
                self._table.insert(item)

    # --- construction ---

    @classmethod
    def empty(cls) -> HashedSet[A]:
        """Creates an empty HashedSet with default equality."""
        return cls()

    @classmethod
    def with_equality(cls, equality: Equality[A],
                      capacity: int | None = None) -> HashedSet[A]:
        """Creates an empty HashedSet that uses the given equality."""
        return cls(equality=_require(equality, "equality"), capacity=capacity)

    @classmethod
    def from_iterable(cls, source: Iterable[A],
                      equality: Equality[A] | None = None) -> HashedSet[A]:
        """Creates a HashedSet holding every distinct element of source."""
        return cls(_require(source, "source"), equality)

    def copy(self) -> HashedSet[A]:
        """Returns a new set with the same elements and equality."""
        return self.__class__(self, self._table.equality)

    def _as_set(self, other: Iterable[A]) -> HashedSet[A]:
        """
        Materializes other under this set's equality. Another HashedSet
        with an equal capability is used as is.
        """
        if isinstance(other, HashedSet) and other._table.equality == self._table.equality:
            return other
        return self.__class__(other, self._table.equality)

    # --- properties ---

    @property
    def count(self) -> int:
        """Number of elements in the set."""
        return self._table.count

    @property
    def capacity(self) -> int:
        """Current number of buckets."""
        return self._table.capacity

    @property
    def equality(self) -> Equality[A]:
        """The equality capability this set was built with."""
        return self._table.equality

    @property
    def is_read_only(self) -> bool:
        """Always False: a HashedSet can be mutated."""
        return False

    # --- primitives ---

    def add(self, item: A) -> bool:
        """Adds item. Returns False if an equal element was already present."""
        return self._table.insert(item)

    def contains(self, item: A) -> bool:
        """Returns True if an element equal to item is present."""
        return self._table.contains(item)

    def remove(self, item: A) -> bool:
        """Removes the element equal to item. Returns False if there was none."""
        return self._table.delete(item)

    def clear(self) -> None:
        """Removes every element."""
        self._table.clear()

    def lookup(self, item: A) -> Maybe[A]:
        """Returns Just the stored element equal to item, or Nothing."""
        return self._table.find(item)

    # --- in-place set algebra ---

    def union_with(self, other: Iterable[A]) -> None:
        """Adds every element of other."""
        for item in _require(other, "other"):
            self._table.insert(item)

    def except_with(self, other: Iterable[A]) -> None:
        """Removes every element of other that is present."""
        _require(other, "other")
        if other is self:
            self.clear()
            return
        for item in other:
            self._table.delete(item)

    def intersect_with(self, other: Iterable[A]) -> None:
        """
        Keeps only elements also present in other. Both sides are
        snapshotted before self is cleared and rebuilt, so self is never
        changed while it is being read.
        """
        other_snapshot = self.__class__(_require(other, "other"), self._table.equality)
        self_snapshot = self.copy()
        self.clear()
        for item in other_snapshot:
            if self_snapshot.contains(item):
                self._table.insert(item)
        logger.debug("intersect_with kept %d of %d elements",
                     self._table.count, self_snapshot.count)

    def symmetric_except_with(self, other: Iterable[A]) -> None:
        """
        Keeps the elements present in exactly one of self and other:
        each distinct element of other is removed if present, else added.
        """
        _require(other, "other")
        if other is self:
            self.clear()
            return
        for item in self.__class__(other, self._table.equality):
            if not self._table.delete(item):
                self._table.insert(item)

    # --- predicates ---

    def set_equals(self, other: Iterable[A]) -> bool:
        """True if self and other hold the same elements, ignoring duplicates."""
        if other is self:
            return True
        materialized = self._as_set(_require(other, "other"))
        if materialized.count != self.count:
            return False
        return all(self._table.contains(item) for item in materialized)

    def overlaps(self, other: Iterable[A]) -> bool:
        """True if any element of other is present."""
        _require(other, "other")
        if self.count == 0:
            return False
        return any(self._table.contains(item) for item in other)

    def is_subset_of(self, other: Iterable[A]) -> bool:
        """True if every element of self is in other."""
        _require(other, "other")
        if self.count == 0:
            return True
        materialized = self._as_set(other)
        return all(materialized.contains(item) for item in self)

    def is_superset_of(self, other: Iterable[A]) -> bool:
        """True if every element of other is in self."""
        return all(self._table.contains(item) for item in _require(other, "other"))

    def is_proper_subset_of(self, other: Iterable[A]) -> bool:
        """Subset of other with strictly fewer elements than other holds."""
        materialized = self._as_set(_require(other, "other"))
        if self.count >= materialized.count:
            return False
        return all(materialized.contains(item) for item in self)

    def is_proper_superset_of(self, other: Iterable[A]) -> bool:
        """Superset of other with strictly more elements than other holds."""
        materialized = self._as_set(_require(other, "other"))
        if self.count <= materialized.count:
            return False
        return all(self._table.contains(item) for item in materialized)

    def copy_to(self, destination: MutableSequence[A], offset: int = 0) -> None:
        """
        Writes every element, in iteration order, into destination
        starting at offset.
        """
        _require(destination, "destination")
        if offset < 0:
            raise ArgumentOutOfRangeError("offset", f"must be non-negative, got {offset}")
        if len(destination) - offset < self.count:
            raise ArgumentOutOfRangeError(
                "destination",
                f"{len(destination) - offset} slots from offset {offset}, "
                f"{self.count} needed")
        for position, item in enumerate(self, offset):
            destination[position] = item

    # --- pure constructors ---

    @classmethod
    def union(cls, a: Iterable[A], b: Iterable[A]) -> HashedSet[A]:
        """New set holding the elements of a and of b."""
        _require(b, "b")
        result = cls(_require(a, "a"), a.equality if isinstance(a, HashedSet) else None)
        result.union_with(b)
        return result

    @classmethod
    def except_(cls, a: Iterable[A], b: Iterable[A]) -> HashedSet[A]:
        """New set holding the elements of a that are not in b."""
        _require(b, "b")
        result = cls(_require(a, "a"), a.equality if isinstance(a, HashedSet) else None)
        result.except_with(b)
        return result

    # --- Functor / Monoid ---

    def map(self, f: Callable[[A], B]) -> HashedSet[B]:
        """New set (default equality) of f applied to every element."""
        return HashedSet([f(item) for item in self])

    def append(self, other: HashedSet[A]) -> HashedSet[A]:
        """Non-mutating union; the Semigroup operation for sets."""
        return self.union(self, other)

    @classmethod
    def mempty(cls) -> HashedSet[A]:
        """The empty set: identity for append."""
        return cls()

    @classmethod
    def unions(cls, sets: Iterable[HashedSet[A]]) -> HashedSet[A]:
        """Union of every set in sets; empty when there are none."""
        return mconcat([cls.mempty(), *sets])

    # --- Python protocols ---

    def __iter__(self) -> SetIterator[A]:
        return SetIterator(self._table)

    def __len__(self) -> int:
        return self._table.count

    def __contains__(self, item: A) -> bool:
        """Allows use of `item in my_set`."""
        return self._table.contains(item)

    def __repr__(self) -> str:
        if self.count == 0:
            return "HashedSet()"
        return "HashedSet({" + ", ".join(repr(item) for item in self) + "})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, (HashedSet, AbstractSet)):
            return NotImplemented
        return self.set_equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __le__(self, other: Iterable[A]) -> bool:
        return self.is_subset_of(other)

    def __lt__(self, other: Iterable[A]) -> bool:
        return self.is_proper_subset_of(other)

    def __ge__(self, other: Iterable[A]) -> bool:
        return self.is_superset_of(other)

    def __gt__(self, other: Iterable[A]) -> bool:
        return self.is_proper_superset_of(other)

    def __or__(self, other: Iterable[A]) -> HashedSet[A]:
        return self.union(self, other)

    def __and__(self, other: Iterable[A]) -> HashedSet[A]:
        result = self.copy()
        result.intersect_with(other)
        return result

    def __sub__(self, other: Iterable[A]) -> HashedSet[A]:
        return self.except_(self, other)

    def __xor__(self, other: Iterable[A]) -> HashedSet[A]:
        result = self.copy()
        result.symmetric_except_with(other)
        return result

    def __ror__(self, other: Iterable[A]) -> HashedSet[A]:
        return self.__or__(other)

    def __rand__(self, other):
        """
        `f & my_set` maps f over the set; `python_set & my_set` intersects.
        """
        if callable(other):
            return map(other, self)
        return self.__and__(other)

    def __rsub__(self, other: Iterable[A]) -> HashedSet[A]:
        result = self.__class__(other, self._table.equality)
        result.except_with(self)
        return result

    def __rxor__(self, other: Iterable[A]) -> HashedSet[A]:
        return self.__xor__(other)

    def __ior__(self, other: Iterable[A]) -> Self:
        self.union_with(other)
        return self

    def __iand__(self, other: Iterable[A]) -> Self:
        self.intersect_with(other)
        return self

    def __isub__(self, other: Iterable[A]) -> Self:
        self.except_with(other)
        return self

    def __ixor__(self, other: Iterable[A]) -> Self:
        self.symmetric_except_with(other)
        return self
