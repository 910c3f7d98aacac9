"""
Equality capabilities: the {equals, hash} pair that defines element
identity for a HashedSet instance.
"""
from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar, runtime_checkable

from .errors import ArgumentNullError

A = TypeVar("A")
K = TypeVar("K", bound=Hashable)


@runtime_checkable
class Equality[A](Protocol):
    """
    Capability deciding when two elements are the same element.

    equals must be reflexive, symmetric and transitive; hash must agree
    with equals (equal values hash identically).
    """

    def equals(self, a: A, b: A) -> bool:
        """Returns True if a and b denote the same set element."""
        ...

    def hash(self, a: A) -> int:
        """Returns a hash code consistent with equals."""
        ...


@dataclass(frozen=True)
class DefaultEquality[A]:
    """Natural Python equality: == and the builtin hash."""

    def equals(self, a: A, b: A) -> bool:
        return a == b

    def hash(self, a: A) -> int:
        return hash(a)


DEFAULT_EQUALITY: DefaultEquality[Any] = DefaultEquality()


@dataclass(frozen=True)
class EqualityBy[A]:
    """An equality capability assembled from two plain functions."""

    eq: Callable[[A, A], bool]
    hasher: Callable[[A], int]

    def equals(self, a: A, b: A) -> bool:
        return self.eq(a, b)

    def hash(self, a: A) -> int:
        return self.hasher(a)


def key_equality(key: Callable[[A], K]) -> EqualityBy[A]:
    """
    Builds an equality that compares and hashes elements by a derived key,
    e.g. key_equality(abs) treats 1 and -1 as the same element.
    """
    return EqualityBy(lambda a, b: key(a) == key(b), lambda a: hash(key(a)))


def require_equality(equality: Equality[A] | None) -> Equality[A]:
    """
    Validates a user-supplied capability, rejecting None and objects that
    do not provide both equals and hash.
    """
    if equality is None or not isinstance(equality, Equality):
        raise ArgumentNullError("equality")
    return equality
