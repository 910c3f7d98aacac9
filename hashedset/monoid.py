# --------------------------------------------------------
# (c) Copyright 2014, 2020 by Jason DeLaat.
# Licensed under BSD 3-clause licence.
# --------------------------------------------------------
# pylint:disable=W2301
"""Monoid protocol.

A monoid is a semigroup with an identity element:

    1. Closure: If 'a' and 'b' are in S, then 'a.append(b)' is also in S.
    2. Identity: There exists mempty() such that
       a.append(mempty()) == a == mempty().append(a)
    3. Associativity: (a.append(b)).append(c) == a.append(b.append(c))

Sets form a monoid under union with the empty set as identity.
"""

from typing import Iterable, Protocol, Self

from .semigroup import Semigroup


class Monoid(Semigroup, Protocol):
    """Protocol for Monoid instances."""

    @classmethod
    def mempty(cls) -> Self:
        """Returns the identity element for this Monoid."""
        ...


def mconcat[M: Monoid](monoid_list: Iterable[M]) -> M:
    """Takes a list of monoid values and reduces them to a single value
    by applying the append operation to all elements of the list.
    Needs a non empty list, because the identity comes from the type.
    """
    it = iter(monoid_list)
    result = next(it)
    for value in it:
        result = result.append(value)
    return result
