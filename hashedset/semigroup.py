"""
This module provides the Semigroup protocol.
"""

from typing import Protocol, Self


class Semigroup(Protocol):
    """Protocol for Semigroup instances.

    A semigroup provides an associative append: for HashedSet that is
    union, returning a new set and leaving both operands untouched.
    """

    def append(self, other: Self) -> Self:
        """Combines two Semigroup instances."""
        ...
