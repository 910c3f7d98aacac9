""" Abstract base class for Functor """
from abc import ABC, abstractmethod
from typing import Callable, Self, TypeVar

# pylint:disable=C0105
A = TypeVar('A', covariant=True)
B = TypeVar('B', covariant=True)


class Functor[A](ABC):
    """Base class for containers that can map a function over their values.

    Subclasses override map, returning a new container of the same kind;
    `f & container` is shorthand for `container.map(f)`.
    """

    @abstractmethod
    def __rand__(self, other):
        """Defines the right-hand side of the map operation."""
        return map(other, self)

    @abstractmethod
    def map(self: Self, f: Callable[[A], B]) -> "Functor[B]":
        """Applies a function to every value inside the Functor."""


def map(fn, f):  # pylint:disable=W0622
    """Applies the function 'fn' to the values inside the functor
    'f' using its map method."""
    return f.map(fn)
