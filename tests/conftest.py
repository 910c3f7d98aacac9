"""
Pytest fixtures shared by the hashedset tests.
"""

import pytest

from hashedset import EqualityBy, HashedSet, key_equality


@pytest.fixture
def abs_equality():
    """Equality that treats x and -x as the same element."""
    return key_equality(abs)


@pytest.fixture
def abs_equality_by():
    """The same absolute-value equality, assembled from two functions."""
    return EqualityBy(lambda a, b: abs(a) == abs(b), abs)


@pytest.fixture
def hundred():
    """The set {0..99}."""
    return HashedSet(range(100))


@pytest.fixture
def make_set():
    """
    Fixture that returns a function building a HashedSet by repeated add.

    Usage:
        s = make_set([1, 2, 3], capacity=7)
    """
    def _make(items, capacity=None, equality=None):
        result = HashedSet(equality=equality, capacity=capacity)
        for item in items:
            result.add(item)
        return result
    return _make
