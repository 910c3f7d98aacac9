"""
Tests for HashedSet construction, options and the add/remove/clear/lookup
primitives.
"""
import pytest
from pydantic import ValidationError

from hashedset import (
    ArgumentNullError,
    ArgumentOutOfRangeError,
    EqualityBy,
    HashedSet,
    Just,
    Nothing,
    SetOptions,
    from_maybe,
    next_prime,
)


class TestConstruction:
    """Constructors and their capacity choices."""

    def test_empty(self):
        """No arguments: empty set, default capacity."""
        s = HashedSet()
        assert s.count == 0
        assert list(s) == []
        assert s.capacity == 5
        assert HashedSet.empty().count == 0

    def test_explicit_capacity(self):
        """An explicit capacity sets the initial bucket count."""
        assert HashedSet(capacity=10).capacity == 10

    @pytest.mark.parametrize("capacity", [0, -1])
    def test_non_positive_capacity_rejected(self, capacity):
        """Capacity must be a positive integer."""
        with pytest.raises(ArgumentOutOfRangeError) as info:
            HashedSet(capacity=capacity)
        assert info.value.argument == "capacity"
        assert isinstance(info.value.__cause__, ValidationError)

    def test_from_sized_source(self):
        """A sized source picks the smallest 6k±1 prime >= its length."""
        s = HashedSet(list(range(100)))
        assert s.capacity == 101
        assert sorted(s) == list(range(100))

    def test_from_empty_source(self):
        """An empty sized source still gets a usable table."""
        assert HashedSet([]).capacity == 5

    def test_from_lazy_source(self):
        """An unsized source starts at the default capacity and grows."""
        s = HashedSet(x for x in range(100))
        assert sorted(s) == list(range(100))
        assert s.count == 100

    def test_source_duplicates_collapse(self):
        """Duplicates in the source are stored once."""
        s = HashedSet([3, 1, 3, 2, 1] * 4)
        assert s.count == 3
        assert sorted(s) == [1, 2, 3]

    def test_custom_equality(self, abs_equality_by):
        """1 and -1 are the same element under absolute-value equality."""
        s = HashedSet(equality=abs_equality_by)
        s.add(1)
        s.add(-1)
        assert s.count == 1

    def test_source_with_custom_equality(self, abs_equality):
        """Source ingestion uses the supplied equality."""
        s = HashedSet(range(-50, 50), abs_equality)
        assert s.count == 51
        assert all(s.contains(x) for x in range(-50, 50))

    def test_with_equality_requires_capability(self):
        """An absent capability fails immediately."""
        with pytest.raises(ArgumentNullError):
            HashedSet.with_equality(None)

    def test_rejects_object_without_equals_and_hash(self):
        """Objects missing the capability's operations are rejected."""
        with pytest.raises(ArgumentNullError) as info:
            HashedSet(equality=object())
        assert info.value.argument == "equality"

    def test_from_iterable_requires_source(self):
        """from_iterable does not accept None."""
        with pytest.raises(ArgumentNullError):
            HashedSet.from_iterable(None)

    def test_copy_keeps_equality(self, abs_equality):
        """A copy is independent but compares elements the same way."""
        s = HashedSet([1, 2], abs_equality)
        c = s.copy()
        c.add(3)
        assert not c.add(-1)
        assert s.count == 2
        assert c.equality is abs_equality


class TestOptions:
    """SetOptions configuration model."""

    def test_defaults(self):
        """Default capacity is five buckets."""
        assert SetOptions().capacity == 5

    def test_validation(self):
        """Non-positive capacities fail pydantic validation."""
        with pytest.raises(ValidationError):
            SetOptions(capacity=0)

    def test_frozen(self):
        """Options cannot be changed once built."""
        options = SetOptions(capacity=7)
        with pytest.raises(ValidationError):
            options.capacity = 11


class TestAdd:
    """add and membership."""

    def test_add_returns_whether_added(self):
        """The second add of an equal value returns False."""
        s = HashedSet()
        assert s.add(42)
        assert not s.add(42)
        assert s.count == 1

    def test_add_valid_input(self, make_set):
        """Values larger than the capacity hash into range."""
        data = [1, 2, 3, 10, 20]
        s = make_set(data, capacity=10)
        assert sorted(s) == data

    def test_add_with_resizing(self, make_set):
        """Growth from a tiny capacity preserves membership."""
        s = make_set(range(100), capacity=3)
        assert sorted(s) == list(range(100))
        assert s.capacity > 3

    def test_add_with_resizing_repeated(self, make_set):
        """Repeating every insertion does not change the result."""
        s = make_set(list(range(100)) * 2, capacity=3)
        assert sorted(s) == list(range(100))
        assert s.count == 100

    def test_contains_after_resizing(self, make_set):
        """Every value is found after several growths."""
        s = make_set(list(range(100)) * 2, capacity=3)
        assert all(s.contains(x) for x in range(100))
        assert all(x in s for x in range(100))
        assert not s.contains(100)
        assert -1 not in s

    def test_capacity_sequence(self, make_set):
        """Exact capacities reached by consecutive integers from 3."""
        assert make_set(range(3), capacity=3).capacity == 5
        assert make_set(range(5), capacity=3).capacity == 5
        assert make_set(range(7), capacity=3).capacity == 5

    def test_growth_target_is_next_prime_of_count(self, make_set):
        """Filling every bucket grows to the smallest 6k±1 prime >= count."""
        s = make_set(range(5), capacity=5)
        assert s.capacity == next_prime(s.count)
        s = make_set([0, 1, 2, 10, 20, 30], capacity=3)
        assert s.capacity == 5

    def test_strings(self):
        """Non-integer elements work with the default equality."""
        s = HashedSet(["alpha", "beta", "alpha"])
        assert s.count == 2
        assert "beta" in s

    def test_is_read_only(self):
        """A HashedSet is never read-only."""
        assert HashedSet().is_read_only is False


class TestRemoveAndClear:
    """remove and clear."""

    def test_remove_from_empty(self):
        """Removing from an empty set returns False."""
        s = HashedSet()
        assert not s.remove(42)
        assert s.count == 0

    def test_remove_absent(self, hundred):
        """Removing an absent value leaves count alone."""
        assert not hundred.remove(1000)
        assert hundred.count == 100

    def test_remove_all(self, hundred):
        """Removing every element empties the set."""
        for value in range(100):
            assert hundred.remove(value), f"Element {value} was not in set."
        assert hundred.count == 0
        assert list(hundred) == []

    def test_remove_all_in_reverse(self, make_set):
        """Removal order does not matter."""
        s = make_set(range(100), capacity=3)
        for value in reversed(range(100)):
            assert s.remove(value)
        assert s.count == 0
        assert list(s) == []

    def test_clear(self, hundred):
        """Clear empties a populated set."""
        hundred.clear()
        assert hundred.count == 0
        assert list(hundred) == []

    def test_clear_empty(self):
        """Clear on an empty set is harmless."""
        s = HashedSet()
        s.clear()
        assert s.count == 0
        assert list(s) == []


class TestLookup:
    """lookup returns the stored representative."""

    def test_found(self, abs_equality):
        """The stored element is returned, not the probe."""
        s = HashedSet([-3], abs_equality)
        assert s.lookup(3) == Just(-3)
        assert from_maybe(0, s.lookup(3)) == -3

    def test_missing(self):
        """Absent elements give Nothing."""
        s = HashedSet([1])
        assert s.lookup(2) is Nothing
        assert from_maybe(0, s.lookup(2)) == 0


class TestEqualityFailures:
    """Exceptions from the equality capability propagate."""

    def test_equals_error_propagates(self):
        """A failing equals surfaces to the caller unchanged."""
        def broken(a, b):
            raise RuntimeError("broken equals")
        s = HashedSet(equality=EqualityBy(broken, lambda a: 0))
        assert s.add(1)
        with pytest.raises(RuntimeError, match="broken equals"):
            s.add(2)

    def test_unhashable_element(self):
        """Default equality cannot place unhashable values."""
        with pytest.raises(TypeError):
            HashedSet().add([1, 2])
