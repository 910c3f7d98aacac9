""" imports for hashedset """
from .equality import Equality, DefaultEquality, EqualityBy, key_equality, \
    DEFAULT_EQUALITY
from .errors import HashedSetError, ArgumentNullError, ArgumentOutOfRangeError, \
    ConcurrentModificationError
from .functor import Functor, map #pylint: disable=redefined-builtin
from .hashedset import HashedSet
from .iterator import SetIterator
from .maybe import Maybe, Just, Nothing, from_maybe
from .monoid import Monoid, mconcat
from .options import SetOptions, DEFAULT_CAPACITY
from .primes import is_prime, next_prime
from .semigroup import Semigroup
from .table import BucketTable, Entry, rehash, growth_target
