"""
Exception types raised by HashedSet and its bucket table.
"""


class HashedSetError(Exception):
    """Base class for every error raised by this package."""


class ArgumentNullError(HashedSetError, TypeError):
    """
    Raised when an operation or constructor that requires a collection,
    destination or equality capability receives None instead.
    """

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"Argument '{argument}' must not be None.")


class ArgumentOutOfRangeError(HashedSetError, ValueError):
    """
    Raised when an argument is present but outside the range the
    operation accepts (negative offsets, undersized destinations,
    non-positive capacities).
    """

    def __init__(self, argument: str, message: str):
        self.argument = argument
        super().__init__(f"{argument}: {message}")


class ConcurrentModificationError(HashedSetError, RuntimeError):
    """
    Raised by an iterator whose set was structurally modified after
    the iterator captured its version stamp.
    """

    def __init__(self):
        super().__init__("Set was modified during enumeration.")
