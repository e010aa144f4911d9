"""
Exceptions raised by pair and list operations.

Validation failures always propagate to the caller.
Nothing in this package catches its own errors.
"""


class PairsError(Exception):
    """Base class for all errors raised by this package."""
    pass


class InvalidArgument(PairsError, TypeError):
    """Raised when a value expected to be a list (or pair) is not one."""
    pass


class EmptyListAccess(PairsError, IndexError):
    """Raised when head, tail or a random element of the empty list is requested."""
    pass


class IndexOutOfRange(PairsError, IndexError):
    """Raised when get() is called with an index outside the list."""
    pass


__all__ = [
    "PairsError",
    "InvalidArgument",
    "EmptyListAccess",
    "IndexOutOfRange",
]
