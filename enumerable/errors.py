"""error types raised by enumerable operations."""


class EnumerableError(Exception):
    """base class for errors raised by this package"""


class InvalidArgumentError(EnumerableError, ValueError):
    """an operation was handed an argument it cannot work with"""


class InvalidStateError(EnumerableError, ValueError):
    """the sequence is in a state the operation cannot handle, e.g. empty"""


__all__ = ["EnumerableError", "InvalidArgumentError", "InvalidStateError"]
