"""Exceptions raised by intrange.

Every error is a programmer error surfaced immediately to the caller. Each
class also derives from the closest built-in exception so code catching
``ValueError`` or ``IndexError`` keeps working.
"""


class RangeError(Exception):
    """Base class for all intrange errors."""


class ConstructionError(RangeError, ValueError):
    """Raised when a range is built from inconsistent endpoints."""


class SizeExceeded(RangeError, ValueError):
    """Raised when a range would hold more values than a 32-bit count allows."""


class IndexOutOfRange(RangeError, IndexError):
    """Raised for an index or sub-range outside ``[0, size)``."""


class IllegalState(RangeError, RuntimeError):
    """Raised when an operation does not apply to this kind of range."""


class InfiniteStep(RangeError, ValueError):
    """Raised for a zero step over a range holding more than one value."""


class UnsupportedOperation(RangeError, NotImplementedError):
    """Raised for mutating operations on immutable ranges."""
