"""Java int32 arithmetic for range endpoints and hash codes.

Endpoints and sizes are validated against the signed 32-bit limits, and
`IntRange.hash_code` wraps and divides the way Java `int` math does.
"""

# Signed 32-bit limits
INT32_BITS = 32
INT32_MASK = (1 << INT32_BITS) - 1
INT32_MIN = -(1 << (INT32_BITS - 1))
INT32_MAX = (1 << (INT32_BITS - 1)) - 1


def fits_i32(value: int) -> bool:
    return INT32_MIN <= value <= INT32_MAX


def wrap_i32(value: int) -> int:
    """Wrap an integer into signed 32-bit range."""
    return ((value + (1 << (INT32_BITS - 1))) & INT32_MASK) + INT32_MIN


def div_i32(value: int, divisor: int) -> int:
    """Signed 32-bit division truncating toward zero."""
    quotient = abs(value) // abs(divisor)
    if (value < 0) != (divisor < 0):
        quotient = -quotient
    return wrap_i32(quotient)
