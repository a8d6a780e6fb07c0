"""
Fixed-width integer helpers for 64-bit signed arithmetic.

This module provides the small set of int64 building blocks used by the
exponentiation routines: range constants, argument coercion, wrapping
multiplication and a wrap of arbitrary-precision Python ints into the int64
range.

Python ints never overflow, so fixed-width behaviour has to be asked for
explicitly. Hot-path arithmetic uses numpy.int64 scalars (hardware wraparound);
wrap_int64 performs the same truncation on a plain Python int and serves as an
independent reference when checking results.
"""

import numpy as np


INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

# 2**64 - 1, the bit mask of a 64-bit word
UINT64_MASK = (1 << 64) - 1

# Largest m such that m * m still fits in int64
MAX_EXACT_MODULUS = 3037000499


class Int64RangeError(ValueError):
    """
    Raised when an integer argument does not fit in a 64-bit signed integer.

    **Conceptual**: The routines in this package model int64 arithmetic, so
    inputs outside [-2**63, 2**63) have no meaning for them. Rather than
    silently truncating caller input, coercion rejects it up front and names
    the offending argument.
    """
    pass


def as_int64(value, name: str = "value") -> int:
    """
    Validate that value is an integer in the int64 range and return it as int.

    Accepts Python ints and numpy integer scalars. Booleans are rejected even
    though bool subclasses int, since True/False as a base or modulus is
    almost always a caller bug.

    Args:
        value: Candidate integer.
        name: Argument name used in error messages.

    Returns:
        The value as a plain Python int.

    Raises:
        TypeError: If value is not an integer (floats, strings, bools...).
        Int64RangeError: If value lies outside [INT64_MIN, INT64_MAX].
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise TypeError(
            f"{name} must be an integer, got {type(value).__name__}: {value!r}"
        )

    value = int(value)
    if not INT64_MIN <= value <= INT64_MAX:
        raise Int64RangeError(
            f"{name} must fit in a 64-bit signed integer "
            f"[{INT64_MIN}, {INT64_MAX}], got: {value}"
        )
    return value


def wrap_int64(value: int) -> int:
    """
    Truncate an arbitrary-precision int to int64 with two's-complement wraparound.

    **Mathematical**: Keeps the low 64 bits of value and reinterprets them as
    a signed integer:
        wrap(x) = ((x + 2**63) mod 2**64) - 2**63
    so wrap(x) ≡ x (mod 2**64) and INT64_MIN <= wrap(x) <= INT64_MAX.

    **Edge cases**:
    - Values already in range are returned unchanged.
    - INT64_MAX + 1 wraps to INT64_MIN.

    Args:
        value: Any Python int.

    Returns:
        The int64 value congruent to value modulo 2**64.
    """
    return ((value - INT64_MIN) & UINT64_MASK) + INT64_MIN


def wrapping_mul(a, b) -> np.int64:
    """
    Multiply two int64 values, wrapping silently on overflow.

    numpy reports scalar integer overflow as a RuntimeWarning; the warning is
    suppressed here because wraparound is the intended result.

    Args:
        a: First factor (int or numpy integer within int64).
        b: Second factor (int or numpy integer within int64).

    Returns:
        numpy.int64 product modulo 2**64.
    """
    with np.errstate(over="ignore"):
        return np.int64(a) * np.int64(b)
