"""
Exponentiation by squaring over 64-bit signed integers.

**Conceptual**: Raising a number to the n-th power by repeated multiplication
costs n - 1 multiplications. Exponentiation by squaring (binary
exponentiation) reads the exponent one bit at a time instead: every step
squares the running base, and bits that are set multiply it into the result.
That brings the cost down to O(log n) multiplications, which is what makes
modular exponentiation with large exponents practical in number-theoretic
and cryptographic code.

**Mathematical**: Write the exponent in binary, n = Σ b_i * 2^i. Then
    a^n = Π (a^(2^i))^(b_i)
Each loop iteration keeps the invariant
    result * base_acc^remaining == a^n
(modulo 2**64 for power, modulo m for power_mod), halving `remaining` and
squaring `base_acc` until remaining reaches 0, at which point result == a^n.

**Numeric semantics**:
- power() multiplies with int64 wraparound: products that do not fit in 64
  bits are truncated silently, exactly as two's-complement hardware does.
  Results are therefore deterministic but not arbitrary-precision correct.
- power_mod() reduces after every multiplication. Products stay exact while
  modulus * modulus fits in int64 (modulus <= MAX_EXACT_MODULUS); larger
  moduli wrap the same way power() does.

Both functions are pure: no I/O, no shared state, safe to call concurrently.
"""

from binexp.utils.math import as_int64, wrapping_mul


class ExponentiationError(ValueError):
    """
    Base class for caller contract violations in the exponentiation routines.

    **Usage**: Catch this to handle any invalid-argument failure from power()
    or power_mod() in one place; catch the subclasses to tell them apart.
    """
    pass


class InvalidModulusError(ExponentiationError):
    """
    Raised when power_mod() receives a modulus <= 0.

    The check happens before any computation, so no partial result exists.
    """
    pass


class InvalidExponentError(ExponentiationError):
    """Raised when power() or power_mod() receives a negative exponent."""
    pass


def _validate_exponent(exponent: int) -> None:
    if exponent < 0:
        raise InvalidExponentError(
            f"exponent must be non-negative, got: {exponent}. "
            "Negative exponents have no integer result."
        )


def power(base: int, exponent: int) -> int:
    """
    Compute base ** exponent with 64-bit signed wraparound.

    **Functionally**:
    - Input: base and exponent as int64 values, exponent >= 0.
    - Output: plain Python int in [-2**63, 2**63).
    - Uses O(log exponent) multiplications.
    - Overflowing products wrap modulo 2**64; no error is raised.

    **Edge cases**:
    - power(x, 0) == 1 for every x, including 0.
    - power(x, 1) == x.
    - power(2, 63) wraps to INT64_MIN; power(2, 64) wraps to 0.

    Args:
        base: Integer base.
        exponent: Non-negative integer exponent.

    Returns:
        base ** exponent truncated to int64.

    Raises:
        TypeError: If an argument is not an integer.
        Int64RangeError: If an argument does not fit in int64.
        InvalidExponentError: If exponent < 0.

    Example:
        >>> power(2, 10)
        1024
        >>> power(15, 20)
        4664335276710460609
    """
    base = as_int64(base, "base")
    exponent = as_int64(exponent, "exponent")
    _validate_exponent(exponent)

    result = 1
    base_acc = base
    remaining = exponent

    while remaining > 0:
        # Low bit set: fold the current power of the base into the result
        if remaining % 2 == 1:
            result = wrapping_mul(result, base_acc)
        base_acc = wrapping_mul(base_acc, base_acc)
        remaining >>= 1

    return int(result)


def power_mod(base: int, exponent: int, modulus: int) -> int:
    """
    Compute (base ** exponent) mod modulus by squaring with per-step reduction.

    **Conceptual**: Same loop as power(), but every product is reduced modulo
    `modulus` straight away. Intermediate values therefore never exceed
    modulus**2, which keeps them inside int64 for any modulus up to
    MAX_EXACT_MODULUS (about 3.04e9). Typical use is modular arithmetic in
    number-theoretic algorithms, e.g. with the prime 1_000_000_007.

    **Functionally**:
    - Input: base, exponent and modulus as int64 values; exponent >= 0,
      modulus > 0.
    - Output: plain Python int in [0, modulus).
    - base is reduced with floored modulo first, so negative bases also give
      results in [0, modulus).
    - For modulus > MAX_EXACT_MODULUS products wrap modulo 2**64 before the
      reduction; the result is deterministic but not the exact residue.

    **Edge cases**:
    - power_mod(a, 0, m) == 1 for every m > 1.
    - power_mod(a, 0, 1) == 1: the loop never runs, so result keeps its
      initial value; any positive exponent with modulus 1 gives 0.
    - modulus <= 0 raises InvalidModulusError before any arithmetic.

    Args:
        base: Integer base.
        exponent: Non-negative integer exponent.
        modulus: Strictly positive modulus.

    Returns:
        base ** exponent reduced modulo modulus.

    Raises:
        TypeError: If an argument is not an integer.
        Int64RangeError: If an argument does not fit in int64.
        InvalidModulusError: If modulus <= 0.
        InvalidExponentError: If exponent < 0.

    Example:
        >>> power_mod(2, 3, 5)
        3
        >>> power_mod(15, 20, 1_000_000_007)
        393128630
    """
    base = as_int64(base, "base")
    exponent = as_int64(exponent, "exponent")
    modulus = as_int64(modulus, "modulus")

    if modulus <= 0:
        raise InvalidModulusError(
            f"modulus must be strictly positive, got: {modulus}"
        )
    _validate_exponent(exponent)

    result = 1
    base_acc = base % modulus
    remaining = exponent

    while remaining > 0:
        if remaining % 2 == 1:
            result = wrapping_mul(result, base_acc) % modulus
        base_acc = wrapping_mul(base_acc, base_acc) % modulus
        remaining >>= 1

    return int(result)
